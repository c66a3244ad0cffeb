"""Tests for the pure shape layer."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Annotated, List, Optional

import pytest

from pyqt_stateview.protocols import StateViewConfig, set_config
from pyqt_stateview.shapes import (
    BOOL, FLOAT, INT, STRING, ArrayShape, CollapseMode, CollapseState, EnumShape, FieldSpec, MoveDirection,
    OptionalShape, Plugin, PluginShape, PrimitiveKind, RecordShape, Reference, ReferenceShape, ShapeKind,
    SymbolTable, append_item, array_starts_collapsed, can_move, delete_item, record_get, record_replace,
    shape_from_type, swap_adjacent, update_item,
)


class Vote(IntEnum):
    Approve = 0
    Reject = 1


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Node:
    name: str = ""
    children: List["Node"] = field(default_factory=list)


@dataclass
class Ballot:
    voter: Annotated[str, Reference("user")] = ""
    vote: Optional[Vote] = None
    weights: List[int] = field(default_factory=list)
    extra: Annotated[dict, Plugin("ballot-plugin", collapsible=True)] = None


# --- SymbolTable ---

def test_symbol_table_drops_reverse_aliases():
    """Only numeric entries survive; string aliases are excluded."""
    table = SymbolTable.from_mapping({"Approve": 0, "Reject": 1, "0": "Approve", "1": "Reject"})
    assert table.labels == ["Approve", "Reject"]
    assert table.values == [0, 1]
    assert len(table) == 2


def test_symbol_table_excludes_bools():
    table = SymbolTable.from_mapping({"yes": True, "count": 3})
    assert table.items() == [("count", 3)]


def test_symbol_table_label_at_out_of_range():
    table = SymbolTable.from_enum(Vote)
    assert table.label_at(0) == "Approve"
    assert table.label_at(1) == "Reject"
    assert table.label_at(2) is None
    assert table.label_at(-1) is None
    assert table.label_at("1") is None


def test_symbol_table_from_enum_rejects_non_enums():
    with pytest.raises(TypeError):
        SymbolTable.from_enum(dict)


# --- Descriptors ---

def test_shape_defaults():
    assert STRING.default() == ""
    assert INT.default() == 0
    assert FLOAT.default() == 0.0
    assert BOOL.default() is False
    assert EnumShape(SymbolTable.from_enum(Vote)).default() == 0
    assert EnumShape(SymbolTable([])).default() == 0
    assert OptionalShape(INT).default() is None
    assert ArrayShape(INT).default() == []
    assert ReferenceShape().default() == ""
    assert PluginShape("x").default() is None


def test_array_default_is_fresh():
    shape = ArrayShape(INT)
    first = shape.default()
    first.append(1)
    assert shape.default() == []


def test_is_composite():
    record = RecordShape("Point", (FieldSpec("x", FLOAT),))
    assert record.is_composite
    assert ArrayShape(INT).is_composite
    assert PluginShape("x").is_composite
    assert OptionalShape(record).is_composite
    assert not OptionalShape(INT).is_composite
    assert not INT.is_composite
    assert not ReferenceShape().is_composite


def test_record_default_without_factory_builds_mapping():
    record = RecordShape("Point", (FieldSpec("x", FLOAT), FieldSpec("y", FLOAT)))
    assert record.default() == {"x": 0.0, "y": 0.0}


# --- Records ---

def test_record_get_and_replace_dataclass():
    point = Point(1.0, 2.0)
    moved = record_replace(point, "x", 5.0)
    assert moved == Point(5.0, 2.0)
    assert point == Point(1.0, 2.0)
    assert record_get(moved, "y") == 2.0


def test_record_get_and_replace_mapping():
    value = {"x": 1, "y": 2}
    updated = record_replace(value, "y", 3)
    assert updated == {"x": 1, "y": 3}
    assert value == {"x": 1, "y": 2}
    assert record_get(updated, "y") == 3


def test_record_accessors_reject_other_values():
    with pytest.raises(TypeError):
        record_get(42, "x")
    with pytest.raises(TypeError):
        record_replace(Point, "x", 1.0)


# --- Array operations ---

def test_append_then_delete_last_restores():
    items = [1, 2, 3]
    grown = append_item(items, 0)
    assert grown == [1, 2, 3, 0]
    assert delete_item(grown, len(grown) - 1) == items
    assert items == [1, 2, 3]


def test_swap_adjacent_is_its_own_inverse():
    items = ["a", "b", "c"]
    swapped = swap_adjacent(items, 1, MoveDirection.DOWN)
    assert swapped == ["a", "c", "b"]
    assert swap_adjacent(swapped, 2, MoveDirection.UP) == items


def test_swap_adjacent_is_noop_at_boundaries():
    items = ["a", "b", "c"]
    assert swap_adjacent(items, 0, MoveDirection.UP) == items
    assert swap_adjacent(items, 2, MoveDirection.DOWN) == items
    assert not can_move(items, 0, MoveDirection.UP)
    assert not can_move(items, 2, MoveDirection.DOWN)
    assert can_move(items, 1, MoveDirection.UP)


def test_delete_shifts_and_update_replaces_only_index():
    items = [10, 20, 30]
    assert delete_item(items, 0) == [20, 30]
    assert update_item(items, 1, 99) == [10, 99, 30]


def test_invalid_index_raises():
    with pytest.raises(IndexError):
        delete_item([1], 1)
    with pytest.raises(IndexError):
        update_item([], 0, 1)
    with pytest.raises(IndexError):
        swap_adjacent([1, 2], -1, MoveDirection.DOWN)


# --- Collapse ---

def test_collapse_heuristic_scalars():
    assert array_starts_collapsed([1, 2, 3, 4, 5], INT)
    assert not array_starts_collapsed([1, 2, 3, 4], INT)
    assert not array_starts_collapsed([], INT)


def test_collapse_heuristic_records():
    record = shape_from_type(Point)
    assert not array_starts_collapsed([Point()], record)
    assert array_starts_collapsed([Point()] * 8, record)


def test_collapse_heuristic_reads_config():
    set_config(StateViewConfig(array_collapse_threshold=1))
    assert array_starts_collapsed([1, 2], INT)


def test_collapse_state_toggle():
    state = CollapseState()
    assert state.mode is CollapseMode.EXPANDED
    assert state.toggle() is CollapseMode.COLLAPSED
    assert state.is_collapsed
    state.toggle()
    assert not state.is_collapsed


# --- Type resolution ---

def test_shape_from_primitives_and_enum():
    assert shape_from_type(str) is STRING
    assert shape_from_type(int) is INT
    assert shape_from_type(bool).primitive is PrimitiveKind.BOOL
    enum_shape = shape_from_type(Vote)
    assert enum_shape.kind is ShapeKind.ENUM
    assert enum_shape.symbols.labels == ["Approve", "Reject"]


def test_shape_from_dataclass_fields_in_order():
    shape = shape_from_type(Ballot)
    assert shape.kind is ShapeKind.RECORD
    assert shape.field_names() == ("voter", "vote", "weights", "extra")
    kinds = [spec.shape.kind for spec in shape.fields]
    assert kinds == [ShapeKind.REFERENCE, ShapeKind.OPTIONAL, ShapeKind.ARRAY, ShapeKind.PLUGIN]
    assert shape.fields[3].shape.collapsible
    assert shape.default() == Ballot()


def test_shape_from_recursive_dataclass():
    shape = shape_from_type(Node)
    assert shape.fields[1].shape.inner is shape
    assert shape_from_type(Node) is shape


def test_shape_from_unsupported_type():
    with pytest.raises(TypeError):
        shape_from_type(set)
    with pytest.raises(TypeError):
        shape_from_type(List)
