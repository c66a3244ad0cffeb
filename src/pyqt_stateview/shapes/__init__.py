"""
Shape layer.

Pure-Python description of how values are interpreted: tagged shape
descriptors, symbol tables, array operations, record accessors, the
collapse state machine and type-to-shape resolution. No Qt imports.
"""

from .symbol_table import SymbolTable
from .descriptors import (
    ShapeKind,
    PrimitiveKind,
    ShapeDescriptor,
    PrimitiveShape,
    EnumShape,
    OptionalShape,
    ArrayShape,
    FieldSpec,
    RecordShape,
    ReferenceShape,
    PluginShape,
    STRING,
    INT,
    FLOAT,
    BOOL,
)
from .records import record_get, record_replace
from .array_ops import MoveDirection, append_item, can_move, swap_adjacent, delete_item, update_item
from .collapse import CollapseMode, CollapseState, array_starts_collapsed
from .type_resolution import Reference, Plugin, shape_from_type, resolve_optional

__all__ = [
    "SymbolTable",
    "ShapeKind",
    "PrimitiveKind",
    "ShapeDescriptor",
    "PrimitiveShape",
    "EnumShape",
    "OptionalShape",
    "ArrayShape",
    "FieldSpec",
    "RecordShape",
    "ReferenceShape",
    "PluginShape",
    "STRING",
    "INT",
    "FLOAT",
    "BOOL",
    "record_get",
    "record_replace",
    "MoveDirection",
    "append_item",
    "can_move",
    "swap_adjacent",
    "delete_item",
    "update_item",
    "CollapseMode",
    "CollapseState",
    "array_starts_collapsed",
    "Reference",
    "Plugin",
    "shape_from_type",
    "resolve_optional",
]
