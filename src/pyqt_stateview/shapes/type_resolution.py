"""
Shape resolution from annotated Python types.

Resolves a type to a ShapeDescriptor once, at schema-definition time:

    str / int / float / bool         -> PrimitiveShape
    IntEnum subclass                 -> EnumShape
    Optional[T]                      -> OptionalShape(shape_from_type(T))
    List[T]                          -> ArrayShape(shape_from_type(T))
    dataclass                        -> RecordShape (fields in declaration order)
    Annotated[T, Reference("user")]  -> ReferenceShape("user")
    Annotated[T, Plugin("elem-id")]  -> PluginShape("elem-id")

Fails loud on anything else. Mirrors the explicit type -> widget mapping of
the widget factory: no duck typing, no fallbacks.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Annotated, Any, Callable, Dict, List, Type, Union, get_args, get_origin, get_type_hints

from .descriptors import (
    ArrayShape, BOOL, EnumShape, FieldSpec, FLOAT, INT, OptionalShape,
    PluginShape, RecordShape, ReferenceShape, ShapeDescriptor, STRING,
)
from .symbol_table import SymbolTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    """``Annotated`` marker: the annotated string is a lazily resolved identifier."""
    lookup_key: str = "user"


@dataclass(frozen=True)
class Plugin:
    """``Annotated`` marker: the annotated value is rendered by a plugin element."""
    element_id: str
    collapsible: bool = False


_PRIMITIVES: Dict[Any, ShapeDescriptor] = {
    str: STRING,
    int: INT,
    float: FLOAT,
    bool: BOOL,
}

# Record shapes memoised per dataclass so recursive schemas resolve
_RECORD_CACHE: Dict[Type, RecordShape] = {}


def resolve_optional(tp: Any) -> Any:
    """Resolve Optional[T] to T; other types are returned unchanged."""
    if get_origin(tp) is Union:
        args = get_args(tp)
        if len(args) == 2 and type(None) in args:
            return next(arg for arg in args if arg is not type(None))
    return tp


def is_optional_type(tp: Any) -> bool:
    return resolve_optional(tp) is not tp


def _resolve_annotated(tp: Any) -> ShapeDescriptor:
    base, *metadata = get_args(tp)
    for marker in metadata:
        if isinstance(marker, Reference):
            return ReferenceShape(marker.lookup_key)
        if isinstance(marker, Plugin):
            return PluginShape(marker.element_id, collapsible=marker.collapsible)
    return shape_from_type(base)


def _field_default_factory(dc_field: dataclasses.Field, shape: ShapeDescriptor) -> Callable[[], Any]:
    if dc_field.default_factory is not dataclasses.MISSING:
        return dc_field.default_factory
    if dc_field.default is not dataclasses.MISSING:
        default = dc_field.default
        return lambda: default
    return shape.default


def _resolve_dataclass(cls: Type) -> RecordShape:
    if cls in _RECORD_CACHE:
        return _RECORD_CACHE[cls]

    record = RecordShape(name=cls.__name__)
    # Registered before field resolution so self-referencing fields terminate
    _RECORD_CACHE[cls] = record

    hints = get_type_hints(cls, include_extras=True)
    specs: List[FieldSpec] = []
    defaults: Dict[str, Callable[[], Any]] = {}
    for dc_field in dataclasses.fields(cls):
        if not dc_field.init:
            continue
        shape = shape_from_type(hints[dc_field.name])
        specs.append(FieldSpec(dc_field.name, shape))
        defaults[dc_field.name] = _field_default_factory(dc_field, shape)

    def factory() -> Any:
        return cls(**{name: make() for name, make in defaults.items()})

    # RecordShape is frozen; completing it in place keeps cached references valid
    object.__setattr__(record, "fields", tuple(specs))
    object.__setattr__(record, "factory", factory)
    logger.debug(f"Resolved record shape {cls.__name__} with fields {[s.name for s in specs]}")
    return record


def shape_from_type(tp: Any) -> ShapeDescriptor:
    """
    Resolve ``tp`` to a ShapeDescriptor.

    Raises:
        TypeError: If ``tp`` has no shape mapping
    """
    if isinstance(tp, ShapeDescriptor):
        return tp

    if get_origin(tp) is Annotated:
        return _resolve_annotated(tp)

    if is_optional_type(tp):
        return OptionalShape(shape_from_type(resolve_optional(tp)))

    if get_origin(tp) in (list, List):
        args = get_args(tp)
        if not args:
            raise TypeError(f"List type {tp!r} needs an item type to resolve a shape")
        return ArrayShape(shape_from_type(args[0]))

    if isinstance(tp, type) and issubclass(tp, IntEnum):
        return EnumShape(SymbolTable.from_enum(tp))

    if tp in _PRIMITIVES:
        return _PRIMITIVES[tp]

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _resolve_dataclass(tp)

    raise TypeError(
        f"No shape registered for type {tp!r}. Supported: str, int, float, bool, IntEnum, "
        f"Optional[T], List[T], dataclasses and Annotated[T, Reference(...) | Plugin(...)]."
    )
