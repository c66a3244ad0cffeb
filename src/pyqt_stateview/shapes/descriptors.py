"""
Shape descriptors: the tagged variants that drive display and edit dispatch.

A shape is resolved once per field when the schema is defined and is then
shared, unchanged, by the display and edit pipelines. Every shape carries a
``kind`` which the ShapeDispatcher uses as its dispatch key; nothing sniffs
runtime values to decide how to render them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from .symbol_table import SymbolTable


class ShapeKind(Enum):
    """Dispatch key for shape handlers."""
    PRIMITIVE = "primitive"
    ENUM = "enum"
    OPTIONAL = "optional"
    ARRAY = "array"
    RECORD = "record"
    REFERENCE = "reference"
    PLUGIN = "plugin"


class PrimitiveKind(Enum):
    """Scalar flavours handled by the primitive handlers."""
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


_PRIMITIVE_DEFAULTS = {
    PrimitiveKind.STRING: "",
    PrimitiveKind.INT: 0,
    PrimitiveKind.FLOAT: 0.0,
    PrimitiveKind.BOOL: False,
}


class ShapeDescriptor:
    """Base class for all shape variants."""

    kind: ShapeKind

    @property
    def is_composite(self) -> bool:
        """Whether values of this shape render as nested containers."""
        return False

    def default(self) -> Any:
        """Return a fresh default value for this shape."""
        raise NotImplementedError(f"{type(self).__name__} does not define a default value")


@dataclass(frozen=True)
class PrimitiveShape(ShapeDescriptor):
    primitive: PrimitiveKind
    kind: ShapeKind = field(default=ShapeKind.PRIMITIVE, init=False)

    def default(self) -> Any:
        return _PRIMITIVE_DEFAULTS[self.primitive]


@dataclass(frozen=True)
class EnumShape(ShapeDescriptor):
    symbols: SymbolTable
    kind: ShapeKind = field(default=ShapeKind.ENUM, init=False)

    def default(self) -> Any:
        return self.symbols.first_value()


@dataclass(frozen=True)
class OptionalShape(ShapeDescriptor):
    """
    Optional wrapper. The value is either None (absent) or a value of ``inner``.

    ``inner.default()`` is the caller default supplied when presence is toggled
    on; the optional handler never computes one itself.
    """
    inner: ShapeDescriptor
    kind: ShapeKind = field(default=ShapeKind.OPTIONAL, init=False)

    @property
    def is_composite(self) -> bool:
        return self.inner.is_composite

    def default(self) -> Any:
        return None


@dataclass(frozen=True)
class ArrayShape(ShapeDescriptor):
    """Homogeneous ordered sequence of ``inner`` values."""
    inner: ShapeDescriptor
    kind: ShapeKind = field(default=ShapeKind.ARRAY, init=False)

    @property
    def is_composite(self) -> bool:
        return True

    def default(self) -> Any:
        return []

    def item_default(self) -> Any:
        """Fresh value appended by the array editor's Add control."""
        return self.inner.default()


@dataclass(frozen=True)
class FieldSpec:
    """One named field of a record, in declaration order."""
    name: str
    shape: ShapeDescriptor
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        return self.label or self.name


@dataclass(frozen=True, eq=False)
class RecordShape(ShapeDescriptor):
    """
    Named fields, each rendered by the handler of its own shape.

    ``factory`` builds the default value (a dataclass instance or a mapping).
    When omitted, the default is a dict of each field's default. Identity
    equality keeps recursive record shapes hashable.
    """
    name: str
    fields: Tuple[FieldSpec, ...] = ()
    factory: Optional[Callable[[], Any]] = None
    kind: ShapeKind = field(default=ShapeKind.RECORD, init=False)

    @property
    def is_composite(self) -> bool:
        return True

    def default(self) -> Any:
        if self.factory is not None:
            return self.factory()
        return {spec.name: spec.shape.default() for spec in self.fields}

    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)


@dataclass(frozen=True)
class ReferenceShape(ShapeDescriptor):
    """Opaque identifier resolved lazily through the lookup registered under ``lookup_key``."""
    lookup_key: str = "user"
    kind: ShapeKind = field(default=ShapeKind.REFERENCE, init=False)

    def default(self) -> Any:
        return ""


@dataclass(frozen=True)
class PluginShape(ShapeDescriptor):
    """Value rendered by an externally registered plugin element."""
    element_id: str
    collapsible: bool = False
    kind: ShapeKind = field(default=ShapeKind.PLUGIN, init=False)

    @property
    def is_composite(self) -> bool:
        return True

    def default(self) -> Any:
        return None


# Shared primitive instances for schema definitions
STRING = PrimitiveShape(PrimitiveKind.STRING)
INT = PrimitiveShape(PrimitiveKind.INT)
FLOAT = PrimitiveShape(PrimitiveKind.FLOAT)
BOOL = PrimitiveShape(PrimitiveKind.BOOL)
