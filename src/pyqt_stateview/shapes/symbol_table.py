"""
Symbol tables backing enumeration shapes.

An enumeration is an explicit ordered mapping ``label -> numeric value`` built
once when the schema is defined. Nothing introspects enum objects at render
time: display and edit widgets only ever see a SymbolTable.

Some generated symbol tables carry reverse aliases alongside the real entries
(``{"Approve": 0, "Reject": 1, "0": "Approve", "1": "Reject"}``). Only entries
whose value is numeric are kept.
"""

import logging
from enum import IntEnum
from numbers import Real
from typing import Any, Iterator, List, Mapping, Optional, Tuple, Type

logger = logging.getLogger(__name__)


def _is_numeric(value: Any) -> bool:
    """True for int/float values, excluding bool."""
    return isinstance(value, Real) and not isinstance(value, bool)


class SymbolTable:
    """
    Ordered, immutable label -> numeric value mapping.

    Example:
        >>> votes = SymbolTable.from_mapping({"Approve": 0, "Reject": 1, "0": "Approve"})
        >>> votes.labels
        ['Approve', 'Reject']
        >>> votes.label_at(1)
        'Reject'
        >>> votes.label_at(7) is None
        True
    """

    __slots__ = ("_name", "_entries")

    def __init__(self, entries: List[Tuple[str, Any]], name: str = ""):
        self._name = name
        self._entries: Tuple[Tuple[str, Any], ...] = tuple(
            (str(label), value) for label, value in entries if _is_numeric(value)
        )
        skipped = len(entries) - len(self._entries)
        if skipped:
            logger.debug(f"SymbolTable {name!r}: skipped {skipped} non-numeric alias entries")

    @classmethod
    def from_enum(cls, enum_type: Type[IntEnum]) -> "SymbolTable":
        """Build a table from an IntEnum class, in member definition order."""
        if not isinstance(enum_type, type) or not issubclass(enum_type, IntEnum):
            raise TypeError(f"{enum_type!r} is not an IntEnum subclass")
        return cls([(member.name, int(member.value)) for member in enum_type], name=enum_type.__name__)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], name: str = "") -> "SymbolTable":
        """Build a table from a raw mapping, dropping non-numeric aliases."""
        return cls(list(mapping.items()), name=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def labels(self) -> List[str]:
        return [label for label, _ in self._entries]

    @property
    def values(self) -> List[Any]:
        return [value for _, value in self._entries]

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._entries)

    def label_at(self, position: Any) -> Optional[str]:
        """
        Return the label at ``position`` among the numeric entries.

        Returns None (never raises) when ``position`` is not an integer inside
        ``[0, len)``. Negative positions are out of range, not wrapped.
        """
        if not isinstance(position, int) or isinstance(position, bool):
            return None
        if 0 <= position < len(self._entries):
            return self._entries[position][0]
        return None

    def label_for_value(self, value: Any) -> Optional[str]:
        """Return the label whose backing value equals ``value``."""
        for label, backing in self._entries:
            if backing == value:
                return label
        return None

    def first_value(self) -> Any:
        """Backing value of the first entry, 0 for an empty table."""
        return self._entries[0][1] if self._entries else 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"SymbolTable({self._name!r}, {dict(self._entries)!r})"
