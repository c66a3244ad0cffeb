"""Narrowed accessors and copy-on-write updaters for record values."""

import dataclasses
from collections.abc import Mapping
from typing import Any


def record_get(value: Any, name: str) -> Any:
    """Read field ``name`` from a dataclass instance or mapping."""
    if isinstance(value, Mapping):
        return value[name]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return getattr(value, name)
    raise TypeError(
        f"Cannot read field {name!r} from {type(value).__name__}: "
        f"record values must be dataclass instances or mappings"
    )


def record_replace(value: Any, name: str, field_value: Any) -> Any:
    """
    Return a copy of ``value`` with field ``name`` replaced.

    The original value is left untouched; this is the record handler's
    narrowed updater.
    """
    if isinstance(value, Mapping):
        return {**value, name: field_value}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.replace(value, **{name: field_value})
    raise TypeError(
        f"Cannot update field {name!r} on {type(value).__name__}: "
        f"record values must be dataclass instances or mappings"
    )
