"""
Form generation and dispatch.

ShapeDispatcher routes shapes to display and edit widgets; layout constants
are shared by every handler. Exports resolve lazily because the widget
modules import layout constants from this package.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shape_dispatcher import ShapeDispatcher
    from .layout_constants import InspectorLayoutConfig, CURRENT_LAYOUT

_EXPORTS = {
    "ShapeDispatcher": ("pyqt_stateview.forms.shape_dispatcher", "ShapeDispatcher"),
    "InspectorLayoutConfig": ("pyqt_stateview.forms.layout_constants", "InspectorLayoutConfig"),
    "CURRENT_LAYOUT": ("pyqt_stateview.forms.layout_constants", "CURRENT_LAYOUT"),
    "COMPACT_LAYOUT": ("pyqt_stateview.forms.layout_constants", "COMPACT_LAYOUT"),
    "SPACIOUS_LAYOUT": ("pyqt_stateview.forms.layout_constants", "SPACIOUS_LAYOUT"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
