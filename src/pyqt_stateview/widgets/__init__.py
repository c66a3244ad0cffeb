"""
Widget implementations.

Display and edit handlers for every shape kind, plus the form, panel, state
view and toast surfaces built on top of them. Exports resolve lazily so that
the dispatcher and the handlers can import each other's modules directly.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .no_scroll_spinbox import NoScrollSpinBox, NoScrollDoubleSpinBox, NoScrollComboBox
    from .collapsible import CollapseToggleButton, CollapsibleSection
    from .display_widgets import (
        PrimitiveDisplay, EnumDisplay, OptionalDisplay, ArrayDisplay, RecordDisplay, KeyValueRow,
    )
    from .reference_display import ReferenceDisplay
    from .plugin_bridge import PluginBridge
    from .input_widgets import (
        StringInput, IntInput, FloatInput, BooleanInput, EnumInput, OptionalInput, ArrayInput, RecordInput,
    )
    from .method_form import MethodForm
    from .methods_panel import MethodsPanel
    from .state_view import StateView
    from .toast_widget import ToastWidget

_EXPORTS = {
    "NoScrollSpinBox": ("pyqt_stateview.widgets.no_scroll_spinbox", "NoScrollSpinBox"),
    "NoScrollDoubleSpinBox": ("pyqt_stateview.widgets.no_scroll_spinbox", "NoScrollDoubleSpinBox"),
    "NoScrollComboBox": ("pyqt_stateview.widgets.no_scroll_spinbox", "NoScrollComboBox"),
    "CollapseToggleButton": ("pyqt_stateview.widgets.collapsible", "CollapseToggleButton"),
    "CollapsibleSection": ("pyqt_stateview.widgets.collapsible", "CollapsibleSection"),
    "PrimitiveDisplay": ("pyqt_stateview.widgets.display_widgets", "PrimitiveDisplay"),
    "EnumDisplay": ("pyqt_stateview.widgets.display_widgets", "EnumDisplay"),
    "OptionalDisplay": ("pyqt_stateview.widgets.display_widgets", "OptionalDisplay"),
    "ArrayDisplay": ("pyqt_stateview.widgets.display_widgets", "ArrayDisplay"),
    "RecordDisplay": ("pyqt_stateview.widgets.display_widgets", "RecordDisplay"),
    "KeyValueRow": ("pyqt_stateview.widgets.display_widgets", "KeyValueRow"),
    "ReferenceDisplay": ("pyqt_stateview.widgets.reference_display", "ReferenceDisplay"),
    "PluginBridge": ("pyqt_stateview.widgets.plugin_bridge", "PluginBridge"),
    "StringInput": ("pyqt_stateview.widgets.input_widgets", "StringInput"),
    "IntInput": ("pyqt_stateview.widgets.input_widgets", "IntInput"),
    "FloatInput": ("pyqt_stateview.widgets.input_widgets", "FloatInput"),
    "BooleanInput": ("pyqt_stateview.widgets.input_widgets", "BooleanInput"),
    "EnumInput": ("pyqt_stateview.widgets.input_widgets", "EnumInput"),
    "OptionalInput": ("pyqt_stateview.widgets.input_widgets", "OptionalInput"),
    "ArrayInput": ("pyqt_stateview.widgets.input_widgets", "ArrayInput"),
    "RecordInput": ("pyqt_stateview.widgets.input_widgets", "RecordInput"),
    "MethodForm": ("pyqt_stateview.widgets.method_form", "MethodForm"),
    "MethodsPanel": ("pyqt_stateview.widgets.methods_panel", "MethodsPanel"),
    "StateView": ("pyqt_stateview.widgets.state_view", "StateView"),
    "ToastWidget": ("pyqt_stateview.widgets.toast_widget", "ToastWidget"),
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
