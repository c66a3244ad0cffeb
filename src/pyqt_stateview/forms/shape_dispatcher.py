"""
Shape dispatcher with fail-loud ABC checking.

Both pipelines (display and edit) route through one ShapeDispatcher. Each
pipeline is an EnumDispatchService keyed on ShapeKind whose handlers are
widget factories with the signature::

    handler(shape, value, dispatcher, parent=None, **options) -> QWidget

Composite handlers receive the dispatcher so they can build their children
through it. Every produced widget is checked against the widget ABCs.
"""

import logging
from typing import Any, Callable, Dict, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_stateview.protocols import ChangeSignalEmitter, SessionContext, ValueSettable
from pyqt_stateview.services.enum_dispatch_service import EnumDispatchService
from pyqt_stateview.shapes import PrimitiveKind, ShapeDescriptor, ShapeKind
from pyqt_stateview.theming import ColorScheme, StyleSheetGenerator
from pyqt_stateview.widgets.display_widgets import (
    ArrayDisplay, EnumDisplay, OptionalDisplay, PrimitiveDisplay, RecordDisplay,
)
from pyqt_stateview.widgets.input_widgets import (
    ArrayInput, BooleanInput, EnumInput, FloatInput, IntInput, OptionalInput, RecordInput, StringInput,
)
from pyqt_stateview.widgets.plugin_bridge import PluginBridge
from pyqt_stateview.widgets.reference_display import ReferenceDisplay

logger = logging.getLogger(__name__)

ShapeWidgetFactory = Callable[..., QWidget]

_PRIMITIVE_EDITORS: Dict[PrimitiveKind, ShapeWidgetFactory] = {
    PrimitiveKind.STRING: StringInput,
    PrimitiveKind.INT: IntInput,
    PrimitiveKind.FLOAT: FloatInput,
    PrimitiveKind.BOOL: BooleanInput,
}


def _create_primitive_editor(shape, value, dispatcher, parent=None, **options):
    return _PRIMITIVE_EDITORS[shape.primitive](shape, value, dispatcher, parent=parent, **options)


def _create_reference_editor(shape, value, dispatcher, parent=None, **options):
    # References have no dedicated editor; the identifier is edited as text
    return StringInput(shape, value, dispatcher, parent=parent, **options)


class _PipelineDispatch(EnumDispatchService[ShapeKind]):
    """One pipeline's ShapeKind -> factory table."""

    def __init__(self, name: str, handlers: Dict[ShapeKind, ShapeWidgetFactory]):
        super().__init__()
        self.name = name
        self._register_handlers(handlers)

    def _determine_strategy(self, shape: ShapeDescriptor, *args, **kwargs) -> ShapeKind:
        return shape.kind


class ShapeDispatcher:
    """
    Builds display and editor widget trees for shape descriptors.

    Example:
        dispatcher = ShapeDispatcher(session=context)
        view = dispatcher.create_display(shape_from_type(GameState), state)
        editor = dispatcher.create_editor(shape_from_type(VoteInQuest), payload)
        editor.value_changed.connect(on_change)
    """

    def __init__(self, session: Optional[SessionContext] = None, color_scheme: Optional[ColorScheme] = None):
        self.session = session
        self.color_scheme = color_scheme or ColorScheme()
        self.style = StyleSheetGenerator(self.color_scheme)

        self._display = _PipelineDispatch("display", {
            ShapeKind.PRIMITIVE: PrimitiveDisplay,
            ShapeKind.ENUM: EnumDisplay,
            ShapeKind.OPTIONAL: OptionalDisplay,
            ShapeKind.ARRAY: ArrayDisplay,
            ShapeKind.RECORD: RecordDisplay,
            ShapeKind.REFERENCE: ReferenceDisplay,
            ShapeKind.PLUGIN: PluginBridge,
        })
        # No PLUGIN entry: plugin values cannot be edited
        self._edit = _PipelineDispatch("edit", {
            ShapeKind.PRIMITIVE: _create_primitive_editor,
            ShapeKind.ENUM: EnumInput,
            ShapeKind.OPTIONAL: OptionalInput,
            ShapeKind.ARRAY: ArrayInput,
            ShapeKind.RECORD: RecordInput,
            ShapeKind.REFERENCE: _create_reference_editor,
        })

    def register_display_handler(self, kind: ShapeKind, factory: ShapeWidgetFactory) -> None:
        """Replace the display factory for ``kind`` on this dispatcher."""
        self._display._register_handlers({kind: factory})

    def register_editor_handler(self, kind: ShapeKind, factory: ShapeWidgetFactory) -> None:
        """Replace the editor factory for ``kind`` on this dispatcher."""
        self._edit._register_handlers({kind: factory})

    def create_display(self, shape: ShapeDescriptor, value: Any, parent: Optional[QWidget] = None,
                       **options) -> QWidget:
        """
        Build the read-only widget for ``value``.

        Args:
            shape: Shape describing ``value``
            value: Value to render
            parent: Optional Qt parent
            **options: Forwarded to the handler (records accept ``collapsible``)

        Raises:
            KeyError: If no display handler exists for ``shape.kind``
            TypeError: If the handler's widget does not implement ValueSettable
        """
        widget = self._display.dispatch(shape, value, self, parent=parent, **options)
        if not isinstance(widget, ValueSettable):
            raise TypeError(
                f"Display handler for {shape.kind.value} produced {type(widget).__name__}, "
                f"which does not implement ValueSettable ABC."
            )
        return widget

    def create_editor(self, shape: ShapeDescriptor, value: Any, parent: Optional[QWidget] = None,
                      **options) -> QWidget:
        """
        Build the interactive widget for ``value``.

        Raises:
            KeyError: If no editor handler exists for ``shape.kind``
            TypeError: If the widget does not implement ValueSettable and ChangeSignalEmitter
        """
        widget = self._edit.dispatch(shape, value, self, parent=parent, **options)
        if not isinstance(widget, ValueSettable) or not isinstance(widget, ChangeSignalEmitter):
            raise TypeError(
                f"Editor handler for {shape.kind.value} produced {type(widget).__name__}, "
                f"which must implement ValueSettable and ChangeSignalEmitter ABCs."
            )
        return widget
