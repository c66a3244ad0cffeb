"""
Read-only shape handlers.

Each widget renders one value of one shape and accepts later snapshots
through set_value(). Containers reconcile their children by position: the
child at index i is reused for the new value at index i, so per-node state
(collapse flags, resolved references) survives updates elsewhere in the tree.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget, QBoxLayout

from pyqt_stateview.forms.layout_constants import CURRENT_LAYOUT
from pyqt_stateview.protocols import ShapeDisplayWidget, get_config
from pyqt_stateview.shapes import (
    ArrayShape, EnumShape, OptionalShape, PrimitiveKind, PrimitiveShape, RecordShape,
    array_starts_collapsed, CollapseState, record_get,
)
from pyqt_stateview.widgets.collapsible import CollapseToggleButton, CollapsibleSection

if TYPE_CHECKING:
    from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher

logger = logging.getLogger(__name__)

NONE_TEXT = "none"
OBJECT_COLLAPSED_TEXT = " object collapsed"
COLLAPSED_ELLIPSIS = "..."


def format_primitive(kind: PrimitiveKind, value: Any) -> str:
    """Text shown for a scalar: quoted strings, true/false booleans, plain numbers."""
    if kind is PrimitiveKind.STRING:
        return f'"{value}"'
    if kind is PrimitiveKind.BOOL:
        return "true" if value else "false"
    return str(value)


def format_item_count(count: int) -> str:
    return f"{count} {'item' if count == 1 else 'items'}"


def _hbox(widget: QWidget, spacing: int = 0) -> QHBoxLayout:
    layout = QHBoxLayout(widget)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(spacing)
    return layout


def _vbox(widget: QWidget, spacing: int = 0) -> QVBoxLayout:
    layout = QVBoxLayout(widget)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(spacing)
    return layout


class PrimitiveDisplay(ShapeDisplayWidget):
    """Read-only glyph for a string, integer, float or boolean."""

    def __init__(self, shape: PrimitiveShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self.label = QLabel()
        self.label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        _hbox(self).addWidget(self.label)
        self.set_value(value)

    def set_value(self, value: Any) -> None:
        self._value = value
        self.label.setText(format_primitive(self.shape.primitive, value))

    @property
    def text(self) -> str:
        return self.label.text()


class EnumDisplay(ShapeDisplayWidget):
    """Label at position ``value`` among the symbol table's numeric entries."""

    def __init__(self, shape: EnumShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self.label = QLabel()
        _hbox(self).addWidget(self.label)
        self.set_value(value)

    def set_value(self, value: Any) -> None:
        self._value = value
        label = self.shape.symbols.label_at(value)
        if label is None:
            # Out-of-range values degrade to an empty label
            logger.debug(f"EnumDisplay: {value!r} is outside {self.shape.symbols!r}")
        self.label.setText(label or "")

    @property
    def text(self) -> str:
        return self.label.text()


class KeyValueRow(QWidget):
    """Bold ``label:`` followed by a child display."""

    def __init__(self, label: str, child: QWidget, parent=None):
        super().__init__(parent)
        layout = _hbox(self, CURRENT_LAYOUT.kv_row_spacing)
        layout.setContentsMargins(*CURRENT_LAYOUT.kv_row_margins)
        self.key_label = QLabel(f"{label}: ")
        font = QFont(self.key_label.font())
        font.setBold(True)
        self.key_label.setFont(font)
        self.key_label.setAlignment(Qt.AlignmentFlag.AlignTop)
        layout.addWidget(self.key_label, 0, Qt.AlignmentFlag.AlignTop)
        layout.addWidget(child, 1)
        self.child = child


class OptionalDisplay(ShapeDisplayWidget):
    """Literal ``none`` when absent, otherwise the inner shape's display."""

    def __init__(self, shape: OptionalShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self._dispatcher = dispatcher
        self._layout = _hbox(self)
        self.none_label = QLabel(NONE_TEXT)
        self.none_label.setStyleSheet(dispatcher.style.muted_text_style())
        self._layout.addWidget(self.none_label)
        self.inner: Optional[ShapeDisplayWidget] = None
        self.set_value(value)

    @property
    def is_present(self) -> bool:
        return self._value is not None

    def set_value(self, value: Any) -> None:
        self._value = value
        if value is None:
            if self.inner is not None:
                self._layout.removeWidget(self.inner)
                self.inner.dispose()
                self.inner = None
            self.none_label.setVisible(True)
            return

        self.none_label.setVisible(False)
        if self.inner is None:
            self.inner = self._dispatcher.create_display(self.shape.inner, value, parent=self)
            self._layout.addWidget(self.inner)
        else:
            self.inner.set_value(value)

    def _release(self) -> None:
        if self.inner is not None:
            self.inner.dispose()


class ArrayDisplay(ShapeDisplayWidget):
    """
    Bracketed, collapsible list of item displays.

    The collapse flag is computed once, here, from the initial value. Composite
    items flow horizontally in a horizontal scroll area; scalar items stack
    vertically in a height-capped vertical scroll area.
    Whether items are composite comes from the declared inner shape, never
    from the first item.
    """

    def __init__(self, shape: ArrayShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self._dispatcher = dispatcher
        self._items: List[ShapeDisplayWidget] = []
        self.composite_items = shape.inner.is_composite
        self.collapse_state = CollapseState(array_starts_collapsed(value or [], shape.inner))

        layout = _vbox(self, 2)

        header = QWidget()
        header_layout = _hbox(header, 4)
        self.toggle_button = CollapseToggleButton(self.collapse_state.is_collapsed, dispatcher.style)
        self.toggle_button.clicked.connect(self.toggle)
        header_layout.addWidget(self.toggle_button)
        header_layout.addWidget(QLabel("["))
        self.count_label = QLabel()
        self.count_label.setStyleSheet(dispatcher.style.muted_text_style())
        header_layout.addWidget(self.count_label)
        self.ellipsis_label = QLabel(COLLAPSED_ELLIPSIS)
        header_layout.addWidget(self.ellipsis_label)
        self.inline_close_label = QLabel("]")
        header_layout.addWidget(self.inline_close_label)
        header_layout.addStretch()
        layout.addWidget(header)

        self.body = QScrollArea()
        self.body.setWidgetResizable(True)
        self.body.setFrameShape(QFrame.Shape.NoFrame)
        container = QFrame()
        container.setObjectName("arrayBody")
        container.setStyleSheet(dispatcher.style.generate_array_body_style("QFrame#arrayBody"))
        if self.composite_items:
            self._item_layout: QBoxLayout = QHBoxLayout(container)
            self._item_layout.setAlignment(Qt.AlignmentFlag.AlignLeft)
            self.body.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
            self.body.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        else:
            self._item_layout = QVBoxLayout(container)
            self._item_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
            self.body.setMaximumHeight(get_config().array_max_height)
            self.body.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
            self.body.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self._item_layout.setContentsMargins(*CURRENT_LAYOUT.array_body_margins)
        self._item_layout.setSpacing(CURRENT_LAYOUT.array_body_spacing)
        self.body.setWidget(container)
        layout.addWidget(self.body)

        self.close_label = QLabel("]")
        layout.addWidget(self.close_label)

        self.set_value(value)

    @property
    def is_collapsed(self) -> bool:
        return self.collapse_state.is_collapsed

    @property
    def item_widgets(self) -> List[ShapeDisplayWidget]:
        return list(self._items)

    def toggle(self) -> None:
        self.collapse_state.toggle()
        self._apply_visibility()

    def set_value(self, value: Any) -> None:
        items = list(value or [])
        self._value = items
        self._reconcile(items)
        self.count_label.setText(format_item_count(len(items)) if items else "")
        self._apply_visibility()

    def _reconcile(self, items: List[Any]) -> None:
        for widget, item in zip(self._items, items):
            widget.set_value(item)

        while len(self._items) > len(items):
            widget = self._items.pop()
            self._item_layout.removeWidget(widget)
            widget.dispose()

        for item in items[len(self._items):]:
            widget = self._dispatcher.create_display(self.shape.inner, item, parent=self.body.widget())
            if not self.composite_items:
                widget.setContentsMargins(CURRENT_LAYOUT.array_item_indent, 0, 0, 0)
            self._item_layout.addWidget(widget)
            self._items.append(widget)

    def _apply_visibility(self) -> None:
        has_items = bool(self._value)
        collapsed = self.collapse_state.is_collapsed
        self.toggle_button.setVisible(has_items)
        self.toggle_button.show_collapsed(collapsed)
        self.count_label.setVisible(has_items)
        self.ellipsis_label.setVisible(has_items and collapsed)
        self.body.setVisible(has_items and not collapsed)
        self.inline_close_label.setVisible(not has_items or collapsed)
        self.close_label.setVisible(has_items and not collapsed)

    def _release(self) -> None:
        for widget in self._items:
            widget.dispose()
        self._items.clear()


class RecordDisplay(ShapeDisplayWidget):
    """Bordered box of ``name: value`` rows in declared field order."""

    def __init__(self, shape: RecordShape, value: Any, dispatcher: "ShapeDispatcher",
                 collapsible: bool = True, parent=None):
        super().__init__(parent)
        self.shape = shape
        self._value = value
        self.section = CollapsibleSection(
            collapsed=False, collapsible=collapsible,
            placeholder_text=OBJECT_COLLAPSED_TEXT, style=dispatcher.style,
        )
        _hbox(self).addWidget(self.section)

        body = QWidget()
        body_layout = _vbox(body, 1)
        self.field_widgets = {}
        for spec in shape.fields:
            child = dispatcher.create_display(spec.shape, record_get(value, spec.name))
            body_layout.addWidget(KeyValueRow(spec.display_label, child))
            self.field_widgets[spec.name] = child
        self.section.set_body(body)

    @property
    def is_collapsed(self) -> bool:
        return self.section.is_collapsed

    def toggle(self) -> None:
        self.section.toggle()

    def set_value(self, value: Any) -> None:
        self._value = value
        for spec in self.shape.fields:
            self.field_widgets[spec.name].set_value(record_get(value, spec.name))

    def _release(self) -> None:
        for child in self.field_widgets.values():
            child.dispose()
