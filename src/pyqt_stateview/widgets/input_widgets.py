"""
Interactive shape handlers for the edit pipeline.

All editors are controlled: a user edit emits ``value_changed`` with the
complete new value for the editor's own shape, and the owner answers by
calling ``set_value`` with whatever it decided to keep. Controls are
re-synced from that value with their signals blocked.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QCheckBox, QFrame, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from pyqt_stateview.forms.layout_constants import CURRENT_LAYOUT
from pyqt_stateview.protocols import ShapeEditorWidget
from pyqt_stateview.services.signal_service import SignalService
from pyqt_stateview.shapes import (
    ArrayShape, EnumShape, MoveDirection, OptionalShape, PrimitiveShape, RecordShape,
    append_item, can_move, delete_item, record_get, record_replace, swap_adjacent, update_item,
)
from pyqt_stateview.widgets.no_scroll_spinbox import NoScrollComboBox, NoScrollDoubleSpinBox, NoScrollSpinBox

if TYPE_CHECKING:
    from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher

logger = logging.getLogger(__name__)

UP_GLYPH = "↑"
DOWN_GLYPH = "↓"
DELETE_GLYPH = "✕"
ADD_TEXT = "+ Add"


def _hbox(widget: QWidget, spacing: int = 0) -> QHBoxLayout:
    layout = QHBoxLayout(widget)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(spacing)
    return layout


class StringInput(ShapeEditorWidget):
    def __init__(self, shape: PrimitiveShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self.line_edit = QLineEdit()
        self.line_edit.textEdited.connect(self._emit_change)
        _hbox(self).addWidget(self.line_edit)
        self.set_value(value)

    def set_value(self, value: Any) -> None:
        text = "" if value is None else str(value)
        self._value = text
        if self.line_edit.text() != text:
            # Only touch the text when it differs, keeping the cursor in place while typing
            with SignalService.block_signals(self.line_edit):
                self.line_edit.setText(text)


class IntInput(ShapeEditorWidget):
    def __init__(self, shape: PrimitiveShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self.spin_box = NoScrollSpinBox()
        self.spin_box.valueChanged.connect(lambda v: self._emit_change(int(v)))
        _hbox(self).addWidget(self.spin_box)
        self.set_value(value)

    def set_value(self, value: Any) -> None:
        self._value = int(value or 0)
        with SignalService.block_signals(self.spin_box):
            self.spin_box.setValue(self._value)


class FloatInput(ShapeEditorWidget):
    def __init__(self, shape: PrimitiveShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self.spin_box = NoScrollDoubleSpinBox()
        self.spin_box.valueChanged.connect(lambda v: self._emit_change(float(v)))
        _hbox(self).addWidget(self.spin_box)
        self.set_value(value)

    def set_value(self, value: Any) -> None:
        self._value = float(value or 0.0)
        with SignalService.block_signals(self.spin_box):
            self.spin_box.setValue(self._value)


class BooleanInput(ShapeEditorWidget):
    """Checkbox styled as a switch."""

    def __init__(self, shape: PrimitiveShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self.switch = QCheckBox()
        self.switch.setStyleSheet(dispatcher.style.generate_switch_style())
        self.switch.toggled.connect(self._on_toggled)
        _hbox(self).addWidget(self.switch)
        self.set_value(value)

    def _on_toggled(self, checked: bool) -> None:
        self._emit_change(bool(checked))
        self._sync()

    def set_value(self, value: Any) -> None:
        self._value = bool(value)
        self._sync()

    def _sync(self) -> None:
        with SignalService.block_signals(self.switch):
            self.switch.setChecked(self._value)


class EnumInput(ShapeEditorWidget):
    """Combo box over the symbol table's numeric entries; emits the numeric value."""

    def __init__(self, shape: EnumShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self.combo = NoScrollComboBox()
        self.combo.setMinimumWidth(CURRENT_LAYOUT.combo_min_width)
        for label, numeric in shape.symbols.items():
            self.combo.addItem(label, numeric)
        self.combo.currentIndexChanged.connect(self._on_index_changed)
        _hbox(self).addWidget(self.combo)
        self.set_value(value)

    def _on_index_changed(self, index: int) -> None:
        if index < 0:
            return
        self._emit_change(self.combo.itemData(index))

    def set_value(self, value: Any) -> None:
        self._value = value
        index = self.combo.index_of_data(value)
        if index < 0:
            logger.debug(f"EnumInput: {value!r} is not a value of {self.shape.symbols!r}")
        with SignalService.block_signals(self.combo):
            self.combo.setCurrentIndex(index)


class OptionalInput(ShapeEditorWidget):
    """
    Presence switch plus the inner editor.

    Switching on emits a fresh ``inner.default()``; switching off emits None.
    The switch is re-derived from the current value after every emission, and
    the inner editor is destroyed while absent.
    """

    def __init__(self, shape: OptionalShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self._dispatcher = dispatcher
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(4)
        self.presence = QCheckBox()
        self.presence.setStyleSheet(dispatcher.style.generate_switch_style())
        self.presence.toggled.connect(self._on_presence_toggled)
        self._layout.addWidget(self.presence, 0, Qt.AlignmentFlag.AlignLeft)
        self.inner: Optional[ShapeEditorWidget] = None
        self.set_value(value)

    @property
    def is_present(self) -> bool:
        return self._value is not None

    def _on_presence_toggled(self, checked: bool) -> None:
        self._emit_change(self.shape.inner.default() if checked else None)
        self._sync_presence()

    def set_value(self, value: Any) -> None:
        self._value = value
        self._sync_presence()
        if value is None:
            self._drop_inner()
        elif self.inner is None:
            self.inner = self._dispatcher.create_editor(self.shape.inner, value, parent=self)
            self.inner.value_changed.connect(self._emit_change)
            self._layout.addWidget(self.inner)
        else:
            self.inner.set_value(value)

    def _sync_presence(self) -> None:
        with SignalService.block_signals(self.presence):
            self.presence.setChecked(self._value is not None)

    def _drop_inner(self) -> None:
        if self.inner is None:
            return
        self._layout.removeWidget(self.inner)
        self.inner.dispose()
        self.inner = None

    def _release(self) -> None:
        self._drop_inner()


class _ArrayRow(QWidget):
    """One editable item with its up/down/delete controls."""

    def __init__(self, editor: ShapeEditorWidget, style, parent=None):
        super().__init__(parent)
        self.editor = editor
        layout = _hbox(self, CURRENT_LAYOUT.array_row_spacing)
        layout.setContentsMargins(*CURRENT_LAYOUT.array_row_margins)
        layout.addWidget(editor, 1)

        button_style = style.generate_row_button_style()
        self.up_button = self._button(UP_GLYPH, "Move up", button_style)
        self.down_button = self._button(DOWN_GLYPH, "Move down", button_style)
        self.delete_button = self._button(DELETE_GLYPH, "Delete", button_style)
        for button in (self.up_button, self.down_button, self.delete_button):
            layout.addWidget(button, 0, Qt.AlignmentFlag.AlignTop)

    @staticmethod
    def _button(text: str, tooltip: str, style: str) -> QPushButton:
        button = QPushButton(text)
        button.setToolTip(tooltip)
        button.setFixedSize(CURRENT_LAYOUT.row_button_size, CURRENT_LAYOUT.row_button_size)
        button.setStyleSheet(style)
        return button


class ArrayInput(ShapeEditorWidget):
    """
    List editor: one row per item plus an Add button.

    Rows are positional. Row ``i`` always edits index ``i``, so its callbacks
    capture the index once at creation and rows are reused across updates.
    """

    def __init__(self, shape: ArrayShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self._dispatcher = dispatcher
        self._rows: List[_ArrayRow] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(CURRENT_LAYOUT.array_row_spacing)
        self._rows_layout = QVBoxLayout()
        self._rows_layout.setSpacing(CURRENT_LAYOUT.array_row_spacing)
        layout.addLayout(self._rows_layout)

        self.add_button = QPushButton(ADD_TEXT)
        self.add_button.setStyleSheet(dispatcher.style.generate_row_button_style())
        self.add_button.clicked.connect(self.append)
        layout.addWidget(self.add_button, 0, Qt.AlignmentFlag.AlignLeft)

        self.set_value(value)

    # User operations, each emitting the whole new list

    def append(self) -> None:
        self._emit_change(append_item(self._value, self.shape.item_default()))

    def move_up(self, index: int) -> None:
        self._emit_change(swap_adjacent(self._value, index, MoveDirection.UP))

    def move_down(self, index: int) -> None:
        self._emit_change(swap_adjacent(self._value, index, MoveDirection.DOWN))

    def delete(self, index: int) -> None:
        self._emit_change(delete_item(self._value, index))

    def _update(self, index: int, item: Any) -> None:
        self._emit_change(update_item(self._value, index, item))

    # Introspection

    def row_count(self) -> int:
        return len(self._rows)

    def row(self, index: int) -> _ArrayRow:
        return self._rows[index]

    def set_value(self, value: Any) -> None:
        items = list(value or [])
        self._value = items

        for row, item in zip(self._rows, items):
            row.editor.set_value(item)

        while len(self._rows) > len(items):
            row = self._rows.pop()
            self._rows_layout.removeWidget(row)
            row.editor.dispose()
            row.deleteLater()

        for index in range(len(self._rows), len(items)):
            self._add_row(index, items[index])

        for index, row in enumerate(self._rows):
            row.up_button.setEnabled(can_move(items, index, MoveDirection.UP))
            row.down_button.setEnabled(can_move(items, index, MoveDirection.DOWN))

    def _add_row(self, index: int, item: Any) -> None:
        editor = self._dispatcher.create_editor(self.shape.inner, item)
        row = _ArrayRow(editor, self._dispatcher.style)
        editor.value_changed.connect(lambda v, i=index: self._update(i, v))
        row.up_button.clicked.connect(lambda _=False, i=index: self.move_up(i))
        row.down_button.clicked.connect(lambda _=False, i=index: self.move_down(i))
        row.delete_button.clicked.connect(lambda _=False, i=index: self.delete(i))
        self._rows_layout.addWidget(row)
        self._rows.append(row)

    def _release(self) -> None:
        for row in self._rows:
            row.editor.dispose()
        self._rows.clear()


class RecordInput(ShapeEditorWidget):
    """Indented block of labelled field editors."""

    def __init__(self, shape: RecordShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self._value = value if value is not None else shape.default()

        frame = QFrame()
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(*CURRENT_LAYOUT.record_margins)
        layout.setSpacing(CURRENT_LAYOUT.record_field_spacing)
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(frame)

        self.field_editors = {}
        for spec in shape.fields:
            label = QLabel(spec.display_label)
            label.setObjectName("fieldLabel")
            label.setContentsMargins(0, CURRENT_LAYOUT.field_label_margin_top, 0, 0)
            layout.addWidget(label)
            editor = dispatcher.create_editor(spec.shape, record_get(self._value, spec.name))
            editor.value_changed.connect(lambda v, name=spec.name: self._on_field_changed(name, v))
            layout.addWidget(editor)
            self.field_editors[spec.name] = editor

    def _on_field_changed(self, name: str, field_value: Any) -> None:
        self._emit_change(record_replace(self._value, name, field_value))

    def set_value(self, value: Any) -> None:
        self._value = value
        for spec in self.shape.fields:
            self.field_editors[spec.name].set_value(record_get(value, spec.name))

    def _release(self) -> None:
        for editor in self.field_editors.values():
            editor.dispose()
