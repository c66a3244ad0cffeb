"""Collapsible containers shared by array, record, reference and plugin handlers."""

import logging
from typing import Optional

from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QToolButton, QVBoxLayout, QWidget
from PyQt6.QtCore import Qt, pyqtSignal

from pyqt_stateview.forms.layout_constants import CURRENT_LAYOUT
from pyqt_stateview.shapes import CollapseState
from pyqt_stateview.theming import StyleSheetGenerator

logger = logging.getLogger(__name__)

EXPAND_GLYPH = "+"
COLLAPSE_GLYPH = "−"  # minus sign


class CollapseToggleButton(QToolButton):
    """Small +/- button reflecting a CollapseState."""

    def __init__(self, collapsed: bool, style: Optional[StyleSheetGenerator] = None, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setFixedSize(CURRENT_LAYOUT.toggle_button_size, CURRENT_LAYOUT.toggle_button_size)
        self.setStyleSheet((style or StyleSheetGenerator()).generate_toggle_button_style())
        self.show_collapsed(collapsed)

    def show_collapsed(self, collapsed: bool) -> None:
        self.setText(EXPAND_GLYPH if collapsed else COLLAPSE_GLYPH)
        self.setToolTip("Expand" if collapsed else "Collapse")


class CollapsibleSection(QFrame):
    """
    Header row + body, or header row + placeholder when collapsed.

    The initial state is fixed by the caller at construction; afterwards only
    toggle() (the user's click) changes it.

    Signals:
        collapse_toggled(bool): Emitted with the new collapsed flag
    """

    collapse_toggled = pyqtSignal(bool)

    def __init__(self, collapsed: bool = False, collapsible: bool = True,
                 placeholder_text: str = "", style: Optional[StyleSheetGenerator] = None,
                 boxed: bool = True, parent=None):
        super().__init__(parent)
        self._state = CollapseState(collapsed if collapsible else False)
        self._collapsible = collapsible
        self._style = style or StyleSheetGenerator()

        if boxed:
            self.setObjectName("objectBox")
            self.setStyleSheet(self._style.generate_object_box_style("QFrame#objectBox"))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(*CURRENT_LAYOUT.object_box_margins)
        layout.setSpacing(CURRENT_LAYOUT.object_box_spacing)

        header = QWidget()
        self._header_layout = QHBoxLayout(header)
        self._header_layout.setContentsMargins(0, 0, 0, 0)
        self._header_layout.setSpacing(4)

        self.toggle_button = CollapseToggleButton(self._state.is_collapsed, self._style)
        self.toggle_button.clicked.connect(self.toggle)
        self.toggle_button.setVisible(collapsible)
        self._header_layout.addWidget(self.toggle_button)
        layout.addWidget(header)

        self._body: Optional[QWidget] = None
        self._body_layout = layout

        self.placeholder_label = QLabel(placeholder_text)
        self.placeholder_label.setStyleSheet(self._style.muted_text_style())
        self._header_layout.addWidget(self.placeholder_label)
        self._header_layout.addStretch()

        self._apply_state()

    @property
    def header_layout(self) -> QHBoxLayout:
        return self._header_layout

    @property
    def is_collapsed(self) -> bool:
        return self._state.is_collapsed

    @property
    def collapsible(self) -> bool:
        return self._collapsible

    def add_header_widget(self, widget: QWidget) -> None:
        """Insert ``widget`` into the header, after the toggle button."""
        self._header_layout.insertWidget(self._header_layout.count() - 2, widget)

    def set_body(self, widget: QWidget) -> None:
        if self._body is not None:
            self._body_layout.removeWidget(self._body)
            self._body.deleteLater()
        self._body = widget
        self._body_layout.addWidget(widget)
        self._apply_state()

    def toggle(self) -> None:
        """User-triggered transition; the only way the state changes after mount."""
        if not self._collapsible:
            return
        mode = self._state.toggle()
        logger.debug(f"CollapsibleSection toggled to {mode.value}")
        self._apply_state()
        self.collapse_toggled.emit(self._state.is_collapsed)

    def _apply_state(self) -> None:
        collapsed = self._state.is_collapsed
        self.toggle_button.show_collapsed(collapsed)
        self.placeholder_label.setVisible(collapsed and bool(self.placeholder_label.text()))
        if self._body is not None:
            self._body.setVisible(not collapsed)
