"""Side panel listing one MethodForm per request kind."""

import logging
from typing import List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget

from pyqt_stateview.forms.layout_constants import CURRENT_LAYOUT
from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher
from pyqt_stateview.protocols import MethodSpec, get_config
from pyqt_stateview.widgets.method_form import MethodForm

logger = logging.getLogger(__name__)

PANEL_TITLE = "Methods"


class MethodsPanel(QDialog):
    """
    Non-modal panel docked to the right edge of its parent.

    Clicking outside or pressing Escape leaves it open; only the Close button
    and set_open(False) dismiss it.

    Signals:
        open_changed(bool): Emitted when the panel is shown or hidden
    """

    open_changed = pyqtSignal(bool)

    def __init__(self, methods: Sequence[MethodSpec], dispatcher: Optional[ShapeDispatcher] = None,
                 parent=None):
        super().__init__(parent)
        self._dispatcher = dispatcher or ShapeDispatcher()
        self._forms: List[MethodForm] = []

        self.setWindowTitle(PANEL_TITLE)
        self.setModal(False)
        self.setWindowFlag(Qt.WindowType.Tool, True)
        self.setStyleSheet(self._dispatcher.style.generate_panel_style())
        self.setFixedWidth(get_config().panel_width)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(*CURRENT_LAYOUT.panel_margins)
        layout.setSpacing(CURRENT_LAYOUT.panel_spacing)

        title = QLabel(PANEL_TITLE)
        title.setObjectName("panelTitle")
        layout.addWidget(title)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(CURRENT_LAYOUT.panel_spacing)
        for spec in methods:
            form = MethodForm.from_spec(spec, dispatcher=self._dispatcher)
            content_layout.addWidget(form)
            self._forms.append(form)
        content_layout.addStretch()
        scroll.setWidget(content)
        layout.addWidget(scroll, 1)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.close_button = QPushButton("Close")
        self.close_button.clicked.connect(lambda: self.set_open(False))
        button_layout.addWidget(self.close_button)
        layout.addLayout(button_layout)

    @property
    def forms(self) -> List[MethodForm]:
        return list(self._forms)

    def form(self, method: str) -> MethodForm:
        for form in self._forms:
            if form.method == method:
                return form
        raise KeyError(f"No form for method '{method}'")

    @property
    def is_open(self) -> bool:
        return self.isVisible()

    def set_open(self, is_open: bool) -> None:
        if is_open == self.isVisible():
            return
        if is_open:
            self._dock_to_parent()
            self.show()
        else:
            self.hide()
        logger.debug(f"MethodsPanel {'opened' if is_open else 'closed'}")
        self.open_changed.emit(is_open)

    def _dock_to_parent(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        frame = parent.frameGeometry()
        self.setGeometry(frame.right() - self.width(), frame.top(), self.width(), frame.height())

    def reject(self) -> None:
        # Escape is ignored; the panel is dismissed explicitly
        pass

    def closeEvent(self, event) -> None:
        super().closeEvent(event)
        if event.isAccepted():
            self.open_changed.emit(False)

    def dispose(self) -> None:
        for form in self._forms:
            form.dispose()
        self._forms.clear()
        self.deleteLater()
