"""Top-level read-only view of the session's live state."""

import logging
from typing import Optional

from PyQt6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget

from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher
from pyqt_stateview.protocols import SessionContext
from pyqt_stateview.shapes import ShapeDescriptor, ShapeKind

logger = logging.getLogger(__name__)


class StateView(QWidget):
    """
    Renders ``session.state`` through ``shape`` and follows snapshot_changed.

    The display tree is built once; each snapshot is pushed into it with
    set_value so nested collapse states are kept.
    """

    def __init__(self, session: SessionContext, shape: ShapeDescriptor,
                 dispatcher: Optional[ShapeDispatcher] = None, parent=None):
        super().__init__(parent)
        self.session = session
        self.shape = shape
        self._dispatcher = dispatcher or ShapeDispatcher(session=session)
        self.display: Optional[QWidget] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setFrameShape(QFrame.Shape.NoFrame)
        layout.addWidget(self._scroll)

        self.session.snapshot_changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        state = self.session.state
        if state is None:
            return
        if self.display is None:
            # The root record is always shown expanded
            options = {"collapsible": False} if self.shape.kind is ShapeKind.RECORD else {}
            self.display = self._dispatcher.create_display(self.shape, state, **options)
            self._scroll.setWidget(self.display)
            logger.debug("StateView: built display tree")
        else:
            self.display.set_value(state)

    def dispose(self) -> None:
        try:
            self.session.snapshot_changed.disconnect(self.refresh)
        except TypeError:
            pass
        if self.display is not None:
            self.display.dispose()
            self.display = None
        self.deleteLater()
