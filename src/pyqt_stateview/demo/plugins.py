"""Example plugin element summarising the player state."""

import time

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QLabel

from pyqt_stateview.protocols import PluginElement, PluginHandle, PyQtWidgetMeta

from .schema import GameStatus, PlayerState


class PlayerStatePlugin(QLabel, PluginElement, metaclass=PyQtWidgetMeta):
    """One-line summary rendered outside the shape pipeline."""

    error_occurred = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._handle = PluginHandle()
        self.setWordWrap(True)

    def bind(self, handle: PluginHandle) -> None:
        self._handle = handle

    def refresh(self) -> None:
        state = self._handle.value
        if state is None:
            self.setText("waiting for state")
            return
        if not isinstance(state, PlayerState):
            self.error_occurred.emit(f"player-state-plugin cannot render {type(state).__name__}")
            return
        user = self._handle.user.display_name if self._handle.user else "anonymous"
        updated = time.strftime("%H:%M:%S", time.localtime((self._handle.updated_at or 0) / 1000))
        self.setText(
            f"{user} | {GameStatus(state.status).name} | "
            f"{len(state.players)} players | {len(state.quests)} quests | updated {updated}"
        )
