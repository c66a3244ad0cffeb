"""Global notification surface for transient user-facing messages.

Submit failures and plugin-reported errors end up here. Anything that wants
to show them (the ToastWidget, a status bar, a test) subscribes to
``notification_posted``.

Example Usage:

    NotificationCenter.instance().error("already voted")

    NotificationCenter.instance().notification_posted.connect(toast.show_notification)
"""

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_stateview.protocols import get_config

logger = logging.getLogger(__name__)


class NotificationLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    message: str
    level: NotificationLevel = NotificationLevel.INFO
    timestamp: float = field(default_factory=time.time)


class NotificationCenter(QObject):
    """
    Process-wide notification hub.

    Signals:
        notification_posted(Notification): Emitted for every posted notification
    """

    notification_posted = pyqtSignal(object)

    _instance: Optional["NotificationCenter"] = None

    def __init__(self, parent=None):
        super().__init__(parent)
        self._history: Deque[Notification] = deque(maxlen=get_config().notification_history_limit)

    @classmethod
    def instance(cls) -> "NotificationCenter":
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance (tests, application teardown)."""
        if cls._instance is not None:
            cls._instance.deleteLater()
        cls._instance = None

    def post(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> Notification:
        notification = Notification(message=message, level=level)
        self._history.append(notification)
        log = logger.error if level is NotificationLevel.ERROR else logger.info
        log(f"Notification ({level.value}): {message}")
        self.notification_posted.emit(notification)
        return notification

    def error(self, message: str) -> Notification:
        return self.post(message, NotificationLevel.ERROR)

    def warning(self, message: str) -> Notification:
        return self.post(message, NotificationLevel.WARNING)

    def info(self, message: str) -> Notification:
        return self.post(message, NotificationLevel.INFO)

    @property
    def history(self) -> List[Notification]:
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()
