"""Transient notification toasts."""

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pyqt_stateview.protocols import get_config
from pyqt_stateview.services.notification_center import Notification, NotificationCenter
from pyqt_stateview.theming import StyleSheetGenerator

logger = logging.getLogger(__name__)


class _Toast(QLabel):
    def __init__(self, notification: Notification, style: StyleSheetGenerator, on_dismiss, parent=None):
        super().__init__(notification.message, parent)
        self.notification = notification
        self._on_dismiss = on_dismiss
        self.setWordWrap(True)
        self.setStyleSheet(style.generate_toast_style(notification.level))
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def mousePressEvent(self, event):
        self._on_dismiss(self)


class ToastWidget(QWidget):
    """
    Stack of notification toasts that dismiss themselves after a delay.

    Subscribes to the NotificationCenter on construction; clicking a toast
    removes it immediately.
    """

    def __init__(self, center: Optional[NotificationCenter] = None,
                 style: Optional[StyleSheetGenerator] = None, parent=None):
        super().__init__(parent)
        self._center = center or NotificationCenter.instance()
        self._style = style or StyleSheetGenerator()
        self._toasts: List[_Toast] = []

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.setSpacing(6)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignBottom)

        self._center.notification_posted.connect(self.show_notification)

    def show_notification(self, notification: Notification) -> None:
        toast = _Toast(notification, self._style, self.dismiss)
        self._layout.addWidget(toast)
        self._toasts.append(toast)
        QTimer.singleShot(get_config().toast_duration_ms, lambda t=toast: self.dismiss(t))

    def dismiss(self, toast: _Toast) -> None:
        if toast not in self._toasts:
            return
        self._toasts.remove(toast)
        self._layout.removeWidget(toast)
        toast.deleteLater()

    def active_messages(self) -> List[str]:
        return [toast.notification.message for toast in self._toasts]

    def clear(self) -> None:
        for toast in list(self._toasts):
            self.dismiss(toast)

    def dispose(self) -> None:
        try:
            self._center.notification_posted.disconnect(self.show_notification)
        except TypeError:
            pass
        self.clear()
        self.deleteLater()
