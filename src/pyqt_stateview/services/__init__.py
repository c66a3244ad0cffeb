"""
Service layer.

Cross-cutting concerns shared by the widgets: enum-driven dispatch, signal
blocking and the global notification surface.
"""

from .enum_dispatch_service import EnumDispatchService
from .signal_service import SignalService
from .notification_center import NotificationCenter, Notification, NotificationLevel

__all__ = [
    "EnumDispatchService",
    "SignalService",
    "NotificationCenter",
    "Notification",
    "NotificationLevel",
]
