"""Session context, responses and request method descriptions.

A SessionContext is constructed once per top-level mount and passed down the
render tree. Widgets that need the live snapshot (the plugin bridge, the state
view) subscribe to ``snapshot_changed``.
"""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

if TYPE_CHECKING:
    from pyqt_stateview.shapes import ShapeDescriptor

logger = logging.getLogger(__name__)


class ResponseType(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Response:
    """Outcome of one submitted request."""
    type: ResponseType
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "Response":
        return cls(ResponseType.SUCCESS)

    @classmethod
    def failure(cls, message: str) -> "Response":
        return cls(ResponseType.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.type is ResponseType.ERROR

    @classmethod
    def coerce(cls, result: Any) -> "Response":
        """
        Normalize whatever a submit operation returned.

        Accepts a Response, a mapping ``{"type": "success" | "error", "error": str}``
        or None (treated as success).

        Raises:
            TypeError: If ``result`` has none of these forms
            ValueError: If a mapping carries an unknown ``type``
        """
        if isinstance(result, Response):
            return result
        if result is None:
            return cls.success()
        if isinstance(result, Mapping):
            response_type = ResponseType(result.get("type"))
            if response_type is ResponseType.ERROR:
                return cls.failure(str(result.get("error", "")))
            return cls.success()
        raise TypeError(
            f"Submit operations must return a Response, a mapping or None; got {type(result).__name__}"
        )


@dataclass(frozen=True)
class UserDescriptor:
    """Resolved description of a user identifier."""
    id: str
    type: str
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


@dataclass(frozen=True)
class MethodSpec:
    """One outgoing request kind: its payload shape, submit operation and default factory."""
    name: str
    shape: "ShapeDescriptor"
    submit: Callable[[Any], Any]
    initialize: Callable[[], Any]
    submit_label: str = "Submit"


def _now_ms() -> float:
    return time.time() * 1000


class SessionContext(QObject):
    """
    Live session snapshot shared by the display pipeline and the plugin bridge.

    Signals:
        snapshot_changed: Emitted after update_snapshot() replaces the state
    """

    snapshot_changed = pyqtSignal()

    def __init__(self, connection: Any = None, user: Optional[UserDescriptor] = None,
                 state: Any = None, updated_at: Optional[float] = None, parent=None):
        super().__init__(parent)
        self._connection = connection
        self._user = user
        self._state = state
        self._updated_at = updated_at if updated_at is not None else _now_ms()

    @property
    def connection(self) -> Any:
        return self._connection

    @property
    def user(self) -> Optional[UserDescriptor]:
        return self._user

    @property
    def state(self) -> Any:
        return self._state

    @property
    def updated_at(self) -> float:
        return self._updated_at

    def update_snapshot(self, state: Any, updated_at: Optional[float] = None) -> None:
        """Replace the current state snapshot and notify subscribers."""
        self._state = state
        self._updated_at = updated_at if updated_at is not None else _now_ms()
        logger.debug(f"SessionContext: new snapshot at {self._updated_at}")
        self.snapshot_changed.emit()

    def set_user(self, user: Optional[UserDescriptor]) -> None:
        self._user = user
        self.snapshot_changed.emit()
