"""
Base adapters that bind Qt widgets to the shape-handler ABCs.

Every display and edit widget produced by the dispatcher derives from one of
these bases:

- ShapeDisplayWidget: ValueGettable + ValueSettable + Disposable
- ShapeEditorWidget:  the above + ChangeSignalEmitter via ``value_changed``

Editors are controlled widgets. A user edit emits ``value_changed`` with the
complete new value; the owner stores it and pushes it back down through
``set_value``. Editors never treat their own emission as applied.
"""

import logging
from abc import ABCMeta
from typing import Any, Callable

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QWidget

from .widget_protocols import ValueGettable, ValueSettable, ChangeSignalEmitter, Disposable

logger = logging.getLogger(__name__)

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class ShapeDisplayWidget(QWidget, ValueGettable, ValueSettable, Disposable, metaclass=PyQtWidgetMeta):
    """
    Read-only widget bound to one shape.

    Subclasses implement ``set_value`` and may override ``_release`` to drop
    resources on dispose.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._value: Any = None
        self._disposed = False

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self._value

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self._value = value

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Implement Disposable ABC."""
        if self._disposed:
            return
        self._disposed = True
        self._release()
        self.deleteLater()

    def _release(self) -> None:
        """Hook for subclasses: release subscriptions and child resources."""
        pass


class ShapeEditorWidget(ShapeDisplayWidget, ChangeSignalEmitter):
    """
    Interactive widget bound to one shape.

    ``value_changed`` is emitted synchronously with one complete value per
    user edit.
    """

    value_changed = pyqtSignal(object)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.value_changed.connect(callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        try:
            self.value_changed.disconnect(callback)
        except TypeError:
            # Signal not connected - ignore
            pass

    def _emit_change(self, value: Any) -> None:
        logger.debug(f"{type(self).__name__}: emitting value_changed")
        self.value_changed.emit(value)
