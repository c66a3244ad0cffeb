"""
Widget ABC contracts for shape handlers.

Every widget produced by the ShapeDispatcher implements these contracts, so
containers talk to children through explicit interfaces instead of probing
for attributes.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueGettable(ABC):
    """
    ABC for widgets that can return the value they currently show.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the value currently held by the widget.

        Returns:
            The latest value passed to set_value() or emitted by the widget.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that accept a new value snapshot.

    Containers reconcile their children in place: a new snapshot updates the
    existing widgets by position instead of rebuilding them, which keeps
    per-node state such as collapse flags.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Show a new value snapshot.

        Implementations must not emit change signals while applying it.

        Args:
            value: The new value, matching the widget's shape.
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for editors that report user edits.

    Implementations expose ``value_changed = pyqtSignal(object)`` and emit it
    synchronously with one complete new value per user edit.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the widget's change signal.

        Args:
            callback: Function to call with the new value.
                     Signature: callback(new_value: Any) -> None
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Disconnect callback from the widget's change signal.

        Args:
            callback: Previously connected callback.
        """
        pass


class Disposable(ABC):
    """
    ABC for widgets holding resources tied to their mount lifetime
    (background tasks, signal subscriptions to objects they do not own).
    """

    @abstractmethod
    def dispose(self) -> None:
        """Release subscriptions and schedule the widget for deletion."""
        pass
