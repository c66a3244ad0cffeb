"""Plugin element contract and registry.

A plugin element renders one externally supplied value through a mechanism
the engine does not inspect. The engine only hands it a mutable handle and
listens for error messages.

Example:
    from pyqt_stateview.protocols import PluginElement, register_plugin_element

    class PlayerStatePlugin(QLabel, PluginElement, metaclass=PyQtWidgetMeta):
        error_occurred = pyqtSignal(str)

        def bind(self, handle):
            self._handle = handle

        def refresh(self):
            self.setText(repr(self._handle.value))

    register_plugin_element("player-state-plugin", PlayerStatePlugin)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class PluginHandle:
    """
    Mutable handle forwarded to a plugin element.

    The bridge mutates these fields in place on every re-render; the element
    keeps the same handle for its whole lifetime.
    """
    value: Any = None
    connection: Any = None
    user: Any = None
    state: Any = None
    updated_at: Optional[float] = None


class PluginElement(ABC):
    """
    ABC for externally registered rendering elements.

    Implementations are QWidgets that also declare
    ``error_occurred = pyqtSignal(str)``.
    """

    @abstractmethod
    def bind(self, handle: PluginHandle) -> None:
        """Receive the handle once, right after construction."""
        pass

    @abstractmethod
    def refresh(self) -> None:
        """Called after the bridge mutated the handle."""
        pass


PluginElementFactory = Callable[[], Any]

# Global registry (set by application)
_plugin_elements: Dict[str, PluginElementFactory] = {}


def register_plugin_element(element_id: str, factory: PluginElementFactory) -> None:
    """Register the factory that builds the element for ``element_id``.

    Args:
        element_id: Identifier referenced by PluginShape.element_id
        factory: Zero-argument callable returning a PluginElement QWidget
    """
    if element_id in _plugin_elements:
        logger.warning(f"Plugin element '{element_id}' already registered. Overwriting.")
    _plugin_elements[element_id] = factory
    logger.debug(f"Registered plugin element '{element_id}'")


def unregister_plugin_element(element_id: str) -> None:
    _plugin_elements.pop(element_id, None)


def get_plugin_element_factory(element_id: str) -> Optional[PluginElementFactory]:
    """Return the registered factory, or None when nothing is registered."""
    return _plugin_elements.get(element_id)
