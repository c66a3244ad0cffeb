"""
Bridge between the shape pipeline and externally registered plugin elements.

The element is built once per bridge and bound to a single PluginHandle.
Every new value and every session snapshot mutates that handle in place and
asks the element to refresh. Errors the element reports and exceptions its
hooks raise are relayed to the NotificationCenter. An element that cannot be
built or bound is replaced by a placeholder label, so sibling subtrees still
render.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pyqt_stateview.protocols import PluginElement, PluginHandle, ShapeDisplayWidget, get_plugin_element_factory
from pyqt_stateview.services.notification_center import NotificationCenter
from pyqt_stateview.shapes import PluginShape
from pyqt_stateview.widgets.collapsible import CollapsibleSection

if TYPE_CHECKING:
    from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher

logger = logging.getLogger(__name__)

PLUGIN_COLLAPSED_TEXT = " plugin collapsed"


class PluginBridge(ShapeDisplayWidget):
    """Hosts one plugin element and keeps its handle current."""

    def __init__(self, shape: PluginShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self._session = dispatcher.session
        self._value = value
        self.handle = PluginHandle(value=value)
        self._sync_session()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._element_failed = False
        self.element = self._create_element()
        if self.element is not None:
            self.element.error_occurred.connect(self._relay_error)
            if not self._call_element("bind", self.handle):
                self.element.error_occurred.disconnect(self._relay_error)
                self.element.deleteLater()
                self.element = None
                self._element_failed = True
        if self.element is None:
            content: QWidget = self._placeholder()
        else:
            content = self.element

        self.section: Optional[CollapsibleSection] = None
        if shape.collapsible:
            self.section = CollapsibleSection(
                collapsed=False, placeholder_text=PLUGIN_COLLAPSED_TEXT,
                style=dispatcher.style, boxed=False,
            )
            self.section.set_body(content)
            layout.addWidget(self.section)
        else:
            layout.addWidget(content)

        self._refresh()
        if self._session is not None:
            self._session.snapshot_changed.connect(self._on_snapshot_changed)

    def _create_element(self) -> Optional[QWidget]:
        factory = get_plugin_element_factory(self.shape.element_id)
        if factory is None:
            logger.warning(f"No plugin element registered for '{self.shape.element_id}'")
            return None
        try:
            element = factory()
        except Exception as e:
            self._report_failure("construction", e)
            self._element_failed = True
            return None
        if not isinstance(element, PluginElement) or not isinstance(element, QWidget):
            raise TypeError(
                f"Plugin element '{self.shape.element_id}' must be a QWidget implementing "
                f"PluginElement; got {type(element).__name__}"
            )
        return element

    def _call_element(self, operation: str, *args) -> bool:
        """Run one element hook; a raising element is reported, never propagated."""
        try:
            getattr(self.element, operation)(*args)
        except Exception as e:
            self._report_failure(operation, e)
            return False
        return True

    def _report_failure(self, operation: str, error: Exception) -> None:
        logger.exception(f"Plugin element '{self.shape.element_id}' failed in {operation}")
        NotificationCenter.instance().error(f"plugin {self.shape.element_id} failed: {error}")

    def _refresh(self) -> None:
        if self.element is not None:
            self._call_element("refresh")

    def _placeholder(self) -> QLabel:
        prefix = "plugin failed" if self._element_failed else "unknown plugin"
        self.placeholder_label = QLabel(f"{prefix}: {self.shape.element_id}")
        return self.placeholder_label

    @property
    def is_collapsed(self) -> bool:
        return self.section is not None and self.section.is_collapsed

    def toggle(self) -> None:
        if self.section is not None:
            self.section.toggle()

    def _sync_session(self) -> None:
        if self._session is None:
            return
        self.handle.connection = self._session.connection
        self.handle.user = self._session.user
        self.handle.state = self._session.state
        self.handle.updated_at = self._session.updated_at

    def set_value(self, value: Any) -> None:
        self._value = value
        self.handle.value = value
        self._sync_session()
        self._refresh()

    def _on_snapshot_changed(self) -> None:
        self._sync_session()
        self._refresh()

    def _relay_error(self, message: str) -> None:
        logger.debug(f"PluginBridge '{self.shape.element_id}' relayed error: {message}")
        NotificationCenter.instance().error(message)

    def _release(self) -> None:
        if self._session is not None:
            try:
                self._session.snapshot_changed.disconnect(self._on_snapshot_changed)
            except TypeError:
                # Already disconnected
                pass
        if self.element is not None:
            try:
                self.element.error_occurred.disconnect(self._relay_error)
            except TypeError:
                pass
