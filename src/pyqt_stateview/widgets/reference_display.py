"""
Reference display: a raw identifier that upgrades itself once resolved.

The identifier is shown immediately. A lookup registered for the shape's
``lookup_key`` then runs on a BackgroundTask; when it returns a
UserDescriptor the node is replaced in place by a collapsible panel titled
with the user's display name. Failures leave the raw form.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QStackedLayout, QVBoxLayout, QWidget

from pyqt_stateview.core.background_task import BackgroundTaskManager
from pyqt_stateview.protocols import ShapeDisplayWidget, UserDescriptor, get_user_lookup
from pyqt_stateview.shapes import STRING, ReferenceShape
from pyqt_stateview.widgets.collapsible import CollapsibleSection
from pyqt_stateview.widgets.display_widgets import KeyValueRow

if TYPE_CHECKING:
    from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher

logger = logging.getLogger(__name__)

USER_GLYPH = "\U0001F464"


class ReferenceDisplay(ShapeDisplayWidget):
    """
    Lazily resolved identifier.

    Resolved descriptors are cached per widget for its whole lifetime, so
    switching back to an identifier seen before upgrades without a new lookup.
    """

    def __init__(self, shape: ReferenceShape, value: Any, dispatcher: "ShapeDispatcher", parent=None):
        super().__init__(parent)
        self.shape = shape
        self._dispatcher = dispatcher
        self._cache: Dict[str, UserDescriptor] = {}
        self._task_manager = BackgroundTaskManager()
        self._resolved: Optional[UserDescriptor] = None
        self._missing_lookup_logged = False

        self._stack = QStackedLayout(self)

        raw = QWidget()
        raw_layout = QHBoxLayout(raw)
        raw_layout.setContentsMargins(0, 0, 0, 0)
        raw_layout.setSpacing(4)
        raw_layout.addWidget(QLabel(USER_GLYPH))
        self.raw_label = QLabel()
        raw_layout.addWidget(self.raw_label)
        raw_layout.addStretch()
        self._stack.addWidget(raw)

        self.section = CollapsibleSection(collapsed=True, style=dispatcher.style)
        self.title_label = QLabel()
        self.section.add_header_widget(self.title_label)
        body = QWidget()
        body_layout = QVBoxLayout(body)
        body_layout.setContentsMargins(0, 0, 0, 0)
        body_layout.setSpacing(1)
        self.id_display = dispatcher.create_display(STRING, "")
        self.type_display = dispatcher.create_display(STRING, "")
        body_layout.addWidget(KeyValueRow("UserId", self.id_display))
        body_layout.addWidget(KeyValueRow("type", self.type_display))
        self.section.set_body(body)
        self._stack.addWidget(self.section)

        self.set_value(value)

    @property
    def is_resolved(self) -> bool:
        return self._resolved is not None

    @property
    def descriptor(self) -> Optional[UserDescriptor]:
        return self._resolved

    @property
    def is_collapsed(self) -> bool:
        return self.section.is_collapsed

    def toggle(self) -> None:
        self.section.toggle()

    def set_value(self, value: Any) -> None:
        identifier = "" if value is None else str(value)
        if identifier == self._value:
            return
        self._value = identifier
        self.raw_label.setText(identifier)

        cached = self._cache.get(identifier)
        if cached is not None:
            self._show_resolved(cached)
            return

        self._show_raw()
        if identifier:
            self._start_lookup(identifier)

    def _start_lookup(self, identifier: str) -> None:
        lookup = get_user_lookup(self.shape.lookup_key)
        if lookup is None:
            if not self._missing_lookup_logged:
                logger.warning(f"No user lookup registered for '{self.shape.lookup_key}'")
                self._missing_lookup_logged = True
            return

        logger.debug(f"ReferenceDisplay: looking up {identifier!r}")
        self._task_manager.run(
            target=lookup,
            args=(identifier,),
            on_success=lambda result, ident=identifier: self._on_lookup_done(ident, result),
            on_error=lambda error, ident=identifier: self._on_lookup_failed(ident, error),
        )

    def _on_lookup_done(self, identifier: str, result: Optional[UserDescriptor]) -> None:
        if self.is_disposed:
            return
        if result is None:
            logger.debug(f"ReferenceDisplay: {identifier!r} did not resolve")
            return
        self._cache[identifier] = result
        if identifier == self._value:
            self._show_resolved(result)

    def _on_lookup_failed(self, identifier: str, error: Exception) -> None:
        # No retry and no notification; the raw identifier stays visible
        logger.debug(f"ReferenceDisplay: lookup for {identifier!r} failed: {error}")

    def _show_raw(self) -> None:
        self._resolved = None
        self._stack.setCurrentIndex(0)

    def _show_resolved(self, descriptor: UserDescriptor) -> None:
        self._resolved = descriptor
        self.title_label.setText(descriptor.display_name)
        self.id_display.set_value(descriptor.id)
        self.type_display.set_value(descriptor.type)
        self._stack.setCurrentWidget(self.section)

    def _release(self) -> None:
        self._task_manager.cleanup()
