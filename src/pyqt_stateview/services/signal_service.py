"""
Signal blocking helpers.

Editors re-derive their controls from each new value snapshot; the controls'
own change signals must stay silent while that happens, otherwise a pushed
value would echo back as a user edit.
"""

from contextlib import contextmanager
from PyQt6.QtWidgets import QWidget
import logging

logger = logging.getLogger(__name__)


class SignalService:
    """
    Context managers for widget signal blocking.

    Examples:
        with SignalService.block_signals(checkbox):
            checkbox.setChecked(True)

        with SignalService.block_signals(spin_box, combo_box):
            spin_box.setValue(1)
            combo_box.setCurrentIndex(0)
    """

    @staticmethod
    @contextmanager
    def block_signals(*widgets: QWidget):
        """Context manager for blocking widget signals, restoring prior state on exit."""
        previous = []
        for widget in widgets:
            if widget is not None:
                previous.append((widget, widget.blockSignals(True)))

        try:
            yield
        finally:
            for widget, was_blocked in previous:
                widget.blockSignals(was_blocked)
