"""
No-scroll input controls for PyQt6.

Prevents accidental value changes from mouse wheel events while scrolling a
long form.
"""

from PyQt6.QtWidgets import QSpinBox, QDoubleSpinBox, QComboBox
from PyQt6.QtGui import QWheelEvent

# --- Module-level constants ---
INT_MIN = -2147483648
INT_MAX = 2147483647
FLOAT_LIMIT = 1e308
FLOAT_DECIMALS = 6


class NoScrollSpinBox(QSpinBox):
    """SpinBox over the 32-bit signed range that ignores wheel events."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRange(INT_MIN, INT_MAX)

    def wheelEvent(self, event: QWheelEvent):
        """Ignore wheel events to prevent accidental value changes."""
        event.ignore()


class NoScrollDoubleSpinBox(QDoubleSpinBox):
    """DoubleSpinBox over +/-1e308 that ignores wheel events."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRange(-FLOAT_LIMIT, FLOAT_LIMIT)
        self.setDecimals(FLOAT_DECIMALS)

    def wheelEvent(self, event: QWheelEvent):
        """Ignore wheel events to prevent accidental value changes."""
        event.ignore()


class NoScrollComboBox(QComboBox):
    """ComboBox that ignores wheel events to prevent accidental selection changes."""

    def wheelEvent(self, event: QWheelEvent):
        """Ignore wheel events to prevent accidental value changes."""
        event.ignore()

    def index_of_data(self, value) -> int:
        """Index of the item whose data equals ``value``, -1 if absent."""
        for i in range(self.count()):
            if self.itemData(i) == value:
                return i
        return -1
