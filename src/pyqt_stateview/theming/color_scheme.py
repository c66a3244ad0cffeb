"""
PyQt6 Color Scheme for the state inspector.

Semantic color names for containers, value glyphs, controls and
notifications. Widgets never hardcode colors; they read them from a
ColorScheme and render through StyleSheetGenerator.
"""

import logging
from dataclasses import dataclass, fields
from typing import Tuple, Dict
from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)


@dataclass
class ColorScheme:
    """
    Color scheme with semantic color names (light theme by default).
    """

    # ========== CONTAINERS ==========
    window_bg: Tuple[int, int, int] = (255, 255, 255)     # #ffffff - Panels and dialogs
    panel_bg: Tuple[int, int, int] = (243, 244, 246)      # #f3f4f6 - Form and array backgrounds
    object_bg: Tuple[int, int, int] = (255, 255, 255)     # #ffffff - Record/reference boxes
    border_color: Tuple[int, int, int] = (209, 213, 219)  # #d1d5db - Primary borders
    border_strong: Tuple[int, int, int] = (55, 65, 81)    # #374151 - Toggle button borders
    overlay_bg: Tuple[int, int, int, int] = (107, 114, 128, 191)  # Dimmed backdrop behind the panel

    # ========== TEXT ==========
    text_primary: Tuple[int, int, int] = (17, 24, 39)     # #111827 - Titles
    text_secondary: Tuple[int, int, int] = (55, 65, 81)   # #374151 - Values and labels
    text_muted: Tuple[int, int, int] = (107, 114, 128)    # #6b7280 - "none", item counts, placeholders

    # ========== CONTROLS ==========
    button_bg: Tuple[int, int, int] = (209, 213, 219)          # #d1d5db - Array row controls
    button_hover_bg: Tuple[int, int, int] = (156, 163, 175)    # #9ca3af
    button_disabled_bg: Tuple[int, int, int] = (229, 231, 235) # #e5e7eb
    button_disabled_text: Tuple[int, int, int] = (107, 114, 128)
    submit_bg: Tuple[int, int, int] = (220, 38, 38)            # #dc2626 - Submit buttons
    submit_hover_bg: Tuple[int, int, int] = (185, 28, 28)      # #b91c1c
    switch_on: Tuple[int, int, int] = (79, 70, 229)            # #4f46e5 - Toggle on
    switch_off: Tuple[int, int, int] = (156, 163, 175)         # #9ca3af - Toggle off
    input_bg: Tuple[int, int, int] = (255, 255, 255)
    input_border: Tuple[int, int, int] = (209, 213, 219)
    input_focus_border: Tuple[int, int, int] = (99, 102, 241)  # #6366f1

    # ========== NOTIFICATIONS ==========
    status_error: Tuple[int, int, int] = (220, 38, 38)     # #dc2626
    status_warning: Tuple[int, int, int] = (217, 119, 6)   # #d97706
    status_info: Tuple[int, int, int] = (37, 99, 235)      # #2563eb
    toast_text: Tuple[int, int, int] = (255, 255, 255)

    def to_qcolor(self, color_tuple: Tuple[int, ...]) -> QColor:
        """
        Convert an RGB or RGBA tuple to QColor.

        Args:
            color_tuple: (r, g, b) or (r, g, b, a)
        """
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, ...]) -> str:
        """
        Convert RGB tuple to hex color string (alpha ignored).

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple[:3]
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_rgba(self, color_tuple: Tuple[int, int, int, int]) -> str:
        """Convert RGBA tuple to a stylesheet ``rgba(...)`` string."""
        r, g, b, a = color_tuple
        return f"rgba({r}, {g}, {b}, {a})"

    @classmethod
    def create_dark_theme(cls) -> 'ColorScheme':
        """Dark variant for embedding in dark applications."""
        return cls(
            window_bg=(43, 43, 43),
            panel_bg=(30, 30, 30),
            object_bg=(43, 43, 43),
            border_color=(85, 85, 85),
            border_strong=(160, 160, 160),
            text_primary=(255, 255, 255),
            text_secondary=(204, 204, 204),
            text_muted=(136, 136, 136),
            button_bg=(64, 64, 64),
            button_hover_bg=(80, 80, 80),
            button_disabled_bg=(42, 42, 42),
            button_disabled_text=(102, 102, 102),
            input_bg=(64, 64, 64),
            input_border=(102, 102, 102),
        )

    def get_color_dict(self) -> Dict[str, Tuple[int, ...]]:
        """Return all colors keyed by their semantic name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
