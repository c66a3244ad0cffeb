"""
Layout constants for display trees and editor forms.

Centralizes spacing and margins so every handler lays out the same way.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InspectorLayoutConfig:
    """Spacing and margins used by display and edit widgets."""

    # Key/value rows of record displays
    kv_row_spacing: int = 4
    kv_row_margins: tuple = (0, 0, 0, 0)

    # Bordered boxes (records, references, collapsed placeholders)
    object_box_spacing: int = 2
    object_box_margins: tuple = (4, 4, 4, 4)

    # Array body (display) and rows (editor)
    array_body_spacing: int = 4
    array_body_margins: tuple = (4, 4, 4, 4)
    array_item_indent: int = 8
    array_row_spacing: int = 4
    array_row_margins: tuple = (0, 0, 0, 4)

    # Record editor: indented block of labelled fields
    record_field_spacing: int = 6
    record_margins: tuple = (8, 8, 8, 8)
    field_label_margin_top: int = 6

    # Method form and panel
    form_spacing: int = 6
    form_margins: tuple = (12, 12, 12, 12)
    panel_spacing: int = 12
    panel_margins: tuple = (16, 24, 16, 24)

    # Fixed sizes
    toggle_button_size: int = 16
    row_button_size: int = 28
    combo_min_width: int = 224


# Default configuration
COMPACT_LAYOUT = InspectorLayoutConfig()

SPACIOUS_LAYOUT = InspectorLayoutConfig(
    kv_row_spacing=6,
    object_box_margins=(8, 8, 8, 8),
    array_body_spacing=8,
    array_row_spacing=8,
    record_field_spacing=10,
    form_spacing=10,
)

# Current active configuration - change this to switch layouts globally
CURRENT_LAYOUT = COMPACT_LAYOUT
