"""
QStyleSheet generator for the inspector widgets.

Builds stylesheet strings from a ColorScheme so widgets reference semantic
colors instead of literals.
"""

import logging
from .color_scheme import ColorScheme
from pyqt_stateview.services.notification_center import NotificationLevel

logger = logging.getLogger(__name__)


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from ColorScheme objects.
    """

    def __init__(self, color_scheme: ColorScheme = None):
        self.color_scheme = color_scheme or ColorScheme()

    def update_color_scheme(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def generate_object_box_style(self, selector: str = "QFrame") -> str:
        """Bordered white box used by records, references and collapsed placeholders."""
        cs = self.color_scheme
        return f"""
            {selector} {{
                background-color: {cs.to_hex(cs.object_bg)};
                border: 1px solid {cs.to_hex(cs.border_color)};
                border-radius: 4px;
            }}
        """

    def generate_array_body_style(self, selector: str = "QFrame") -> str:
        cs = self.color_scheme
        return f"""
            {selector} {{
                background-color: {cs.to_hex(cs.panel_bg)};
                border: 1px solid {cs.to_hex(cs.border_color)};
                border-radius: 3px;
            }}
        """

    def generate_toggle_button_style(self) -> str:
        """Small +/- button that flips a collapsible node."""
        cs = self.color_scheme
        return f"""
            QToolButton {{
                background-color: {cs.to_hex(cs.panel_bg)};
                color: {cs.to_hex(cs.text_secondary)};
                border: 1px solid {cs.to_hex(cs.border_strong)};
                border-radius: 4px;
                padding: 0px 3px;
                font-size: 10px;
            }}
            QToolButton:hover {{
                background-color: {cs.to_hex(cs.button_bg)};
            }}
        """

    def generate_row_button_style(self) -> str:
        """Up/down/delete/add controls of the array editor."""
        cs = self.color_scheme
        return f"""
            QPushButton {{
                background-color: {cs.to_hex(cs.button_bg)};
                color: {cs.to_hex(cs.text_secondary)};
                border: none;
                border-radius: 4px;
                padding: 4px 6px;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.button_hover_bg)};
                color: {cs.to_hex(cs.text_primary)};
            }}
            QPushButton:disabled {{
                background-color: {cs.to_hex(cs.button_disabled_bg)};
                color: {cs.to_hex(cs.button_disabled_text)};
            }}
        """

    def generate_submit_button_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QPushButton {{
                background-color: {cs.to_hex(cs.submit_bg)};
                color: {cs.to_hex(cs.toast_text)};
                border: none;
                border-radius: 6px;
                padding: 6px 12px;
                font-weight: 500;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.submit_hover_bg)};
            }}
            QPushButton:disabled {{
                background-color: {cs.to_hex(cs.button_disabled_bg)};
                color: {cs.to_hex(cs.button_disabled_text)};
            }}
        """

    def generate_switch_style(self) -> str:
        """Checkbox rendered as an on/off switch (booleans and optional presence)."""
        cs = self.color_scheme
        return f"""
            QCheckBox::indicator {{
                width: 30px;
                height: 16px;
                border-radius: 8px;
                background-color: {cs.to_hex(cs.switch_off)};
            }}
            QCheckBox::indicator:checked {{
                background-color: {cs.to_hex(cs.switch_on)};
            }}
        """

    def generate_form_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QFrame#methodForm {{
                background-color: {cs.to_hex(cs.panel_bg)};
                border-radius: 6px;
            }}
            QLabel#methodTitle {{
                color: {cs.to_hex(cs.text_primary)};
                font-weight: 500;
            }}
            QLabel#fieldLabel {{
                color: {cs.to_hex(cs.text_secondary)};
                font-size: 11px;
            }}
            QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox {{
                background-color: {cs.to_hex(cs.input_bg)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 4px;
                padding: 3px;
            }}
            QLineEdit:focus, QSpinBox:focus, QDoubleSpinBox:focus, QComboBox:focus {{
                border: 1px solid {cs.to_hex(cs.input_focus_border)};
            }}
        """

    def generate_panel_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QDialog {{
                background-color: {cs.to_hex(cs.window_bg)};
            }}
            QLabel#panelTitle {{
                color: {cs.to_hex(cs.text_primary)};
                font-size: 16px;
                font-weight: 500;
            }}
        """

    def muted_text_style(self, italic: bool = True) -> str:
        cs = self.color_scheme
        style = f"color: {cs.to_hex(cs.text_muted)};"
        if italic:
            style += " font-style: italic;"
        return style

    def generate_toast_style(self, level: NotificationLevel) -> str:
        cs = self.color_scheme
        background = {
            NotificationLevel.ERROR: cs.status_error,
            NotificationLevel.WARNING: cs.status_warning,
            NotificationLevel.INFO: cs.status_info,
        }[level]
        return f"""
            QLabel {{
                background-color: {cs.to_hex(background)};
                color: {cs.to_hex(cs.toast_text)};
                border-radius: 6px;
                padding: 8px 12px;
            }}
        """
