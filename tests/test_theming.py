"""Tests for theming system."""


def test_color_scheme_conversions():
    """Test ColorScheme hex and rgba helpers."""
    from pyqt_stateview.theming import ColorScheme

    scheme = ColorScheme()
    assert scheme.to_hex((255, 0, 16)) == "#ff0010"
    assert scheme.to_rgba((1, 2, 3, 128)).startswith("rgba(1, 2, 3")
    assert "status_error" in scheme.get_color_dict()


def test_dark_theme_differs():
    from pyqt_stateview.theming import ColorScheme

    assert ColorScheme.create_dark_theme().window_bg != ColorScheme().window_bg


def test_style_generator_uses_scheme_colors():
    from pyqt_stateview.services import NotificationLevel
    from pyqt_stateview.theming import ColorScheme, StyleSheetGenerator

    scheme = ColorScheme()
    generator = StyleSheetGenerator(scheme)
    assert scheme.to_hex(scheme.status_error) in generator.generate_toast_style(NotificationLevel.ERROR)
    assert scheme.to_hex(scheme.submit_bg) in generator.generate_submit_button_style()
    assert "QFrame#box" in generator.generate_object_box_style("QFrame#box")
    assert "italic" not in generator.muted_text_style(italic=False)
