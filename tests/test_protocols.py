"""Tests for widget protocols, registries and configuration."""

import pytest


def test_editor_widgets_implement_protocols(dispatcher):
    """Every editor implements the value and change-signal ABCs."""
    from pyqt_stateview.protocols import ChangeSignalEmitter, Disposable, ValueGettable, ValueSettable
    from pyqt_stateview.shapes import INT

    editor = dispatcher.create_editor(INT, 3)
    assert isinstance(editor, ValueGettable)
    assert isinstance(editor, ValueSettable)
    assert isinstance(editor, ChangeSignalEmitter)
    assert isinstance(editor, Disposable)

    # Test value roundtrip
    editor.set_value(7)
    assert editor.get_value() == 7


def test_change_signal_connect_disconnect(dispatcher):
    from pyqt_stateview.shapes import STRING

    editor = dispatcher.create_editor(STRING, "")
    received = []
    editor.connect_change_signal(received.append)
    editor._emit_change("a")
    editor.disconnect_change_signal(received.append)
    editor.disconnect_change_signal(received.append)
    editor._emit_change("b")
    assert received == ["a"]


def test_dispose_is_idempotent(dispatcher):
    from pyqt_stateview.shapes import INT

    display = dispatcher.create_display(INT, 1)
    display.dispose()
    display.dispose()
    assert display.is_disposed


def test_plugin_registry(caplog):
    from pyqt_stateview.protocols import (
        get_plugin_element_factory, register_plugin_element, unregister_plugin_element,
    )

    factory = object
    register_plugin_element("x", factory)
    assert get_plugin_element_factory("x") is factory
    register_plugin_element("x", dict)
    assert "already registered" in caplog.text
    unregister_plugin_element("x")
    assert get_plugin_element_factory("x") is None


def test_user_lookup_registry():
    from pyqt_stateview.protocols import get_user_lookup, register_user_lookup, unregister_user_lookup

    lookup = lambda user_id: None
    register_user_lookup(lookup)
    assert get_user_lookup() is lookup
    assert get_user_lookup("other") is None
    register_user_lookup(lookup, key="other")
    unregister_user_lookup()
    assert get_user_lookup() is None
    assert get_user_lookup("other") is lookup


def test_config_defaults_and_override():
    from pyqt_stateview.protocols import StateViewConfig, get_config, set_config

    assert get_config().array_collapse_threshold == 4
    assert get_config().array_composite_collapse_threshold == 7
    set_config(StateViewConfig(panel_width=300))
    assert get_config().panel_width == 300
    set_config(None)
    assert get_config().panel_width == 512


def test_user_descriptor_display_name():
    from pyqt_stateview.protocols import UserDescriptor

    assert UserDescriptor("u1", "human").display_name == "u1"
    assert UserDescriptor("u1", "human", "Alice").display_name == "Alice"


def test_plugin_element_is_abstract():
    from pyqt_stateview.protocols import PluginElement

    with pytest.raises(TypeError):
        PluginElement()
