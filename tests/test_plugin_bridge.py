"""Tests for the plugin bridge."""

import pytest
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QLabel

from pyqt_stateview.protocols import (
    PluginElement, PluginHandle, PyQtWidgetMeta, SessionContext, UserDescriptor, register_plugin_element,
)
from pyqt_stateview.shapes import PluginShape


class RecordingElement(QLabel, PluginElement, metaclass=PyQtWidgetMeta):
    error_occurred = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.handle = None
        self.refreshes = 0

    def bind(self, handle: PluginHandle) -> None:
        self.handle = handle

    def refresh(self) -> None:
        self.refreshes += 1
        self.setText(repr(self.handle.value))


@pytest.fixture
def session(qapp):
    return SessionContext(connection="conn", user=UserDescriptor("u1", "human"), state={"round": 1})


@pytest.fixture
def bridge_dispatcher(session):
    from pyqt_stateview.forms import ShapeDispatcher
    return ShapeDispatcher(session=session)


def test_bridge_binds_handle_once(bridge_dispatcher, session):
    register_plugin_element("recorder", RecordingElement)
    bridge = bridge_dispatcher.create_display(PluginShape("recorder"), {"score": 1})

    element = bridge.element
    handle = element.handle
    assert handle.value == {"score": 1}
    assert handle.connection == "conn"
    assert handle.user.id == "u1"
    assert handle.state == {"round": 1}
    assert element.refreshes == 1

    bridge.set_value({"score": 2})
    assert bridge.element is element
    assert element.handle is handle
    assert handle.value == {"score": 2}
    assert element.refreshes == 2


def test_bridge_follows_session_snapshots(bridge_dispatcher, session):
    register_plugin_element("recorder", RecordingElement)
    bridge = bridge_dispatcher.create_display(PluginShape("recorder"), None)
    element = bridge.element

    session.update_snapshot({"round": 2}, updated_at=1234.0)
    assert element.handle.state == {"round": 2}
    assert element.handle.updated_at == 1234.0
    assert element.refreshes == 2

    bridge.dispose()
    session.update_snapshot({"round": 3})
    assert element.refreshes == 2


def test_bridge_relays_errors(bridge_dispatcher, notifications):
    register_plugin_element("recorder", RecordingElement)
    bridge = bridge_dispatcher.create_display(PluginShape("recorder"), None)

    bridge.element.error_occurred.emit("render failed")
    assert notifications == ["render failed"]

    bridge.dispose()
    bridge.element.error_occurred.emit("after unmount")
    assert notifications == ["render failed"]


def test_bridge_unregistered_element_renders_placeholder(bridge_dispatcher):
    bridge = bridge_dispatcher.create_display(PluginShape("missing"), None)
    assert bridge.element is None
    assert "missing" in bridge.placeholder_label.text()
    bridge.set_value(1)


def test_bridge_rejects_non_plugin_elements(bridge_dispatcher):
    register_plugin_element("label", QLabel)
    with pytest.raises(TypeError):
        bridge_dispatcher.create_display(PluginShape("label"), None)


def test_collapsible_bridge(bridge_dispatcher):
    register_plugin_element("recorder", RecordingElement)
    bridge = bridge_dispatcher.create_display(PluginShape("recorder", collapsible=True), None)
    assert not bridge.is_collapsed
    bridge.toggle()
    assert bridge.is_collapsed
    assert bridge.section.placeholder_label.text().strip() == "plugin collapsed"
    assert bridge.element.isHidden()


def test_bridge_without_session(dispatcher):
    register_plugin_element("recorder", RecordingElement)
    bridge = dispatcher.create_display(PluginShape("recorder"), 5)
    assert bridge.element.handle.state is None
    assert bridge.element.text() == "5"


class ExplodingElement(RecordingElement):
    fail_on_refresh = True

    def refresh(self) -> None:
        super().refresh()
        if self.fail_on_refresh:
            raise RuntimeError("plugin exploded")


def _exploding_factory():
    raise RuntimeError("factory exploded")


def _record_with_plugin(element_id):
    from pyqt_stateview.shapes import STRING, FieldSpec, RecordShape

    return RecordShape("Root", (FieldSpec("name", STRING), FieldSpec("plug", PluginShape(element_id))))


def test_raising_refresh_does_not_break_siblings(bridge_dispatcher, notifications):
    register_plugin_element("exploding", ExplodingElement)
    record = bridge_dispatcher.create_display(_record_with_plugin("exploding"), {"name": "Alice", "plug": 1})

    assert record.field_widgets["name"].text == '"Alice"'
    bridge = record.field_widgets["plug"]
    assert bridge.element is not None
    assert notifications == ["plugin exploding failed: plugin exploded"]

    record.set_value({"name": "Bob", "plug": 2})
    assert record.field_widgets["name"].text == '"Bob"'
    assert bridge.handle.value == 2
    assert len(notifications) == 2


def test_raising_refresh_in_snapshot_slot_is_reported(bridge_dispatcher, session, notifications):
    register_plugin_element("exploding", ExplodingElement)
    bridge = bridge_dispatcher.create_display(PluginShape("exploding"), None)

    session.update_snapshot({"round": 2})
    assert bridge.element.refreshes == 2
    assert bridge.element.handle.state == {"round": 2}
    assert len(notifications) == 2


def test_raising_factory_falls_back_to_placeholder(bridge_dispatcher, notifications):
    register_plugin_element("broken", _exploding_factory)
    record = bridge_dispatcher.create_display(_record_with_plugin("broken"), {"name": "Alice", "plug": None})

    assert record.field_widgets["name"].text == '"Alice"'
    bridge = record.field_widgets["plug"]
    assert bridge.element is None
    assert bridge.placeholder_label.text() == "plugin failed: broken"
    assert notifications == ["plugin broken failed: factory exploded"]
    bridge.set_value(3)


def test_raising_bind_falls_back_to_placeholder(bridge_dispatcher, notifications):
    class UnbindableElement(RecordingElement):
        def bind(self, handle):
            raise ValueError("cannot bind")

    register_plugin_element("unbindable", UnbindableElement)
    bridge = bridge_dispatcher.create_display(PluginShape("unbindable"), None)

    assert bridge.element is None
    assert bridge.placeholder_label.text() == "plugin failed: unbindable"
    assert notifications == ["plugin unbindable failed: cannot bind"]
