"""Tests for lazily resolved reference displays."""

import threading

from pyqt_stateview.protocols import UserDescriptor, register_user_lookup
from pyqt_stateview.shapes import ReferenceShape


def test_reference_resolves_and_expands(dispatcher, qtbot):
    """u1 resolves to a collapsed panel; expanding shows UserId and type."""
    register_user_lookup(lambda user_id: UserDescriptor(user_id, "human") if user_id == "u1" else None)

    display = dispatcher.create_display(ReferenceShape(), "u1")
    qtbot.addWidget(display)
    assert display.raw_label.text() == "u1"

    qtbot.waitUntil(lambda: display.is_resolved, timeout=3000)
    assert display.title_label.text() == "u1"
    assert display.is_collapsed

    display.toggle()
    assert not display.is_collapsed
    assert display.id_display.text == '"u1"'
    assert display.type_display.text == '"human"'
    display.dispose()


def test_reference_shows_raw_until_resolved(dispatcher, qtbot):
    release = threading.Event()

    def slow_lookup(user_id):
        release.wait(2)
        return UserDescriptor(user_id, "bot", "Robo")

    register_user_lookup(slow_lookup)
    display = dispatcher.create_display(ReferenceShape(), "u9")
    qtbot.addWidget(display)
    assert not display.is_resolved
    assert display.raw_label.text() == "u9"

    release.set()
    qtbot.waitUntil(lambda: display.is_resolved, timeout=3000)
    assert display.title_label.text() == "Robo"
    display.dispose()


def test_reference_failure_keeps_raw_form(dispatcher, qtbot, notifications):
    """Rejected lookups degrade silently: no retry, no notification."""
    calls = []

    def failing_lookup(user_id):
        calls.append(user_id)
        raise ConnectionError("offline")

    register_user_lookup(failing_lookup)
    display = dispatcher.create_display(ReferenceShape(), "u1")
    qtbot.addWidget(display)
    qtbot.waitUntil(lambda: calls == ["u1"], timeout=3000)
    qtbot.wait(100)

    assert not display.is_resolved
    assert display.raw_label.text() == "u1"
    display.set_value("u1")
    qtbot.wait(50)
    assert calls == ["u1"]
    assert notifications == []
    display.dispose()


def test_reference_unresolved_and_cache(dispatcher, qtbot):
    calls = []

    def lookup(user_id):
        calls.append(user_id)
        return UserDescriptor(user_id, "human") if user_id == "u1" else None

    register_user_lookup(lookup)
    display = dispatcher.create_display(ReferenceShape(), "u1")
    qtbot.addWidget(display)
    qtbot.waitUntil(lambda: display.is_resolved, timeout=3000)

    display.set_value("ghost")
    assert not display.is_resolved
    qtbot.waitUntil(lambda: calls == ["u1", "ghost"], timeout=3000)
    qtbot.wait(50)
    assert not display.is_resolved

    # Seen before: upgrades from the per-widget cache without a new lookup
    display.set_value("u1")
    assert display.is_resolved
    assert calls == ["u1", "ghost"]
    display.dispose()


def test_reference_without_lookup_stays_raw(dispatcher):
    display = dispatcher.create_display(ReferenceShape("nobody"), "u1")
    assert not display.is_resolved
    assert display.raw_label.text() == "u1"
