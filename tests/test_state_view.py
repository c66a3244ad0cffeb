"""Tests for the session-bound state view and toast surface."""

from pyqt_stateview.demo.schema import GAME_VIEW_SHAPE, PLAYER_STATE_SHAPE, GameView, PlayerState, Role
from pyqt_stateview.protocols import SessionContext, StateViewConfig, register_plugin_element, set_config
from pyqt_stateview.services import NotificationCenter
from pyqt_stateview.widgets import StateView, ToastWidget


def test_state_view_follows_snapshots(qtbot):
    session = SessionContext(state=PlayerState(creator="u1"))
    view = StateView(session, PLAYER_STATE_SHAPE)
    qtbot.addWidget(view)

    display = view.display
    assert not display.section.collapsible
    assert display.field_widgets["role"].none_label.text() == "none"

    session.update_snapshot(PlayerState(creator="u1", role=Role.Morgana, playersPerQuest=[2, 3, 2, 3, 3]))
    assert view.display is display
    assert display.field_widgets["role"].inner.text == "Morgana"
    assert display.field_widgets["playersPerQuest"].count_label.text() == "5 items"
    # Mounted empty, so it stays expanded after growing
    assert not display.field_widgets["playersPerQuest"].is_collapsed
    view.dispose()


def test_state_view_waits_for_first_state(qtbot):
    session = SessionContext()
    view = StateView(session, PLAYER_STATE_SHAPE)
    qtbot.addWidget(view)
    assert view.display is None

    session.update_snapshot(PlayerState())
    assert view.display is not None


def test_demo_game_view_with_plugin(qtbot):
    from pyqt_stateview.demo.plugins import PlayerStatePlugin

    register_plugin_element("player-state-plugin", PlayerStatePlugin)
    state = PlayerState(players=["u1", "u2"])
    session = SessionContext(state=GameView(summary=state, state=state), updated_at=0)
    view = StateView(session, GAME_VIEW_SHAPE)
    qtbot.addWidget(view)

    plugin = view.display.field_widgets["summary"].element
    assert "2 players" in plugin.text()

    bigger = PlayerState(players=["u1", "u2", "u3"])
    session.update_snapshot(GameView(summary=bigger, state=bigger))
    assert "3 players" in plugin.text()


def test_session_snapshot_timestamp():
    session = SessionContext(state=1)
    session.update_snapshot(2)
    assert session.state == 2
    assert session.updated_at > 0
    session.update_snapshot(3, updated_at=10.0)
    assert session.updated_at == 10.0


def test_toast_shows_and_auto_dismisses(qtbot):
    set_config(StateViewConfig(toast_duration_ms=50))
    toast = ToastWidget()
    qtbot.addWidget(toast)

    NotificationCenter.instance().error("already voted")
    assert toast.active_messages() == ["already voted"]
    qtbot.waitUntil(lambda: toast.active_messages() == [], timeout=2000)


def test_toast_dismiss_on_click(qtbot):
    from PyQt6.QtCore import Qt

    toast = ToastWidget()
    qtbot.addWidget(toast)
    toast.show()
    qtbot.waitExposed(toast)
    NotificationCenter.instance().info("hello")
    label = toast._toasts[0]
    qtbot.waitUntil(label.isVisible)
    qtbot.mouseClick(label, Qt.MouseButton.LeftButton)
    assert toast.active_messages() == []
