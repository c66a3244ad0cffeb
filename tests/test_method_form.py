"""Tests for the form orchestrator and the methods panel."""

import threading

import pytest

from pyqt_stateview.demo.schema import StartGameRequest, Vote, VoteInQuestRequest
from pyqt_stateview.protocols import MethodSpec, Response, ResponseType
from pyqt_stateview.shapes import shape_from_type
from pyqt_stateview.widgets import MethodForm, MethodsPanel


def make_form(submit, dispatcher, method="voteInQuest"):
    return MethodForm(method, shape_from_type(VoteInQuestRequest), submit, VoteInQuestRequest,
                      dispatcher=dispatcher)


def test_vote_in_quest_error_notifies_and_resets(dispatcher, qtbot, notifications):
    """Submitting {questId: 2, vote: Approve} surfaces the server error and resets the form."""
    calls = []

    def submit(payload):
        calls.append(payload)
        return {"type": "error", "error": "already voted"}

    form = make_form(submit, dispatcher)
    qtbot.addWidget(form)
    form.editor.field_editors["questId"].spin_box.setValue(2)
    form.editor.field_editors["vote"].combo.setCurrentIndex(int(Vote.Approve))
    assert form.staged_value == VoteInQuestRequest(questId=2, vote=Vote.Approve)

    with qtbot.waitSignal(form.completed, timeout=3000) as blocker:
        form.submit_button.click()

    assert calls == [VoteInQuestRequest(questId=2, vote=Vote.Approve)]
    assert notifications == ["already voted"]
    assert blocker.args[0] == Response.failure("already voted")
    assert form.staged_value == VoteInQuestRequest()
    assert form.editor.field_editors["questId"].spin_box.value() == 0


def test_success_resets_without_notification(dispatcher, qtbot, notifications):
    form = make_form(lambda payload: Response.success(), dispatcher)
    qtbot.addWidget(form)
    form.editor.field_editors["vote"].combo.setCurrentIndex(1)
    assert form.staged_value.vote == 1

    with qtbot.waitSignal(form.completed, timeout=3000) as blocker:
        form.submit()

    assert blocker.args[0].type is ResponseType.SUCCESS
    assert notifications == []
    assert form.staged_value == VoteInQuestRequest()


def test_submit_exception_is_notified(dispatcher, qtbot, notifications):
    def submit(payload):
        raise RuntimeError("connection lost")

    form = make_form(submit, dispatcher)
    qtbot.addWidget(form)
    form.set_staged_value(VoteInQuestRequest(questId=5))

    with qtbot.waitSignal(form.completed, timeout=3000) as blocker:
        form.submit()

    assert blocker.args[0].is_error
    assert notifications == ["connection lost"]
    assert form.staged_value == VoteInQuestRequest()


def test_invalid_submit_result_is_notified(dispatcher, qtbot, notifications):
    form = make_form(lambda payload: 42, dispatcher)
    qtbot.addWidget(form)
    with qtbot.waitSignal(form.completed, timeout=3000) as blocker:
        form.submit()
    assert blocker.args[0].is_error
    assert len(notifications) == 1


def test_single_flight_submission(dispatcher, qtbot):
    """While a submission runs, the button is disabled and extra submits are ignored."""
    release = threading.Event()
    calls = []

    def submit(payload):
        calls.append(payload)
        release.wait(2)
        return None

    form = make_form(submit, dispatcher)
    qtbot.addWidget(form)
    submitted = []
    form.submitted.connect(submitted.append)

    form.submit()
    assert form.is_submitting
    assert not form.submit_button.isEnabled()
    form.submit()
    assert len(submitted) == 1

    with qtbot.waitSignal(form.completed, timeout=3000):
        release.set()

    assert len(calls) == 1
    assert not form.is_submitting
    assert form.submit_button.isEnabled()
    assert form.submit_button.text() == "Submit"


def test_form_from_spec_uses_label(dispatcher):
    spec = MethodSpec("startGame", shape_from_type(StartGameRequest), lambda p: None, StartGameRequest,
                      submit_label="Create")
    form = MethodForm.from_spec(spec, dispatcher=dispatcher)
    assert form.submit_button.text() == "Create"
    assert form.title_label.text() == "startGame"
    assert form.staged_value == StartGameRequest()


def test_response_coerce():
    assert Response.coerce(None).type is ResponseType.SUCCESS
    assert Response.coerce({"type": "success"}) == Response.success()
    assert Response.coerce({"type": "error", "error": "x"}) == Response.failure("x")
    with pytest.raises(ValueError):
        Response.coerce({"type": "maybe"})
    with pytest.raises(TypeError):
        Response.coerce(3)


# --- Methods panel ---

def _specs():
    return [
        MethodSpec("createGame", shape_from_type(StartGameRequest), lambda p: None, StartGameRequest,
                   submit_label="Create"),
        MethodSpec("voteInQuest", shape_from_type(VoteInQuestRequest), lambda p: None, VoteInQuestRequest),
    ]


def test_methods_panel_lists_forms(dispatcher, qtbot):
    panel = MethodsPanel(_specs(), dispatcher=dispatcher)
    qtbot.addWidget(panel)
    assert panel.windowTitle() == "Methods"
    assert [form.method for form in panel.forms] == ["createGame", "voteInQuest"]
    assert panel.form("createGame").submit_button.text() == "Create"
    with pytest.raises(KeyError):
        panel.form("missing")


def test_methods_panel_open_close(dispatcher, qtbot):
    panel = MethodsPanel(_specs(), dispatcher=dispatcher)
    qtbot.addWidget(panel)
    changes = []
    panel.open_changed.connect(changes.append)

    panel.set_open(True)
    assert panel.is_open

    # Escape / outside dismissal is ignored
    panel.reject()
    assert panel.is_open

    panel.close_button.click()
    assert not panel.is_open
    assert changes == [True, False]
