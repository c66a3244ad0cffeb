"""Tests for core utilities."""

import logging

import pytest


def test_background_task_manager_success(qtbot):
    """Results arrive on the main thread and the button is restored."""
    from PyQt6.QtWidgets import QPushButton
    from pyqt_stateview.core import BackgroundTaskManager

    manager = BackgroundTaskManager()
    button = QPushButton("Submit")
    results = []

    manager.run(target=lambda a, b: a + b, args=(2, 3), on_success=results.append, button=button)
    assert not button.isEnabled()
    assert button.text() == "Submit..."

    qtbot.waitUntil(lambda: results == [5], timeout=3000)
    assert button.isEnabled()
    assert button.text() == "Submit"
    manager.cleanup()


def test_background_task_manager_error(qtbot):
    from pyqt_stateview.core import BackgroundTaskManager

    manager = BackgroundTaskManager()
    errors = []

    def boom():
        raise ValueError("bad input")

    manager.run(target=boom, on_error=errors.append)
    qtbot.waitUntil(lambda: len(errors) == 1, timeout=3000)
    assert isinstance(errors[0], ValueError)
    manager.cleanup()


def test_background_task_superseded_result_is_dropped(qtbot):
    import threading
    from pyqt_stateview.core import BackgroundTaskManager

    manager = BackgroundTaskManager()
    release = threading.Event()
    results = []

    manager.run(target=lambda: (release.wait(2), "old")[1], on_success=results.append)
    manager.run(target=lambda: "new", on_success=results.append)
    release.set()

    qtbot.waitUntil(lambda: "new" in results, timeout=3000)
    qtbot.wait(100)
    assert results == ["new"]
    manager.cleanup()


@pytest.fixture
def restore_root_logger():
    from pyqt_stateview.core import log_utils

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    log_utils._file_handler = None


def test_configure_logging_writes_file(tmp_path, restore_root_logger):
    from pyqt_stateview.core import configure_logging, discover_logs, get_current_log_file_path
    from pyqt_stateview.protocols import StateViewConfig, set_config

    set_config(StateViewConfig(log_dir=str(tmp_path)))
    log_file = configure_logging(logging.DEBUG)

    assert log_file.parent == tmp_path
    assert log_file.name.startswith("pyqt_stateview_")
    assert get_current_log_file_path() == str(log_file)
    logging.getLogger("pyqt_stateview.test").info("hello")
    assert discover_logs() == [log_file]


def test_configure_logging_console_only(restore_root_logger):
    from pyqt_stateview.core import configure_logging

    assert configure_logging(logging.WARNING, log_to_file=False) is None
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_reports_its_own_file(tmp_path, restore_root_logger):
    """Another FileHandler on the root logger does not hide ours."""
    from pyqt_stateview.core import configure_logging, get_current_log_file_path

    foreign = logging.FileHandler(tmp_path / "foreign.log")
    logging.getLogger().addHandler(foreign)

    log_file = configure_logging(logging.INFO, log_dir=tmp_path / "logs")
    assert log_file.parent == tmp_path / "logs"
    assert get_current_log_file_path() == str(log_file)


def test_configure_logging_replaces_previous_file_handler(tmp_path, restore_root_logger):
    from pyqt_stateview.core import configure_logging, get_current_log_file_path

    first = configure_logging(logging.INFO, log_dir=tmp_path / "first")
    second = configure_logging(logging.INFO, log_dir=tmp_path / "second")

    ours = [
        h for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler) and h.baseFilename in (str(first), str(second))
    ]
    assert [h.baseFilename for h in ours] == [str(second)]
    assert get_current_log_file_path() == str(second)

    assert configure_logging(logging.INFO, log_to_file=False) is None
    assert not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == str(second)
        for h in logging.getLogger().handlers
    )
