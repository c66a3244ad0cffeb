"""pytest configuration and fixtures for pyqt-stateview tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def isolated_globals():
    """Reset process-wide registries, config and the notification hub around each test."""
    from pyqt_stateview.protocols import set_config
    from pyqt_stateview.protocols import plugin_element, user_lookup
    from pyqt_stateview.services import NotificationCenter

    yield

    set_config(None)
    plugin_element._plugin_elements.clear()
    user_lookup._user_lookups.clear()
    NotificationCenter.reset_instance()


@pytest.fixture
def dispatcher(qapp):
    from pyqt_stateview.forms import ShapeDispatcher
    return ShapeDispatcher()


@pytest.fixture
def notifications(qapp):
    """Messages posted to the NotificationCenter during the test."""
    from pyqt_stateview.services import NotificationCenter

    posted = []
    NotificationCenter.instance().notification_posted.connect(lambda n: posted.append(n.message))
    return posted
