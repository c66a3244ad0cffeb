"""
Form orchestrator for one outgoing request kind.

A MethodForm owns the staged payload. Its editor tree is fully controlled:
each ``value_changed`` replaces the staged value wholesale, which is then
pushed back into the editor. Submitting runs the caller's submit operation on
a background task; whatever happens, the staged value is rebuilt from the
caller's factory afterwards.
"""

import logging
from typing import Any, Callable

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout

from pyqt_stateview.core.background_task import BackgroundTaskManager
from pyqt_stateview.forms.layout_constants import CURRENT_LAYOUT
from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher
from pyqt_stateview.protocols import MethodSpec, Response
from pyqt_stateview.services.notification_center import NotificationCenter
from pyqt_stateview.shapes import ShapeDescriptor

logger = logging.getLogger(__name__)


class MethodForm(QFrame):
    """
    Title, editor and Submit button for one request kind.

    Only one submission is in flight at a time; while it runs the Submit
    button is disabled and further submit() calls are ignored.

    Signals:
        submitted(object): Payload handed to the submit operation
        completed(object): Response once the submission finished
    """

    submitted = pyqtSignal(object)
    completed = pyqtSignal(object)

    def __init__(self, method: str, shape: ShapeDescriptor, submit: Callable[[Any], Any],
                 initialize: Callable[[], Any], submit_label: str = "Submit",
                 dispatcher=None, parent=None):
        super().__init__(parent)
        dispatcher = dispatcher or ShapeDispatcher()
        self.method = method
        self.shape = shape
        self._submit = submit
        self._initialize = initialize
        self._task_manager = BackgroundTaskManager()
        self._in_flight = False
        self._staged = initialize()

        self.setObjectName("methodForm")
        self.setStyleSheet(dispatcher.style.generate_form_style())
        layout = QVBoxLayout(self)
        layout.setContentsMargins(*CURRENT_LAYOUT.form_margins)
        layout.setSpacing(CURRENT_LAYOUT.form_spacing)

        self.title_label = QLabel(method)
        self.title_label.setObjectName("methodTitle")
        layout.addWidget(self.title_label)

        self.editor = dispatcher.create_editor(shape, self._staged)
        self.editor.value_changed.connect(self._on_value_changed)
        layout.addWidget(self.editor)

        self.submit_button = QPushButton(submit_label)
        self.submit_button.setStyleSheet(dispatcher.style.generate_submit_button_style())
        self.submit_button.clicked.connect(self.submit)
        layout.addWidget(self.submit_button)

    @classmethod
    def from_spec(cls, spec: MethodSpec, dispatcher=None, parent=None) -> "MethodForm":
        return cls(spec.name, spec.shape, spec.submit, spec.initialize,
                   submit_label=spec.submit_label, dispatcher=dispatcher, parent=parent)

    @property
    def staged_value(self) -> Any:
        return self._staged

    @property
    def is_submitting(self) -> bool:
        return self._in_flight

    def set_staged_value(self, value: Any) -> None:
        """Replace the staged payload, as a user edit would."""
        self._on_value_changed(value)

    def _on_value_changed(self, value: Any) -> None:
        self._staged = value
        self.editor.set_value(value)

    def submit(self) -> None:
        if self._in_flight:
            logger.debug(f"MethodForm '{self.method}': submission already in flight, ignoring")
            return
        self._in_flight = True
        payload = self._staged
        logger.debug(f"MethodForm '{self.method}': submitting {payload!r}")
        self.submitted.emit(payload)
        self._task_manager.run(
            target=self._submit,
            args=(payload,),
            on_success=self._on_submit_result,
            on_error=self._on_submit_error,
            button=self.submit_button,
        )

    def _on_submit_result(self, result: Any) -> None:
        try:
            response = Response.coerce(result)
        except (TypeError, ValueError) as e:
            logger.error(f"MethodForm '{self.method}': invalid submit result: {e}")
            response = Response.failure(str(e))
        if response.is_error:
            logger.error(f"MethodForm '{self.method}' failed: {response.error}")
            NotificationCenter.instance().error(response.error or f"{self.method} failed")
        self._finish(response)

    def _on_submit_error(self, error: Exception) -> None:
        logger.error(f"MethodForm '{self.method}': submit raised {type(error).__name__}: {error}")
        message = str(error) or type(error).__name__
        NotificationCenter.instance().error(message)
        self._finish(Response.failure(message))

    def _finish(self, response: Response) -> None:
        self._in_flight = False
        self.reset()
        self.completed.emit(response)

    def reset(self) -> None:
        """Discard the staged payload and start over from the caller's factory."""
        self._on_value_changed(self._initialize())

    def dispose(self) -> None:
        self._task_manager.cleanup()
        self.editor.dispose()
        self.deleteLater()
