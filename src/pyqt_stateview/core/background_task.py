"""Background task runner for reference lookups and request submissions."""

from typing import Callable, Any, Optional, Set, Tuple
from PyQt6.QtCore import QThread, pyqtSignal
from PyQt6.QtWidgets import QPushButton
import logging

logger = logging.getLogger(__name__)

# --- Module-level constants ---
CLEANUP_WAIT_MS = 200     # Wait time during widget dispose cleanup


class BackgroundTask(QThread):
    """
    Runs one blocking call off the main thread.

    Usage:
        task = BackgroundTask(target=lookup, args=("u1",))
        task.result_ready.connect(on_success)
        task.error_occurred.connect(on_error)  # Receives Exception, not str
        task.start()

    Results arrive on the receiver's thread through queued signal delivery,
    so handlers run on the Qt main thread.
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)  # Full exception, caller decides

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self.cancelled = False

    def run(self):
        """Execute target in background, respecting cancellation."""
        try:
            result = self._target(*self._args, **self._kwargs)
            if not self.cancelled:
                self.result_ready.emit(result)
        except Exception as e:
            if not self.cancelled:
                self.error_occurred.emit(e)

    def cancel(self):
        """Cancel result delivery; signals will not emit after this."""
        self.cancelled = True


class BackgroundTaskManager:
    """
    Manages background task lifecycle for a widget.

    Handles:
    - Superseding the previous task when a new one starts (its result is dropped)
    - Keeping superseded threads alive until they finish
    - Button state management (disable during operation, auto-restore)
    - Cleanup when the owning widget is disposed

    Usage in widget:
        self._task_manager = BackgroundTaskManager()

        def resolve(self):
            self._task_manager.run(
                target=lookup,
                args=(self.identifier,),
                on_success=self._on_resolved,
                on_error=self._on_failed,
            )

        def _release(self):
            self._task_manager.cleanup()
    """

    def __init__(self):
        self._current_task: Optional[BackgroundTask] = None
        self._retired: Set[BackgroundTask] = set()

    @property
    def is_running(self) -> bool:
        return self._current_task is not None and self._current_task.isRunning()

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
        button: QPushButton = None,
        button_loading_text: str = None,
    ) -> BackgroundTask:
        """
        Run a background task, superseding any previous one.

        Args:
            target: Function to execute in background
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_success: Callback for successful result
            on_error: Callback for error (receives Exception, not str)
            button: Button to disable during operation (auto-restored on complete)
            button_loading_text: Text while loading (default: original + "...")

        Returns:
            The started BackgroundTask
        """
        self._retire_current()

        # Restore the button on success and on error
        original_button_text = None
        if button:
            original_button_text = button.text()
            button.setEnabled(False)
            button.setText(button_loading_text or f"{original_button_text}...")

        def restore_button():
            if button:
                button.setEnabled(True)
                button.setText(original_button_text)

        def wrapped_success(result):
            restore_button()
            if on_success:
                on_success(result)

        def wrapped_error(error):
            restore_button()
            if on_error:
                on_error(error)

        task = BackgroundTask(target=target, args=args, kwargs=kwargs)
        task.result_ready.connect(wrapped_success)
        task.error_occurred.connect(wrapped_error)
        task.finished.connect(lambda t=task: self._on_finished(t))

        self._current_task = task
        task.start()
        return task

    def _retire_current(self) -> None:
        task = self._current_task
        if task is not None and task.isRunning():
            task.cancel()
            # Keep a reference until the thread exits; destroying a running QThread aborts
            self._retired.add(task)
        self._current_task = None

    def _on_finished(self, task: BackgroundTask) -> None:
        self._retired.discard(task)
        if task is self._current_task:
            self._current_task = None

    def cleanup(self):
        """Cancel and wait for outstanding tasks. Call when the owner is disposed."""
        self._retire_current()
        for task in list(self._retired):
            if not task.wait(CLEANUP_WAIT_MS):
                logger.debug("Background task still running after cleanup wait; result will be dropped")
                _orphaned_tasks.add(task)
                task.finished.connect(lambda t=task: _orphaned_tasks.discard(t))
        self._retired.clear()


# Tasks outliving their manager, held until their thread exits
_orphaned_tasks: Set[BackgroundTask] = set()
