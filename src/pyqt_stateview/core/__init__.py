"""
Core PyQt6 utilities.

Background task execution and logging setup, with no shape-specific logic.
"""

from .background_task import BackgroundTask, BackgroundTaskManager
from .log_utils import configure_logging, get_current_log_file_path, discover_logs

__all__ = [
    "BackgroundTask",
    "BackgroundTaskManager",
    "configure_logging",
    "get_current_log_file_path",
    "discover_logs",
]
