"""
Logging setup for pyqt-stateview.

Console and file handler configuration plus log file discovery, shared by
the demo application and embedding applications.
"""

import logging
import time
from pathlib import Path
from typing import Optional, List

from pyqt_stateview.protocols import get_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# File handler installed by the last configure_logging() call
_file_handler: Optional[logging.FileHandler] = None


def get_log_dir() -> Path:
    """Return configured log directory or default."""
    config = get_config()
    if config.log_dir:
        return Path(config.log_dir)
    return Path.home() / ".local" / "share" / "pyqt_stateview" / "logs"


def configure_logging(level: int = logging.INFO, log_dir: Optional[Path] = None,
                      log_to_file: bool = True) -> Optional[Path]:
    """
    Install a console handler and, optionally, a timestamped file handler on
    the root logger.

    Calling again replaces the file handler from the previous call.

    Args:
        level: Root logger level
        log_dir: Directory for the log file (defaults to get_log_dir())
        log_to_file: Whether to also write ``<prefix><timestamp>.log``

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    global _file_handler
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if _file_handler is not None:
        root_logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    if not log_to_file:
        return None

    directory = Path(log_dir) if log_dir is not None else get_log_dir()
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / f"{get_config().log_prefix}{int(time.time())}.log"
    _file_handler = logging.FileHandler(log_file)
    _file_handler.setFormatter(formatter)
    root_logger.addHandler(_file_handler)
    logger.info(f"Logging to {log_file}")
    return log_file


def get_current_log_file_path() -> Optional[str]:
    """
    Path of the file configure_logging() is writing to.

    Falls back to the first FileHandler on the root logger when
    configure_logging() has not installed one.
    """
    if _file_handler is not None:
        return _file_handler.baseFilename
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.FileHandler):
            return handler.baseFilename
    return None


def discover_logs(log_directory: Optional[Path] = None) -> List[Path]:
    """
    List log files written by this package, newest first.

    Args:
        log_directory: Directory to search (defaults to configured log directory)
    """
    log_dir = log_directory or get_log_dir()
    if not log_dir.exists():
        return []
    prefix = get_config().log_prefix
    logs = [path for path in log_dir.glob(f"{prefix}*.log") if path.is_file()]
    return sorted(logs, key=lambda path: path.stat().st_mtime, reverse=True)
