"""Base configuration for the inspector/editor.

Provides hooks for applications to tune heuristics, notification timing and
logging without touching widget code.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class StateViewConfig:
    """Configuration for display and edit behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        array_collapse_threshold: Arrays longer than this start collapsed
        array_composite_collapse_threshold: Arrays of composite items longer than this start collapsed
        array_max_height: Height cap (px) of the vertical scroll area for scalar arrays
        toast_duration_ms: How long a transient notification stays visible
        notification_history_limit: Notifications kept by NotificationCenter
        panel_width: Width (px) of the methods panel
        log_dir: Directory for log files (None = ~/.local/share/pyqt_stateview/logs)
        log_prefix: File name prefix for log files
    """

    array_collapse_threshold: int = 4
    array_composite_collapse_threshold: int = 7
    array_max_height: int = 240
    toast_duration_ms: int = 4000
    notification_history_limit: int = 50
    panel_width: int = 512
    log_dir: Optional[str] = None
    log_prefix: str = "pyqt_stateview_"


# Global config instance (set by application)
_config: Optional[StateViewConfig] = None


def set_config(config: Optional[StateViewConfig]) -> None:
    """Set the global configuration.

    Args:
        config: StateViewConfig instance, or None to restore defaults
    """
    global _config
    _config = config


def get_config() -> StateViewConfig:
    """Get the current configuration.

    Returns:
        Current StateViewConfig or default if not set
    """
    if _config is None:
        return StateViewConfig()
    return _config
