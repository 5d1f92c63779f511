"""Configuration for action-tracker: settings and logging."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    setup_logging,
)
from .settings import ActionTrackerSettings, StoreBackend, get_settings

__all__ = [
    # Logging
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "setup_logging",

    # Settings
    "ActionTrackerSettings",
    "StoreBackend",
    "get_settings",
]
