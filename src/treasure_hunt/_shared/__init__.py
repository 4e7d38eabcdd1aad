# Area: Shared
"""
Shared utilities used by the engine, the runner and the CLI.

This package contains:
- Logging configuration
- The colored event feed
"""

from .logging_config import (
    setup_logging,
    log_engine_error,
    enable_event_mode,
    disable_event_mode,
    is_event_mode_enabled,
)
from .event_display import EventDisplay, get_event_display

__all__ = [
    "setup_logging",
    "log_engine_error",
    "enable_event_mode",
    "disable_event_mode",
    "is_event_mode_enabled",
    "EventDisplay",
    "get_event_display",
]
