# Area: Shared
"""
treasure_hunt._shared.logging_config — Structured logging setup
===============================================================

Every module logs under the "treasure_hunt" logger tree. setup_logging()
gives that tree two handlers: a colored terminal stream and a JSON-lines
file. While the live event feed is on, terminal log lines are muted
and only the file keeps them.
"""

from __future__ import annotations
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import TreasureHuntError

PACKAGE_LOGGER = "treasure_hunt"

logger = logging.getLogger(PACKAGE_LOGGER)

_event_mode_enabled = False


class EventFeedFilter(logging.Filter):
    """Drops terminal records while the event feed is printing."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _event_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colors the level name; the record itself is left untouched."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        plain = record.levelname
        color = self.COLORS.get(record.levelno, "")
        record.levelname = f"{color}{plain}{self.RESET}" if color else plain
        try:
            return super().format(record)
        finally:
            record.levelname = plain


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line for the log file.

    Records logged with extra={"round_number": ..., "player": ...,
    "error_type": ...} carry those keys into the JSON line.
    """

    STRUCTURED_FIELDS = ("round_number", "player", "error_type")

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.STRUCTURED_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _terminal_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    handler.addFilter(EventFeedFilter())
    return handler


def _file_handler(log_file_path: str, level: int) -> logging.Handler:
    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    log_file_path: str = "treasure_hunt.log",
    level: int = logging.INFO,
) -> None:
    """
    Attach the terminal and JSON file handlers to the package logger.

    Calling it again replaces the handlers of the previous call. If the
    log file cannot be opened, logging continues on the terminal only.

    Parameters
    ----------
    log_file_path : str
        JSON-lines log file; parent directories are created.
    level : int
        Threshold for both handlers.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(level)
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)
        old.close()

    pkg_logger.addHandler(_terminal_handler(level))
    try:
        pkg_logger.addHandler(_file_handler(log_file_path, level))
    except OSError as e:
        pkg_logger.warning(f"Log file {log_file_path} unavailable, terminal only: {e}")

    pkg_logger.propagate = False


def log_engine_error(error: "TreasureHuntError") -> None:
    """
    Report a rejected operation: the full error block on stderr and a
    one-line ERROR record (tagged with its error_type) in the log.
    """
    print(error.format_error_log(), file=sys.stderr)
    logger.error(
        f"{type(error).__name__}: {error}",
        extra={"error_type": error.error_type},
    )


def enable_event_mode() -> None:
    """Mute terminal log lines so only the event feed is shown."""
    global _event_mode_enabled
    _event_mode_enabled = True


def disable_event_mode() -> None:
    global _event_mode_enabled
    _event_mode_enabled = False


def is_event_mode_enabled() -> bool:
    return _event_mode_enabled
