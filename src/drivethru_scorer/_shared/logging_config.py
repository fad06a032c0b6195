# Area: Shared
"""
drivethru_scorer._shared.logging_config - Structured logging setup
==================================================================

Configures dual logging: terminal (colored) + file (JSON lines).
Provides the storage-failure logging hook used by the dialogue manager.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import StorageError

# Package logger
logger = logging.getLogger("drivethru_scorer")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Copy so the JSON file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("session_id", "intent"):
            value = getattr(record, key, None)
            if value is not None:
                log_data[key] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: str = "drivethru.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'drivethru.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("drivethru_scorer")
    pkg_logger.setLevel(level)

    pkg_logger.handlers.clear()

    # Terminal goes to stderr so console speech output on stdout stays clean
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    pkg_logger.propagate = False


def log_storage_error(error: "StorageError", session_id: str = "") -> None:
    """
    Log a storage failure in the structured format.

    Parameters
    ----------
    error : StorageError
        The failure raised by the score store.
    session_id : str
        Session whose turn was being processed.
    """
    logger.error(
        f"Storage failure during turn:{error.format_error_log()}",
        extra={
            "session_id": session_id or None,
            "error_type": error.__class__.__name__,
        },
    )
