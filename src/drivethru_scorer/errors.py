# Area: Shared
"""
drivethru_scorer.errors - Custom exception classes
==================================================

Defines the exception hierarchy that crosses the dialogue boundary.
Slot and intent ambiguity never raises; it is answered with a
clarifying question. Only storage failures and malformed adapter
payloads surface as exceptions.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class DriveThruError(Exception):
    """Base exception for all drivethru_scorer errors."""
    pass


class StorageError(DriveThruError):
    """Raised when the score store cannot load or persist a record."""

    def __init__(
        self,
        operation: str,
        key: str,
        cause: Optional[BaseException] = None,
    ):
        self.operation = operation
        self.key = key
        self.cause = cause
        message = f"Storage operation '{operation}' failed for '{key}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)

    def format_error_log(self) -> str:
        details = {"operation": self.operation, "key": self.key}
        if self.cause is not None:
            details["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return _format_error_block(
            error_type="STORAGE_FAILURE",
            details=details,
            validation_errors=None,
        )


class InvalidEventError(DriveThruError):
    """Raised when an adapter payload cannot be read as an inbound event."""

    def __init__(self, payload: Any, validation_errors: List[str]):
        self.payload = payload
        self.validation_errors = validation_errors
        super().__init__(f"Invalid inbound event: {validation_errors}")

    def format_error_log(self) -> str:
        payload = self.payload if isinstance(self.payload, dict) else {"raw": repr(self.payload)}
        return _format_error_block(
            error_type="INVALID_EVENT",
            details=payload,
            validation_errors=self.validation_errors,
        )


def _format_error_block(
    error_type: str,
    details: Dict[str, Any],
    validation_errors: Optional[List[str]],
) -> str:
    """Format a structured error block for the log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " DRIVE THRU ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        "",
        " -- DETAILS " + "-" * 52,
        _indent_json(details),
    ]

    if validation_errors:
        lines.append("")
        lines.append(" -- VALIDATION ERRORS " + "-" * 42)
        for error in validation_errors:
            lines.append(f" * {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
