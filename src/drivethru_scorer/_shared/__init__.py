# Area: Shared
"""
Shared utilities used by the dialogue engine and the score store.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_storage_error,
)

__all__ = [
    "setup_logging",
    "log_storage_error",
]
