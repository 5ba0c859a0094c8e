"""Core module exports."""

from funcdiff.core.errors import (
    ConfigError,
    ErrorCode,
    FuncDiffError,
    InternalError,
    ReportError,
    SnapshotError,
)
from funcdiff.core.logging import configure_logging, get_logger
from funcdiff.core.progress import pluralize, progress, status

__all__ = [
    # Errors
    "ErrorCode",
    "FuncDiffError",
    "ConfigError",
    "SnapshotError",
    "ReportError",
    "InternalError",
    # Logging
    "configure_logging",
    "get_logger",
    # Progress
    "pluralize",
    "progress",
    "status",
]
