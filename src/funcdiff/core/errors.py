"""funcdiff error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Snapshot
- 4xxx: Report
- 9xxx: Internal

Git and parsing failures have their own hierarchies in ``funcdiff.git.errors``
and ``funcdiff.parsing.errors``.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Snapshot (3xxx)
    SNAPSHOT_DUPLICATE_KEY = 3001

    # Report (4xxx)
    REPORT_OUTPUT_UNWRITABLE = 4001

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class FuncDiffError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(FuncDiffError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class SnapshotError(FuncDiffError):
    """Errors that abort building a revision's declaration inventory."""

    @classmethod
    def duplicate_key(
        cls, revision: str, key: str, first: str, second: str
    ) -> "SnapshotError":
        return cls(
            code=ErrorCode.SNAPSHOT_DUPLICATE_KEY,
            message=f"Duplicate declaration {key} at {revision}: {first} and {second}",
            details={"revision": revision, "key": key, "first": first, "second": second},
        )


class ReportError(FuncDiffError):
    """Report output errors."""

    @classmethod
    def output_unwritable(cls, path: str, reason: str) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_OUTPUT_UNWRITABLE,
            message=f"Cannot write report output to {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class InternalError(FuncDiffError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
