"""mibscope error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Workspace (discovery, file reading)
- 9xxx: Internal

The MIB parsing core never raises these. Malformed rows are skipped there;
these errors belong to the layers that read files and load configuration.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Workspace (3xxx)
    WORKSPACE_NO_MIB_FILES = 3001
    WORKSPACE_READ_FAILED = 3002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class MibScopeError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
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
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(MibScopeError):
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


class WorkspaceError(MibScopeError):
    """Errors raised while discovering or reading MIB tables."""

    @classmethod
    def no_mib_files(cls, root: str) -> "WorkspaceError":
        return cls(
            code=ErrorCode.WORKSPACE_NO_MIB_FILES,
            message=f"No CCF or CDF tables found under {root}",
            details={"root": root},
        )

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "WorkspaceError":
        return cls(
            code=ErrorCode.WORKSPACE_READ_FAILED,
            message=f"Failed to read MIB table {path}: {reason}",
            retryable=True,
            details={"path": path, "reason": reason},
        )


class InternalError(MibScopeError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
