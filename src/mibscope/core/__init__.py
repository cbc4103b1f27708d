"""Core module exports."""

from mibscope.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    MibScopeError,
    WorkspaceError,
)
from mibscope.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from mibscope.core.progress import spinner, status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "MibScopeError",
    "WorkspaceError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "spinner",
    "status",
]
