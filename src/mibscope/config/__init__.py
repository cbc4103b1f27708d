"""Config module exports."""

from mibscope.config.loader import load_config
from mibscope.config.models import (
    EnrichmentConfig,
    LoggingConfig,
    MibScopeConfig,
    SearchConfig,
    WorkspaceConfig,
)

__all__ = [
    "load_config",
    "EnrichmentConfig",
    "LoggingConfig",
    "MibScopeConfig",
    "SearchConfig",
    "WorkspaceConfig",
]
