"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (MIBSCOPE__SECTION__KEY)
3. Workspace YAML (.mibscope/config.yaml)
4. Global YAML (~/.config/mibscope/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    MIBSCOPE__<SECTION>__<KEY>=<VALUE>

Examples:
    MIBSCOPE__LOGGING__LEVEL=DEBUG
    MIBSCOPE__WORKSPACE__MAX_FILES=50
    MIBSCOPE__SEARCH__DEFAULT_LIMIT=20
    MIBSCOPE__ENRICHMENT__TXP_TARGETS=telemetry
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from mibscope.config.constants import (
    COMPLETION_MAX_LIMIT,
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_MIB_GLOBS,
    SEARCH_MAX_LIMIT,
    TEXT_MATCH_MAX_LIMIT,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
TxpTargetName = Literal["telemetry", "commands", "all", "none"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        MIBSCOPE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG lists skipped rows and dangling references.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class WorkspaceConfig(BaseModel):
    """Where MIB tables are looked for.

    Env vars:
        MIBSCOPE__WORKSPACE__MAX_FILES: Files considered per table kind
    """

    table_dirs: list[str] = Field(
        default_factory=list,
        description="Directories (relative to the workspace root) holding MIB tables. "
        "Empty means the whole workspace is searched.",
    )
    mib_globs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MIB_GLOBS),
        description="Globs scanned by the raw text fallback.",
    )
    max_files: int = Field(
        default=200,
        description="Upper bound on files per table kind and on text fallback files.",
    )
    excluded_dirs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_DIRS),
        description="Directory names skipped during discovery.",
    )

    @field_validator("max_files")
    @classmethod
    def validate_max_files(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_files must be positive, got {v}")
        return v


class SearchConfig(BaseModel):
    """Query limit defaults.

    Env vars:
        MIBSCOPE__SEARCH__DEFAULT_LIMIT: Ranked results per query
        MIBSCOPE__SEARCH__COMPLETION_LIMIT: Completion items per request
        MIBSCOPE__SEARCH__TEXT_MATCH_LIMIT: Raw text matches per query
    """

    default_limit: int = Field(default=200, ge=0, le=SEARCH_MAX_LIMIT)
    completion_limit: int = Field(default=200, ge=1, le=COMPLETION_MAX_LIMIT)
    text_match_limit: int = Field(default=5, ge=1, le=TEXT_MATCH_MAX_LIMIT)


class EnrichmentConfig(BaseModel):
    """Cross-table enrichment switches.

    Env vars:
        MIBSCOPE__ENRICHMENT__TXP_TARGETS: telemetry, commands, all or none
    """

    txp_targets: TxpTargetName = Field(
        default="all",
        description="Where TXP text labels are attached: telemetry parameters "
        "(by enumeration set id), command parameters (by parameter id), both, or neither.",
    )


class MibScopeConfig(BaseModel):
    """Root configuration for mibscope."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
