"""Minimal user-facing configuration.

Only the handful of options a flight-ops engineer plausibly edits live here.
Everything else uses the defaults in models.py.

User config is stored in .mibscope/config.yaml at the workspace root.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from mibscope.config.constants import DEFAULT_MIB_GLOBS
from mibscope.config.models import LogLevel, TxpTargetName

DEFAULT_LOG_LEVEL: LogLevel = "WARNING"
DEFAULT_MAX_FILES = 200
DEFAULT_TXP_TARGETS: TxpTargetName = "all"


class UserConfig(BaseModel):
    """User-facing configuration options."""

    log_level: LogLevel = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level. DEBUG lists every skipped row.",
    )
    max_files: int = Field(
        default=DEFAULT_MAX_FILES,
        ge=1,
        description="Files considered per table kind.",
    )
    mib_globs: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MIB_GLOBS),
        description="Globs scanned by the raw text fallback.",
    )
    txp_targets: TxpTargetName = Field(
        default=DEFAULT_TXP_TARGETS,
        description="Where TXP labels are attached.",
    )


def write_user_config(path: Path, config: UserConfig | None = None) -> None:
    """Write user config file with helpful comments.

    Non-default values are written active; defaults are written commented out.
    """
    cfg = config or UserConfig()

    lines = [
        "# mibscope configuration",
        "",
        "# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    ]
    if cfg.log_level != DEFAULT_LOG_LEVEL:
        lines.append(f"log_level: {cfg.log_level}")
    else:
        lines.append(f"# log_level: {cfg.log_level}")
    lines.append("")

    lines.append("# Maximum files read per table kind (ccf.dat, cdf.dat, ...)")
    if cfg.max_files != DEFAULT_MAX_FILES:
        lines.append(f"max_files: {cfg.max_files}")
    else:
        lines.append(f"# max_files: {cfg.max_files}")
    lines.append("")

    lines.append("# Files scanned for raw text matches when the index has no answer")
    globs = "mib_globs: " + yaml.safe_dump(cfg.mib_globs, default_flow_style=True).strip()
    if cfg.mib_globs != list(DEFAULT_MIB_GLOBS):
        lines.append(globs)
    else:
        lines.append(f"# {globs}")
    lines.append("")

    lines.append("# Where TXP text labels are attached: telemetry, commands, all, none")
    if cfg.txp_targets != DEFAULT_TXP_TARGETS:
        lines.append(f"txp_targets: {cfg.txp_targets}")
    else:
        lines.append(f"# txp_targets: {cfg.txp_targets}")
    lines.append("")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines))


def load_user_config(path: Path) -> UserConfig:
    """Load user config from YAML, falling back to defaults when unusable."""
    if not path.exists():
        return UserConfig()
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
        return UserConfig(**data)
    except (yaml.YAMLError, ValidationError, TypeError):
        return UserConfig()
