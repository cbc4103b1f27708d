"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (MIBSCOPE__SECTION__KEY)
3. Workspace user config (.mibscope/config.yaml) - minimal user-facing options
4. Global YAML (~/.config/mibscope/config.yaml)
5. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from mibscope.config.constants import CONFIG_DIR_NAME
from mibscope.config.models import (
    EnrichmentConfig,
    LoggingConfig,
    MibScopeConfig,
    SearchConfig,
    WorkspaceConfig,
)
from mibscope.config.user_config import UserConfig, load_user_config
from mibscope.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/mibscope/config.yaml").expanduser()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


_USER_FIELD_SECTIONS: dict[str, tuple[str, str]] = {
    "log_level": ("logging", "level"),
    "max_files": ("workspace", "max_files"),
    "mib_globs": ("workspace", "mib_globs"),
    "txp_targets": ("enrichment", "txp_targets"),
}


def _user_sections(user_config: UserConfig, *, exclude_unset: bool = False) -> dict[str, Any]:
    """Map flat user config fields onto their config sections."""
    sections: dict[str, Any] = {}
    for key, value in user_config.model_dump(exclude_unset=exclude_unset).items():
        section, field = _USER_FIELD_SECTIONS[key]
        sections.setdefault(section, {})[field] = value
    return sections


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class bound to one YAML snapshot."""

    class MibScopeSettings(BaseSettings):
        """Root config. Env vars: MIBSCOPE__LOGGING__LEVEL, MIBSCOPE__WORKSPACE__MAX_FILES, etc."""

        model_config = SettingsConfigDict(
            env_prefix="MIBSCOPE__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        workspace: WorkspaceConfig = WorkspaceConfig()
        search: SearchConfig = SearchConfig()
        enrichment: EnrichmentConfig = EnrichmentConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return MibScopeSettings


def load_config(workspace_root: Path | None = None, **kwargs: Any) -> MibScopeConfig:
    """Load config: defaults < global yaml < user config < env vars < kwargs.

    Args:
        workspace_root: Directory holding the MIB tables and the optional
                        .mibscope/ folder. Defaults to the working directory.
        **kwargs: Override values per section (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    workspace_root = workspace_root or Path.cwd()
    user_config = load_user_config(workspace_root / CONFIG_DIR_NAME / "config.yaml")

    # User-config defaults sit below the global file; only keys the user wrote sit above it
    yaml_config = _user_sections(UserConfig())
    global_config = _load_yaml(GLOBAL_CONFIG_PATH)
    if global_config:
        yaml_config = _deep_merge(yaml_config, global_config)
    yaml_config = _deep_merge(yaml_config, _user_sections(user_config, exclude_unset=True))

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return MibScopeConfig.model_validate(settings.model_dump())
