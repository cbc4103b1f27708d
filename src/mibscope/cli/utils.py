"""CLI utilities."""

from pathlib import Path

import click

from mibscope.config.loader import load_config
from mibscope.config.models import MibScopeConfig
from mibscope.core.errors import ConfigError, WorkspaceError
from mibscope.core.logging import clear_run_id, configure_logging, set_run_id
from mibscope.core.progress import spinner
from mibscope.workspace.loader import IndexCache, WorkspaceIndex

root_option = click.option(
    "--root",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory holding the MIB tables (default: current directory)",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


def resolve_config(root: Path) -> MibScopeConfig:
    """Load configuration for ``root`` and apply its logging section.

    ``-v`` on the group keeps DEBUG logging regardless of the config file.

    Raises:
        click.ClickException: If the configuration cannot be loaded
    """
    try:
        config = load_config(root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    ctx = click.get_current_context(silent=True)
    verbose = bool(ctx and ctx.find_root().obj and ctx.find_root().obj.get("verbose"))
    if not verbose:
        configure_logging(config=config.logging)
    set_run_id()
    if ctx is not None:
        ctx.call_on_close(clear_run_id)
    return config


def try_load_index(root: Path, config: MibScopeConfig) -> WorkspaceIndex | None:
    """Build the index for ``root``, or None without CCF/CDF tables.

    Raises:
        click.ClickException: If a table cannot be read
    """
    try:
        with spinner("Indexing MIB tables"):
            workspace = IndexCache(config).load(root)
    except WorkspaceError as e:
        raise click.ClickException(str(e)) from e

    return workspace


def load_index(root: Path, config: MibScopeConfig) -> WorkspaceIndex:
    """Build the index for ``root``.

    Raises:
        click.ClickException: If a table cannot be read or no CCF/CDF table exists
    """
    workspace = try_load_index(root, config)
    if workspace is None:
        raise click.ClickException(str(WorkspaceError.no_mib_files(str(root))))
    return workspace
