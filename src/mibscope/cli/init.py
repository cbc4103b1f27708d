"""mibscope init command - write a workspace configuration file."""

from pathlib import Path

import click

from mibscope.config.constants import CONFIG_DIR_NAME
from mibscope.config.user_config import write_user_config
from mibscope.core.progress import status


def initialize_workspace(root: Path, *, force: bool = False) -> bool:
    """Create .mibscope/config.yaml under root, returning True when written."""
    config_path = root / CONFIG_DIR_NAME / "config.yaml"
    if config_path.exists() and not force:
        status(f"Already initialized: {config_path}", style="info")
        status("Use --force to overwrite", style="info")
        return False

    write_user_config(config_path)
    status(f"Wrote {config_path}", style="success")
    return True


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
def init_command(path: Path, force: bool) -> None:
    """Initialize a MIB workspace.

    PATH is the workspace root (default: current directory).
    """
    initialize_workspace(path.resolve(), force=force)
