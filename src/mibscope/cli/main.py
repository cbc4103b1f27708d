"""mibscope CLI - search and complete SCOS-2000 MIB telecommands."""

from typing import Any

import click
import structlog

from mibscope.cli.complete import complete_command
from mibscope.cli.init import init_command
from mibscope.cli.search import search_command
from mibscope.cli.show import show_command
from mibscope.cli.stats import stats_command
from mibscope.core.errors import InternalError
from mibscope.core.logging import configure_logging, get_log_file_path

log = structlog.get_logger()


class MibScopeGroup(click.Group):
    """Command group that reports unexpected failures as internal errors."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            log.exception("command_failed", error_type=type(e).__name__)
            error = InternalError.unexpected(str(e), error_type=type(e).__name__)
            message = str(error)
            if log_file := get_log_file_path():
                message += f". See {log_file} for details."
            raise click.ClickException(message) from e


@click.group(cls=MibScopeGroup)
@click.version_option(version="0.1.0", prog_name="mibscope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """mibscope - index and search SCOS-2000 MIB tables."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(search_command, name="search")
cli.add_command(show_command, name="show")
cli.add_command(complete_command, name="complete")
cli.add_command(stats_command, name="stats")
cli.add_command(init_command, name="init")


if __name__ == "__main__":
    cli()
