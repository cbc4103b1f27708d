"""mibscope complete command - completions for a partially typed line."""

import json
from dataclasses import asdict
from pathlib import Path

import click

from mibscope.cli.utils import json_option, load_index, resolve_config, root_option
from mibscope.workspace.present import complete_line


def default_prefix(line: str) -> str:
    """The word being typed: the last token unless the line ends in whitespace."""
    if not line or line[-1].isspace():
        return ""
    parts = line.split()
    return parts[-1] if parts else ""


@click.command()
@click.argument("line", default="")
@click.option("--prefix", default=None, help="Word being completed (default: last token of LINE)")
@root_option
@json_option
def complete_command(line: str, prefix: str | None, root: Path, as_json: bool) -> None:
    """Complete commands, or optional parameters after a known command."""
    root = root.resolve()
    config = resolve_config(root)
    workspace = load_index(root, config)

    items = complete_line(
        workspace.index,
        line,
        default_prefix(line) if prefix is None else prefix,
        config.search.completion_limit,
    )

    if as_json:
        click.echo(json.dumps([asdict(item) for item in items], indent=2))
        return
    for item in items:
        click.echo(f"{item.label}\t{item.insert_text}\t{item.detail}")
