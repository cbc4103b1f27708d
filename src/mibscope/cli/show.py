"""mibscope show command - describe one telecommand."""

import json
from dataclasses import asdict
from pathlib import Path

import click

from mibscope.cli.utils import json_option, resolve_config, root_option, try_load_index
from mibscope.workspace.discovery import discover_text_files
from mibscope.workspace.lookup import find_entry, find_text_matches
from mibscope.workspace.present import render_hover, render_text_matches


@click.command()
@click.argument("token")
@root_option
@json_option
def show_command(token: str, root: Path, as_json: bool) -> None:
    """Show a telecommand by id or name (case-insensitive).

    Unknown tokens are looked up in the text-fallback files instead.
    """
    root = root.resolve()
    config = resolve_config(root)
    workspace = try_load_index(root, config)
    entry = find_entry(workspace.index, token) if workspace is not None else None

    if entry is not None:
        if as_json:
            click.echo(json.dumps(asdict(entry), indent=2))
        else:
            click.echo(render_hover(entry, root), nl=False)
        return

    matches = find_text_matches(
        token,
        discover_text_files(root, config.workspace),
        config.search.text_match_limit,
    )
    if not matches:
        raise click.ClickException(f"No telecommand or text match for '{token}'")

    if as_json:
        click.echo(
            json.dumps(
                [{"path": str(m.path), "line": m.line, "text": m.text} for m in matches],
                indent=2,
            )
        )
    else:
        click.echo(render_text_matches(token, matches, root), nl=False)
