"""mibscope search command - rank commands for a free-text query."""

import json
from pathlib import Path

import click

from mibscope.cli.utils import json_option, load_index, resolve_config, root_option
from mibscope.config.constants import SEARCH_MAX_LIMIT
from mibscope.workspace.discovery import discover_text_files
from mibscope.workspace.lookup import TextMatch, find_text_matches
from mibscope.workspace.present import SearchHit, build_search_hits, relative_path


def _hit_to_dict(hit: SearchHit) -> dict[str, object]:
    return {
        "id": hit.entry.id,
        "name": hit.entry.name,
        "label": hit.label,
        "description": hit.description,
        "detail": hit.detail,
        "score": int(hit.score),
        "source_path": hit.entry.source_path,
        "source_line": hit.entry.source_line,
    }


def _match_to_dict(match: TextMatch) -> dict[str, object]:
    return {"path": str(match.path), "line": match.line, "text": match.text}


@click.command()
@click.argument("query", default="")
@root_option
@click.option(
    "--limit",
    type=click.IntRange(0, SEARCH_MAX_LIMIT),
    default=None,
    help="Maximum number of hits (default from config)",
)
@json_option
def search_command(query: str, root: Path, limit: int | None, as_json: bool) -> None:
    """Search telecommands by id, name, parameter or description.

    An empty QUERY lists every command. When nothing in the index matches,
    the text-fallback files are scanned for QUERY as a whole word.
    """
    root = root.resolve()
    config = resolve_config(root)
    workspace = load_index(root, config)

    hits = build_search_hits(
        workspace.search_index,
        query,
        config.search.default_limit if limit is None else limit,
        root=root,
    )
    matches: list[TextMatch] = []
    if not hits and query:
        matches = find_text_matches(
            query,
            discover_text_files(root, config.workspace),
            config.search.text_match_limit,
        )

    if as_json:
        payload = {
            "query": query,
            "hits": [_hit_to_dict(hit) for hit in hits],
            "text_matches": [_match_to_dict(m) for m in matches],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    for hit in hits:
        click.echo(f"{hit.label}  [{hit.detail}]")
        if hit.description:
            click.echo(f"    {hit.description}")
    for match in matches:
        click.echo(f"{relative_path(match.path, root)}:{match.line}: {match.text}")
    if not hits and not matches:
        click.echo(f"No matches for '{query}'")
