"""mibscope stats command - summarize discovered tables and the index."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from mibscope.cli.utils import json_option, resolve_config, root_option, try_load_index
from mibscope.core.progress import pluralize
from mibscope.workspace.discovery import discover_table_files


@click.command()
@root_option
@json_option
def stats_command(root: Path, as_json: bool) -> None:
    """Show table files per kind and the size of the built index."""
    root = root.resolve()
    config = resolve_config(root)
    workspace = try_load_index(root, config)

    index_stats: dict[str, int] | None = None
    if workspace is not None:
        index = workspace.index
        file_counts = workspace.files.counts()
        index_stats = {
            "commands": len(index.tc_by_id),
            "named_commands": len(index.tc_by_name),
            "command_params": sum(len(e.params) for e in index.tc_by_id.values()),
            "telemetry_packets": len(index.telemetry_by_sid),
            "telemetry_params": sum(len(e.params) for e in index.telemetry_by_sid.values()),
        }
    else:
        file_counts = discover_table_files(root, config.workspace).counts()

    if as_json:
        click.echo(json.dumps({"root": str(root), "files": file_counts, "index": index_stats}, indent=2))
        return

    console = Console(highlight=False)
    table = Table(title=f"MIB tables in {root}")
    table.add_column("Kind", style="cyan")
    table.add_column("Files", justify="right")
    for kind, count in file_counts.items():
        table.add_row(kind.upper(), str(count))
    console.print(table)

    if index_stats is None:
        console.print("Index: not built (no CCF or CDF tables)")
        return
    console.print(
        f"Index: {pluralize(index_stats['commands'], 'command')}, "
        f"{pluralize(index_stats['telemetry_packets'], 'telemetry packet')}"
    )
