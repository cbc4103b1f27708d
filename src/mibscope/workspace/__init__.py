"""Workspace module - file discovery, cached index loading and presentation."""

from mibscope.workspace.discovery import TableFiles, discover_table_files, discover_text_files
from mibscope.workspace.loader import (
    IndexCache,
    WorkspaceIndex,
    build_workspace_index,
    compute_cache_key,
    read_dat_lines,
)
from mibscope.workspace.lookup import (
    TextMatch,
    find_entry,
    find_telecommand_on_line,
    find_text_matches,
)
from mibscope.workspace.present import (
    CompletionItem,
    SearchHit,
    build_search_hits,
    complete_command,
    complete_line,
    complete_optional_params,
    relative_path,
    render_hover,
    render_text_matches,
)

__all__ = [
    "CompletionItem",
    "IndexCache",
    "SearchHit",
    "TableFiles",
    "TextMatch",
    "WorkspaceIndex",
    "build_search_hits",
    "build_workspace_index",
    "complete_command",
    "complete_line",
    "complete_optional_params",
    "compute_cache_key",
    "discover_table_files",
    "discover_text_files",
    "find_entry",
    "find_telecommand_on_line",
    "find_text_matches",
    "read_dat_lines",
    "relative_path",
    "render_hover",
    "render_text_matches",
]
