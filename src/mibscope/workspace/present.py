"""Markdown, search hits and completion items built from the index.

Everything here is pure: it takes index records and returns strings or
small dataclasses for the CLI to print.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from mibscope.mib.models import MibIndex, ParamEntry, TcEntry
from mibscope.search.index import EntrySearchIndex
from mibscope.search.params import param_completion_keys, partition_params
from mibscope.search.ranking import MatchTier, rank_entries
from mibscope.workspace.lookup import TextMatch, find_telecommand_on_line

CompletionKind = Literal["command", "parameter"]


@dataclass(frozen=True, slots=True)
class SearchHit:
    label: str
    description: str
    detail: str
    entry: TcEntry
    score: MatchTier


@dataclass(frozen=True, slots=True)
class CompletionItem:
    """One completion; ``insert_text`` uses snippet syntax when ``is_snippet``."""

    label: str
    insert_text: str
    detail: str
    kind: CompletionKind
    is_snippet: bool = False


def relative_path(path: str | Path, root: Path | None) -> str:
    """Path relative to root, or unchanged when it lies outside root."""
    if root is None:
        return str(path)
    try:
        return str(Path(path).relative_to(root))
    except ValueError:
        return str(path)


def _param_bullet(param: ParamEntry) -> str:
    bits = f", {param.bit_length}b" if param.bit_length else ""
    offset = f"@{param.bit_offset}" if param.bit_offset else ""
    pid = f" (ID: {param.param_id})" if param.param_id else ""
    return f"- {param.name}{bits}{offset}{pid}"


def render_hover(entry: TcEntry, root: Path | None = None) -> str:
    """Markdown summary of a command and its parameters."""
    lines = [f"**Telecommand** `{entry.label}`", ""]
    if entry.description:
        lines += [entry.description, ""]

    details = [
        f"{caption}: {value}"
        for caption, value in (
            ("Service", entry.service_type),
            ("Subservice", entry.sub_service),
            ("APID", entry.apid),
            ("Header", entry.header),
        )
        if value
    ]
    if details:
        lines += [" | ".join(details), ""]

    lines += [f"Source: {relative_path(entry.source_path, root)}:{entry.source_line}", ""]

    if not entry.params:
        lines.append("No parameters found in CDF.")
        return "\n".join(lines) + "\n"

    required, optional = partition_params(entry.params)
    if required:
        lines.append("**Required Parameters**")
        lines += [_param_bullet(param) for param in required]
    if optional:
        lines.append("**Optional Parameters**")
        lines += [_param_bullet(param) for param in optional]
    return "\n".join(lines) + "\n"


def render_text_matches(
    token: str,
    matches: Sequence[TextMatch],
    root: Path | None = None,
) -> str:
    lines = [f"**MIB matches for** `{token}`", ""]
    lines += [f"- {relative_path(m.path, root)}:{m.line} - {m.text}" for m in matches]
    return "\n".join(lines) + "\n"


def build_search_hits(
    search_index: Iterable[EntrySearchIndex],
    query: str,
    limit: int,
    root: Path | None = None,
) -> list[SearchHit]:
    hits: list[SearchHit] = []
    for ranked in rank_entries(search_index, query, limit):
        entry = ranked.entry
        hits.append(
            SearchHit(
                label=entry.label,
                description=entry.description or "",
                detail=f"Match: {ranked.score.caption} • {relative_path(entry.source_path, root)}",
                entry=entry,
                score=ranked.score,
            )
        )
    return hits


def _command_snippet(entry_id: str, keys: Sequence[str]) -> str:
    slots = [f"{{{key} ${{{n}:value}}}}" for n, key in enumerate(keys, start=1)]
    return " ".join([entry_id, *slots])


def complete_command(index: MibIndex, prefix: str = "", limit: int = 200) -> list[CompletionItem]:
    """Commands whose id or name starts with ``prefix`` (case-insensitive)."""
    lowered = prefix.lower()
    items: list[CompletionItem] = []
    for entry in index.tc_by_id.values():
        if len(items) >= limit:
            break
        if lowered and not (
            entry.id.lower().startswith(lowered)
            or (entry.name or "").lower().startswith(lowered)
        ):
            continue

        summary = "Telecommand" if entry.description is None else entry.description
        keys = param_completion_keys(entry.params, required=True)
        if keys:
            items.append(
                CompletionItem(
                    label=entry.label,
                    insert_text=_command_snippet(entry.id, keys),
                    detail=f"{summary} ({len(keys)} required params)",
                    kind="command",
                    is_snippet=True,
                )
            )
        else:
            items.append(
                CompletionItem(
                    label=entry.label,
                    insert_text=entry.id,
                    detail=summary,
                    kind="command",
                )
            )
    return items


def complete_optional_params(entry: TcEntry, prefix: str = "") -> list[CompletionItem]:
    lowered = prefix.lower()
    return [
        CompletionItem(
            label=key,
            insert_text=f"{{{key} ${{value}}}}",
            detail=f"Optional parameter for {entry.id}",
            kind="parameter",
        )
        for key in param_completion_keys(entry.params, required=False)
        if key.lower().startswith(lowered)
    ]


def complete_line(
    index: MibIndex,
    line: str,
    prefix: str = "",
    limit: int = 200,
) -> list[CompletionItem]:
    """Optional parameters after a known command, otherwise commands."""
    entry = find_telecommand_on_line(line, index)
    if entry is not None:
        items = complete_optional_params(entry, prefix)
        if items:
            return items
    return complete_command(index, prefix, limit)
