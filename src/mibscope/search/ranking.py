"""Tiered substring ranking of commands against a free-text query.

Each command is scored on its own, best tier first:

    3  query is a substring of the id or the name
    2  query is a substring of a parameter name
    1  query is a substring of the description
    0  no match

Matching is case-insensitive substring containment. An empty query keeps
every command at score 0 ("list everything"); otherwise unmatched commands
are dropped. Results are ordered by score, then id.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from mibscope.mib.models import TcEntry
from mibscope.search.index import EntrySearchIndex


class MatchTier(IntEnum):
    NONE = 0
    DESCRIPTION = 1
    PARAMETER = 2
    NAME_OR_ID = 3

    @property
    def caption(self) -> str:
        """Short label for the field that matched."""
        return {
            MatchTier.NAME_OR_ID: "Name/ID",
            MatchTier.PARAMETER: "Parameter",
            MatchTier.DESCRIPTION: "Description",
            MatchTier.NONE: "Listing",
        }[self]


@dataclass(frozen=True, slots=True)
class RankedEntry:
    entry: TcEntry
    score: MatchTier


def score_entry_match(item: EntrySearchIndex, query_lower: str) -> MatchTier:
    """Score one command against an already lower-cased query."""
    if not query_lower:
        return MatchTier.NONE
    if query_lower in item.id_lower or query_lower in item.name_lower:
        return MatchTier.NAME_OR_ID
    if any(query_lower in name for name in item.param_names_lower):
        return MatchTier.PARAMETER
    if query_lower in item.desc_lower:
        return MatchTier.DESCRIPTION
    return MatchTier.NONE


def rank_entries(
    entry_index: Iterable[EntrySearchIndex],
    query: str,
    limit: int,
) -> list[RankedEntry]:
    """Rank commands for ``query`` and keep the first ``limit``.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    query_lower = query.lower()
    ranked = [
        RankedEntry(entry=item.entry, score=score_entry_match(item, query_lower))
        for item in entry_index
    ]
    if query_lower:
        ranked = [item for item in ranked if item.score > MatchTier.NONE]
    ranked.sort(key=lambda item: (-item.score, item.entry.id))
    return ranked[:limit]
