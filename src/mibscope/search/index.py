"""Precomputed lower-case search fields per command."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mibscope.mib.models import TcEntry


@dataclass(frozen=True, slots=True)
class EntrySearchIndex:
    """Lower-cased projection of one command used by the ranker."""

    entry: TcEntry
    id_lower: str
    name_lower: str
    desc_lower: str
    param_names_lower: tuple[str, ...]


def build_entry_search_index(entries: Iterable[TcEntry]) -> tuple[EntrySearchIndex, ...]:
    """Project commands into search rows, keeping the input order."""
    return tuple(
        EntrySearchIndex(
            entry=entry,
            id_lower=entry.id.lower(),
            name_lower=(entry.name or "").lower(),
            desc_lower=(entry.description or "").lower(),
            param_names_lower=tuple(param.name.lower() for param in entry.params),
        )
        for entry in entries
    )
