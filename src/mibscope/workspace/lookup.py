"""Resolving tokens to commands and scanning text files for a token."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from mibscope.mib.models import MibIndex, TcEntry
from mibscope.search.params import get_telecommand_token_from_line
from mibscope.workspace.loader import read_dat_lines


@dataclass(frozen=True, slots=True)
class TextMatch:
    """A line in a text file containing a token as a whole word."""

    path: Path
    line: int
    text: str


def find_entry(index: MibIndex, token: str) -> TcEntry | None:
    """Exact id, then exact name, then a case-insensitive scan."""
    direct = index.tc_by_id.get(token) or index.tc_by_name.get(token)
    if direct is not None:
        return direct

    lowered = token.lower()
    for entry in index.tc_by_id.values():
        if entry.id.lower() == lowered:
            return entry
        if entry.name and entry.name.lower() == lowered:
            return entry
    return None


def find_telecommand_on_line(line: str, index: MibIndex) -> TcEntry | None:
    token = get_telecommand_token_from_line(line)
    if token is None:
        return None
    return find_entry(index, token)


def find_text_matches(token: str, paths: Iterable[Path], limit: int = 5) -> list[TextMatch]:
    """Scan ``paths`` in order, stopping after ``limit`` matching lines."""
    if not token or limit <= 0:
        return []

    pattern = re.compile(rf"\b{re.escape(token)}\b")
    matches: list[TextMatch] = []
    for path in paths:
        for number, line in enumerate(read_dat_lines(path), start=1):
            if pattern.search(line):
                matches.append(TextMatch(path=path, line=number, text=line.strip()))
                if len(matches) >= limit:
                    return matches
    return matches
