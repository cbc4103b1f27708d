"""Line tokenizer for SCOS-2000 ASCII tables.

Tables are tab-delimited; every field is whitespace-trimmed. Blank lines and
lines whose trimmed text starts with ``#`` are comments.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

_LINE_BREAK = re.compile(r"\r?\n")


def split_dat_line(line: str) -> list[str]:
    """Split one table line into trimmed tab-separated fields."""
    return [value.strip() for value in line.split("\t")]


def is_comment_line(line: str | None) -> bool:
    """True for absent, blank and ``#``-prefixed lines."""
    if not line:
        return True
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def iter_table_rows(lines: Iterable[str | None]) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, columns)`` for every data line.

    ``line_number`` is 1-based and counts comment and blank lines, so it
    points at the row's real position in the source file.
    """
    for line_number, line in enumerate(lines, start=1):
        if line is None or is_comment_line(line):
            continue
        yield line_number, split_dat_line(line)


def split_text_lines(content: str) -> list[str]:
    """Split file content on LF or CRLF, keeping every other character."""
    return _LINE_BREAK.split(content)
