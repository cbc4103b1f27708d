"""Reading table files and caching the built index by modification time.

The MIB core never touches the filesystem; this module turns discovered
paths into ``DatFile`` inputs, builds the index, and reuses it while no
input file changed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import structlog

from mibscope.config.models import MibScopeConfig
from mibscope.core.errors import WorkspaceError
from mibscope.mib.builder import DatFile, build_mib_index_from_lines
from mibscope.mib.models import MibIndex, TableKind
from mibscope.mib.parsers import TxpTarget
from mibscope.mib.tokenizer import split_text_lines
from mibscope.search.index import EntrySearchIndex, build_entry_search_index
from mibscope.workspace.discovery import TableFiles, discover_table_files

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class WorkspaceIndex:
    """A built index together with what it was built from."""

    root: Path
    index: MibIndex
    search_index: tuple[EntrySearchIndex, ...]
    files: TableFiles
    cache_key: str


def read_dat_lines(path: Path) -> list[str]:
    """Read a table as UTF-8 lines; undecodable bytes are replaced."""
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise WorkspaceError.read_failed(str(path), str(e)) from e
    return split_text_lines(content)


def compute_cache_key(paths: Iterable[Path]) -> str:
    """Fingerprint of a file set: sorted ``path|mtime_ns`` pairs."""
    parts: list[str] = []
    for path in paths:
        try:
            mtime = path.stat().st_mtime_ns
        except OSError as e:
            raise WorkspaceError.read_failed(str(path), str(e)) from e
        parts.append(f"{path}|{mtime}")
    return ";".join(sorted(parts))


def _dat_files(paths: Iterable[Path]) -> list[DatFile]:
    return [DatFile(path=str(path), lines=read_dat_lines(path)) for path in paths]


def build_workspace_index(
    root: Path,
    config: MibScopeConfig | None = None,
    files: TableFiles | None = None,
) -> WorkspaceIndex | None:
    """Discover, read and build. Returns None when no CCF/CDF table exists."""
    config = config or MibScopeConfig()
    files = files or discover_table_files(root, config.workspace)
    if not files.has_index_inputs:
        log.debug("no_mib_tables", root=str(root))
        return None

    cache_key = compute_cache_key(files.all_paths)
    index = build_mib_index_from_lines(
        _dat_files(files[TableKind.CCF]),
        _dat_files(files[TableKind.CDF]),
        _dat_files(files[TableKind.PID]),
        _dat_files(files[TableKind.PLF]),
        _dat_files(files[TableKind.PCF]),
        _dat_files(files[TableKind.CVE]),
        _dat_files(files[TableKind.CVP]),
        _dat_files(files[TableKind.TXP]),
        txp_targets=TxpTarget.from_name(config.enrichment.txp_targets),
    )
    return WorkspaceIndex(
        root=root,
        index=index,
        search_index=build_entry_search_index(index.commands),
        files=files,
        cache_key=cache_key,
    )


class IndexCache:
    """Keeps the last built index and rebuilds only when inputs change.

    Meant for long-lived callers (an editor integration, a watch loop) that
    load the same root repeatedly. A one-shot CLI invocation builds a fresh
    cache each time, so it always misses. Not thread-safe; one cache per caller.
    """

    def __init__(self, config: MibScopeConfig | None = None) -> None:
        self._config = config or MibScopeConfig()
        self._cached: WorkspaceIndex | None = None

    @property
    def cached(self) -> WorkspaceIndex | None:
        return self._cached

    def invalidate(self) -> None:
        self._cached = None

    def load(self, root: Path) -> WorkspaceIndex | None:
        """Return the index for ``root``, rebuilding if any table changed."""
        root = root.resolve()
        files = discover_table_files(root, self._config.workspace)
        if not files.has_index_inputs:
            self._cached = None
            return None

        cached = self._cached
        if cached is not None and cached.root == root:
            if compute_cache_key(files.all_paths) == cached.cache_key:
                log.debug("index_cache_hit", root=str(root))
                return cached

        self._cached = build_workspace_index(root, self._config, files)
        return self._cached
