"""Discovery of MIB table files and text-fallback files in a workspace."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from mibscope.config.constants import INDEX_TRIGGER_KINDS
from mibscope.config.models import WorkspaceConfig
from mibscope.mib.models import TableKind


@dataclass(frozen=True, slots=True)
class TableFiles:
    """Discovered table files, one sorted tuple per kind."""

    by_kind: Mapping[TableKind, tuple[Path, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        complete = {kind: tuple(self.by_kind.get(kind, ())) for kind in TableKind}
        object.__setattr__(self, "by_kind", MappingProxyType(complete))

    def __getitem__(self, kind: TableKind) -> tuple[Path, ...]:
        return self.by_kind[kind]

    @property
    def all_paths(self) -> tuple[Path, ...]:
        return tuple(path for kind in TableKind for path in self.by_kind[kind])

    @property
    def has_index_inputs(self) -> bool:
        """True when a command table exists; without one no index is built."""
        return any(self.by_kind[TableKind(kind)] for kind in INDEX_TRIGGER_KINDS)

    def counts(self) -> dict[str, int]:
        return {kind.value: len(paths) for kind, paths in self.by_kind.items()}


def _search_roots(root: Path, config: WorkspaceConfig) -> list[Path]:
    if not config.table_dirs:
        return [root]
    return [root / rel for rel in config.table_dirs if (root / rel).is_dir()]


def _walk_files(start: Path, excluded: frozenset[str]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(start):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in filenames:
            yield Path(dirpath) / filename


def discover_table_files(root: Path, config: WorkspaceConfig | None = None) -> TableFiles:
    """Find ``<kind>.dat`` / ``<KIND>.DAT`` files for every table kind.

    Files are deduplicated, sorted by path and capped at ``max_files`` per
    kind so the build order is stable between runs.
    """
    config = config or WorkspaceConfig()
    excluded = frozenset(config.excluded_dirs)
    names = {name: kind for kind in TableKind for name in kind.file_names}

    found: dict[TableKind, set[Path]] = {kind: set() for kind in TableKind}
    for start in _search_roots(root, config):
        for path in _walk_files(start, excluded):
            kind = names.get(path.name)
            if kind is not None:
                found[kind].add(path.resolve())

    return TableFiles(
        by_kind={kind: tuple(sorted(paths)[: config.max_files]) for kind, paths in found.items()}
    )


def discover_text_files(root: Path, config: WorkspaceConfig | None = None) -> list[Path]:
    """Resolve the text-fallback globs, skipping excluded directories."""
    config = config or WorkspaceConfig()
    excluded = set(config.excluded_dirs)
    found: set[Path] = set()
    for pattern in config.mib_globs:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            if excluded.intersection(path.relative_to(root).parts[:-1]):
                continue
            found.add(path.resolve())
    return sorted(found)[: config.max_files]
