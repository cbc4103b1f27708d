"""Tests for table and text file discovery."""

from pathlib import Path

from mibscope.config.models import WorkspaceConfig
from mibscope.mib.models import TableKind
from mibscope.workspace.discovery import TableFiles, discover_table_files, discover_text_files


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestDiscoverTableFiles:
    def test_finds_every_kind_in_sample(self, mib_root: Path) -> None:
        files = discover_table_files(mib_root)

        assert all(len(files[kind]) == 1 for kind in TableKind)
        assert files.has_index_inputs
        assert files[TableKind.CCF][0].name == "ccf.dat"

    def test_accepts_upper_case_names(self, tmp_path: Path) -> None:
        _touch(tmp_path / "a" / "ccf.dat")
        _touch(tmp_path / "b" / "CCF.DAT")
        _touch(tmp_path / "c" / "Ccf.Dat")

        files = discover_table_files(tmp_path)

        assert [p.parent.name for p in files[TableKind.CCF]] == ["a", "b"]

    def test_skips_excluded_directories(self, tmp_path: Path) -> None:
        _touch(tmp_path / "node_modules" / "pkg" / "ccf.dat")
        _touch(tmp_path / "mib" / "ccf.dat")

        files = discover_table_files(tmp_path)

        assert [p.parent.name for p in files[TableKind.CCF]] == ["mib"]

    def test_table_dirs_restrict_search(self, tmp_path: Path) -> None:
        _touch(tmp_path / "flight" / "ccf.dat")
        _touch(tmp_path / "sim" / "ccf.dat")

        files = discover_table_files(tmp_path, WorkspaceConfig(table_dirs=["flight", "missing"]))

        assert [p.parent.name for p in files[TableKind.CCF]] == ["flight"]

    def test_caps_files_per_kind(self, tmp_path: Path) -> None:
        for name in ("a", "b", "c"):
            _touch(tmp_path / name / "cdf.dat")

        files = discover_table_files(tmp_path, WorkspaceConfig(max_files=2))

        assert [p.parent.name for p in files[TableKind.CDF]] == ["a", "b"]

    def test_cdf_alone_is_enough_to_index(self, tmp_path: Path) -> None:
        _touch(tmp_path / "cdf.dat")

        assert discover_table_files(tmp_path).has_index_inputs

    def test_telemetry_tables_alone_are_not(self, tmp_path: Path) -> None:
        _touch(tmp_path / "pid.dat")
        _touch(tmp_path / "plf.dat")

        files = discover_table_files(tmp_path)

        assert not files.has_index_inputs
        assert files.counts()["pid"] == 1


class TestTableFiles:
    def test_missing_kinds_are_empty(self) -> None:
        files = TableFiles(by_kind={TableKind.CCF: (Path("/x/ccf.dat"),)})

        assert files[TableKind.TXP] == ()
        assert files.all_paths == (Path("/x/ccf.dat"),)
        assert files.counts() == {kind.value: int(kind is TableKind.CCF) for kind in TableKind}


class TestDiscoverTextFiles:
    def test_uses_default_globs(self, mib_root: Path) -> None:
        files = discover_text_files(mib_root)

        assert [p.name for p in files] == ["notes.txt"]

    def test_skips_excluded_directories(self, tmp_path: Path) -> None:
        _touch(tmp_path / "docs" / "a.mib")
        _touch(tmp_path / ".git" / "b.txt")

        files = discover_text_files(tmp_path)

        assert [p.name for p in files] == ["a.mib"]

    def test_custom_globs(self, tmp_path: Path) -> None:
        _touch(tmp_path / "a.mib")
        _touch(tmp_path / "b.csv")

        files = discover_text_files(tmp_path, WorkspaceConfig(mib_globs=["*.csv"]))

        assert [p.name for p in files] == ["b.csv"]
