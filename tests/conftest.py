"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides a small on-disk MIB dataset shared by workspace and CLI tests.
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local mibscope package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of mibscope modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("mibscope"):
        del sys.modules[module_name]


def row(*cols: str) -> str:
    """Join columns into one tab-delimited table line."""
    return "\t".join(cols)


SAMPLE_TABLES: dict[str, list[str]] = {
    "ccf.dat": [
        "# command definitions",
        row("TC_A", "DEPLOY", "Deploy solar array", "", "", "HDR", "8", "1", "100"),
        row("TC_B", "RESET", "Reboot payload", "", "", "HDR", "17", "2", "101"),
        row("TC_C", "", "Ping"),
    ],
    "cdf.dat": [
        row("TC_A", "E", "MODE", "8", "16", "", "P_MODE"),
        row("TC_A", "A", "SPARE", "8", "24", "", ""),
        row("TC_B", "E", "TARGET", "16", "16", "", "P_TGT"),
        row("TC_B", "E", "filler", "8", "32", "", ""),
        row("TC_UNKNOWN", "E", "GHOST", "8", "0", "", "P_GHOST"),
    ],
    "pid.dat": [
        row("3", "25", "0", "0", "0", "1001", "Housekeeping"),
    ],
    "pcf.dat": [
        row("PT_TEMP", "BATT_TEMP", "", "", "", "", "", "", "", "", "", "TXT_1"),
    ],
    "plf.dat": [
        row("PT_TEMP", "1001", "0", "0"),
        row("PT_RAW", "1001", "8", "0"),
    ],
    "cve.dat": [
        row("CAL", "P_MODE", "E", "SAFE"),
        row("CAL", "P_MODE", "E", "NOMINAL"),
    ],
    "cvp.dat": [
        row("TC_A", "1", "CAL"),
    ],
    "txp.dat": [
        row("TXT_1", "0", "0", "COLD"),
        row("TXT_1", "1", "1", "HOT"),
    ],
}


def write_tables(directory: Path, tables: dict[str, list[str]]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name, lines in tables.items():
        (directory / name).write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def mib_root(tmp_path: Path) -> Iterator[Path]:
    """Workspace with the sample tables under mib/ and a text note."""
    root = tmp_path / "workspace"
    write_tables(root / "mib", SAMPLE_TABLES)
    (root / "notes.txt").write_text("Legacy command TC_ZZZ was retired.\n", encoding="utf-8")
    yield root


@pytest.fixture
def empty_root(tmp_path: Path) -> Iterator[Path]:
    """Workspace without any MIB tables."""
    root = tmp_path / "empty"
    root.mkdir()
    yield root
