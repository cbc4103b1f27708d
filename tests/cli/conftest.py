"""Fixtures for CLI tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path) -> Iterator[None]:
    """Never read the developer's ~/.config/mibscope during CLI tests."""
    with patch("mibscope.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield
