"""Tests for mibscope init command."""

from pathlib import Path

import yaml
from click.testing import CliRunner

from mibscope.cli.main import cli

runner = CliRunner()


class TestInitCommand:
    """mibscope init command tests."""

    def test_given_workspace_when_init_then_creates_config(self, empty_root: Path) -> None:
        """Init creates .mibscope/config.yaml with commented defaults."""
        # When
        result = runner.invoke(cli, ["init", str(empty_root)])

        # Then
        assert result.exit_code == 0
        config_path = empty_root / ".mibscope" / "config.yaml"
        assert config_path.exists()
        assert yaml.safe_load(config_path.read_text()) is None

    def test_given_initialized_when_init_then_keeps_existing(self, empty_root: Path) -> None:
        """Re-running init without --force leaves the file alone."""
        # Given
        runner.invoke(cli, ["init", str(empty_root)])
        config_path = empty_root / ".mibscope" / "config.yaml"
        config_path.write_text("max_files: 5\n")

        # When
        result = runner.invoke(cli, ["init", str(empty_root)])

        # Then
        assert result.exit_code == 0
        assert config_path.read_text() == "max_files: 5\n"

    def test_given_initialized_when_init_force_then_overwrites(self, empty_root: Path) -> None:
        """--force rewrites the template."""
        # Given
        config_path = empty_root / ".mibscope" / "config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("max_files: 5\n")

        # When
        result = runner.invoke(cli, ["init", str(empty_root), "--force"])

        # Then
        assert result.exit_code == 0
        assert "# max_files: 200" in config_path.read_text()

    def test_given_missing_path_when_init_then_fails(self, tmp_path: Path) -> None:
        """A path that does not exist is rejected by click."""
        result = runner.invoke(cli, ["init", str(tmp_path / "missing")])

        assert result.exit_code != 0
