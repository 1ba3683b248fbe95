"""End-to-end tests for the brainz-query command group."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from brainz_query import __version__
from brainz_query.cli import cli


class TestCommandGroup:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_commands_registered(self) -> None:
        for name in ("build", "fields", "init-config", "help"):
            assert name in cli.commands

    def test_help_command(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["help", "build"])
        assert result.exit_code == 0
        assert "--join" in result.output

    def test_help_unknown_command(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["help", "nope"])
        assert result.exit_code == 1


class TestBuildThroughGroup:
    def test_missing_config_uses_defaults(self, temp_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--config", str(temp_dir / "none.toml"), "build", "artist=Jethro Tull"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == 'artist:"Jethro Tull"'

    def test_config_default_entity_and_paging(self, sample_config: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "--config",
                str(sample_config),
                "build",
                "--format",
                "params",
                "release_group=Revolver",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "query": "releasegroup:Revolver",
            "limit": 50,
            "offset": 10,
        }

    def test_config_warnings_shown(self, temp_dir: Path) -> None:
        config_path = temp_dir / "config.toml"
        config_path.write_text("[search]\nlimit = 0\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config_path), "build", "artist=Queen"])
        assert result.exit_code == 0
        assert "search.limit=0" in result.output

    def test_config_warnings_hidden_when_quiet(self, temp_dir: Path) -> None:
        config_path = temp_dir / "config.toml"
        config_path.write_text("[search]\nlimit = 0\n")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["--quiet", "--config", str(config_path), "build", "artist=Queen"]
        )
        assert result.exit_code == 0
        assert "search.limit" not in result.output

    def test_verbose_reports_term_count(self, temp_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--verbose", "--config", str(temp_dir / "none.toml"), "build", "artist=Queen"],
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "artist:Queen"
        assert "Building artist query from 1 term(s)" in result.output

    def test_broken_config_fails(self, temp_dir: Path) -> None:
        config_path = temp_dir / "config.toml"
        config_path.write_text("not [ toml")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config_path), "build", "artist=Queen"])
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_init_config_then_build(self, temp_dir: Path) -> None:
        config_path = temp_dir / "brainz" / "config.toml"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["init-config", "--output", str(config_path), "--default-entity", "release-group"],
        )
        assert result.exit_code == 0
        assert config_path.exists()

        result = runner.invoke(
            cli, ["--config", str(config_path), "build", "release_group=Revolver"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "releasegroup:Revolver"
