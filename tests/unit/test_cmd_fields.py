"""Unit tests for the fields command."""

from __future__ import annotations

from click.testing import CliRunner

from brainz_query.commands.fields import cli


def test_fields_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Show the search fields of ENTITY" in result.output


def test_lists_helper_and_wire_names() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["artist"], standalone_mode=False)
    assert result.exception is None
    assert "sort_name" in result.output
    assert "sortname" in result.output
    assert "(default)" in result.output


def test_accepts_entity_alias() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["release_group"], standalone_mode=False)
    assert result.exception is None
    assert "releasegroupaccent" in result.output


def test_unknown_entity() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["spaceship"], standalone_mode=False)
    assert isinstance(result.exception, SystemExit)
    assert result.exit_code == 2
    assert "release-group" in result.output
