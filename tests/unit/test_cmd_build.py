"""Unit tests for the build command."""

from __future__ import annotations

import json
from datetime import date

import pytest
from click.testing import CliRunner

from brainz_query.commands.build import build_query, cli, coerce_value, parse_term
from brainz_query.config import Config
from brainz_query.context import Context
from brainz_query.exceptions import TermValueError, UnknownFieldError
from brainz_query.lucene.ast_nodes import SingleTerm
from brainz_query.search.artist import ArtistField, ArtistSearch
from brainz_query.search.release_group import ReleaseGroupSearch


def _invoke(args: list[str], obj: Context | None = None):
    runner = CliRunner()
    return runner.invoke(cli, args, obj=obj, standalone_mode=False)


class TestCoerceValue:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("true", True),
            ("False", False),
            ("1969", 1969),
            ("0", 0),
            ("-5", -5),
            ("1969-12-31", date(1969, 12, 31)),
            ("Queen", "Queen"),
            ("Jethro Tull", "Jethro Tull"),
            ("007", "007"),
            ("1969-12", "1969-12"),
        ],
    )
    def test_coercion(self, text: str, expected: object) -> None:
        assert coerce_value(text) == expected

    def test_raw(self) -> None:
        assert coerce_value("Beat*", raw=True) == SingleTerm("Beat*", escape=False)

    def test_empty_value(self) -> None:
        with pytest.raises(TermValueError):
            coerce_value("  ")

    def test_invalid_date(self) -> None:
        with pytest.raises(TermValueError):
            coerce_value("2020-13-45")


class TestParseTerm:
    def test_helper_name(self) -> None:
        term = parse_term(ArtistSearch, "sort_name=Beatles, The")
        assert term.field is ArtistField.SORT_NAME
        assert term.value == "Beatles, The"
        assert term.operator == ""

    def test_wire_name_with_operator(self) -> None:
        term = parse_term(ArtistSearch, "-sortname=Queen")
        assert term.field is ArtistField.SORT_NAME
        assert term.operator == "-"

    def test_value_may_contain_equals(self) -> None:
        term = parse_term(ArtistSearch, "comment=a=b")
        assert term.value == "a=b"

    def test_empty_field_is_default(self) -> None:
        assert parse_term(ArtistSearch, "=Queen").field is ArtistField.DEFAULT

    def test_missing_equals(self) -> None:
        with pytest.raises(TermValueError):
            parse_term(ArtistSearch, "Queen")

    def test_unknown_field(self) -> None:
        with pytest.raises(UnknownFieldError):
            parse_term(ArtistSearch, "bogus=x")


class TestBuildQuery:
    def test_implicit_join(self) -> None:
        terms = [
            parse_term(ArtistSearch, "artist=Queen"),
            parse_term(ArtistSearch, "-type=Person"),
        ]
        assert build_query(ArtistSearch, terms) == "artist:Queen -type:Person"

    def test_and_join(self) -> None:
        terms = [
            parse_term(ReleaseGroupSearch, "artist=The Beatles"),
            parse_term(ReleaseGroupSearch, "releasegroup=Revolver"),
        ]
        query = build_query(ReleaseGroupSearch, terms, "and")
        assert query == '(artist:"The Beatles" AND releasegroup:Revolver)'

    def test_or_join_with_decorated_terms(self) -> None:
        terms = [
            parse_term(ArtistSearch, "+artist=Queen"),
            parse_term(ArtistSearch, "alias=Queen"),
        ]
        assert build_query(ArtistSearch, terms, "or") == "(+artist:Queen OR alias:Queen)"

    def test_no_terms(self) -> None:
        assert build_query(ArtistSearch, [], "and") == ""


class TestBuildCommand:
    def test_phrase(self) -> None:
        result = _invoke(["artist", "artist=Jethro Tull"])
        assert result.exception is None
        assert result.stdout.strip() == 'artist:"Jethro Tull"'

    def test_join_and(self) -> None:
        result = _invoke(
            ["release-group", "--join", "and", "artist=The Beatles", "release_group=Revolver"]
        )
        assert result.stdout.strip() == '(artist:"The Beatles" AND releasegroup:Revolver)'

    def test_prohibited_term_not_parsed_as_option(self) -> None:
        result = _invoke(["release-group", "artist=Queen", "-secondary_type=Compilation"])
        assert result.exception is None
        assert result.stdout.strip() == "artist:Queen -secondarytype:Compilation"

    def test_boolean_and_date(self) -> None:
        result = _invoke(["artist", "ended=true", "begin=1969-12-31"])
        assert result.stdout.strip() == 'ended:true begin:"1969-12-31"'

    def test_entity_only_gives_empty_query(self) -> None:
        result = _invoke(["artist"])
        assert result.exception is None
        assert result.stdout.strip() == ""

    def test_default_entity(self) -> None:
        result = _invoke(["artist=Queen"])
        assert result.stdout.strip() == "artist:Queen"

    def test_default_entity_from_config(self) -> None:
        ctx = Context()
        ctx.config = Config(default_entity="release-group")
        result = _invoke(["release_group=Revolver"], obj=ctx)
        assert result.stdout.strip() == "releasegroup:Revolver"

    def test_operator_word_value(self) -> None:
        result = _invoke(["artist", "=OR", "artist=NOT"])
        assert result.exception is None
        assert result.stdout.strip() == '"OR" artist:"NOT"'

    def test_raw_values(self) -> None:
        result = _invoke(["--raw", "artist", "artist=Beat*"])
        assert result.stdout.strip() == "artist:Beat*"

    def test_params_format(self) -> None:
        ctx = Context()
        ctx.config = Config(limit=10, offset=20)
        result = _invoke(["--format", "params", "artist", "artist=Queen"], obj=ctx)
        assert result.exception is None
        assert json.loads(result.stdout) == {
            "query": "artist:Queen",
            "limit": 10,
            "offset": 20,
        }

    def test_unknown_entity_exit_code(self) -> None:
        result = _invoke(["spaceship", "name=x"])
        assert isinstance(result.exception, SystemExit)
        assert result.exit_code == 2
        assert "Unknown search entity" in result.output

    def test_unknown_field_exit_code(self) -> None:
        result = _invoke(["artist", "bogus=x"])
        assert result.exit_code == 2
        assert "Unknown artist search field" in result.output

    def test_invalid_term_exit_code(self) -> None:
        result = _invoke(["artist", "Queen"])
        assert result.exit_code == 1
        assert "expected field=value" in result.output

    def test_empty_value_exit_code(self) -> None:
        result = _invoke(["artist", "artist="])
        assert result.exit_code == 1
