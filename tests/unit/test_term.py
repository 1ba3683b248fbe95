"""Unit tests for term construction and rendering."""

from __future__ import annotations

import uuid
from datetime import date, datetime

import pytest

from brainz_query.lucene.ast_nodes import AndTerm, NotTerm, OrTerm, Phrase, SingleTerm
from brainz_query.lucene.terms import (
    all_of,
    any_of,
    boost,
    exclusive,
    inclusive,
    lucene_escape,
    make_term,
    not_term,
    raw_term,
)
from brainz_query.values import ArtistMbid, ArtistType, ReleaseGroupType


class TestTextTerms:
    def test_single_word(self) -> None:
        term = make_term("Revolver")
        assert term == SingleTerm("Revolver")
        assert str(term) == "Revolver"

    def test_whitespace_makes_phrase(self) -> None:
        term = make_term("Jethro Tull")
        assert isinstance(term, Phrase)
        assert str(term) == '"Jethro Tull"'

    def test_text_is_stripped(self) -> None:
        assert str(make_term("  Queen \n")) == "Queen"

    def test_empty_text_is_empty_phrase(self) -> None:
        assert str(make_term("")) == '""'
        assert str(make_term("   ")) == '""'

    def test_reserved_characters_escaped(self) -> None:
        assert str(make_term("AC/DC")) == "AC\\/DC"
        assert str(make_term("a:b")) == "a\\:b"
        assert str(make_term("R&B")) == "R\\&B"
        assert str(make_term("(hello)!")) == "\\(hello\\)\\!"

    def test_phrase_escapes_only_quotes_and_backslashes(self) -> None:
        assert str(make_term('say "hi" now')) == '"say \\"hi\\" now"'
        assert str(make_term("AC/DC live")) == '"AC/DC live"'

    def test_lucene_escape_whitespace(self) -> None:
        assert lucene_escape("a b") == "a\\ b"

    def test_raw_term_not_escaped(self) -> None:
        assert str(raw_term("Beat*")) == "Beat*"

    @pytest.mark.parametrize("word", ["AND", "OR", "NOT"])
    def test_operator_words_are_quoted(self, word: str) -> None:
        term = make_term(f" {word} ")
        assert term == Phrase(word)
        assert str(term) == f'"{word}"'

    def test_operator_words_only_match_uppercase(self) -> None:
        assert str(make_term("and")) == "and"
        assert str(make_term("ORB")) == "ORB"

    def test_lucene_escape_operator_word(self) -> None:
        assert lucene_escape("OR") == "\\OR"
        assert str(SingleTerm("NOT")) == "\\NOT"


class TestValueKinds:
    def test_booleans(self) -> None:
        assert str(make_term(True)) == "true"
        assert str(make_term(False)) == "false"

    def test_integers(self) -> None:
        assert str(make_term(1969)) == "1969"
        assert str(make_term(0)) == "0"

    def test_negative_integer_quoted(self) -> None:
        assert str(make_term(-5)) == '"-5"'

    def test_float_quoted(self) -> None:
        assert str(make_term(1.5)) == '"1.5"'
        assert str(make_term(-33.86)) == '"-33.86"'

    def test_date_quoted_iso(self) -> None:
        assert str(make_term(date(1969, 12, 31))) == '"1969-12-31"'

    def test_datetime_renders_date_only(self) -> None:
        assert str(make_term(datetime(1969, 12, 31, 23, 59))) == '"1969-12-31"'

    def test_mbid_verbatim(self) -> None:
        mbid = ArtistMbid("5b11f4ce-a62d-471e-81fc-a69a8278c7da")
        assert str(make_term(mbid)) == "5b11f4ce-a62d-471e-81fc-a69a8278c7da"

    def test_uuid_verbatim(self) -> None:
        value = uuid.UUID("0383dadf-2a4e-4d10-a46a-e9e041da8eb3")
        assert str(make_term(value)) == "0383dadf-2a4e-4d10-a46a-e9e041da8eb3"

    def test_enum_uses_value(self) -> None:
        assert str(make_term(ArtistType.GROUP)) == "Group"
        assert str(make_term(ReleaseGroupType.AUDIO_DRAMA)) == '"audio drama"'
        assert str(make_term(ReleaseGroupType.DJ_MIX)) == "dj\\-mix"

    def test_term_passes_through(self) -> None:
        term = SingleTerm("x")
        assert make_term(term) is term

    @pytest.mark.parametrize("value", [None, object(), [1, 2], b"bytes"])
    def test_unsupported_kind_raises(self, value: object) -> None:
        with pytest.raises(TypeError):
            make_term(value)


class TestTermOperators:
    def test_and(self) -> None:
        term = make_term("rock") & "pop"
        assert isinstance(term, AndTerm)
        assert str(term) == "(rock AND pop)"

    def test_and_flattens(self) -> None:
        term = (make_term("a") & "b") & "c"
        assert str(term) == "(a AND b AND c)"

    def test_or_flattens(self) -> None:
        term = make_term("a") | "b" | "c"
        assert isinstance(term, OrTerm)
        assert len(term.terms) == 3

    def test_mixed_groups_nest(self) -> None:
        term = make_term("a") | (make_term("b") & "c")
        assert str(term) == "(a OR (b AND c))"

    def test_require_and_prohibit(self) -> None:
        assert str(+make_term("a")) == "+a"
        assert str(-make_term("a")) == "-a"

    def test_decorators_replace(self) -> None:
        assert str(-(+make_term("a"))) == "-a"
        assert str(+(-make_term("a"))) == "+a"
        assert str(-(-make_term("a"))) == "-a"

    def test_not(self) -> None:
        term = ~make_term("Alice")
        assert isinstance(term, NotTerm)
        assert str(term) == "NOT Alice"
        assert str(not_term("One more")) == 'NOT "One more"'

    def test_not_inside_group(self) -> None:
        assert str(make_term("Alice") & ~make_term("Bob")) == "(Alice AND NOT Bob)"

    def test_not_replaces_other_decorators(self) -> None:
        assert str(~(+make_term("a"))) == "NOT a"
        assert str(-(~make_term("a"))) == "-a"
        assert str(+(~make_term("a"))) == "+a"

    def test_all_of_and_any_of(self) -> None:
        assert str(all_of("rock", "pop")) == "(rock AND pop)"
        assert str(any_of("rock", "pop", "jazz")) == "(rock OR pop OR jazz)"

    def test_combine_needs_two_values(self) -> None:
        with pytest.raises(ValueError):
            any_of("rock")


class TestRangesAndBoost:
    def test_inclusive_range(self) -> None:
        assert str(inclusive(1990, 1999)) == "[1990 TO 1999]"

    def test_exclusive_range(self) -> None:
        assert str(exclusive("Aida", "Carmen")) == "{Aida TO Carmen}"

    def test_open_range_bounds(self) -> None:
        assert str(inclusive(1990, "*")) == "[1990 TO *]"
        assert str(exclusive("*", "Carmen")) == "{* TO Carmen}"

    def test_star_inside_bound_is_escaped(self) -> None:
        assert str(inclusive("a*", "b")) == "[a\\* TO b]"

    def test_date_range(self) -> None:
        term = inclusive(date(1990, 1, 1), date(1999, 12, 31))
        assert str(term) == '["1990-01-01" TO "1999-12-31"]'

    def test_boost(self) -> None:
        assert str(boost("Queen", 2)) == "Queen^2"

    def test_negative_boost_raises(self) -> None:
        with pytest.raises(ValueError):
            boost("Queen", -1)
