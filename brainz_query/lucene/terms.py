"""Convert Python values into Lucene terms.

``make_term`` is the single entry point used by every search builder.
It accepts a closed set of value kinds and renders each one in exactly
one way:

* ``str``: a phrase (quoted) if it contains whitespace or is one of the
  operator words ``AND``, ``OR``, ``NOT``, otherwise a single term with
  reserved characters escaped
* ``bool``: ``true`` / ``false``
* ``int``: the literal digits, quoted when negative
* ``float``: quoted
* ``datetime.date`` and ``datetime.datetime``: a quoted ISO date
* MBIDs and ``uuid.UUID``: the raw identifier, never escaped
* ``enum.Enum`` members: their value, converted by the rules above
* ``Term``: returned unchanged
"""

from __future__ import annotations

import enum
import uuid
from collections.abc import Iterable
from datetime import date, datetime
from typing import Union

from brainz_query.lucene.ast_nodes import (
    AndTerm,
    BoostTerm,
    ExclusiveRange,
    InclusiveRange,
    NotTerm,
    OrTerm,
    Phrase,
    ProhibitTerm,
    RequireTerm,
    SingleTerm,
    Term,
)
from brainz_query.values import Mbid

# Characters with special meaning in the Lucene classic query parser.
RESERVED_CHARACTERS: frozenset[str] = frozenset('+-&|!(){}[]^"~*?:\\/')

# Words the parser reads as boolean operators rather than as terms.
OPERATOR_WORDS: frozenset[str] = frozenset({"AND", "OR", "NOT"})

# A range bound of "*" leaves that end of the range open.
OPEN_BOUND = "*"

TermValue = Union[Term, str, bool, int, float, date, Mbid, uuid.UUID, enum.Enum]


def lucene_escape(text: str) -> str:
    """Backslash-escape reserved characters and whitespace in ``text``.

    An operator word (``AND``, ``OR``, ``NOT``) gets its first letter
    escaped so it is read as a term.
    """
    if text in OPERATOR_WORDS:
        return "\\" + text
    return "".join(
        f"\\{char}" if char in RESERVED_CHARACTERS or char.isspace() else char for char in text
    )


def phrase_escape(text: str) -> str:
    """Escape the characters that would terminate a quoted phrase."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def text_term(text: str) -> Term:
    """Build a term from free text.

    The text is stripped first. Text containing whitespace, empty text
    and the operator words ``AND``/``OR``/``NOT`` become a :class:`Phrase`;
    everything else becomes an escaped :class:`SingleTerm`.
    """
    stripped = text.strip()
    if not stripped or stripped in OPERATOR_WORDS or any(char.isspace() for char in stripped):
        return Phrase(stripped)
    return SingleTerm(stripped)


def raw_term(text: str) -> Term:
    """Build a term from text that is already valid query syntax."""
    return SingleTerm(text, escape=False)


def make_term(value: object) -> Term:
    """Convert a supported value into a :class:`Term`.

    Raises:
        TypeError: If ``value`` is not one of the supported kinds.
    """
    if isinstance(value, Term):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return SingleTerm("true" if value else "false", escape=False)
    if isinstance(value, int):
        if value < 0:
            return Phrase(str(value))
        return SingleTerm(str(value), escape=False)
    if isinstance(value, float):
        return Phrase(repr(value))
    # datetime before date: datetime is a date subclass
    if isinstance(value, datetime):
        return Phrase(value.date().isoformat())
    if isinstance(value, date):
        return Phrase(value.isoformat())
    if isinstance(value, Mbid):
        return SingleTerm(value.value, escape=False)
    if isinstance(value, uuid.UUID):
        return SingleTerm(str(value), escape=False)
    if isinstance(value, enum.Enum):
        return make_term(value.value)
    if isinstance(value, str):
        return text_term(value)
    raise TypeError(f"Cannot build a search term from {type(value).__name__}: {value!r}")


def _join(kind: type[AndTerm] | type[OrTerm], left: Term, right: Term) -> Term:
    terms: list[Term] = []
    for operand in (left, right):
        if isinstance(operand, kind):
            terms.extend(operand.terms)
        else:
            terms.append(operand)
    return kind(tuple(terms))


def and_terms(left: Term, right: Term) -> Term:
    """``(left AND right)``, flattening nested AND groups."""
    return _join(AndTerm, left, right)


def or_terms(left: Term, right: Term) -> Term:
    """``(left OR right)``, flattening nested OR groups."""
    return _join(OrTerm, left, right)


def _combine(kind: type[AndTerm] | type[OrTerm], values: Iterable[object]) -> Term:
    terms = [make_term(value) for value in values]
    if len(terms) < 2:
        raise ValueError("At least two values are required")
    result = terms[0]
    for term in terms[1:]:
        result = _join(kind, result, term)
    return result


def all_of(*values: object) -> Term:
    """All of ``values`` must match: ``(a AND b AND c)``."""
    return _combine(AndTerm, values)


def any_of(*values: object) -> Term:
    """Any of ``values`` may match: ``(a OR b OR c)``."""
    return _combine(OrTerm, values)


def _undecorated(term: Term) -> Term:
    while isinstance(term, (RequireTerm, ProhibitTerm, NotTerm)):
        term = term.term
    return term


def require_term(value: object) -> Term:
    return RequireTerm(_undecorated(make_term(value)))


def prohibit_term(value: object) -> Term:
    return ProhibitTerm(_undecorated(make_term(value)))


def not_term(value: object) -> Term:
    """``NOT term``. Replaces a ``+`` or ``-`` already on the term."""
    return NotTerm(_undecorated(make_term(value)))


def _bound(value: object) -> Term:
    if value == OPEN_BOUND:
        return raw_term(OPEN_BOUND)
    return make_term(value)


def inclusive(low: object, high: object) -> Term:
    """Range including both bounds, e.g. ``[1990 TO 1999]``.

    Either bound may be ``"*"`` for an open range: ``[1990 TO *]``.
    """
    return InclusiveRange(_bound(low), _bound(high))


def exclusive(low: object, high: object) -> Term:
    """Range excluding both bounds, e.g. ``{Aida TO Carmen}``.

    Either bound may be ``"*"`` for an open range.
    """
    return ExclusiveRange(_bound(low), _bound(high))


def boost(value: object, factor: int) -> Term:
    if factor < 0:
        raise ValueError(f"Boost factor must not be negative: {factor}")
    return BoostTerm(make_term(value), factor)
