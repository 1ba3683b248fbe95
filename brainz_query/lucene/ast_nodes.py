"""AST data classes for Lucene query expressions.

Every node is immutable. Combining or decorating nodes always produces
new nodes; see :mod:`brainz_query.lucene.terms` and
:mod:`brainz_query.lucene.fields`.
"""

from __future__ import annotations

from dataclasses import dataclass


class Expression:
    """Base of all renderable query nodes."""

    def __str__(self) -> str:
        from brainz_query.lucene.render import render

        return render(self)


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


class Term(Expression):
    """A value in a query: a word, a phrase, or a compound of terms.

    Terms support ``&`` (AND), ``|`` (OR), unary ``+`` (require) and
    unary ``-`` (prohibit) and ``~`` (``NOT``). The right-hand side of
    ``&``/``|`` may be any value accepted by
    :func:`~brainz_query.lucene.terms.make_term`.
    """

    def __and__(self, other: object) -> Term:
        from brainz_query.lucene.terms import and_terms, make_term

        return and_terms(self, make_term(other))

    def __or__(self, other: object) -> Term:
        from brainz_query.lucene.terms import make_term, or_terms

        return or_terms(self, make_term(other))

    def __pos__(self) -> Term:
        from brainz_query.lucene.terms import require_term

        return require_term(self)

    def __neg__(self) -> Term:
        from brainz_query.lucene.terms import prohibit_term

        return prohibit_term(self)

    def __invert__(self) -> Term:
        from brainz_query.lucene.terms import not_term

        return not_term(self)


@dataclass(frozen=True)
class SingleTerm(Term):
    """A single word.

    With ``escape`` set, reserved characters are backslash-escaped when
    rendered. Identifiers and numbers are stored with ``escape=False``.
    """

    value: str
    escape: bool = True


@dataclass(frozen=True)
class Phrase(Term):
    """A group of words rendered inside double quotes."""

    value: str


@dataclass(frozen=True)
class RequireTerm(Term):
    """``+term``: the term must appear in the result."""

    term: Term


@dataclass(frozen=True)
class ProhibitTerm(Term):
    """``-term``: the term must not appear in the result."""

    term: Term


@dataclass(frozen=True)
class NotTerm(Term):
    """``NOT term``: excludes matches on the term within its group.

    Like ``-term``, it only narrows a group that also has a positive
    clause, as in ``(Alice AND NOT Bob)``.
    """

    term: Term


@dataclass(frozen=True)
class AndTerm(Term):
    terms: tuple[Term, ...]


@dataclass(frozen=True)
class OrTerm(Term):
    terms: tuple[Term, ...]


@dataclass(frozen=True)
class InclusiveRange(Term):
    """``[low TO high]``. Bounds are included, sorting is lexicographic."""

    low: Term
    high: Term


@dataclass(frozen=True)
class ExclusiveRange(Term):
    """``{low TO high}``. Bounds are excluded."""

    low: Term
    high: Term


@dataclass(frozen=True)
class BoostTerm(Term):
    """``term^boost``: raises the relevance of matches on ``term``."""

    term: Term
    boost: int


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------


class Field(Expression):
    """A named predicate or a composite of other fields."""


@dataclass(frozen=True)
class BasicField(Field):
    """``name:term``, or ``name:(t1 t2)`` when several terms are given.

    An empty ``name`` searches the entity's default field and renders
    the bare term. With no terms at all the field matches entities that
    have no value for ``name`` (``-name:*``).
    """

    name: str
    terms: tuple[Term, ...]


@dataclass(frozen=True)
class AndGroup(Field):
    fields: tuple[Field, ...]


@dataclass(frozen=True)
class OrGroup(Field):
    fields: tuple[Field, ...]


@dataclass(frozen=True)
class RequireField(Field):
    field: Field


@dataclass(frozen=True)
class ProhibitField(Field):
    field: Field
