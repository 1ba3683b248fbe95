"""Render query AST nodes to Lucene query syntax."""

from __future__ import annotations

from collections.abc import Iterable

from brainz_query.lucene.ast_nodes import (
    AndGroup,
    AndTerm,
    BasicField,
    BoostTerm,
    ExclusiveRange,
    Expression,
    Field,
    InclusiveRange,
    NotTerm,
    OrGroup,
    OrTerm,
    Phrase,
    ProhibitField,
    ProhibitTerm,
    RequireField,
    RequireTerm,
    SingleTerm,
    Term,
)
from brainz_query.lucene.terms import lucene_escape, phrase_escape

_AND = " AND "
_OR = " OR "


def _render_group(operator: str, items: Iterable[Expression]) -> str:
    return "(" + operator.join(render(item) for item in items) + ")"


def _render_term(term: Term) -> str:
    if isinstance(term, SingleTerm):
        return lucene_escape(term.value) if term.escape else term.value
    if isinstance(term, Phrase):
        return f'"{phrase_escape(term.value)}"'
    if isinstance(term, RequireTerm):
        return "+" + _render_term(term.term)
    if isinstance(term, ProhibitTerm):
        return "-" + _render_term(term.term)
    if isinstance(term, NotTerm):
        return "NOT " + _render_term(term.term)
    if isinstance(term, AndTerm):
        return _render_group(_AND, term.terms)
    if isinstance(term, OrTerm):
        return _render_group(_OR, term.terms)
    if isinstance(term, InclusiveRange):
        return f"[{_render_term(term.low)} TO {_render_term(term.high)}]"
    if isinstance(term, ExclusiveRange):
        return f"{{{_render_term(term.low)} TO {_render_term(term.high)}}}"
    if isinstance(term, BoostTerm):
        return f"{_render_term(term.term)}^{term.boost}"
    raise TypeError(f"Unknown term node: {type(term).__name__}")


def _render_basic_field(basic: BasicField) -> str:
    if not basic.terms:
        return f"-{basic.name}:*"
    prefix = f"{basic.name}:" if basic.name else ""
    # "name:NOT x" does not parse, the group form "name:(NOT x)" does
    if len(basic.terms) == 1 and not (prefix and isinstance(basic.terms[0], NotTerm)):
        return prefix + _render_term(basic.terms[0])
    return prefix + "(" + " ".join(_render_term(term) for term in basic.terms) + ")"


def _render_field(node: Field) -> str:
    if isinstance(node, BasicField):
        return _render_basic_field(node)
    if isinstance(node, AndGroup):
        return _render_group(_AND, node.fields)
    if isinstance(node, OrGroup):
        return _render_group(_OR, node.fields)
    if isinstance(node, RequireField):
        return "+" + _render_field(node.field)
    if isinstance(node, ProhibitField):
        return "-" + _render_field(node.field)
    raise TypeError(f"Unknown field node: {type(node).__name__}")


def render_fields(fields: Iterable[Field]) -> str:
    """Render top-level fields separated by a space (implicit AND)."""
    return " ".join(_render_field(node) for node in fields)


def render(node: Expression | Iterable[Field]) -> str:
    """Render a term, a field, or a sequence of top-level fields.

    A :class:`~brainz_query.lucene.query.Query` is rendered as the
    sequence of its fields; an empty query renders as ``""``.
    """
    if isinstance(node, Term):
        return _render_term(node)
    if isinstance(node, Field):
        return _render_field(node)
    return render_fields(node)
