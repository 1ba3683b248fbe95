"""Build fields and combine them.

All functions here are pure: they return new nodes and never modify
their arguments. Registration of fields in a query is handled by
:class:`brainz_query.search.base.BaseSearch`.
"""

from __future__ import annotations

from brainz_query.lucene.ast_nodes import (
    AndGroup,
    BasicField,
    Field,
    OrGroup,
    ProhibitField,
    RequireField,
)
from brainz_query.lucene.terms import make_term


def field(name: str, *values: object) -> BasicField:
    """Build ``name:value``; several values render as ``name:(v1 v2)``."""
    return BasicField(name, tuple(make_term(value) for value in values))


def missing(name: str) -> BasicField:
    """Match entities that have no value at all for ``name``."""
    return BasicField(name, ())


def _join(kind: type[AndGroup] | type[OrGroup], left: Field, right: Field) -> Field:
    fields: list[Field] = []
    for operand in (left, right):
        if isinstance(operand, kind):
            fields.extend(operand.fields)
        else:
            fields.append(operand)
    return kind(tuple(fields))


def and_fields(left: Field, right: Field) -> Field:
    """Combine two fields into one flat AND group.

    AND groups on either side are spliced in, so ``and(and(a, b), c)``
    renders as ``(a AND b AND c)``. OR groups are kept as operands.
    """
    return _join(AndGroup, left, right)


def or_fields(left: Field, right: Field) -> Field:
    """Combine two fields into one flat OR group. See :func:`and_fields`."""
    return _join(OrGroup, left, right)


def _undecorated(target: Field) -> Field:
    while isinstance(target, (RequireField, ProhibitField)):
        target = target.field
    return target


def require(target: Field) -> Field:
    """Mark ``target`` as required (``+``), replacing any existing prefix."""
    return RequireField(_undecorated(target))


def prohibit(target: Field) -> Field:
    """Mark ``target`` as prohibited (``-``), replacing any existing prefix."""
    return ProhibitField(_undecorated(target))
