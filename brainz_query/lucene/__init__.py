"""Lucene query expression building for MusicBrainz indexed search."""

from brainz_query.lucene.ast_nodes import (
    AndGroup,
    AndTerm,
    BasicField,
    BoostTerm,
    ExclusiveRange,
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
from brainz_query.lucene.fields import and_fields, field, missing, or_fields, prohibit, require
from brainz_query.lucene.query import Query
from brainz_query.lucene.render import render
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

__all__ = [
    "AndGroup",
    "AndTerm",
    "BasicField",
    "BoostTerm",
    "ExclusiveRange",
    "Field",
    "InclusiveRange",
    "NotTerm",
    "OrGroup",
    "OrTerm",
    "Phrase",
    "ProhibitField",
    "ProhibitTerm",
    "Query",
    "RequireField",
    "RequireTerm",
    "SingleTerm",
    "Term",
    "all_of",
    "and_fields",
    "any_of",
    "boost",
    "exclusive",
    "field",
    "inclusive",
    "lucene_escape",
    "make_term",
    "missing",
    "not_term",
    "or_fields",
    "prohibit",
    "raw_term",
    "render",
    "require",
]
