"""Base of the search builder DSL.

Every entity search builder derives from :class:`BaseSearch`. A helper
call such as ``ArtistSearch.artist("Queen")`` builds a field, registers
it as a top-level entry of the search's :class:`Query` and returns a
:class:`FieldHandle` to that entry. Combining handles replaces their
entries in place::

    search = ReleaseGroupSearch()
    search.artist("The Beatles") & search.release_group("Revolver")
    str(search)  # '(artist:"The Beatles" AND releasegroup:Revolver)'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, ClassVar, Union

from brainz_query.exceptions import UnknownFieldError, UnregisteredFieldError
from brainz_query.lucene.ast_nodes import BasicField, Field
from brainz_query.lucene.fields import and_fields, or_fields, prohibit, require
from brainz_query.lucene.query import Query
from brainz_query.lucene.render import render
from brainz_query.lucene.terms import TermValue, make_term

logger = logging.getLogger(__name__)

# A helper argument: a term value, or a callable producing one.
Value = Union[TermValue, Callable[[], TermValue]]


class SearchField(Enum):
    """Base for per-entity search field enums.

    Each member's value is the field name used on the wire; the empty
    name is the entity's default field. Members are declared as
    ``NAME = ("wirename", "description")``.
    """

    def __new__(cls, value: str, description: str = "") -> SearchField:
        member = object.__new__(cls)
        member._value_ = value
        member.description = description
        return member

    @property
    def helper_name(self) -> str:
        """Name of the builder method that adds this field."""
        return self.name.lower()

    @classmethod
    def lookup(cls, name: str) -> SearchField:
        """Find a member by helper name (``sort_name``) or wire name (``sortname``).

        Raises:
            KeyError: If no member matches.
        """
        key = name.strip().lower().replace("-", "_")
        for member in cls:
            if member.helper_name == key or (member.value and member.value == key):
                return member
        raise KeyError(name)


class FieldHandle:
    """Reference to a top-level field registered in a search.

    Handles are consumed by combinators: after ``a & b`` neither ``a``
    nor ``b`` may be used again, only the returned handle.
    """

    __slots__ = ("_search", "key")

    def __init__(self, search: BaseSearch, key: int) -> None:
        self._search = search
        self.key = key

    @property
    def search(self) -> BaseSearch:
        return self._search

    @property
    def field(self) -> Field:
        return self._search.field_of(self)

    def __and__(self, other: FieldHandle) -> FieldHandle:
        return self._search.and_(self, other)

    def __or__(self, other: FieldHandle) -> FieldHandle:
        return self._search.or_(self, other)

    def __pos__(self) -> FieldHandle:
        return self._search.require(self)

    def __neg__(self) -> FieldHandle:
        return self._search.prohibit(self)

    def __invert__(self) -> FieldHandle:
        return self._search.prohibit(self)

    def __str__(self) -> str:
        return render(self.field)

    def __repr__(self) -> str:
        return f"FieldHandle(key={self.key})"


class BaseSearch:
    """Lucene query builder for one MusicBrainz entity.

    Subclasses set ``entity`` and ``fields`` and expose one helper method
    per member of ``fields``, named after the member. Helpers accept any
    value :func:`~brainz_query.lucene.terms.make_term` accepts, or a
    zero-argument callable producing one.

    A builder serves exactly one search: create it, call helpers and
    combinators, then call :meth:`build`.
    """

    entity: ClassVar[str]
    fields: ClassVar[type[SearchField]]

    def __init__(self) -> None:
        self._query = Query()

    @classmethod
    def compose(cls, build: Callable[[Any], object]) -> str:
        """Create a builder, pass it to ``build`` and return the query string."""
        search = cls()
        build(search)
        return search.build()

    def add(self, field: SearchField, value: object, *more: object) -> FieldHandle:
        """Register ``field:value`` as a new top-level field.

        Several values produce a multi-term field, ``name:(v1 v2)``.
        """
        if not isinstance(field, self.fields):
            raise UnknownFieldError(self.entity, str(getattr(field, "value", field)))
        terms = tuple(make_term(_produce(value)) for value in (value, *more))
        key = self._query.add(BasicField(field.value, terms))
        logger.debug("%s search: added %s field (key %d)", self.entity, field.name, key)
        return FieldHandle(self, key)

    def missing(self, field: SearchField) -> FieldHandle:
        """Register a field matching entities with no value for ``field``."""
        if not isinstance(field, self.fields):
            raise UnknownFieldError(self.entity, str(getattr(field, "value", field)))
        return FieldHandle(self, self._query.add(BasicField(field.value, ())))

    def field_of(self, handle: FieldHandle) -> Field:
        """Return the field currently registered under ``handle``.

        Raises:
            UnregisteredFieldError: If ``handle`` was consumed or belongs
                to another search.
        """
        if handle.search is not self:
            logger.debug("%s search: foreign handle %r", self.entity, handle)
            raise UnregisteredFieldError(repr(handle), "belongs to a different search")
        if handle.key not in self._query:
            logger.debug("%s search: stale handle %r", self.entity, handle)
            raise UnregisteredFieldError(repr(handle), "is not registered in this search")
        return self._query.get(handle.key)

    def and_(self, left: FieldHandle, right: FieldHandle) -> FieldHandle:
        """Replace ``left`` with ``(left AND right)`` and drop ``right``."""
        return self._combine(and_fields, left, right)

    def or_(self, left: FieldHandle, right: FieldHandle) -> FieldHandle:
        """Replace ``left`` with ``(left OR right)`` and drop ``right``."""
        return self._combine(or_fields, left, right)

    def require(self, handle: FieldHandle) -> FieldHandle:
        """Replace ``handle``'s field with ``+field``."""
        return self._replace(handle, require(self.field_of(handle)))

    def prohibit(self, handle: FieldHandle) -> FieldHandle:
        """Replace ``handle``'s field with ``-field``."""
        return self._replace(handle, prohibit(self.field_of(handle)))

    def _combine(
        self,
        combinator: Callable[[Field, Field], Field],
        left: FieldHandle,
        right: FieldHandle,
    ) -> FieldHandle:
        left_field = self.field_of(left)
        right_field = self.field_of(right)
        if left.key == right.key:
            raise UnregisteredFieldError(repr(right), "cannot be combined with itself")
        self._query.remove(right.key)
        return self._replace(left, combinator(left_field, right_field))

    def _replace(self, handle: FieldHandle, replacement: Field) -> FieldHandle:
        key = self._query.replace(handle.key, replacement)
        logger.debug("%s search: replaced key %d with key %d", self.entity, handle.key, key)
        return FieldHandle(self, key)

    def build(self) -> str:
        """Render the query string for this search."""
        return self._query.render()

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.build()!r})"


def _produce(value: object) -> object:
    return value() if callable(value) else value
