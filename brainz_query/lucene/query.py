"""Ordered container of the top-level fields of one search."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator

from brainz_query.lucene.ast_nodes import Field
from brainz_query.lucene.fields import field
from brainz_query.lucene.render import render_fields


class Query:
    """An arena of top-level fields keyed by integer handles.

    Keys are never reused. :meth:`replace` keeps the position of the
    replaced entry but hands out a new key, so a stale key can never
    address a field that was consumed by a combinator.
    """

    def __init__(self, fields: Iterable[Field] = ()) -> None:
        self._fields: dict[int, Field] = {}
        self._keys = itertools.count(1)
        for item in fields:
            self.add(item)

    @classmethod
    def of(cls, *pairs: tuple[str, object]) -> Query:
        """Build a query from ``(field name, value)`` pairs."""
        return cls(field(name, value) for name, value in pairs)

    def add(self, item: Field) -> int:
        key = next(self._keys)
        self._fields[key] = item
        return key

    def remove(self, key: int) -> bool:
        return self._fields.pop(key, None) is not None

    def replace(self, key: int, item: Field) -> int:
        """Replace the entry at ``key`` in place, or append if ``key`` is absent.

        Returns:
            The key of the new entry.
        """
        if key not in self._fields:
            return self.add(item)
        new_key = next(self._keys)
        self._fields = {
            (new_key if existing == key else existing): (item if existing == key else value)
            for existing, value in self._fields.items()
        }
        return new_key

    def get(self, key: int) -> Field:
        return self._fields[key]

    def keys(self) -> list[int]:
        return list(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[Field]:
        return iter(list(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    def render(self) -> str:
        return render_fields(self._fields.values())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Query({self.render()!r})"
