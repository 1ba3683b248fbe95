"""Tag search."""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class TagField(SearchField):
    DEFAULT = ("", "searches the tag name")
    TAG = ("tag", "(part of) the tag's name")


class TagSearch(BaseSearch):
    entity = "tag"
    fields = TagField

    def default(self, value: Value) -> FieldHandle:
        return self.add(TagField.DEFAULT, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(TagField.TAG, value)
