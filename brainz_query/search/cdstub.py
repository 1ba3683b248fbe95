"""CD stub search."""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class CDStubField(SearchField):
    ADDED = ("added", "the date the CD stub was added (e.g. \"2020-01-22\")")
    ARTIST = ("artist", "(part of) the artist name set on the CD stub")
    BARCODE = ("barcode", "the barcode set on the CD stub")
    COMMENT = ("comment", "(part of) the comment set on the CD stub")
    DEFAULT = ("", "searches artist and title")
    DISC_ID = ("discid", "the CD stub's disc ID")
    TITLE = ("title", "(part of) the release title set on the CD stub")
    TRACK_COUNT = ("tracks", "the number of tracks on the CD stub")


class CDStubSearch(BaseSearch):
    entity = "cdstub"
    fields = CDStubField

    def added(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.ADDED, value)

    def artist(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.ARTIST, value)

    def barcode(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.BARCODE, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.COMMENT, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.DEFAULT, value)

    def disc_id(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.DISC_ID, value)

    def title(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.TITLE, value)

    def track_count(self, value: Value) -> FieldHandle:
        return self.add(CDStubField.TRACK_COUNT, value)
