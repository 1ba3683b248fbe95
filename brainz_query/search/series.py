"""Series search."""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class SeriesField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the series (diacritics are ignored)")
    COMMENT = ("comment", "(part of) the series' disambiguation comment")
    DEFAULT = ("", "searches alias and series")
    SERIES = ("series", "(part of) the series' name (diacritics are ignored)")
    SERIES_ACCENT = ("seriesaccent", "(part of) the series' name (with the specified diacritics)")
    SERIES_ID = ("sid", "the series' MBID")
    TAG = ("tag", "(part of) a tag attached to the series")
    TYPE = ("type", "the series' type")


class SeriesSearch(BaseSearch):
    entity = "series"
    fields = SeriesField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.ALIAS, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.COMMENT, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.DEFAULT, value)

    def series(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.SERIES, value)

    def series_accent(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.SERIES_ACCENT, value)

    def series_id(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.SERIES_ID, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.TAG, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(SeriesField.TYPE, value)
