"""Area search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Area
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class AreaField(SearchField):
    AREA_ID = ("aid", "the area's MBID")
    ALIAS = ("alias", "(part of) any alias attached to the area (diacritics are ignored)")
    AREA = ("area", "(part of) the area's name (diacritics are ignored)")
    AREA_ACCENT = ("areaaccent", "(part of) the area's name (with the specified diacritics)")
    BEGIN_DATE = ("begin", "the area's begin date")
    COMMENT = ("comment", "(part of) the area's disambiguation comment")
    DEFAULT = ("", "searches alias and area")
    END_DATE = ("end", "the area's end date")
    ENDED = ("ended", "true/false: whether the area has ended")
    ISO = ("iso", "an ISO 3166-1, 3166-2 or 3166-3 code attached to the area")
    TAG = ("tag", "(part of) a tag attached to the area")
    TYPE = ("type", "the area's type")


class AreaSearch(BaseSearch):
    entity = "area"
    fields = AreaField

    def area_id(self, value: Value) -> FieldHandle:
        return self.add(AreaField.AREA_ID, value)

    def alias(self, value: Value) -> FieldHandle:
        return self.add(AreaField.ALIAS, value)

    def area(self, value: Value) -> FieldHandle:
        return self.add(AreaField.AREA, value)

    def area_accent(self, value: Value) -> FieldHandle:
        return self.add(AreaField.AREA_ACCENT, value)

    def begin_date(self, value: Value) -> FieldHandle:
        return self.add(AreaField.BEGIN_DATE, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(AreaField.COMMENT, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(AreaField.DEFAULT, value)

    def end_date(self, value: Value) -> FieldHandle:
        return self.add(AreaField.END_DATE, value)

    def ended(self, value: Value) -> FieldHandle:
        return self.add(AreaField.ENDED, value)

    def iso(self, value: Value) -> FieldHandle:
        return self.add(AreaField.ISO, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(AreaField.TAG, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(AreaField.TYPE, value)
