"""Label search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Label
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class LabelField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the label (diacritics are ignored)")
    AREA = ("area", "(part of) the name of the label's main associated area")
    BEGIN_DATE = ("begin", "the label's begin date")
    LABEL_CODE = ("code", "the label code for the label (only the numbers, without \"LC\")")
    COMMENT = ("comment", "(part of) the label's disambiguation comment")
    COUNTRY = ("country", "the 2-letter code (ISO 3166-1 alpha-2) for the label's area")
    DEFAULT = ("", "searches alias and label")
    END_DATE = ("end", "the label's end date")
    ENDED = ("ended", "true/false: whether the label has ended")
    IPI = ("ipi", "an IPI code associated with the label")
    ISNI = ("isni", "an ISNI code associated with the label")
    LABEL = ("label", "(part of) the label's name (diacritics are ignored)")
    LABEL_ACCENT = ("labelaccent", "(part of) the label's name (with the specified diacritics)")
    LABEL_ID = ("laid", "the label's MBID")
    RELEASE_COUNT = ("release_count", "the amount of releases related to the label")
    TAG = ("tag", "(part of) a tag attached to the label")
    TYPE = ("type", "the label's type")


class LabelSearch(BaseSearch):
    entity = "label"
    fields = LabelField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(LabelField.ALIAS, value)

    def area(self, value: Value) -> FieldHandle:
        return self.add(LabelField.AREA, value)

    def begin_date(self, value: Value) -> FieldHandle:
        return self.add(LabelField.BEGIN_DATE, value)

    def label_code(self, value: Value) -> FieldHandle:
        return self.add(LabelField.LABEL_CODE, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(LabelField.COMMENT, value)

    def country(self, value: Value) -> FieldHandle:
        return self.add(LabelField.COUNTRY, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(LabelField.DEFAULT, value)

    def end_date(self, value: Value) -> FieldHandle:
        return self.add(LabelField.END_DATE, value)

    def ended(self, value: Value) -> FieldHandle:
        return self.add(LabelField.ENDED, value)

    def ipi(self, value: Value) -> FieldHandle:
        return self.add(LabelField.IPI, value)

    def isni(self, value: Value) -> FieldHandle:
        return self.add(LabelField.ISNI, value)

    def label(self, value: Value) -> FieldHandle:
        return self.add(LabelField.LABEL, value)

    def label_accent(self, value: Value) -> FieldHandle:
        return self.add(LabelField.LABEL_ACCENT, value)

    def label_id(self, value: Value) -> FieldHandle:
        return self.add(LabelField.LABEL_ID, value)

    def release_count(self, value: Value) -> FieldHandle:
        return self.add(LabelField.RELEASE_COUNT, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(LabelField.TAG, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(LabelField.TYPE, value)
