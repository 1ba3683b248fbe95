"""Instrument search."""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class InstrumentField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the instrument (diacritics are ignored)")
    COMMENT = ("comment", "(part of) the instrument's disambiguation comment")
    DEFAULT = ("", "searches alias, description and instrument")
    DESCRIPTION = ("description", "(part of) the description of the instrument")
    INSTRUMENT_ID = ("iid", "the instrument's MBID")
    INSTRUMENT = ("instrument", "(part of) the instrument's name (diacritics are ignored)")
    INSTRUMENT_ACCENT = (
        "instrumentaccent",
        "(part of) the instrument's name (with the specified diacritics)",
    )
    TAG = ("tag", "(part of) a tag attached to the instrument")
    TYPE = ("type", "the instrument's type")


class InstrumentSearch(BaseSearch):
    entity = "instrument"
    fields = InstrumentField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.ALIAS, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.COMMENT, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.DEFAULT, value)

    def description(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.DESCRIPTION, value)

    def instrument_id(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.INSTRUMENT_ID, value)

    def instrument(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.INSTRUMENT, value)

    def instrument_accent(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.INSTRUMENT_ACCENT, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.TAG, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(InstrumentField.TYPE, value)
