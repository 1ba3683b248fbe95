"""Event search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Event
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class EventField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the event (diacritics are ignored)")
    AREA_ID = ("aid", "the MBID of an area related to the event")
    AREA = ("area", "(part of) the name of an area related to the event")
    ARTIST_ID = ("arid", "the MBID of an artist related to the event")
    ARTIST = ("artist", "(part of) the name of an artist related to the event")
    BEGIN_DATE = ("begin", "the event's begin date")
    COMMENT = ("comment", "(part of) the event's disambiguation comment")
    DEFAULT = ("", "searches alias and event")
    END_DATE = ("end", "the event's end date")
    ENDED = ("ended", "true/false: whether the event has ended")
    EVENT_ID = ("eid", "the event's MBID")
    EVENT = ("event", "(part of) the event's name (diacritics are ignored)")
    EVENT_ACCENT = ("eventaccent", "(part of) the event's name (with the specified diacritics)")
    PLACE_ID = ("pid", "the MBID of a place related to the event")
    PLACE = ("place", "(part of) the name of a place related to the event")
    TAG = ("tag", "(part of) a tag attached to the event")
    TYPE = ("type", "the event's type")


class EventSearch(BaseSearch):
    entity = "event"
    fields = EventField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(EventField.ALIAS, value)

    def area_id(self, value: Value) -> FieldHandle:
        return self.add(EventField.AREA_ID, value)

    def area(self, value: Value) -> FieldHandle:
        return self.add(EventField.AREA, value)

    def artist_id(self, value: Value) -> FieldHandle:
        return self.add(EventField.ARTIST_ID, value)

    def artist(self, value: Value) -> FieldHandle:
        return self.add(EventField.ARTIST, value)

    def begin_date(self, value: Value) -> FieldHandle:
        return self.add(EventField.BEGIN_DATE, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(EventField.COMMENT, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(EventField.DEFAULT, value)

    def end_date(self, value: Value) -> FieldHandle:
        return self.add(EventField.END_DATE, value)

    def ended(self, value: Value) -> FieldHandle:
        return self.add(EventField.ENDED, value)

    def event_id(self, value: Value) -> FieldHandle:
        return self.add(EventField.EVENT_ID, value)

    def event(self, value: Value) -> FieldHandle:
        return self.add(EventField.EVENT, value)

    def event_accent(self, value: Value) -> FieldHandle:
        return self.add(EventField.EVENT_ACCENT, value)

    def place_id(self, value: Value) -> FieldHandle:
        return self.add(EventField.PLACE_ID, value)

    def place(self, value: Value) -> FieldHandle:
        return self.add(EventField.PLACE, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(EventField.TAG, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(EventField.TYPE, value)
