"""Place search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Place
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class PlaceField(SearchField):
    ADDRESS = ("address", "(part of) the physical address for this place")
    ALIAS = ("alias", "(part of) any alias attached to the place (diacritics are ignored)")
    AREA = ("area", "(part of) the name of the area the place is in")
    BEGIN_DATE = ("begin", "the place's begin date")
    COMMENT = ("comment", "(part of) the place's disambiguation comment")
    DEFAULT = ("", "searches address, alias, area and place")
    END_DATE = ("end", "the place's end date")
    ENDED = ("ended", "true/false: whether the place has ended")
    LATITUDE = ("lat", "the place's latitude")
    LONGITUDE = ("long", "the place's longitude")
    PLACE = ("place", "(part of) the place's name (diacritics are ignored)")
    PLACE_ACCENT = ("placeaccent", "(part of) the place's name (with the specified diacritics)")
    PLACE_ID = ("pid", "the place's MBID")
    TYPE = ("type", "the place's type")


class PlaceSearch(BaseSearch):
    entity = "place"
    fields = PlaceField

    def address(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.ADDRESS, value)

    def alias(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.ALIAS, value)

    def area(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.AREA, value)

    def begin_date(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.BEGIN_DATE, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.COMMENT, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.DEFAULT, value)

    def end_date(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.END_DATE, value)

    def ended(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.ENDED, value)

    def latitude(self, value: Value) -> FieldHandle:
        """Latitude in degrees. Negative values are quoted."""
        return self.add(PlaceField.LATITUDE, value)

    def longitude(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.LONGITUDE, value)

    def place(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.PLACE, value)

    def place_accent(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.PLACE_ACCENT, value)

    def place_id(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.PLACE_ID, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(PlaceField.TYPE, value)
