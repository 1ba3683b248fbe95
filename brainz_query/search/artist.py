"""Artist search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Artist
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class ArtistField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the artist (diacritics are ignored)")
    PRIMARY_ALIAS = (
        "primary_alias",
        "(part of) any primary alias attached to the artist (diacritics are ignored)",
    )
    AREA = ("area", "(part of) the name of the artist's main associated area")
    ARTIST_ID = ("arid", "the artist's MBID")
    ARTIST = ("artist", "(part of) the artist's name (diacritics are ignored)")
    ARTIST_ACCENT = ("artistaccent", "(part of) the artist's name (with accented characters)")
    BEGIN_DATE = ("begin", 'the artist\'s begin date (e.g. "1980-01-22")')
    BEGIN_AREA = ("beginarea", "(part of) the name of the artist's begin area")
    COMMENT = ("comment", "(part of) the artist's disambiguation comment")
    COUNTRY = (
        "country",
        "the 2-letter code (ISO 3166-1 alpha-2) for the artist's main associated country",
    )
    DEFAULT = ("", "searches alias, artist and sortname")
    END_DATE = ("end", 'the artist\'s end date (e.g. "1980-01-22")')
    END_AREA = ("endarea", "(part of) the name of the artist's end area")
    ENDED = ("ended", "true/false: whether the artist has ended (is dissolved/deceased)")
    GENDER = ("gender", "the artist's gender (male, female, other or not applicable)")
    IPI = ("ipi", "an IPI code associated with the artist")
    ISNI = ("isni", "an ISNI code associated with the artist")
    SORT_NAME = ("sortname", "(part of) the artist's sort name")
    TAG = ("tag", "(part of) a tag attached to the artist")
    TYPE = ("type", "the artist's type (Person, Group, ...)")


class ArtistSearch(BaseSearch):
    entity = "artist"
    fields = ArtistField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.ALIAS, value)

    def primary_alias(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.PRIMARY_ALIAS, value)

    def area(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.AREA, value)

    def artist_id(self, value: Value) -> FieldHandle:
        """The artist's MBID, e.g. ``ArtistMbid("5b11f4ce-...")``."""
        return self.add(ArtistField.ARTIST_ID, value)

    def artist(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.ARTIST, value)

    def artist_accent(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.ARTIST_ACCENT, value)

    def begin_date(self, value: Value) -> FieldHandle:
        """Begin date as a ``date``, a year ``int``, or a range term."""
        return self.add(ArtistField.BEGIN_DATE, value)

    def begin_area(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.BEGIN_AREA, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.COMMENT, value)

    def country(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.COUNTRY, value)

    def default(self, value: Value) -> FieldHandle:
        """Unscoped search over alias, artist and sort name."""
        return self.add(ArtistField.DEFAULT, value)

    def end_date(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.END_DATE, value)

    def end_area(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.END_AREA, value)

    def ended(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.ENDED, value)

    def gender(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.GENDER, value)

    def ipi(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.IPI, value)

    def isni(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.ISNI, value)

    def sort_name(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.SORT_NAME, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(ArtistField.TAG, value)

    def type(self, value: Value) -> FieldHandle:
        """The artist's type, usually an :class:`~brainz_query.values.ArtistType`."""
        return self.add(ArtistField.TYPE, value)
