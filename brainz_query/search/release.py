"""Release search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Release
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class ReleaseField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the release (diacritics are ignored)")
    ARTIST_ID = ("arid", "the MBID of any of the release artists")
    ARTIST = (
        "artist",
        "(part of) the combined credited artist name for the release, including join phrases",
    )
    ARTIST_NAME = ("artistname", "(part of) the name of any of the release artists")
    ASIN = ("asin", "an Amazon ASIN for the release")
    BARCODE = ("barcode", "the barcode for the release")
    CATALOG_NUMBER = ("catno", "any catalog number for this release")
    COMMENT = ("comment", "(part of) the release's disambiguation comment")
    COUNTRY = ("country", "the 2-letter code (ISO 3166-1 alpha-2) for any release country")
    CREDIT_NAME = ("creditname", "(part of) the credited name of any of the release artists")
    DATE = ("date", 'a release date for the release (e.g. "1980-01-22")')
    DEFAULT = ("", "searches the release title")
    DISC_ID_COUNT = ("discids", "the total number of disc IDs attached to all mediums")
    MEDIUM_DISC_COUNT = ("discidsmedium", "the number of disc IDs attached to any one medium")
    FORMAT = ("format", "the format of any medium in the release")
    LABEL_ID = ("laid", "the MBID of any of the release labels")
    LABEL = ("label", "(part of) the name of any of the release labels")
    LANGUAGE = ("lang", "the ISO 639-3 code for the release language")
    MEDIUM_COUNT = ("mediums", "the number of mediums on the release")
    MEDIUM_TRACK_COUNT = ("tracksmedium", "the number of tracks on any one medium")
    PACKAGING = ("packaging", "the packaging of the release")
    PRIMARY_TYPE = ("primarytype", "the primary type of the release group for this release")
    QUALITY = ("quality", "the listed data quality of the release (low, normal, high)")
    RELEASE_ID = ("reid", "the release's MBID")
    RELEASE = ("release", "(part of) the release's title (diacritics are ignored)")
    RELEASE_ACCENT = ("releaseaccent", "(part of) the release's title (with diacritics)")
    RELEASE_GROUP_ID = ("rgid", "the MBID of the release group for this release")
    SCRIPT = ("script", "the ISO 15924 code for the release script")
    SECONDARY_TYPE = ("secondarytype", "any of the secondary types of the release group")
    STATUS = ("status", "the status of the release")
    TAG = ("tag", "(part of) a tag attached to the release")
    TRACK_COUNT = ("tracks", "the total number of tracks on the release")


class ReleaseSearch(BaseSearch):
    entity = "release"
    fields = ReleaseField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.ALIAS, value)

    def artist_id(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.ARTIST_ID, value)

    def artist(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.ARTIST, value)

    def artist_name(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.ARTIST_NAME, value)

    def asin(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.ASIN, value)

    def barcode(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.BARCODE, value)

    def catalog_number(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.CATALOG_NUMBER, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.COMMENT, value)

    def country(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.COUNTRY, value)

    def credit_name(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.CREDIT_NAME, value)

    def date(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.DATE, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.DEFAULT, value)

    def disc_id_count(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.DISC_ID_COUNT, value)

    def medium_disc_count(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.MEDIUM_DISC_COUNT, value)

    def format(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.FORMAT, value)

    def label_id(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.LABEL_ID, value)

    def label(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.LABEL, value)

    def language(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.LANGUAGE, value)

    def medium_count(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.MEDIUM_COUNT, value)

    def medium_track_count(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.MEDIUM_TRACK_COUNT, value)

    def packaging(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.PACKAGING, value)

    def primary_type(self, value: Value) -> FieldHandle:
        """Usually a primary :class:`~brainz_query.values.ReleaseGroupType`."""
        return self.add(ReleaseField.PRIMARY_TYPE, value)

    def quality(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.QUALITY, value)

    def release_id(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.RELEASE_ID, value)

    def release(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.RELEASE, value)

    def release_accent(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.RELEASE_ACCENT, value)

    def release_group_id(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.RELEASE_GROUP_ID, value)

    def script(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.SCRIPT, value)

    def secondary_type(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.SECONDARY_TYPE, value)

    def status(self, value: Value) -> FieldHandle:
        """Usually a :class:`~brainz_query.values.ReleaseStatus`."""
        return self.add(ReleaseField.STATUS, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.TAG, value)

    def track_count(self, value: Value) -> FieldHandle:
        return self.add(ReleaseField.TRACK_COUNT, value)
