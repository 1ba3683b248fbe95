"""Recording search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Recording
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class RecordingField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the recording (diacritics are ignored)")
    ARTIST_ID = ("arid", "the MBID of any of the recording artists")
    ARTIST = ("artist", "(part of) the combined credited artist name for the recording")
    ARTIST_NAME = ("artistname", "(part of) the name of any of the recording artists")
    COMMENT = ("comment", "(part of) the recording's disambiguation comment")
    COUNTRY = ("country", "the 2-letter code (ISO 3166-1 alpha-2) for the country of any release")
    CREDIT_NAME = ("creditname", "(part of) the credited name of any of the recording artists")
    DATE = ("date", "the release date of any release including this recording")
    DEFAULT = ("", "searches the recording title")
    DURATION = ("dur", "the recording duration in milliseconds")
    FIRST_RELEASE_DATE = ("firstreleasedate", "the release date of the earliest release")
    FORMAT = ("format", "the format of any medium including this recording")
    ISRC = ("isrc", "any ISRC associated to the recording")
    TRACK_NUMBER = ("number", "the free-text number of the track on any medium")
    POSITION = ("position", "the position inside its release of any medium including it")
    PRIMARY_TYPE = ("primarytype", "the primary type of any release group including it")
    QUANTIZED_DURATION = ("qdur", "the recording duration, quantized (duration in ms / 2000)")
    RECORDING = ("recording", "(part of) the recording's name (diacritics are ignored)")
    RECORDING_ACCENT = ("recordingaccent", "(part of) the recording's name (with diacritics)")
    RELEASE_ID = ("reid", "the MBID of any release including this recording")
    RELEASE = ("release", "(part of) the title of any release including this recording")
    RELEASE_GROUP_ID = ("rgid", "the MBID of any release group including this recording")
    RECORDING_ID = ("rid", "the recording's MBID")
    SECONDARY_TYPE = ("secondarytype", "any secondary type of any release group including it")
    STATUS = ("status", "the status of any release including this recording")
    TAG = ("tag", "(part of) a tag attached to the recording")
    TRACK_ID = ("tid", "the MBID of a track that is associated with the recording")
    TRACK_POSITION = ("tnum", "the position of the track on any medium including it")
    TRACK_COUNT = ("tracks", "the number of tracks on any medium including this recording")
    RELEASE_TRACK_COUNT = (
        "tracksrelease",
        "the number of tracks on any release (as a whole) including this recording",
    )
    VIDEO = ("video", "true to only show video recordings")


class RecordingSearch(BaseSearch):
    entity = "recording"
    fields = RecordingField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.ALIAS, value)

    def artist_id(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.ARTIST_ID, value)

    def artist(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.ARTIST, value)

    def artist_name(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.ARTIST_NAME, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.COMMENT, value)

    def country(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.COUNTRY, value)

    def credit_name(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.CREDIT_NAME, value)

    def date(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.DATE, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.DEFAULT, value)

    def duration(self, value: Value) -> FieldHandle:
        """Duration in milliseconds, or a range of milliseconds."""
        return self.add(RecordingField.DURATION, value)

    def first_release_date(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.FIRST_RELEASE_DATE, value)

    def format(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.FORMAT, value)

    def isrc(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.ISRC, value)

    def track_number(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.TRACK_NUMBER, value)

    def position(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.POSITION, value)

    def primary_type(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.PRIMARY_TYPE, value)

    def quantized_duration(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.QUANTIZED_DURATION, value)

    def recording(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.RECORDING, value)

    def recording_accent(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.RECORDING_ACCENT, value)

    def release_id(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.RELEASE_ID, value)

    def release(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.RELEASE, value)

    def release_group_id(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.RELEASE_GROUP_ID, value)

    def recording_id(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.RECORDING_ID, value)

    def secondary_type(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.SECONDARY_TYPE, value)

    def status(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.STATUS, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.TAG, value)

    def track_id(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.TRACK_ID, value)

    def track_position(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.TRACK_POSITION, value)

    def track_count(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.TRACK_COUNT, value)

    def release_track_count(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.RELEASE_TRACK_COUNT, value)

    def video(self, value: Value) -> FieldHandle:
        return self.add(RecordingField.VIDEO, value)
