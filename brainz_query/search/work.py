"""Work search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Work
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class WorkField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the work (diacritics are ignored)")
    ARTIST_ID = ("arid", "the MBID of an artist related to the work (e.g. a composer)")
    ARTIST = ("artist", "(part of) the name of an artist related to the work")
    COMMENT = ("comment", "(part of) the work's disambiguation comment")
    DEFAULT = ("", "searches alias and work")
    ISWC = ("iswc", "any ISWC associated to the work")
    LANGUAGE = ("lang", "the ISO 639-3 code for any of the languages of the work's lyrics")
    RECORDING = ("recording", "(part of) the title of a recording related to the work")
    RECORDING_COUNT = ("recording_count", "the number of recordings related to the work")
    RECORDING_ID = ("rid", "the MBID of a recording related to the work")
    TAG = ("tag", "(part of) a tag attached to the work")
    TYPE = ("type", "the work's type")
    WORK_ID = ("wid", "the work's MBID")
    WORK = ("work", "(part of) the work's title (diacritics are ignored)")
    WORK_ACCENT = ("workaccent", "(part of) the work's title (with the specified diacritics)")


class WorkSearch(BaseSearch):
    entity = "work"
    fields = WorkField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(WorkField.ALIAS, value)

    def artist_id(self, value: Value) -> FieldHandle:
        return self.add(WorkField.ARTIST_ID, value)

    def artist(self, value: Value) -> FieldHandle:
        return self.add(WorkField.ARTIST, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(WorkField.COMMENT, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(WorkField.DEFAULT, value)

    def iswc(self, value: Value) -> FieldHandle:
        return self.add(WorkField.ISWC, value)

    def language(self, value: Value) -> FieldHandle:
        return self.add(WorkField.LANGUAGE, value)

    def recording(self, value: Value) -> FieldHandle:
        return self.add(WorkField.RECORDING, value)

    def recording_count(self, value: Value) -> FieldHandle:
        return self.add(WorkField.RECORDING_COUNT, value)

    def recording_id(self, value: Value) -> FieldHandle:
        return self.add(WorkField.RECORDING_ID, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(WorkField.TAG, value)

    def type(self, value: Value) -> FieldHandle:
        return self.add(WorkField.TYPE, value)

    def work_id(self, value: Value) -> FieldHandle:
        return self.add(WorkField.WORK_ID, value)

    def work(self, value: Value) -> FieldHandle:
        return self.add(WorkField.WORK, value)

    def work_accent(self, value: Value) -> FieldHandle:
        return self.add(WorkField.WORK_ACCENT, value)
