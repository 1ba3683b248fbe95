"""Release group search.

See https://musicbrainz.org/doc/Indexed_Search_Syntax#Release_Group
"""

from __future__ import annotations

from brainz_query.search.base import BaseSearch, FieldHandle, SearchField, Value


class ReleaseGroupField(SearchField):
    ALIAS = ("alias", "(part of) any alias attached to the release group")
    ARTIST_ID = ("arid", "the MBID of any of the release group artists")
    ARTIST = ("artist", "(part of) the combined credited artist name for the release group")
    ARTIST_NAME = ("artistname", "(part of) the name of any of the release group artists")
    COMMENT = ("comment", "(part of) the release group's disambiguation comment")
    CREDIT_NAME = ("creditname", "(part of) the credited name of any release group artist")
    DEFAULT = ("", "searches the release group title")
    FIRST_RELEASE_DATE = (
        "firstreleasedate",
        'the release date of the earliest release in this release group (e.g. "1980-01-22")',
    )
    PRIMARY_TYPE = ("primarytype", "the primary type of the release group")
    RELEASE_ID = ("reid", "the MBID of any of the releases in the release group")
    RELEASE = ("release", "(part of) the title of any of the releases in the release group")
    RELEASE_GROUP = ("releasegroup", "(part of) the release group's title (diacritics ignored)")
    RELEASE_GROUP_ACCENT = (
        "releasegroupaccent",
        "(part of) the release group's title (with the specified diacritics)",
    )
    RELEASE_COUNT = ("releases", "the number of releases in the release group")
    RELEASE_GROUP_ID = ("rgid", "the release group's MBID")
    SECONDARY_TYPE = ("secondarytype", "any of the secondary types of the release group")
    STATUS = ("status", "the status of any of the releases in the release group")
    TAG = ("tag", "(part of) a tag attached to the release group")


class ReleaseGroupSearch(BaseSearch):
    entity = "release-group"
    fields = ReleaseGroupField

    def alias(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.ALIAS, value)

    def artist_id(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.ARTIST_ID, value)

    def artist(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.ARTIST, value)

    def artist_name(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.ARTIST_NAME, value)

    def comment(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.COMMENT, value)

    def credit_name(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.CREDIT_NAME, value)

    def default(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.DEFAULT, value)

    def first_release_date(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.FIRST_RELEASE_DATE, value)

    def primary_type(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.PRIMARY_TYPE, value)

    def release_id(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.RELEASE_ID, value)

    def release(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.RELEASE, value)

    def release_group(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.RELEASE_GROUP, value)

    def release_group_accent(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.RELEASE_GROUP_ACCENT, value)

    def release_count(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.RELEASE_COUNT, value)

    def release_group_id(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.RELEASE_GROUP_ID, value)

    def secondary_type(self, value: Value) -> FieldHandle:
        """Any secondary type, e.g. ``ReleaseGroupType.COMPILATION``.

        Exclude several types at once with
        ``-(search.secondary_type(a) | search.secondary_type(b))``.
        """
        return self.add(ReleaseGroupField.SECONDARY_TYPE, value)

    def status(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.STATUS, value)

    def tag(self, value: Value) -> FieldHandle:
        return self.add(ReleaseGroupField.TAG, value)
