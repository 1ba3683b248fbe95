"""Typed values accepted by the search builders."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_MBID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


@dataclass(frozen=True)
class Mbid:
    """A MusicBrainz identifier.

    An MBID is a 36 character UUID permanently assigned to each entity
    in the MusicBrainz database, e.g. ``0383dadf-2a4e-4d10-a46a-e9e041da8eb3``
    for the artist Queen. MBIDs are rendered into queries verbatim.
    """

    value: str

    @property
    def is_valid(self) -> bool:
        return _MBID_PATTERN.match(self.value) is not None

    def __str__(self) -> str:
        return self.value


class AreaMbid(Mbid):
    pass


class ArtistMbid(Mbid):
    pass


class EventMbid(Mbid):
    pass


class InstrumentMbid(Mbid):
    pass


class LabelMbid(Mbid):
    pass


class PlaceMbid(Mbid):
    pass


class RecordingMbid(Mbid):
    pass


class ReleaseMbid(Mbid):
    pass


class ReleaseGroupMbid(Mbid):
    pass


class SeriesMbid(Mbid):
    pass


class TrackMbid(Mbid):
    pass


class WorkMbid(Mbid):
    pass


class ArtistType(Enum):
    PERSON = "Person"
    GROUP = "Group"
    ORCHESTRA = "Orchestra"
    CHOIR = "Choir"
    CHARACTER = "Character"
    OTHER = "Other"


class ReleaseGroupType(Enum):
    """Primary and secondary release group types.

    See https://musicbrainz.org/doc/Release_Group/Type
    """

    ALBUM = "album"
    SINGLE = "single"
    EP = "ep"
    BROADCAST = "broadcast"
    OTHER = "other"
    COMPILATION = "compilation"
    SOUNDTRACK = "soundtrack"
    SPOKEN_WORD = "spokenword"
    INTERVIEW = "interview"
    AUDIOBOOK = "audiobook"
    AUDIO_DRAMA = "audio drama"
    LIVE = "live"
    REMIX = "remix"
    DJ_MIX = "dj-mix"
    MIXTAPE = "mixtape/street"
    DEMO = "demo"

    @property
    def is_primary(self) -> bool:
        return self in _PRIMARY_TYPES


_PRIMARY_TYPES = frozenset(
    {
        ReleaseGroupType.ALBUM,
        ReleaseGroupType.SINGLE,
        ReleaseGroupType.EP,
        ReleaseGroupType.BROADCAST,
        ReleaseGroupType.OTHER,
    }
)


class ReleaseStatus(Enum):
    OFFICIAL = "official"
    PROMOTION = "promotion"
    BOOTLEG = "bootleg"
    PSEUDO_RELEASE = "pseudo-release"
