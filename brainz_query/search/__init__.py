"""Per-entity search builders for the MusicBrainz search API."""

from brainz_query.search.annotation import AnnotationField, AnnotationSearch
from brainz_query.search.area import AreaField, AreaSearch
from brainz_query.search.artist import ArtistField, ArtistSearch
from brainz_query.search.base import BaseSearch, FieldHandle, SearchField
from brainz_query.search.cdstub import CDStubField, CDStubSearch
from brainz_query.search.event import EventField, EventSearch
from brainz_query.search.instrument import InstrumentField, InstrumentSearch
from brainz_query.search.label import LabelField, LabelSearch
from brainz_query.search.place import PlaceField, PlaceSearch
from brainz_query.search.recording import RecordingField, RecordingSearch
from brainz_query.search.registry import SEARCHES, get_search
from brainz_query.search.release import ReleaseField, ReleaseSearch
from brainz_query.search.release_group import ReleaseGroupField, ReleaseGroupSearch
from brainz_query.search.series import SeriesField, SeriesSearch
from brainz_query.search.tag import TagField, TagSearch
from brainz_query.search.work import WorkField, WorkSearch

__all__ = [
    "SEARCHES",
    "AnnotationField",
    "AnnotationSearch",
    "AreaField",
    "AreaSearch",
    "ArtistField",
    "ArtistSearch",
    "BaseSearch",
    "CDStubField",
    "CDStubSearch",
    "EventField",
    "EventSearch",
    "FieldHandle",
    "InstrumentField",
    "InstrumentSearch",
    "LabelField",
    "LabelSearch",
    "PlaceField",
    "PlaceSearch",
    "RecordingField",
    "RecordingSearch",
    "ReleaseField",
    "ReleaseGroupField",
    "ReleaseGroupSearch",
    "ReleaseSearch",
    "SearchField",
    "SeriesField",
    "SeriesSearch",
    "TagField",
    "TagSearch",
    "WorkField",
    "WorkSearch",
    "get_search",
]
