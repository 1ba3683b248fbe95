"""Lookup of search builders by entity name."""

from __future__ import annotations

from brainz_query.exceptions import UnknownEntityError
from brainz_query.search.annotation import AnnotationSearch
from brainz_query.search.area import AreaSearch
from brainz_query.search.artist import ArtistSearch
from brainz_query.search.base import BaseSearch
from brainz_query.search.cdstub import CDStubSearch
from brainz_query.search.event import EventSearch
from brainz_query.search.instrument import InstrumentSearch
from brainz_query.search.label import LabelSearch
from brainz_query.search.place import PlaceSearch
from brainz_query.search.recording import RecordingSearch
from brainz_query.search.release import ReleaseSearch
from brainz_query.search.release_group import ReleaseGroupSearch
from brainz_query.search.series import SeriesSearch
from brainz_query.search.tag import TagSearch
from brainz_query.search.work import WorkSearch

SEARCHES: dict[str, type[BaseSearch]] = {
    search.entity: search
    for search in (
        AnnotationSearch,
        AreaSearch,
        ArtistSearch,
        CDStubSearch,
        EventSearch,
        InstrumentSearch,
        LabelSearch,
        PlaceSearch,
        RecordingSearch,
        ReleaseSearch,
        ReleaseGroupSearch,
        SeriesSearch,
        TagSearch,
        WorkSearch,
    )
}

# Spellings accepted on the command line besides the entity names.
_ALIASES: dict[str, str] = {
    "release_group": "release-group",
    "releasegroup": "release-group",
    "cd-stub": "cdstub",
    "cd_stub": "cdstub",
}


def get_search(name: str) -> type[BaseSearch]:
    """Return the search builder class for an entity name.

    Raises:
        UnknownEntityError: If no builder exists for ``name``.
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return SEARCHES[key]
    except KeyError:
        raise UnknownEntityError(name) from None
