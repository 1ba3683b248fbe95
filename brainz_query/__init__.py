"""brainz-query: Lucene query builder for the MusicBrainz search API."""

__version__ = "0.1.0"
