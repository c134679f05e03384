from enum import StrEnum


class UrlKind(StrEnum):
    """Kinds of urls recognized by the classifier."""

    TRACK = 'track'
    ALBUM = 'album'
    UNRECOGNIZED = ''
    """Url is not a bandcamp track or album page."""


class Severity(StrEnum):
    """How bad a resolution failure is."""

    COMMON = 'common'
    """Cause is known and expected, nothing is wrong with the system."""
    SUSPICIOUS = 'suspicious'
    """Page content was not in the expected shape.
    Site might have changed or content was removed.
    """
    FAULT = 'fault'
    """Transport or parsing failure."""


class LoadResultType(StrEnum):
    """Outcome of a single resolution request."""

    NOT_APPLICABLE = 'not_applicable'
    TRACK_LOADED = 'track_loaded'
    PLAYLIST_LOADED = 'playlist_loaded'
    NO_MATCHES = 'no_matches'
    LOAD_FAILED = 'load_failed'
