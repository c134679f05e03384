import re

BANDCAMP_HOST = 'bandcamp.com'
"""Bandcamp domain suffix shared by every artist subdomain."""

SOURCE_NAME = 'bandcamp'
"""Name under which the source manager registers itself."""

ARTWORK_URL_FORMAT = 'https://f4.bcbits.com/img/a{art_id}_9.jpg'
"""Template for album art urls. Art id must be padded beforehand."""
ARTWORK_ID_WIDTH = 10
"""Art ids shorter than this are left-padded with zeros."""

TRALBUM_ATTRIBUTE_START = 'data-tralbum="'
TRALBUM_ATTRIBUTE_END = '"'
ESCAPED_QUOTE = '&quot;'

STREAM_FORMAT = 'mp3-128'
"""Key of the stream url in track's `file` object."""

LOADING_FAILED_MESSAGE = 'Loading information for a Bandcamp track failed.'

REQUEST_TIMEOUT = 10
"""Default timeout in seconds for every request to bandcamp."""

MAX_CONCURRENT_REQUESTS = 5
"""Maximum count of idle sessions kept by the http interface manager."""

DEFAULT_SCRAPER_OPTIONS = {
    'browser': 'chrome',
    'delay': 5,
}
"""Keyword arguments passed to `cloudscraper.create_scraper`."""

_SLUG_PATTERN = r'([a-zA-Z0-9_-]+)'
_QUERY_PATTERN = r'/?(?:\?.*|)'


def _site_pattern(host: str) -> str:
    return r'(?i:https?)://(?:[a-zA-Z0-9-]+\.|)' + re.escape(host)


def build_track_url_regex(host: str = BANDCAMP_HOST) -> re.Pattern:
    """Regex matching track page urls and capturing the track slug."""
    return re.compile(
        rf'{_site_pattern(host)}/track/{_SLUG_PATTERN}{_QUERY_PATTERN}'
    )


def build_album_url_regex(host: str = BANDCAMP_HOST) -> re.Pattern:
    """Regex matching album page urls and capturing the album slug."""
    return re.compile(
        rf'{_site_pattern(host)}/album/{_SLUG_PATTERN}{_QUERY_PATTERN}'
    )


def build_root_url_regex(host: str = BANDCAMP_HOST) -> re.Pattern:
    """Regex capturing (root url, page kind, slug) from a page url."""
    return re.compile(
        rf'({_site_pattern(host)})/(track|album)/{_SLUG_PATTERN}'
        rf'{_QUERY_PATTERN}'
    )


TRACK_URL_REGEX = build_track_url_regex()
"""Regex to check if url is a bandcamp track page."""
ALBUM_URL_REGEX = build_album_url_regex()
"""Regex to check if url is a bandcamp album page."""
ROOT_URL_REGEX = build_root_url_regex()
"""
Regex to extract band root url (scheme and host),
page kind and slug from a track or album url.
"""
