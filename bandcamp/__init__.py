"""Bandcamp page resolver.

Resolves bandcamp track and album page urls into track metadata
without downloading any audio.
"""

from .constants import (
    ALBUM_URL_REGEX,
    BANDCAMP_HOST,
    ROOT_URL_REGEX,
    SOURCE_NAME,
    TRACK_URL_REGEX,
)
from .enums import (
    LoadResultType,
    Severity,
    UrlKind,
)
from .exceptions import (
    BandcampError,
    FriendlyError,
    InvalidStatusCode,
    NoRequestedDataInHtml,
)
from .httpclient import (
    HttpInterface,
    HttpInterfaceManager,
)
from .manager import BandcampSourceManager
from .models import (
    AudioSourceManager,
    LoadResult,
    Playlist,
    Track,
    TrackInfo,
)
from .url import (
    ClassifiedUrl,
    classify_url,
)
from .util import build_artwork_url

__all__ = [
    'ALBUM_URL_REGEX',
    'BANDCAMP_HOST',
    'ROOT_URL_REGEX',
    'SOURCE_NAME',
    'TRACK_URL_REGEX',
    'AudioSourceManager',
    'BandcampError',
    'BandcampSourceManager',
    'ClassifiedUrl',
    'FriendlyError',
    'HttpInterface',
    'HttpInterfaceManager',
    'InvalidStatusCode',
    'LoadResult',
    'LoadResultType',
    'NoRequestedDataInHtml',
    'Playlist',
    'Severity',
    'Track',
    'TrackInfo',
    'UrlKind',
    'build_artwork_url',
    'classify_url',
]
