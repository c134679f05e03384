import re
from dataclasses import dataclass
from typing import NamedTuple, Self

from .constants import (
    ALBUM_URL_REGEX,
    ROOT_URL_REGEX,
    TRACK_URL_REGEX,
    build_album_url_regex,
    build_root_url_regex,
    build_track_url_regex,
)
from .enums import UrlKind
from .exceptions import NoRequestedDataInHtml


class UrlPatterns(NamedTuple):
    """Track, album and root url regexes built for the same host."""

    track: re.Pattern
    album: re.Pattern
    root: re.Pattern

    @classmethod
    def for_host(cls, host: str) -> Self:
        """Compile all three patterns for some host suffix.

        :param str host: Domain suffix, e.g. `bandcamp.com`.
        """
        return cls(
            track=build_track_url_regex(host),
            album=build_album_url_regex(host),
            root=build_root_url_regex(host),
        )


DEFAULT_PATTERNS = UrlPatterns(
    track=TRACK_URL_REGEX,
    album=ALBUM_URL_REGEX,
    root=ROOT_URL_REGEX,
)


@dataclass(frozen=True)
class ClassifiedUrl:
    """Bandcamp url split into its parts."""

    kind: UrlKind
    root_url: str = ''
    slug: str = ''

    @property
    def url(self) -> str:
        """Canonical page url rebuilt from root url and slug."""
        if self.kind is UrlKind.UNRECOGNIZED:
            return ''
        return f'{self.root_url}/{self.kind}/{self.slug}'


UNRECOGNIZED = ClassifiedUrl(UrlKind.UNRECOGNIZED)


def classify_url(
    url: str,
    patterns: UrlPatterns = DEFAULT_PATTERNS,
) -> ClassifiedUrl:
    """Decide whether url is a bandcamp track, album or neither.

    :param str url: Any string.
    :param UrlPatterns patterns: Patterns to match against.
    :return ClassifiedUrl: Classified url. Never raises.
    """
    if match := patterns.track.fullmatch(url):
        kind = UrlKind.TRACK
    elif match := patterns.album.fullmatch(url):
        kind = UrlKind.ALBUM
    else:
        return UNRECOGNIZED

    # Empty root url makes loading fail in read_root_url
    root_match = patterns.root.fullmatch(url)
    return ClassifiedUrl(
        kind=kind,
        root_url=root_match[1] if root_match else '',
        slug=match[1],
    )


def read_root_url(url: str, patterns: UrlPatterns = DEFAULT_PATTERNS) -> str:
    """Extract band root url (scheme and host) from a track or album url.

    :raises NoRequestedDataInHtml: Url is not a track or album url.
    """
    if not (match := patterns.root.fullmatch(url)):
        raise NoRequestedDataInHtml(
            'Band information not found on the Bandcamp page.'
        )
    return match[1]
