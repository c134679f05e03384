import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import BinaryIO, Self, TypeVar

from . import codec
from ._types import BuilderOptions, RequestOptions
from .constants import BANDCAMP_HOST, LOADING_FAILED_MESSAGE, SOURCE_NAME
from .decorators import log_outputs, log_time, wrap_errors
from .enums import Severity, UrlKind
from .exceptions import FriendlyError, NoRequestedDataInHtml
from .httpclient import HttpInterface, HttpInterfaceManager
from .models import LoadResult, Playlist, Track, TrackInfo
from .parser import (
    parse_album,
    parse_track,
    read_stream_url,
    read_tralbum_json,
)
from .scraper import fetch_page
from .url import DEFAULT_PATTERNS, UrlPatterns, classify_url, read_root_url
from .util import close_with_warnings

logger = logging.getLogger('bandcamp-manager')

T = TypeVar('T')

PageExtractor = Callable[[str, str], T]
"""Builds an item from (page html, page url)."""


class BandcampSourceManager:
    """Source manager that finds bandcamp tracks and albums by url.

    Pages are fetched with sessions borrowed from a shared
    :class:`HttpInterfaceManager`, so one manager can serve
    many threads at once.

    Methods:
    - :meth:`load_item`: resolve any identifier into :class:`LoadResult`;
    - :meth:`load_track`, :meth:`load_album`: resolve a page url directly;
    - :meth:`fetch_stream_url`: find the audio stream of a loaded track;
    - :meth:`encode_track`, :meth:`decode_track`: persistence hooks;
    - :meth:`shutdown`: close http sessions.
    """

    def __init__(
        self,
        http_interface_manager: HttpInterfaceManager | None = None,
        host: str = BANDCAMP_HOST,
    ) -> None:
        """
        :param HttpInterfaceManager | None http_interface_manager:
            Session pool to use. Default is a new pool of cloudscraper
            sessions owned by this manager.
        :param str host: Site domain suffix. Default is `bandcamp.com`.
        """
        self._http_interface_manager = (
            http_interface_manager or HttpInterfaceManager()
        )
        self._patterns = (
            DEFAULT_PATTERNS
            if host == BANDCAMP_HOST
            else UrlPatterns.for_host(host)
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    @property
    def source_name(self) -> str:
        return SOURCE_NAME

    @log_time
    @log_outputs(logger=logger)
    def load_item(self, identifier: str) -> LoadResult:
        """Resolve identifier into a track or an album.

        Never raises on resolution failures, they are reported
        as :attr:`LoadResultType.LOAD_FAILED` results.

        :param str identifier: Track or album page url.
        :return LoadResult: Resolution outcome. NOT_APPLICABLE if
            identifier is not a bandcamp url, nothing is fetched then.
        """
        classified = classify_url(identifier, self._patterns)

        match classified.kind:
            case UrlKind.TRACK:
                loader = self.load_track
            case UrlKind.ALBUM:
                loader = self.load_album
            case _:
                return LoadResult.not_applicable()

        try:
            item = loader(identifier)
        except FriendlyError as e:
            logger.warning(f'Failed to load {identifier}: {e.message}')
            return LoadResult.load_failed(e)

        if item is None:
            return LoadResult.no_matches()
        if isinstance(item, Playlist):
            return LoadResult.playlist_loaded(item)
        return LoadResult.track_loaded(item)

    def load_track(self, track_url: str) -> Track | None:
        """Load track from its page.

        :return Track | None: Track or None if page does not exist.
        :raises FriendlyError: Page could not be loaded or parsed.
        """

        def _extract(html_text: str, url: str) -> Track:
            root_url = read_root_url(url, self._patterns)
            tralbum = read_tralbum_json(html_text, 'Track')
            return parse_track(tralbum, root_url, self)

        return self._extract_from_page(track_url, _extract)

    def load_album(self, album_url: str) -> Playlist | None:
        """Load all album tracks from its page.

        :return Playlist | None: Album or None if page does not exist.
        :raises FriendlyError: Page could not be loaded or parsed.
        """

        def _extract(html_text: str, url: str) -> Playlist:
            root_url = read_root_url(url, self._patterns)
            tralbum = read_tralbum_json(html_text, 'Album')
            return parse_album(tralbum, root_url, self)

        return self._extract_from_page(album_url, _extract)

    def fetch_stream_url(self, track: Track) -> str:
        """Find audio stream url on the track's page.

        :raises FriendlyError: Page does not exist or has no stream.
        """

        def _extract(html_text: str, url: str) -> str:
            tralbum = read_tralbum_json(html_text, 'Track')
            if not (stream_url := read_stream_url(tralbum)):
                raise NoRequestedDataInHtml(
                    'Stream url not found on the Bandcamp page.'
                )
            return stream_url

        stream_url = self._extract_from_page(track.info.identifier, _extract)
        if stream_url is None:
            raise FriendlyError(
                'Track is no longer available on Bandcamp.', Severity.COMMON
            )
        return stream_url

    @wrap_errors(LOADING_FAILED_MESSAGE, Severity.FAULT)
    def _extract_from_page(
        self,
        url: str,
        extractor: PageExtractor[T],
    ) -> T | None:
        with self._http_interface_manager.get_interface() as interface:
            html_text = fetch_page(interface, url)

        if html_text is None:
            return None
        return extractor(html_text, url)

    def is_track_encodable(self, track: Track) -> bool:
        return codec.is_track_encodable(track)

    def encode_track(self, track: Track, output: BinaryIO) -> None:
        codec.encode_track(track, output)

    def decode_track(self, info: TrackInfo, input: BinaryIO) -> Track:
        return codec.decode_track(info, input, self)

    def shutdown(self) -> None:
        """Close http sessions. Failures are logged, never raised."""
        close_with_warnings(self._http_interface_manager)

    def get_http_interface(self) -> AbstractContextManager[HttpInterface]:
        """Borrow an http session, e.g. for playing a track."""
        return self._http_interface_manager.get_interface()

    def configure_requests(
        self,
        configurator: Callable[[RequestOptions], RequestOptions],
    ) -> None:
        self._http_interface_manager.configure_requests(configurator)

    def configure_builder(
        self,
        configurator: Callable[[BuilderOptions], None],
    ) -> None:
        self._http_interface_manager.configure_builder(configurator)
