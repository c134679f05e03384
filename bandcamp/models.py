from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import BinaryIO, Protocol, Self

from ._types import BuilderOptions, RequestOptions
from .enums import LoadResultType
from .exceptions import FriendlyError


@dataclass(frozen=True)
class TrackInfo:
    """Metadata common to every track regardless of its source."""

    title: str
    author: str
    length: int
    """Track length in milliseconds."""
    identifier: str
    """Url the track is played from."""
    is_stream: bool
    uri: str
    """Human-facing page url."""
    artwork_url: str | None = None


@dataclass
class Track:
    """Some track found on bandcamp."""

    info: TrackInfo
    source_manager: AudioSourceManager = field(repr=False, compare=False)

    def __str__(self) -> str:
        return f'{self.info.author} - {self.info.title}'

    def stream_url(self) -> str:
        """Fetch the url of the track's audio stream."""
        return self.source_manager.fetch_stream_url(self)


@dataclass
class Playlist:
    """Some album from bandcamp."""

    name: str
    tracks: list[Track] = field(default_factory=list)
    selected_track: Track | None = None
    is_search_result: bool = False

    @property
    def track_count(self) -> int:
        """Album track count."""
        return len(self.tracks)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of resolving one identifier.

    Exactly one of `track`, `playlist` and `exception` is set
    for the corresponding result types, none otherwise.
    """

    type: LoadResultType
    track: Track | None = None
    playlist: Playlist | None = None
    exception: FriendlyError | None = None

    @classmethod
    def not_applicable(cls) -> Self:
        return cls(LoadResultType.NOT_APPLICABLE)

    @classmethod
    def no_matches(cls) -> Self:
        return cls(LoadResultType.NO_MATCHES)

    @classmethod
    def track_loaded(cls, track: Track) -> Self:
        return cls(LoadResultType.TRACK_LOADED, track=track)

    @classmethod
    def playlist_loaded(cls, playlist: Playlist) -> Self:
        return cls(LoadResultType.PLAYLIST_LOADED, playlist=playlist)

    @classmethod
    def load_failed(cls, exception: FriendlyError) -> Self:
        return cls(LoadResultType.LOAD_FAILED, exception=exception)


class AudioSourceManager(Protocol):
    """Capabilities of a source that resolves identifiers into tracks."""

    @property
    def source_name(self) -> str: ...

    def load_item(self, identifier: str) -> LoadResult: ...

    def fetch_stream_url(self, track: Track) -> str: ...

    def is_track_encodable(self, track: Track) -> bool: ...

    def encode_track(self, track: Track, output: BinaryIO) -> None: ...

    def decode_track(self, info: TrackInfo, input: BinaryIO) -> Track: ...

    def shutdown(self) -> None: ...

    def configure_requests(
        self,
        configurator: Callable[[RequestOptions], RequestOptions],
    ) -> None: ...

    def configure_builder(
        self,
        configurator: Callable[[BuilderOptions], None],
    ) -> None: ...
