"""Hooks used to persist tracks without their original page.

Bandcamp tracks carry nothing besides common track metadata,
so nothing is written and a track is rebuilt from metadata alone.
"""

from typing import BinaryIO

from .models import AudioSourceManager, Track, TrackInfo


def is_track_encodable(track: Track) -> bool:
    return True


def encode_track(track: Track, output: BinaryIO) -> None:
    """Write source specific track data. Bandcamp has none."""


def decode_track(
    info: TrackInfo,
    input: BinaryIO,
    source_manager: AudioSourceManager,
) -> Track:
    """Rebuild track from its common metadata.

    :param TrackInfo info: Previously encoded metadata.
    :param BinaryIO input: Source specific data. Nothing is read from it.
    :param AudioSourceManager source_manager: Manager owning the track.
    """
    return Track(info=info, source_manager=source_manager)
