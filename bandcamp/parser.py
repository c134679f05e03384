import json
import logging
from collections.abc import Mapping

from ._types import TralbumJson
from .constants import (
    ESCAPED_QUOTE,
    STREAM_FORMAT,
    TRALBUM_ATTRIBUTE_END,
    TRALBUM_ATTRIBUTE_START,
)
from .exceptions import NoRequestedDataInHtml
from .models import AudioSourceManager, Playlist, Track, TrackInfo
from .util import (
    build_artwork_url,
    extract_between,
    get_array,
    get_number,
    get_object,
    get_text,
    require_text,
)

logger = logging.getLogger('bandcamp-parser')


def read_tralbum_json(html_text: str, what: str = 'Track') -> TralbumJson:
    """Extract json embedded in `data-tralbum` attribute of the page.

    Only `&quot;` is unescaped, the rest of the payload is left as is.

    :param str html_text: Page html.
    :param str what: What the page describes, used in error message.
    :return TralbumJson: Parsed payload.
    :raises NoRequestedDataInHtml: Page has no `data-tralbum` attribute.
    :raises json.JSONDecodeError: Payload is not valid json.
    """
    raw_json = extract_between(
        html_text, TRALBUM_ATTRIBUTE_START, TRALBUM_ATTRIBUTE_END
    )
    if raw_json is None:
        raise NoRequestedDataInHtml(
            f'{what} information not found on the Bandcamp page.'
        )

    return json.loads(raw_json.replace(ESCAPED_QUOTE, '"'))


def extract_artwork_url(tralbum: TralbumJson) -> str | None:
    return build_artwork_url(get_text(tralbum, 'art_id'))


def parse_track_info(
    track_json: Mapping,
    root_url: str,
    artist: str,
    artwork_url: str | None,
) -> TrackInfo:
    """Build track metadata from one `trackinfo` entry.

    :param Mapping track_json: Entry of `trackinfo` list.
    :param str root_url: Band root url, prefix of entry's relative link.
    :param str artist: Artist of the page.
    :param str | None artwork_url: Artwork shared by all page tracks.
    :raises NoRequestedDataInHtml: Entry has no title or link.
    """
    page_url = root_url + require_text(track_json, 'title_link', 'Track link')
    duration = get_number(track_json, 'duration') or 0.0

    return TrackInfo(
        title=require_text(track_json, 'title', 'Track title'),
        author=artist,
        length=int(duration * 1000),
        identifier=page_url,
        is_stream=True,
        uri=page_url,
        artwork_url=artwork_url,
    )


def parse_track(
    tralbum: TralbumJson,
    root_url: str,
    source_manager: AudioSourceManager,
) -> Track:
    """Build the track of a track page."""
    artist = get_text(tralbum, 'artist') or ''
    tracks_json = get_array(tralbum, 'trackinfo') or []
    if not tracks_json:
        raise NoRequestedDataInHtml(
            'Track information not found on the Bandcamp page.'
        )

    info = parse_track_info(
        tracks_json[0], root_url, artist, extract_artwork_url(tralbum)
    )
    return Track(info=info, source_manager=source_manager)


def parse_album(
    tralbum: TralbumJson,
    root_url: str,
    source_manager: AudioSourceManager,
) -> Playlist:
    """Build the playlist of an album page.

    :raises NoRequestedDataInHtml: Page has no artist.
    """
    artist = require_text(tralbum, 'artist', 'Artist')
    artwork_url = extract_artwork_url(tralbum)

    tracks = [
        Track(
            info=parse_track_info(track_json, root_url, artist, artwork_url),
            source_manager=source_manager,
        )
        for track_json in get_array(tralbum, 'trackinfo') or []
    ]
    if not tracks:
        logger.warning(f'Album has no tracks: {root_url}')

    album_name = get_text(get_object(tralbum, 'current'), 'title') or ''
    return Playlist(name=album_name, tracks=tracks)


def read_stream_url(tralbum: TralbumJson) -> str | None:
    """Read audio stream url of the first track of the page."""
    tracks_json = get_array(tralbum, 'trackinfo') or []
    if not tracks_json:
        return None

    return get_text(get_object(tracks_json[0], 'file'), STREAM_FORMAT)
