import io

from bandcamp import TrackInfo

from .conftest import TRACK_URL, tralbum_html


def test_encode_writes_nothing(source_manager, session_factory, track_payload):
    session_factory.pages[TRACK_URL] = (200, tralbum_html(track_payload))
    track = source_manager.load_item(TRACK_URL).track
    output = io.BytesIO()

    assert source_manager.is_track_encodable(track)
    source_manager.encode_track(track, output)

    assert output.getvalue() == b''


def test_decode_rebuilds_track(source_manager, session_factory, track_payload):
    session_factory.pages[TRACK_URL] = (200, tralbum_html(track_payload))
    track = source_manager.load_item(TRACK_URL).track
    output = io.BytesIO()
    source_manager.encode_track(track, output)

    decoded = source_manager.decode_track(
        track.info, io.BytesIO(output.getvalue())
    )

    assert decoded == track
    assert decoded.info == track.info
    assert decoded.source_manager is source_manager


def test_decode_needs_no_network(source_manager, session_factory):
    info = TrackInfo(
        title='T',
        author='A',
        length=1000,
        identifier='https://a.bandcamp.com/track/t',
        is_stream=True,
        uri='https://a.bandcamp.com/track/t',
    )

    track = source_manager.decode_track(info, io.BytesIO())

    assert track.info is info
    assert session_factory.sessions == []
