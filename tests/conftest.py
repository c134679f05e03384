import json

import pytest

from bandcamp import BandcampSourceManager, HttpInterfaceManager

TRACK_URL = 'https://artist.bandcamp.com/track/some-track'
ALBUM_URL = 'https://artist.bandcamp.com/album/some-album'
ROOT_URL = 'https://artist.bandcamp.com'


def tralbum_html(payload: dict) -> str:
    """Page html with payload embedded the way bandcamp does it."""
    escaped = json.dumps(payload).replace('"', '&quot;')
    return (
        '<html><body>'
        '<script data-band="{}"></script>'
        '<div id="pagedata" data-tralbum="' + escaped + '"></div>'
        '</body></html>'
    )


class FakeResponse:
    def __init__(self, status_code: int, text: str | bytes = '') -> None:
        self.status_code = status_code
        self.content = (
            text if isinstance(text, bytes) else text.encode('utf-8')
        )
        self.closed = False

    def __enter__(self) -> 'FakeResponse':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Session answering with prepared pages instead of sending requests."""

    def __init__(self, pages: dict, **builder_options) -> None:
        self.pages = pages
        self.builder_options = builder_options
        self.requests: list[tuple[str, dict]] = []
        self.responses: list[FakeResponse] = []
        self.closed = False

    def get(self, url: str, **request_options) -> FakeResponse:
        self.requests.append((url, request_options))
        page = self.pages.get(url, (404, ''))
        if isinstance(page, Exception):
            raise page

        response = FakeResponse(*page)
        self.responses.append(response)
        return response

    def close(self) -> None:
        self.closed = True


class SessionFactory:
    def __init__(self) -> None:
        self.pages: dict = {}
        self.sessions: list[FakeSession] = []

    def __call__(self, **builder_options) -> FakeSession:
        session = FakeSession(self.pages, **builder_options)
        self.sessions.append(session)
        return session

    @property
    def requested_urls(self) -> list[str]:
        return [
            url for session in self.sessions for url, _ in session.requests
        ]

    @property
    def responses(self) -> list[FakeResponse]:
        return [
            response
            for session in self.sessions
            for response in session.responses
        ]


@pytest.fixture
def session_factory() -> SessionFactory:
    return SessionFactory()


@pytest.fixture
def http_manager(session_factory: SessionFactory) -> HttpInterfaceManager:
    return HttpInterfaceManager(session_factory=session_factory)


@pytest.fixture
def source_manager(http_manager: HttpInterfaceManager):
    with BandcampSourceManager(http_manager) as manager:
        yield manager


@pytest.fixture
def track_payload() -> dict:
    return {
        'artist': 'A',
        'art_id': 5,
        'trackinfo': [
            {
                'title': 'T',
                'title_link': '/track/t',
                'duration': 61.5,
                'file': {'mp3-128': 'https://t4.bcbits.com/stream/abc/t'},
            }
        ],
    }


@pytest.fixture
def album_payload() -> dict:
    return {
        'artist': 'A',
        'art_id': 1234567,
        'current': {'title': 'Album1'},
        'trackinfo': [
            {'title': 'First', 'title_link': '/track/first', 'duration': 10.0},
            {
                'title': 'Second',
                'title_link': '/track/second',
                'duration': 200.1234,
            },
        ],
    }
