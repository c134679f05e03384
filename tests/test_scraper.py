import pytest
import requests

from bandcamp.exceptions import InvalidStatusCode
from bandcamp.scraper import fetch_page

from .conftest import TRACK_URL


def test_fetch_page_decodes_utf8(http_manager, session_factory):
    session_factory.pages[TRACK_URL] = (200, '<p>Björk – ÿ</p>')

    with http_manager.get_interface() as interface:
        assert fetch_page(interface, TRACK_URL) == '<p>Björk – ÿ</p>'

    assert all(response.closed for response in session_factory.responses)


def test_fetch_page_not_found(http_manager, session_factory):
    session_factory.pages[TRACK_URL] = (404, 'gone')

    with http_manager.get_interface() as interface:
        assert fetch_page(interface, TRACK_URL) is None

    assert session_factory.responses[0].closed


@pytest.mark.parametrize('status_code', [204, 301, 403, 500, 503])
def test_fetch_page_invalid_status(http_manager, session_factory, status_code):
    session_factory.pages[TRACK_URL] = (status_code, 'error')

    with http_manager.get_interface() as interface:
        with pytest.raises(InvalidStatusCode) as exc_info:
            fetch_page(interface, TRACK_URL)

    assert exc_info.value.status_code == status_code
    assert str(status_code) in str(exc_info.value)
    assert session_factory.responses[0].closed


def test_fetch_page_passes_request_options(http_manager, session_factory):
    session_factory.pages[TRACK_URL] = (200, 'ok')

    with http_manager.get_interface() as interface:
        fetch_page(interface, TRACK_URL)

    assert session_factory.sessions[0].requests == [
        (TRACK_URL, {'timeout': 10})
    ]


def test_fetch_page_transport_error(http_manager, session_factory):
    session_factory.pages[TRACK_URL] = requests.ConnectionError('refused')

    with http_manager.get_interface() as interface:
        with pytest.raises(requests.ConnectionError):
            fetch_page(interface, TRACK_URL)


def test_fetch_page_replaces_malformed_bytes(http_manager, session_factory):
    session_factory.pages[TRACK_URL] = (200, b'<html><body>\xff<p>ok</p>')

    with http_manager.get_interface() as interface:
        html_text = fetch_page(interface, TRACK_URL)

    assert html_text == '<html><body>\ufffd<p>ok</p>'
