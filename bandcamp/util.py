import logging
import math
from collections.abc import Mapping
from typing import Any, Protocol

from requests import codes

from .constants import ARTWORK_ID_WIDTH, ARTWORK_URL_FORMAT
from .exceptions import NoRequestedDataInHtml

logger = logging.getLogger('bandcamp-util')


class Closeable(Protocol):
    def close(self) -> None: ...


def extract_between(text: str, start: str, end: str) -> str | None:
    """Extract substring between first `start` and the `end` following it.

    :param str text: Text to search in.
    :param str start: Opening delimiter.
    :param str end: Closing delimiter.
    :return str | None: Text between delimiters or None if any is missing.
    """
    start_index = text.find(start)
    if start_index < 0:
        return None

    start_index += len(start)
    end_index = text.find(end, start_index)
    if end_index < 0:
        return None

    return text[start_index:end_index]


def get_text(node: Any, key: str) -> str | None:
    """Read a field as text.

    Numbers are converted to their decimal representation.

    :return str | None: Field value or None if absent or not a scalar.
    """
    if not isinstance(node, Mapping):
        return None

    value = node.get(key)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    return None


def require_text(node: Any, key: str, what: str) -> str:
    """Read a field as text, failing if it is absent.

    :param str what: Human readable name of the data being read.
    :raises NoRequestedDataInHtml: Field is absent.
    """
    if (value := get_text(node, key)) is None:
        raise NoRequestedDataInHtml(
            f'{what} information not found on the Bandcamp page.'
        )
    return value


def get_number(node: Any, key: str) -> float | None:
    if not isinstance(node, Mapping):
        return None

    value = node.get(key)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def get_array(node: Any, key: str) -> list | None:
    if not isinstance(node, Mapping):
        return None

    value = node.get(key)
    return value if isinstance(value, list) else None


def get_object(node: Any, key: str) -> Mapping | None:
    if not isinstance(node, Mapping):
        return None

    value = node.get(key)
    return value if isinstance(value, Mapping) else None


def build_artwork_url(art_id: str | None) -> str | None:
    """Build album art url from bandcamp art id.

    :param str | None art_id: Numeric art id as text.
    :return str | None: Art url or None if art id is absent.
    """
    if art_id is None:
        return None

    padded_id = art_id.rjust(ARTWORK_ID_WIDTH, '0')
    return ARTWORK_URL_FORMAT.format(art_id=padded_id)


def is_success_with_content(status_code: int) -> bool:
    """Check if status code is 2xx with a response body."""
    return (
        codes.ok <= status_code < codes.multiple_choices
        and status_code != codes.no_content
    )


def close_with_warnings(closeable: Closeable | None) -> None:
    """Close an object, logging failures instead of raising them."""
    if closeable is None:
        return

    try:
        closeable.close()
    except Exception as e:
        logger.warning(f'Failed to close {closeable!r}: {e}')
