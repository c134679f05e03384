import logging

from .decorators import log_errors
from .exceptions import InvalidStatusCode
from .httpclient import HttpInterface
from .util import is_success_with_content

logger = logging.getLogger('bandcamp-scraper')

NOT_FOUND = 404


@log_errors(logger=logger)
def fetch_page(interface: HttpInterface, url: str) -> str | None:
    """Fetch page html.

    Response is closed before returning, whatever the outcome.

    :param HttpInterface interface: Interface to send request with.
    :param str url: Page url.
    :return str | None: Page html or None if page does not exist.
    :raises InvalidStatusCode: Page responded with non-2xx status
        or without content.
    """
    with interface.get(url) as response:
        if response.status_code == NOT_FOUND:
            logger.info(f'Page does not exist: {url}')
            return None

        if not is_success_with_content(response.status_code):
            raise InvalidStatusCode(response.status_code)

        return response.content.decode('utf-8', errors='replace')
