import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass, field

import cloudscraper
import requests

from ._types import BuilderOptions, RequestOptions
from .constants import (
    DEFAULT_SCRAPER_OPTIONS,
    MAX_CONCURRENT_REQUESTS,
    REQUEST_TIMEOUT,
)
from .util import close_with_warnings

logger = logging.getLogger('bandcamp-http')

SessionFactory = Callable[..., requests.Session]


@dataclass
class HttpInterface:
    """Session borrowed from :class:`HttpInterfaceManager` for one call."""

    session: requests.Session
    request_options: RequestOptions = field(default_factory=dict)

    def get(self, url: str) -> requests.Response:
        """Send GET request with configured request options."""
        return self.session.get(url, **self.request_options)


class HttpInterfaceManager:
    """Pool of cloudscraper sessions shared between resolution calls.

    Every call to :meth:`get_interface` borrows a session that no other
    call uses until it is returned. Sessions are created lazily with
    builder options and returned to the pool when the call exits.

    Methods:
    - :meth:`get_interface`: borrow a session for the duration of a block;
    - :meth:`configure_requests`: change options of every request;
    - :meth:`configure_builder`: change options sessions are created with;
    - :meth:`close`: close all sessions. Safe to call more than once.
    """

    def __init__(
        self,
        session_factory: SessionFactory = cloudscraper.create_scraper,
        max_idle_sessions: int = MAX_CONCURRENT_REQUESTS,
    ) -> None:
        self._session_factory = session_factory
        self._max_idle_sessions = max_idle_sessions

        self._builder_options: BuilderOptions = deepcopy(
            DEFAULT_SCRAPER_OPTIONS
        )
        self._request_options: RequestOptions = {'timeout': REQUEST_TIMEOUT}

        self._lock = threading.Lock()
        self._idle_sessions: list[requests.Session] = []
        # Bumped on builder changes, older sessions are not reused
        self._generation = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def request_options(self) -> RequestOptions:
        with self._lock:
            return dict(self._request_options)

    @contextmanager
    def get_interface(self) -> Iterator[HttpInterface]:
        """Borrow a session for the duration of the with block.

        :raises RuntimeError: Manager is closed.
        """
        session, generation = self._acquire_session()
        try:
            yield HttpInterface(session, self.request_options)
        finally:
            self._release_session(session, generation)

    def configure_requests(
        self,
        configurator: Callable[[RequestOptions], RequestOptions],
    ) -> None:
        """Change options passed to every request.

        :param configurator: Receives current options, returns new ones.
        """
        with self._lock:
            self._request_options = configurator(dict(self._request_options))

    def configure_builder(
        self,
        configurator: Callable[[BuilderOptions], None],
    ) -> None:
        """Change options sessions are created with.

        Idle sessions are discarded so that new options take effect.

        :param configurator: Receives options dict to modify in place.
        """
        with self._lock:
            configurator(self._builder_options)
            self._generation += 1
            stale_sessions, self._idle_sessions = self._idle_sessions, []

        for session in stale_sessions:
            close_with_warnings(session)

    def close(self) -> None:
        """Close all idle sessions. Borrowed ones are closed on return."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            sessions, self._idle_sessions = self._idle_sessions, []

        for session in sessions:
            close_with_warnings(session)
        logger.info('Http interface manager closed')

    def _acquire_session(self) -> tuple[requests.Session, int]:
        with self._lock:
            if self._closed:
                raise RuntimeError('Http interface manager is closed')
            if self._idle_sessions:
                return self._idle_sessions.pop(), self._generation
            builder_options = deepcopy(self._builder_options)
            generation = self._generation

        logger.debug(f'Creating new session: {builder_options}')
        return self._session_factory(**builder_options), generation

    def _release_session(
        self,
        session: requests.Session,
        generation: int,
    ) -> None:
        with self._lock:
            if (
                not self._closed
                and generation == self._generation
                and len(self._idle_sessions) < self._max_idle_sessions
            ):
                self._idle_sessions.append(session)
                return

        close_with_warnings(session)
