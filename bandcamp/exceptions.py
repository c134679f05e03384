from .enums import Severity


class BandcampError(Exception):
    """Base class for bandcamp errors."""


class InvalidStatusCode(BandcampError):
    """Page responded with unexpected status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f'Invalid status code for track page: {status_code}')
        self.status_code = status_code


class FriendlyError(BandcampError):
    """Error with a message that can be shown to the user."""

    def __init__(
        self,
        message: str,
        severity: Severity = Severity.COMMON,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.severity = severity


class NoRequestedDataInHtml(FriendlyError):
    """Requested data is missing from provided html."""

    def __init__(self, message: str) -> None:
        super().__init__(message, Severity.SUSPICIOUS)


def wrap_unfriendly_exceptions(
    message: str,
    severity: Severity,
    error: Exception,
) -> FriendlyError:
    """Wrap an exception into :class:`FriendlyError` unless it is one.

    :param str message: Message for the wrapping error.
    :param Severity severity: Severity of the wrapping error.
    :param Exception error: Exception to wrap.
    :return FriendlyError: Either the error itself or a new friendly error
        with the original one set as its cause.
    """
    if isinstance(error, FriendlyError):
        return error

    wrapped = FriendlyError(message, severity)
    wrapped.__cause__ = error
    return wrapped
