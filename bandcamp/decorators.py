import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from .enums import Severity
from .exceptions import wrap_unfriendly_exceptions

P = ParamSpec('P')
T = TypeVar('T')


global_logger = logging.getLogger('bandcamp')


def log_errors(
    *, logger: logging.Logger | None = None
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Log exceptions raised during function execution.

    :param Logger | None logger: Logger to use.
        Default is the global logger.
    """
    local_logger = logger or global_logger

    def _decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def _wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                local_logger.error(
                    f'{func.__name__}(args: {args}, kwargs: {kwargs}): {e}'
                )
                raise

        return _wrapper

    return _decorator


def log_outputs(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Log function's output.

    :param Logger | None logger: Logger to use.
        Default is the global logger.
    :param int level: logging level to log messages under. Default is DEBUG.
    """
    local_logger = logger or global_logger

    def _decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def _wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            out = func(*args, **kwargs)
            local_logger.log(
                level,
                f'{func.__name__}(args: {args}, kwargs: {kwargs}) -> {out}',
            )
            return out

        return _wrapper

    return _decorator


def log_time(func: Callable[P, T]) -> Callable[P, T]:
    """Log real time elapsed by function call."""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start_time = time.time()
        try:
            return func(*args, **kwargs)
        finally:
            global_logger.info(
                f'{func.__name__} took {time.time() - start_time:.2f} seconds'
            )

    return wrapper


def wrap_errors(
    message: str,
    severity: Severity = Severity.FAULT,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Re-raise every exception as :class:`FriendlyError`.

    Friendly errors pass through unchanged.

    :param str message: Message of the wrapping error.
    :param Severity severity: Severity of the wrapping error.
    """

    def _decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def _wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                wrapped = wrap_unfriendly_exceptions(message, severity, e)
                if wrapped is e:
                    raise
                raise wrapped from e

        return _wrapper

    return _decorator
