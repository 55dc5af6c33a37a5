"""Fallible construction – run a callable and turn failure into ``NONE``.

Intended for parsing, lookups and configuration reads where an exception
only means "no value"::

    attempt(lambda: int("abc"))                                   # NONE
    attempt(lambda: int("abc"), lambda exc: isinstance(exc, ValueError))  # NONE
    attempt(lambda: int("abc"), lambda exc: isinstance(exc, KeyError))    # raises ValueError
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, TypeVar

from optionkit.config.settings.factory import get_settings
from optionkit.kernel.types.option import NONE, Option, as_option
from optionkit.observability.logging import get_logger

T = TypeVar("T")

ExceptionFilter = Callable[[Exception], bool]
ExceptionHook = Callable[[Exception], Any]

_logger = get_logger(__name__)


def attempt(
    func: Callable[[], T | None],
    exception_filter: ExceptionFilter | None = None,
    log_exception: ExceptionHook | None = None,
) -> Option[T]:
    """Call *func* and wrap its result.

    Args:
        func: Zero-argument callable that may raise.
        exception_filter: Decides whether a raised exception is swallowed.
            Exceptions it rejects propagate unchanged. ``None`` swallows
            every :class:`Exception`.
        log_exception: Receives a swallowed exception before ``NONE`` is
            returned.

    Returns:
        ``Some(result)``, or ``NONE`` when *func* returned ``None`` or raised
        a swallowed exception.
    """
    try:
        result = func()
    except Exception as exc:
        if exception_filter is not None and not exception_filter(exc):
            raise
        _swallow(exc, func, log_exception)
        return NONE
    return as_option(result)


async def attempt_async(
    func: Callable[[], Awaitable[T | None]] | Awaitable[T | None],
    exception_filter: ExceptionFilter | None = None,
    log_exception: ExceptionHook | None = None,
) -> Option[T]:
    """Awaitable counterpart of :func:`attempt`.

    *func* is either a zero-argument callable returning an awaitable, or the
    awaitable itself. Cancellation is a :class:`BaseException` and is never
    swallowed.

    Raises:
        TypeError: *func* is neither awaitable nor a callable returning an
            awaitable. This is a usage error and is never swallowed.
    """
    if inspect.isawaitable(func):
        awaitable = func
    elif not callable(func):
        raise TypeError(
            f"attempt_async expects an awaitable or a callable, got {type(func).__name__}"
        )
    else:
        try:
            awaitable = func()
        except Exception as exc:
            if exception_filter is not None and not exception_filter(exc):
                raise
            _swallow(exc, func, log_exception)
            return NONE
        if not inspect.isawaitable(awaitable):
            raise TypeError(
                f"attempt_async expects {getattr(func, '__qualname__', func)!r} to return an "
                f"awaitable, got {type(awaitable).__name__}"
            )
    try:
        result = await awaitable
    except Exception as exc:
        if exception_filter is not None and not exception_filter(exc):
            raise
        _swallow(exc, func, log_exception)
        return NONE
    return as_option(result)


def _swallow(exc: Exception, func: Any, log_exception: ExceptionHook | None) -> None:
    if log_exception is not None:
        log_exception(exc)
    settings = get_settings()
    if settings.log_swallowed_exceptions:
        log = getattr(_logger, settings.swallowed_log_level)
        log(
            "option.attempt.swallowed",
            func=getattr(func, "__qualname__", repr(func)),
            error_type=type(exc).__name__,
            error=str(exc),
        )


__all__ = ["ExceptionFilter", "ExceptionHook", "attempt", "attempt_async"]
