"""Awaitable combinators.

Each family comes in two functions:

* ``family(source, f)`` – *source* is an :class:`Option` or an awaitable that
  resolves to one; *f* is synchronous.
* ``family_async(source, f)`` – same *source*, but *f* returns an awaitable.

Both await *source* first and then apply the synchronous rule from
:class:`Option`, so awaited and direct calls behave identically. Calls are
sequential: the source is resolved before any callable is awaited.

:class:`AsyncOption` offers the same families as a fluent chain::

    name = await (
        AsyncOption(repo.find_user(user_id))
        .map(lambda user: user.name)
        .check_async(is_allowed)
        .reduce("anonymous")
    )
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generator, Generic, TypeAlias, TypeVar

from optionkit.kernel.types.option import NONE, Option, Some, as_option

T = TypeVar("T")
U = TypeVar("U")

OptionSource: TypeAlias = Option[T] | Awaitable[Option[T]]


async def resolve(source: OptionSource[T]) -> Option[T]:
    """Await *source* unless it already is an option."""
    if isinstance(source, Option):
        return source
    return await source


# ---------------------------------------------------------------------------
# Map / Bind / Check
# ---------------------------------------------------------------------------


async def map(source: OptionSource[T], selector: Callable[[T], U | None]) -> Option[U]:  # noqa: A001
    return (await resolve(source)).map(selector)


async def map_async(
    source: OptionSource[T],
    selector: Callable[[T], Awaitable[U | None]],
) -> Option[U]:
    has_value, value = (await resolve(source)).try_get()
    if not has_value:
        return NONE
    return as_option(await selector(value))  # type: ignore[arg-type]


async def bind(source: OptionSource[T], selector: Callable[[T], Option[U]]) -> Option[U]:
    return (await resolve(source)).bind(selector)


async def bind_async(
    source: OptionSource[T],
    selector: Callable[[T], Awaitable[Option[U]]],
) -> Option[U]:
    has_value, value = (await resolve(source)).try_get()
    if not has_value:
        return NONE
    return await selector(value)  # type: ignore[arg-type]


async def check(source: OptionSource[T], predicate: Callable[[T], bool]) -> Option[T]:
    return (await resolve(source)).check(predicate)


async def check_async(
    source: OptionSource[T],
    predicate: Callable[[T], Awaitable[bool]],
) -> Option[T]:
    option = await resolve(source)
    has_value, value = option.try_get()
    if has_value and await predicate(value):  # type: ignore[arg-type]
        return option
    return NONE


# ---------------------------------------------------------------------------
# Match
# ---------------------------------------------------------------------------


async def match(
    source: OptionSource[T],
    when_some: Callable[[T], U],
    when_none: Callable[[], U],
) -> U:
    return (await resolve(source)).match(when_some, when_none)


async def match_async(
    source: OptionSource[T],
    when_some: Callable[[T], Awaitable[U]],
    when_none: Callable[[], Awaitable[U]],
) -> U:
    has_value, value = (await resolve(source)).try_get()
    if has_value:
        return await when_some(value)  # type: ignore[arg-type]
    return await when_none()


# ---------------------------------------------------------------------------
# OrElse / Reduce
# ---------------------------------------------------------------------------


async def or_else(source: OptionSource[T], alternative: T) -> Option[T]:
    return (await resolve(source)).or_else(alternative)


async def or_else_get(source: OptionSource[T], supplier: Callable[[], T]) -> Option[T]:
    return (await resolve(source)).or_else_get(supplier)


async def or_else_async(
    source: OptionSource[T],
    supplier: Callable[[], Awaitable[T]],
) -> Option[T]:
    option = await resolve(source)
    if option.has_value:
        return option
    return Some(await supplier())


async def reduce(source: OptionSource[T], default: T) -> T:
    return (await resolve(source)).reduce(default)


async def reduce_get(source: OptionSource[T], supplier: Callable[[], T]) -> T:
    return (await resolve(source)).reduce_get(supplier)


async def reduce_async(source: OptionSource[T], supplier: Callable[[], Awaitable[T]]) -> T:
    has_value, value = (await resolve(source)).try_get()
    if has_value:
        return value  # type: ignore[return-value]
    return await supplier()


# ---------------------------------------------------------------------------
# Tap / TapIfNone
# ---------------------------------------------------------------------------


async def tap(source: OptionSource[T], action: Callable[[T], Any]) -> Option[T]:
    return (await resolve(source)).tap(action)


async def tap_async(
    source: OptionSource[T],
    action: Callable[[T], Awaitable[Any]],
) -> Option[T]:
    option = await resolve(source)
    has_value, value = option.try_get()
    if has_value:
        await action(value)  # type: ignore[arg-type]
    return option


async def tap_if_none(source: OptionSource[T], action: Callable[[], Any]) -> Option[T]:
    return (await resolve(source)).tap_if_none(action)


async def tap_if_none_async(
    source: OptionSource[T],
    action: Callable[[], Awaitable[Any]],
) -> Option[T]:
    option = await resolve(source)
    if not option.has_value:
        await action()
    return option


# ---------------------------------------------------------------------------
# IsSomeAnd
# ---------------------------------------------------------------------------


async def is_some_and(source: OptionSource[T], predicate: Callable[[T], bool]) -> bool:
    return (await resolve(source)).is_some_and(predicate)


async def is_some_and_equals(
    source: OptionSource[T],
    expected: T,
    comparer: Callable[[T, T], bool] | None = None,
) -> bool:
    return (await resolve(source)).is_some_and_equals(expected, comparer)


async def is_some_and_async(
    source: OptionSource[T],
    predicate: Callable[[T], Awaitable[bool]],
) -> bool:
    has_value, value = (await resolve(source)).try_get()
    return has_value and bool(await predicate(value))  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Fluent wrapper
# ---------------------------------------------------------------------------


class AsyncOption(Generic[T]):
    """Chainable view over an option that is still being computed.

    Every option-returning method returns a new :class:`AsyncOption`; the
    terminal ones (``match``, ``reduce``, ``is_some_and`` ...) return a
    coroutine. Awaiting an :class:`AsyncOption` yields the final option.

    The wrapped source is awaited at most once; the resulting option is kept,
    so one instance may be awaited repeatedly or branched into several chains.
    """

    __slots__ = ("_source", "_option", "_lock")

    def __init__(self, source: OptionSource[T]) -> None:
        self._source = source
        self._option: Option[T] | None = source if isinstance(source, Option) else None
        self._lock = asyncio.Lock()

    def __await__(self) -> Generator[Any, None, Option[T]]:
        return self._resolved().__await__()

    async def _resolved(self) -> Option[T]:
        if self._option is None:
            async with self._lock:
                if self._option is None:
                    self._option = await resolve(self._source)
        return self._option

    def map(self, selector: Callable[[T], U | None]) -> AsyncOption[U]:
        return AsyncOption(map(self._resolved(), selector))

    def map_async(self, selector: Callable[[T], Awaitable[U | None]]) -> AsyncOption[U]:
        return AsyncOption(map_async(self._resolved(), selector))

    def bind(self, selector: Callable[[T], Option[U]]) -> AsyncOption[U]:
        return AsyncOption(bind(self._resolved(), selector))

    def bind_async(self, selector: Callable[[T], Awaitable[Option[U]]]) -> AsyncOption[U]:
        return AsyncOption(bind_async(self._resolved(), selector))

    def check(self, predicate: Callable[[T], bool]) -> AsyncOption[T]:
        return AsyncOption(check(self._resolved(), predicate))

    def check_async(self, predicate: Callable[[T], Awaitable[bool]]) -> AsyncOption[T]:
        return AsyncOption(check_async(self._resolved(), predicate))

    def or_else(self, alternative: T) -> AsyncOption[T]:
        return AsyncOption(or_else(self._resolved(), alternative))

    def or_else_get(self, supplier: Callable[[], T]) -> AsyncOption[T]:
        return AsyncOption(or_else_get(self._resolved(), supplier))

    def or_else_async(self, supplier: Callable[[], Awaitable[T]]) -> AsyncOption[T]:
        return AsyncOption(or_else_async(self._resolved(), supplier))

    def tap(self, action: Callable[[T], Any]) -> AsyncOption[T]:
        return AsyncOption(tap(self._resolved(), action))

    def tap_async(self, action: Callable[[T], Awaitable[Any]]) -> AsyncOption[T]:
        return AsyncOption(tap_async(self._resolved(), action))

    def tap_if_none(self, action: Callable[[], Any]) -> AsyncOption[T]:
        return AsyncOption(tap_if_none(self._resolved(), action))

    def tap_if_none_async(self, action: Callable[[], Awaitable[Any]]) -> AsyncOption[T]:
        return AsyncOption(tap_if_none_async(self._resolved(), action))

    async def match(self, when_some: Callable[[T], U], when_none: Callable[[], U]) -> U:
        return await match(self._resolved(), when_some, when_none)

    async def match_async(
        self,
        when_some: Callable[[T], Awaitable[U]],
        when_none: Callable[[], Awaitable[U]],
    ) -> U:
        return await match_async(self._resolved(), when_some, when_none)

    async def reduce(self, default: T) -> T:
        return await reduce(self._resolved(), default)

    async def reduce_get(self, supplier: Callable[[], T]) -> T:
        return await reduce_get(self._resolved(), supplier)

    async def reduce_async(self, supplier: Callable[[], Awaitable[T]]) -> T:
        return await reduce_async(self._resolved(), supplier)

    async def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        return await is_some_and(self._resolved(), predicate)

    async def is_some_and_equals(
        self,
        expected: T,
        comparer: Callable[[T, T], bool] | None = None,
    ) -> bool:
        return await is_some_and_equals(self._resolved(), expected, comparer)

    async def is_some_and_async(self, predicate: Callable[[T], Awaitable[bool]]) -> bool:
        return await is_some_and_async(self._resolved(), predicate)


__all__ = [
    "AsyncOption",
    "OptionSource",
    "bind",
    "bind_async",
    "check",
    "check_async",
    "is_some_and",
    "is_some_and_async",
    "is_some_and_equals",
    "map",
    "map_async",
    "match",
    "match_async",
    "or_else",
    "or_else_async",
    "or_else_get",
    "reduce",
    "reduce_async",
    "reduce_get",
    "resolve",
    "tap",
    "tap_async",
    "tap_if_none",
    "tap_if_none_async",
]
