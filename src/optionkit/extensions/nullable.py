"""Bridging between options and nullable values.

Used at boundaries that speak ``X | None`` (ORM columns, JSON payloads,
``dict.get``)::

    row.nickname = as_nullable(profile.nickname)
    profile.nickname = as_option(row.nickname)
"""

from __future__ import annotations

from typing import Awaitable, TypeVar

from optionkit.extensions.aio import OptionSource, resolve
from optionkit.kernel.types.option import Option, as_option

T = TypeVar("T")


def as_nullable(option: Option[T]) -> T | None:
    """Return the payload, or ``None`` when absent."""
    return option.as_nullable()


async def as_option_async(awaitable: Awaitable[T | None]) -> Option[T]:
    return as_option(await awaitable)


async def as_nullable_async(source: OptionSource[T]) -> T | None:
    return (await resolve(source)).as_nullable()


__all__ = ["as_nullable", "as_nullable_async", "as_option", "as_option_async"]
