"""Unsafe extraction – the one place an absent option raises.

Everything else in optionkit treats absence as an ordinary value. Importing
this module is the explicit opt-in to raising instead::

    from optionkit.extensions import unsafe

    user = unsafe.reduce_or_throw(find_user(user_id), "user must exist here")
"""

from __future__ import annotations

from typing import TypeVar

from optionkit.extensions.aio import OptionSource, resolve
from optionkit.kernel.errors import DEFAULT_MISSING_VALUE_MESSAGE, MissingValueError
from optionkit.kernel.types.option import Option

T = TypeVar("T")


def reduce_or_throw(option: Option[T], message: str = DEFAULT_MISSING_VALUE_MESSAGE) -> T:
    """Return the payload or raise :class:`MissingValueError` with *message*."""
    has_value, value = option.try_get()
    if not has_value:
        raise MissingValueError(message)
    return value  # type: ignore[return-value]


async def reduce_or_throw_async(
    source: OptionSource[T],
    message: str = DEFAULT_MISSING_VALUE_MESSAGE,
) -> T:
    return reduce_or_throw(await resolve(source), message)


__all__ = ["reduce_or_throw", "reduce_or_throw_async"]
