"""First/last lookups over iterables of plain values.

A private sentinel marks "nothing seen yet", so falsy elements such as
``0``, ``""`` or ``False`` come back as ``Some``. An element that is itself
``None`` converts through :func:`~optionkit.kernel.types.option.as_option`
and yields ``NONE``.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from optionkit.kernel.types.option import NONE, Option, as_option

T = TypeVar("T")

_MISSING: Any = object()


def first_item_or_none(items: Iterable[T | None], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    for item in items:
        if predicate is None or predicate(item):  # type: ignore[arg-type]
            return as_option(item)
    return NONE


def last_item_or_none(items: Iterable[T | None], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    last = _MISSING
    for item in items:
        if predicate is None or predicate(item):  # type: ignore[arg-type]
            last = item
    if last is _MISSING:
        return NONE
    return as_option(last)


__all__ = ["first_item_or_none", "last_item_or_none"]
