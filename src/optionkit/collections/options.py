"""Scanning helpers over iterables of options.

The value projections (:func:`values`, :func:`where_values`,
:func:`select_values`) are lazy views: iterating them walks the source
again, so a view over a list can be iterated repeatedly while a view over a
generator is exhausted after one pass. Predicates and selectors only ever
see payloads of present entries.
"""
from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from optionkit.kernel.types.option import NONE, Option

T = TypeVar("T")
U = TypeVar("U")


def _always(_value: object) -> bool:
    return True


class OptionValues(Generic[T]):
    """Re-iterable view over the payloads of present options."""

    __slots__ = ("_source", "_predicate")

    def __init__(
        self,
        source: Iterable[Option[T]],
        predicate: Callable[[T], bool] = _always,
    ) -> None:
        self._source = source
        self._predicate = predicate

    def __iter__(self) -> Iterator[T]:
        for option in self._source:
            has_value, value = option.try_get()
            if has_value and self._predicate(value):  # type: ignore[arg-type]
                yield value  # type: ignore[misc]


class SelectedValues(Generic[T, U]):
    """Re-iterable view projecting each present payload through a selector."""

    __slots__ = ("_values", "_selector")

    def __init__(self, values: OptionValues[T], selector: Callable[[T], U]) -> None:
        self._values = values
        self._selector = selector

    def __iter__(self) -> Iterator[U]:
        for value in self._values:
            yield self._selector(value)


def values(source: Iterable[Option[T]]) -> OptionValues[T]:
    """Payloads of the present entries, in source order."""
    return OptionValues(source)


def where_values(source: Iterable[Option[T]], predicate: Callable[[T], bool]) -> OptionValues[T]:
    return OptionValues(source, predicate)


def select_values(source: Iterable[Option[T]], selector: Callable[[T], U]) -> SelectedValues[T, U]:
    return SelectedValues(OptionValues(source), selector)


def count_values(source: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> int:
    return sum(1 for _ in OptionValues(source, predicate or _always))


def any_values(source: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> bool:
    """True if some entry is present (and satisfies *predicate*). False for an empty source."""
    for _ in OptionValues(source, predicate or _always):
        return True
    return False


def all_values(source: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> bool:
    """True if every entry is present (and satisfies *predicate*). True for an empty source."""
    check = predicate or _always
    for option in source:
        has_value, value = option.try_get()
        if not (has_value and check(value)):  # type: ignore[arg-type]
            return False
    return True


def first_or_none(source: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    """The first present entry (satisfying *predicate*), or ``NONE``."""
    check = predicate or _always
    for option in source:
        has_value, value = option.try_get()
        if has_value and check(value):  # type: ignore[arg-type]
            return option
    return NONE


def last_or_none(source: Iterable[Option[T]], predicate: Callable[[T], bool] | None = None) -> Option[T]:
    """The last present entry (satisfying *predicate*), or ``NONE``. Scans forward once."""
    check = predicate or _always
    last: Option[T] = NONE
    for option in source:
        has_value, value = option.try_get()
        if has_value and check(value):  # type: ignore[arg-type]
            last = option
    return last


__all__ = [
    "OptionValues",
    "SelectedValues",
    "all_values",
    "any_values",
    "count_values",
    "first_or_none",
    "last_or_none",
    "select_values",
    "values",
    "where_values",
]
