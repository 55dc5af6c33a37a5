"""Option[T] – a value-or-absence container with Some and Nothing variants.

Every operation below is written against :meth:`Option.try_get`; it is the
only place the payload leaves the container.

Usage::

    from optionkit import NONE, Some, as_option

    port = as_option(os.environ.get("PORT")).map(int).check(lambda p: p > 0)
    port.reduce(8080)

    match port:
        case Some(value):
            ...
        case Nothing():
            ...
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, Iterator, TypeVar

from optionkit.kernel.errors import NullValueError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class Option(abc.ABC, Generic[T]):
    """Base of the two variants. Never instantiated directly."""

    __slots__ = ()

    # -- construction --------------------------------------------------------

    @staticmethod
    def some(value: T) -> Option[T]:
        """Return a present option; ``None`` is rejected with :class:`NullValueError`."""
        return Some(value)

    @staticmethod
    def none() -> Option[Any]:
        """Return the canonical absent option."""
        return NONE

    # -- the primitive -------------------------------------------------------

    @abc.abstractmethod
    def try_get(self) -> tuple[bool, T | None]:
        """Return ``(True, payload)`` when present, ``(False, None)`` otherwise."""

    # -- inspection ----------------------------------------------------------

    @property
    def has_value(self) -> bool:
        return self.try_get()[0]

    def is_some(self) -> bool:
        return self.has_value

    def is_none(self) -> bool:
        return not self.has_value

    def equals_value(self, other: T) -> bool:
        """True when present and the payload equals *other*."""
        has_value, value = self.try_get()
        return has_value and value == other

    # -- transform / chain / filter -----------------------------------------

    def map(self, selector: Callable[[T], U | None]) -> Option[U]:
        """Apply *selector* to the payload; a ``None`` result collapses to ``NONE``."""
        has_value, value = self.try_get()
        if not has_value:
            return NONE
        return as_option(selector(value))  # type: ignore[arg-type]

    def bind(self, selector: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an option-returning *selector* without nesting containers."""
        has_value, value = self.try_get()
        if not has_value:
            return NONE
        return selector(value)  # type: ignore[arg-type]

    def check(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep this option only if the payload satisfies *predicate*."""
        has_value, value = self.try_get()
        if has_value and predicate(value):  # type: ignore[arg-type]
            return self
        return NONE

    def match(self, when_some: Callable[[T], U], when_none: Callable[[], U]) -> U:
        """Run exactly one of the two branches and return its result."""
        has_value, value = self.try_get()
        if has_value:
            return when_some(value)  # type: ignore[arg-type]
        return when_none()

    # -- fallback ------------------------------------------------------------

    def or_else(self, alternative: T) -> Option[T]:
        has_value, _ = self.try_get()
        return self if has_value else Some(alternative)

    def or_else_get(self, supplier: Callable[[], T]) -> Option[T]:
        """Like :meth:`or_else`, but *supplier* is only called when absent."""
        has_value, _ = self.try_get()
        return self if has_value else Some(supplier())

    def reduce(self, default: T) -> T:
        """Return the payload, or *default* when absent."""
        has_value, value = self.try_get()
        return value if has_value else default  # type: ignore[return-value]

    def reduce_get(self, supplier: Callable[[], T]) -> T:
        has_value, value = self.try_get()
        return value if has_value else supplier()  # type: ignore[return-value]

    # -- side effects --------------------------------------------------------

    def tap(self, action: Callable[[T], Any]) -> Option[T]:
        """Call *action* with the payload when present; always return ``self``."""
        has_value, value = self.try_get()
        if has_value:
            action(value)  # type: ignore[arg-type]
        return self

    def tap_if_none(self, action: Callable[[], Any]) -> Option[T]:
        has_value, _ = self.try_get()
        if not has_value:
            action()
        return self

    # -- predicates ----------------------------------------------------------

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        has_value, value = self.try_get()
        return has_value and bool(predicate(value))  # type: ignore[arg-type]

    def is_some_and_equals(
        self,
        expected: T,
        comparer: Callable[[T, T], bool] | None = None,
    ) -> bool:
        """True when present and the payload equals *expected*.

        *comparer* is called as ``comparer(payload, expected)`` and replaces
        ``==`` when given.
        """
        has_value, value = self.try_get()
        if not has_value:
            return False
        if comparer is None:
            return value == expected
        return bool(comparer(value, expected))  # type: ignore[arg-type]

    # -- query-style aliases -------------------------------------------------

    def select(self, selector: Callable[[T], U | None]) -> Option[U]:
        return self.map(selector)

    def where(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self.check(predicate)

    def select_many(
        self,
        bind: Callable[[T], Option[U]],
        project: Callable[[T, U], V | None] | None = None,
    ) -> Option[U] | Option[V]:
        if project is None:
            return self.bind(bind)
        return self.bind(lambda source: bind(source).map(lambda inner: project(source, inner)))

    # -- interop -------------------------------------------------------------

    def as_nullable(self) -> T | None:
        """Return the payload, or ``None`` when absent."""
        return self.try_get()[1]

    def __iter__(self) -> Iterator[T]:
        has_value, value = self.try_get()
        if has_value:
            yield value  # type: ignore[misc]

    # -- equality / rendering ------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        has_value, value = self.try_get()
        other_has_value, other_value = other.try_get()
        if has_value != other_has_value:
            return False
        return not has_value or value == other_value

    def __hash__(self) -> int:
        has_value, value = self.try_get()
        return hash(value) if has_value else 0

    def __repr__(self) -> str:
        has_value, value = self.try_get()
        return f"Some({value!r})" if has_value else "None"

    def __str__(self) -> str:
        has_value, value = self.try_get()
        return str(value) if has_value else ""

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Some(Option[T]):
    """Option with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        if value is None:
            raise NullValueError()
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self.try_get()[1]  # type: ignore[return-value]

    def try_get(self) -> tuple[bool, T | None]:
        return True, self._value

    def __reduce__(self) -> tuple[Any, ...]:
        return Some, (self._value,)


class Nothing(Option[Any]):
    """Empty option. A single instance exists: :data:`NONE`."""

    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance  # type: ignore[return-value]

    def try_get(self) -> tuple[bool, None]:
        return False, None

    def __reduce__(self) -> tuple[Any, ...]:
        return Nothing, ()

    def __copy__(self) -> Nothing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Nothing:
        return self


NONE: Option[Any] = Nothing()
"""The canonical absent option; also usable wherever any ``Option[T]`` is expected."""


def some(value: T) -> Option[T]:
    """Module-level alias of :meth:`Option.some`."""
    return Some(value)


def none() -> Option[Any]:
    return NONE


def to_option(value: T | Option[T]) -> Option[T]:
    """Explicit stand-in for an implicit conversion.

    An option (including the untyped :data:`NONE`) is returned unchanged; any
    other value is wrapped with :func:`some`, so ``None`` is still rejected.
    """
    if isinstance(value, Option):
        return value
    return Some(value)


def as_option(value: T | None) -> Option[T]:
    """Bridge a nullable value: ``None`` becomes ``NONE``, anything else ``Some``."""
    return NONE if value is None else Some(value)


__all__ = [
    "NONE",
    "Nothing",
    "Option",
    "Some",
    "as_option",
    "none",
    "some",
    "to_option",
]
