"""Testing – Hypothesis strategies for options.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "optionkit[testing]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from optionkit.kernel.types.option import Option


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use option strategies: "
            "pip install hypothesis"
        ) from exc


def some_strategy(values: "SearchStrategy[Any]") -> "SearchStrategy[Option[Any]]":
    """Present options whose payloads are drawn from *values*.

    ``None`` draws are discarded since ``Some`` cannot hold them.
    """
    from optionkit.kernel.types.option import Some

    _require_hypothesis()
    return values.filter(lambda v: v is not None).map(Some)


def option_strategy(values: "SearchStrategy[Any]") -> "SearchStrategy[Option[Any]]":
    """Either ``NONE`` or a ``Some`` drawn from *values*.

    Example::

        @given(option_strategy(st.integers()))
        def test_check_is_idempotent(option):
            assert option.check(is_even).check(is_even) == option.check(is_even)
    """
    from optionkit.kernel.types.option import NONE

    st = _require_hypothesis()
    return st.one_of(st.just(NONE), some_strategy(values))


def option_function_strategy(returns: "SearchStrategy[Any]") -> "SearchStrategy[Any]":
    """Pure one-argument functions returning options drawn from ``option_strategy(returns)``.

    Useful for the associativity law of ``bind``.
    """
    st = _require_hypothesis()
    return st.functions(like=lambda value: value, returns=option_strategy(returns), pure=True)


__all__ = ["option_function_strategy", "option_strategy", "some_strategy"]
