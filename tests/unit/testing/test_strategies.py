"""Unit tests for the Hypothesis option strategies."""

from __future__ import annotations

import sys
from unittest.mock import patch

import hypothesis.strategies as st
import pytest
from hypothesis import given

from optionkit import NONE, Option, Some
from optionkit.testing import option_function_strategy, option_strategy, some_strategy


class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self) -> None:
        from optionkit.testing.strategies import _require_hypothesis

        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="hypothesis"):
                _require_hypothesis()


class TestSomeStrategy:
    @given(some_strategy(st.integers()))
    def test_only_present_options(self, option: Option[int]) -> None:
        assert isinstance(option, Some)

    @given(some_strategy(st.none() | st.just(1)))
    def test_none_draws_are_discarded(self, option: Option[int]) -> None:
        assert option == Some(1)


class TestOptionStrategy:
    @given(option_strategy(st.integers(min_value=0)))
    def test_draws_are_options(self, option: Option[int]) -> None:
        assert option is NONE or option.is_some_and(lambda x: x >= 0)

    def test_can_produce_none(self) -> None:
        drawn: list[Option[int]] = []

        @given(option_strategy(st.integers()))
        def collect(option: Option[int]) -> None:
            drawn.append(option)

        collect()
        assert NONE in drawn


class TestOptionFunctionStrategy:
    @given(option_function_strategy(st.integers()), st.integers())
    def test_functions_return_options_and_are_pure(self, f, value: int) -> None:
        result = f(value)
        assert isinstance(result, Option)
        assert f(value) == result
