"""Testing support – option assertions and Hypothesis strategies.

The strategies need ``hypothesis`` (``pip install "optionkit[testing]"``);
the assertions have no extra requirements.
"""

from optionkit.testing.assertions import (
    OptionAssertionError,
    should_be_none,
    should_be_some,
    should_be_some_and_satisfy,
    should_be_some_that_matches,
    should_be_some_with_value,
)
from optionkit.testing.strategies import (
    option_function_strategy,
    option_strategy,
    some_strategy,
)

__all__ = [
    "OptionAssertionError",
    "option_function_strategy",
    "option_strategy",
    "should_be_none",
    "should_be_some",
    "should_be_some_and_satisfy",
    "should_be_some_that_matches",
    "should_be_some_with_value",
    "some_strategy",
]
