"""Kernel – the option container and its error hierarchy."""

from optionkit.kernel.errors import (
    BaseError,
    MissingValueError,
    NullValueError,
    OptionError,
)
from optionkit.kernel.types import (
    NONE,
    Nothing,
    Option,
    Some,
    as_option,
    attempt,
    attempt_async,
    none,
    some,
    to_option,
)

__all__ = [
    "NONE",
    "BaseError",
    "MissingValueError",
    "Nothing",
    "NullValueError",
    "Option",
    "OptionError",
    "Some",
    "as_option",
    "attempt",
    "attempt_async",
    "none",
    "some",
    "to_option",
]
