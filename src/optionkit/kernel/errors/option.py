"""Option errors – construction and unsafe extraction failures."""

from __future__ import annotations

from typing import Any

from optionkit.kernel.errors.base import BaseError

DEFAULT_MISSING_VALUE_MESSAGE = "Option has no value"


class OptionError(BaseError):
    """Root for errors raised by the option container itself."""

    default_code = "option_error"


class NullValueError(OptionError, ValueError):
    """``Some`` was asked to wrap ``None``.

    Absence is spelled ``NONE`` / ``none()``; a present option never holds
    ``None``.
    """

    default_code = "null_value"

    def __init__(self, message: str = "Cannot create Some from None; use none() instead", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class MissingValueError(OptionError, RuntimeError):
    """An unsafe extraction was attempted on an absent option."""

    default_code = "missing_value"

    def __init__(self, message: str = DEFAULT_MISSING_VALUE_MESSAGE, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "DEFAULT_MISSING_VALUE_MESSAGE",
    "MissingValueError",
    "NullValueError",
    "OptionError",
]
