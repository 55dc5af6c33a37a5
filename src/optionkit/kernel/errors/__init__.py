"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── OptionError            (option.py)
        ├── NullValueError     (also ValueError)
        └── MissingValueError  (also RuntimeError)

Configuration errors live in :mod:`optionkit.config.validation`; test
assertion failures in :mod:`optionkit.testing`.
"""

from optionkit.kernel.errors.base import BaseError
from optionkit.kernel.errors.option import (
    DEFAULT_MISSING_VALUE_MESSAGE,
    MissingValueError,
    NullValueError,
    OptionError,
)

__all__ = [
    "DEFAULT_MISSING_VALUE_MESSAGE",
    "BaseError",
    "MissingValueError",
    "NullValueError",
    "OptionError",
]
