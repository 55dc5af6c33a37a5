"""Kernel types – public re-export surface.

Modules:
  option.py  – Option, Some, Nothing, NONE and the some/none/to_option/as_option constructors
  attempt.py – attempt, attempt_async (exceptions become NONE)
"""

from optionkit.kernel.types.option import (
    NONE,
    Nothing,
    Option,
    Some,
    as_option,
    none,
    some,
    to_option,
)
from optionkit.kernel.types.attempt import attempt, attempt_async

__all__ = [
    "NONE",
    "Nothing",
    "Option",
    "Some",
    "as_option",
    "attempt",
    "attempt_async",
    "none",
    "some",
    "to_option",
]
