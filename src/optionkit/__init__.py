"""
optionkit – explicit optional values for Python.

Import path convention::

    from optionkit import NONE, Option, Some, as_option, attempt
    from optionkit.extensions import AsyncOption, aio
    from optionkit.extensions import unsafe
    from optionkit.collections import values, first_or_none
    from optionkit.testing import should_be_some
"""

import logging

from optionkit.kernel import (
    NONE,
    MissingValueError,
    Nothing,
    NullValueError,
    Option,
    OptionError,
    Some,
    as_option,
    attempt,
    attempt_async,
    none,
    some,
    to_option,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "NONE",
    "MissingValueError",
    "Nothing",
    "NullValueError",
    "Option",
    "OptionError",
    "Some",
    "__version__",
    "as_option",
    "attempt",
    "attempt_async",
    "none",
    "some",
    "to_option",
]
