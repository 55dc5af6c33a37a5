"""Extensions – awaitable combinators, nullable bridging and unsafe extraction.

``unsafe`` is deliberately not re-exported; import it by name.
"""

from optionkit.extensions import aio
from optionkit.extensions.aio import AsyncOption
from optionkit.extensions.nullable import (
    as_nullable,
    as_nullable_async,
    as_option,
    as_option_async,
)

__all__ = [
    "AsyncOption",
    "aio",
    "as_nullable",
    "as_nullable_async",
    "as_option",
    "as_option_async",
]
