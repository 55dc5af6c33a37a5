"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from optionkit.kernel.types.option import Option


class OptionValueProcessor:
    """structlog processor that flattens :class:`Option` values in log events.

    ``Some(x)`` becomes ``x`` and ``NONE`` becomes ``None`` so JSON renderers
    can serialise them. Only top-level event keys are rewritten.

    Usage::

        import structlog
        from optionkit.observability.logging import OptionValueProcessor

        structlog.configure(processors=[OptionValueProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, Option):
                event_dict[key] = value.as_nullable()
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger backed by a stdlib :class:`logging.Logger`.

    Events reach stdlib handlers, so nothing is written until the
    application configures logging (see :class:`JsonLoggerFactory`).

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(logging.getLogger(name))
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["OptionValueProcessor", "get_logger"]
