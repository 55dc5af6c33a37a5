"""Observability – structured logging."""

from optionkit.observability.logging import JsonLoggerFactory, OptionValueProcessor, get_logger

__all__ = ["JsonLoggerFactory", "OptionValueProcessor", "get_logger"]
