"""Observability – structured logging helpers."""
from optionkit.observability.logging.factory import JsonLoggerFactory
from optionkit.observability.logging.processors import OptionValueProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "OptionValueProcessor",
    "get_logger",
]
