"""Utility modules: logging setup and transcript formatters."""

from .logging import get_logger, setup_logger
from .formatters import (
    Formatter,
    FormatterLoader,
    JSONFormatter,
    PrettyPrintFormatter,
    SRTFormatter,
    TextFormatter,
    UnknownFormatterType,
    WebVTTFormatter,
)

__all__ = [
    'get_logger',
    'setup_logger',
    'Formatter',
    'FormatterLoader',
    'JSONFormatter',
    'PrettyPrintFormatter',
    'SRTFormatter',
    'TextFormatter',
    'UnknownFormatterType',
    'WebVTTFormatter',
]
