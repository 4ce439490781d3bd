"""Utility modules for CV Copilot."""

from .logging import setup_logging, get_logger, set_correlation_id, get_correlation_id, log_performance
from .exceptions import (
    CVCopilotError,
    ConfigurationError,
    ExtractionError,
    UnsupportedFormatError,
    InsufficientTextError,
    ExtractionFailureError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "log_performance",
    "CVCopilotError",
    "ConfigurationError",
    "ExtractionError",
    "UnsupportedFormatError",
    "InsufficientTextError",
    "ExtractionFailureError",
]
