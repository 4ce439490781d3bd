"""Logging utilities for the CV Copilot package."""

import json
import logging
import logging.handlers
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER_NAMESPACE = "cv_copilot"

# Id of the analysis request being processed; empty outside a request
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

# Attributes every LogRecord carries; anything else came in through ``extra=``
_STANDARD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message", "asctime", "correlation_id", "taskName",
}

HUMAN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-32s | %(request_tag)s%(error_tag)s%(message)s"


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the current request id."""

    def filter(self, record):
        record.correlation_id = correlation_id.get()
        record.request_tag = f"[{record.correlation_id}] " if record.correlation_id else ""
        return True


def _error_code(record: logging.LogRecord) -> Optional[str]:
    """Error code of the exception attached to a record, if it has one."""
    if not record.exc_info or record.exc_info[1] is None:
        return None
    return getattr(record.exc_info[1], "error_code", None)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log shipping."""

    def format(self, record):
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "correlation_id", ""),
        }

        error_code = _error_code(record)
        if error_code:
            entry["error_code"] = error_code
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update({
            key: value for key, value in vars(record).items()
            if key not in _STANDARD_ATTRIBUTES and key not in ("request_tag", "error_tag")
        })
        return json.dumps(entry, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Single-line console format with the request id in brackets."""

    def __init__(self):
        super().__init__(HUMAN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record):
        if not hasattr(record, "request_tag"):
            record.request_tag = ""
        error_code = _error_code(record)
        record.error_tag = f"{error_code} " if error_code and error_code not in record.getMessage() else ""
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    enable_console: bool = True,
    enable_file: bool = False,
    structured: bool = False,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """Setup logging configuration for CV Copilot.

    Console output goes to stderr so that stdout stays free for command
    output such as ``--json``.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        enable_console: Enable console logging
        enable_file: Enable file logging
        structured: Use structured JSON logging
        max_file_size: Maximum log file size in bytes
        backup_count: Number of backup log files to keep
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(level.upper())

    handlers = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if enable_file and log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_file_size, backupCount=backup_count, encoding="utf-8"
        ))

    for handler in handlers:
        handler.setFormatter(StructuredFormatter() if structured else HumanReadableFormatter())
        handler.addFilter(CorrelationIdFilter())
        root_logger.addHandler(handler)

    # pypdf warns about every malformed but readable object
    logging.getLogger("pypdf").setLevel(logging.ERROR)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    get_logger("logging").debug(
        "Logging configured",
        extra={"level": level, "handlers": len(handlers), "structured": structured},
    )


def get_logger(name: str, correlation_id_value: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``cv_copilot`` namespace.

    Args:
        name: Component name, e.g. ``"text_extractor"``
        correlation_id_value: Request id to bind to the current context

    Returns:
        Logger instance
    """
    if correlation_id_value:
        correlation_id.set(correlation_id_value)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_correlation_id(correlation_id_value: str) -> None:
    """Bind a request id to the current context."""
    correlation_id.set(correlation_id_value)


def get_correlation_id() -> str:
    """Request id bound to the current context, or an empty string."""
    return correlation_id.get()


def log_performance(operation: str, duration: float, details: Optional[dict] = None):
    """Record how long an operation took.

    Args:
        operation: Name of the operation
        duration: Duration in seconds
        details: Additional fields for structured output
    """
    extra = {"operation": operation, "duration_seconds": round(duration, 4)}
    if details:
        extra.update(details)
    get_logger("performance").info(f"{operation} took {duration:.3f}s", extra=extra)
