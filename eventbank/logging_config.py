"""
Structured logging configuration.

JSON logs (python-json-logger) or plain text, every record carrying a
trace_id. Aggregates log with their account id as trace_id so one account's
history can be followed across interleaved callers.

Usage:
    from eventbank.logging_config import setup_logging, get_logger

    setup_logging(Settings.from_env())
    logger = get_logger(__name__, trace_id="acct-42")
    logger.info("Deposit accepted")
"""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from .config import Settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]"


class TraceIDFilter(logging.Filter):
    """
    Ensures every record has a trace_id, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(settings: Optional[Settings] = None, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Configure the root logger.

    Existing root handlers are replaced. The trace_id filter sits on the
    handler, so records propagated from child loggers get it too.

    Returns:
        The installed handler
    """
    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if settings.log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    return handler


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with a trace_id for correlation.

    Example:
        logger = get_logger(__name__, trace_id="acct-42")
        logger.info("Replayed")
        # {"timestamp": "...", "level": "INFO", "message": "Replayed", "trace_id": "acct-42"}
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
