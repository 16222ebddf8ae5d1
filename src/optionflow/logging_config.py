"""
Logging configuration for optionflow.

Provides:
- Daily rotating file handlers (app, error, audit)
- Session context on every record
- Optional JSON file output
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

LOG_DIR_ENV = "OPTIONFLOW_LOG_DIR"
AUDIT_LOGGER = "optionflow.audit"
LINE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

_session_context = threading.local()


def log_dir() -> Path:
    return Path(os.getenv(LOG_DIR_ENV, "logs"))


class ContextFilter(logging.Filter):
    """Stamp the current session ID onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = getattr(_session_context, "session_id", "N/A")
        return True


class FlushingTimedRotatingFileHandler(logging.handlers.TimedRotatingFileHandler):
    """TimedRotatingFileHandler that flushes after every write."""

    def emit(self, record: logging.LogRecord) -> None:
        super().emit(record)
        self.flush()


class ColoredFormatter(logging.Formatter):
    """Colored console output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        # Format a copy so file handlers never see the escape codes
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "message": record.getMessage(),
            "session_id": getattr(record, "session_id", None),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _daily_handler(
    filename: str, level: int, formatter: logging.Formatter, backup_count: int
) -> FlushingTimedRotatingFileHandler:
    directory = log_dir()
    directory.mkdir(parents=True, exist_ok=True)
    handler = FlushingTimedRotatingFileHandler(
        directory / filename,
        when="midnight",
        interval=1,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.suffix = "%Y-%m-%d"
    handler.setFormatter(formatter)
    handler.addFilter(ContextFilter())
    return handler


def setup_logging(
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    *,
    enable_debug_file: bool = False,
    json_format: bool = False,
) -> None:
    """
    Configure application-wide logging.

    Args:
        console_level: Console output level (DEBUG, INFO, WARNING, ERROR)
        file_level: File output level (DEBUG, INFO, WARNING, ERROR)
        enable_debug_file: Whether to create a separate size-rotated debug log
        json_format: Use JSON format for the main file log
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    if os.getenv("OPTIONFLOW_NO_COLOR"):
        console_formatter = logging.Formatter(LINE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        console_formatter = ColoredFormatter(LINE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    console_handler.setFormatter(console_formatter)
    console_handler.addFilter(ContextFilter())
    root_logger.addHandler(console_handler)

    app_formatter = JSONFormatter() if json_format else logging.Formatter(LINE_FORMAT)
    root_logger.addHandler(
        _daily_handler(
            "optionflow.log",
            getattr(logging, file_level.upper(), logging.DEBUG),
            app_formatter,
            backup_count=30,
        )
    )
    root_logger.addHandler(
        _daily_handler(
            "optionflow-error.log", logging.ERROR, logging.Formatter(LINE_FORMAT), backup_count=90
        )
    )

    audit_logger = logging.getLogger(AUDIT_LOGGER)
    for handler in list(audit_logger.handlers):
        audit_logger.removeHandler(handler)
        handler.close()
    audit_logger.addHandler(
        _daily_handler(
            "optionflow-audit.log",
            logging.INFO,
            logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"),
            backup_count=365,
        )
    )
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False

    if enable_debug_file:
        debug_handler = logging.handlers.RotatingFileHandler(
            log_dir() / "optionflow-debug.log",
            maxBytes=50 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        debug_handler.setLevel(logging.DEBUG)
        debug_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
            )
        )
        debug_handler.addFilter(ContextFilter())
        root_logger.addHandler(debug_handler)

    logging.getLogger("optionflow.models").setLevel(logging.WARNING)

    root_logger.debug("Logging configured (console=%s, file=%s)", console_level, file_level)


def set_session_id(session_id: str) -> None:
    """Set session ID for current thread."""
    _session_context.session_id = session_id


def get_session_id() -> str | None:
    """Get session ID for current thread."""
    return getattr(_session_context, "session_id", None)


def generate_session_id() -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"sess_{timestamp}_{uuid.uuid4().hex[:8]}"


def audit_log(message: str, **context: Any) -> None:
    """
    Write to audit log.

    Example:
        audit_log("Flow analyzed", symbol="SPY", trades=1200, spreads=87)
    """
    context_str = " | ".join(f"{k}={v}" for k, v in context.items())
    full_message = f"{message} | {context_str}" if context else message
    logging.getLogger(AUDIT_LOGGER).info(full_message)
