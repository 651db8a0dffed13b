"""Structured logging for remote browser connections.

Every record emitted for a connection carries its context (engine and CDP
endpoint) in ``record.extra``; both formatters render it. The library never
installs handlers itself; applications call setup_logging() (or
Configuration.configure_logging()) once at startup.

Note: Named logging_setup.py to avoid conflicts with Python's built-in logging module.
"""

import sys
import json
import logging
from typing import Optional, Dict, Any, Union
from datetime import datetime


def _context(record: logging.LogRecord) -> Optional[Dict[str, Any]]:
    extra = getattr(record, "extra", None)
    return extra if isinstance(extra, dict) and extra else None


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON for machine-parseable output.

    Example output:
        {"timestamp": "2025-10-24T23:30:00.123Z", "level": "WARNING",
         "logger": "remote_browser.page", "message": "Error closing browser connection: ...",
         "extra": {"engine": "puppeteer", "cdp_ws_url": "ws://localhost:9222/..."}}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        context = _context(record)
        if context:
            log_data["extra"] = context

        if record.levelno == logging.DEBUG:
            log_data["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Formats log records as human-readable text, context appended.

    Example output:
        2025-10-24 23:30:00 [DEBUG] remote_browser.page: Connected (engine=puppeteer, cdp_ws_url=ws://...)
    """

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if not context:
            return line
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        # Keep a traceback, if any, below the first line
        first, sep, rest = line.partition("\n")
        return f"{first} ({context_str}){sep}{rest}"


class ConnectionLogger(logging.LoggerAdapter):
    """Logger adapter that tags records with one connection's context.

    Fields passed through ``extra=`` at the call site are merged over the
    connection fields.

    Usage:
        log = ConnectionLogger(logger, engine="playwright", cdp_ws_url=url)
        log.debug("Connected", extra={"page_count": 3})
    """

    def __init__(self, logger: logging.Logger, **context):
        super().__init__(logger, context)

    def process(self, msg, kwargs):
        fields = dict(self.extra)
        fields.update(kwargs.pop("extra", None) or {})
        kwargs["extra"] = {"extra": fields}
        return msg, kwargs


def setup_logging(
    format_type: str = "text",
    level: Optional[str] = None,
    quiet: bool = False,
    verbose: bool = False,
) -> None:
    """Configure root logging with the selected format and level.

    Args:
        format_type: Output format - "json" or "text" (default: "text")
        level: Logging level name. If None, determined by quiet/verbose flags
        quiet: Only errors (sets level to ERROR)
        verbose: Debug output (sets level to DEBUG)

    Precedence for level determination:
        1. quiet flag → ERROR
        2. verbose flag → DEBUG
        3. explicit level argument → as specified
        4. default → INFO
    """
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    elif level:
        log_level = getattr(logging, level.upper(), logging.INFO)
    else:
        log_level = logging.INFO

    formatter: Union[JSONFormatter, TextFormatter]
    if format_type == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("remote_browser").setLevel(log_level)
