"""Logging setup with redaction of runner identity data.

Profiles carry an identity reference and sometimes an e-mail address as a
display name. The filter here keeps both out of log output.

Usage:
    from run_advisor.utils.log_sanitizer import configure_logging

    configure_logging(logging.DEBUG)
"""

import logging
import re
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler


class LogSanitizationFilter(logging.Filter):
    """Logging filter that redacts runner identifiers and e-mail addresses."""

    PATTERNS: list[tuple[re.Pattern, str]] = [
        # Email addresses
        (re.compile(r'\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b'), '[REDACTED_EMAIL]'),

        # Profile identity references: uid=..., "uid": "..."
        (re.compile(r'(uid["\']?\s*[:=]\s*["\']?)[^"\'&\s,)]+', re.IGNORECASE), r'\1[REDACTED]'),
        (re.compile(r'(user_id["\']?\s*[:=]\s*["\']?)[^"\'&\s,)]+', re.IGNORECASE), r'\1[REDACTED]'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the record in place; never drops it."""
        if record.msg:
            record.msg = self._sanitize(str(record.msg))
        if record.args:
            record.args = self._sanitize_args(record.args)
        return True

    def _sanitize(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def _sanitize_args(self, args: Any) -> Any:
        if isinstance(args, str):
            return self._sanitize(args)
        elif isinstance(args, tuple):
            return tuple(self._sanitize_args(arg) for arg in args)
        elif isinstance(args, dict):
            return {k: self._sanitize_args(v) for k, v in args.items()}
        return args


def install_log_sanitizer(logger_name: Optional[str] = None) -> LogSanitizationFilter:
    """Install the sanitization filter on a named logger or the root logger and its handlers."""
    sanitizer = LogSanitizationFilter()
    target = logging.getLogger(logger_name)
    target.addFilter(sanitizer)
    if logger_name is None:
        for handler in target.handlers:
            handler.addFilter(sanitizer)
    return sanitizer


def sanitize_string(text: str) -> str:
    """Sanitize a string outside the logging system."""
    return LogSanitizationFilter()._sanitize(text)


def configure_logging(level: int = logging.WARNING, console: Optional[Console] = None) -> None:
    """
    Route logging through a rich handler with sanitization.

    Args:
        level: Root log level
        console: Console to log to (defaults to stderr)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    install_log_sanitizer()
