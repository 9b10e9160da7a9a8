"""Utility modules."""

from .log_sanitizer import configure_logging, install_log_sanitizer

__all__ = ["configure_logging", "install_log_sanitizer"]
