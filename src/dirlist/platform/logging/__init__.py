"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the diagnostic Rich handler.
Why: Provide a single canonical import path for logging.
"""

from __future__ import annotations

from .config import LOG_LEVEL_ENV, console_level_from_env, logger, setup_logger
from .handlers import DiagnosticRichHandler

__all__ = [
    "DiagnosticRichHandler",
    "LOG_LEVEL_ENV",
    "console_level_from_env",
    "logger",
    "setup_logger",
]
