"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure logging defaults and expose the shared application logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import DiagnosticRichHandler


LOG_LEVEL_ENV: Final[str] = "DIRLIST_LOG_LEVEL"


def console_level_from_env(
    env: Mapping[str, str] | None = None,
    default: int = logging.WARNING,
) -> int:
    """Return the console level named by ``DIRLIST_LOG_LEVEL``, or ``default``."""

    mapping = env if env is not None else os.environ
    name = (mapping.get(LOG_LEVEL_ENV) or "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to WARNING.
        file_level: Logging level for file output. Defaults to DEBUG.
        console: Console to render to; defaults to stderr.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger("dirlist")
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = DiagnosticRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = setup_logger(console_level=console_level_from_env())


__all__ = ["LOG_LEVEL_ENV", "console_level_from_env", "setup_logger", "logger"]
