"""Rich console handler for user-facing diagnostics.

Where: platform/logging/handlers.py
What: Render option misfires and unreadable paths as compact ``dirlist:`` lines.
Why: Diagnostics read like command output rather than log records.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

PROGRAM_NAME = "dirlist"


class DiagnosticRichHandler(RichHandler):
    """Rich handler that prefixes diagnostics with the program name."""

    _MISFIRE_COLOURS: ClassVar[dict[str, str]] = {
        "Conflict": "red",
        "Useless": "yellow",
        "Useless2": "yellow",
        "FailedParse": "red",
        "InvalidOptions": "red",
    }
    _LEVEL_COLOURS: ClassVar[dict[int, str]] = {
        logging.DEBUG: "bright_black",
        logging.INFO: "blue",
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "bold red",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact, markup-free settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _prefix(self, colour: str) -> Text:
        text = Text()
        _ = text.append(f"{PROGRAM_NAME}: ", style=Style.parse(f"bold {colour}"))
        return text

    def _render_misfire(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render a record carrying a ``misfire`` extra."""

        misfire = getattr(record, "misfire", None)
        if misfire is None:
            return None

        colour = self._MISFIRE_COLOURS.get(type(misfire).__name__, "red")
        text = self._prefix(colour)
        _ = text.append(message, style=Style(color=colour))
        return text

    def _render_path_problem(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render a record carrying a ``path`` extra with the path highlighted."""

        path = getattr(record, "path", None)
        if path is None:
            return None

        colour = self._LEVEL_COLOURS.get(record.levelno, "red")
        text = self._prefix(colour)
        _ = text.append(str(path), style=Style(bold=True))
        _ = text.append(f": {message}")
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render diagnostics with the program prefix; defer other records to Rich."""

        misfire_text = self._render_misfire(record, message)
        if misfire_text is not None:
            return misfire_text

        path_text = self._render_path_problem(record, message)
        if path_text is not None:
            return path_text

        return super().render_message(record, message)


__all__ = ["DiagnosticRichHandler", "PROGRAM_NAME"]
