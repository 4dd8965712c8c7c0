"""
Summary: Runtime capability descriptor consulted while resolving options.
Why: Platform and feature gates stay testable without platform-specific builds.
"""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class Capabilities:
    """Environment facts supplied by external collaborators.

    Attributes:
        terminal_width: Column width of stdout, or ``None`` when stdout is not a terminal.
        xattr: Whether extended attributes can be read on this platform.
        git: Whether git status support is enabled.
    """

    terminal_width: int | None = None
    xattr: bool = False
    git: bool = True

    @classmethod
    def detect(cls) -> Capabilities:
        """Probe the running process for its capabilities."""

        width: int | None = None
        if sys.stdout.isatty():
            width = shutil.get_terminal_size().columns
        return cls(terminal_width=width, xattr=hasattr(os, "listxattr"), git=True)


__all__ = ["Capabilities"]
