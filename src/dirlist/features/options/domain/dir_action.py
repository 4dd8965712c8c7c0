"""
Summary: Decide whether directories are shown as files, listed, or recursed.
Why: Recurse, list-dirs and tree interact and must be rejected in pairs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, final

from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.misfire import Conflict, FailedParse

_DEPTH_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")


def parse_depth(raw: str) -> int:
    """Parse a ``--level`` value as a non-negative integer.

    Raises:
        FailedParse: If ``raw`` is not a plain non-negative number.
    """
    if not raw:
        raise FailedParse(raw, "cannot parse integer from empty string")
    if _DEPTH_PATTERN.fullmatch(raw) is None:
        raise FailedParse(raw, "invalid digit found in string")
    return int(raw)


@final
@dataclass(frozen=True, slots=True)
class RecurseOptions:
    """How to recurse: as a tree or as separate listings, and how deep."""

    tree: bool = False
    max_depth: int | None = None

    @staticmethod
    def deduce(flags: Flags, tree: bool) -> RecurseOptions:
        level = flags.value("level")
        max_depth = parse_depth(level) if level is not None else None
        return RecurseOptions(tree=tree, max_depth=max_depth)

    def is_too_deep(self, depth: int) -> bool:
        """Return whether ``depth`` is past the limit; depth 0 is the listed directory."""

        return self.max_depth is not None and depth >= self.max_depth


class DirAction:
    """What to do when encountering a directory."""

    def recurse_options(self) -> RecurseOptions | None:
        return None

    def treat_dirs_as_files(self) -> bool:
        return False

    @staticmethod
    def deduce(flags: Flags) -> DirAction:
        """Resolve the directory action from recurse, list-dirs and tree.

        Raises:
            Conflict: For recurse with list-dirs, or tree with list-dirs.
            FailedParse: If ``--level`` is not a number.
        """
        recurse = flags.present("recurse")
        list_dirs = flags.present("list-dirs")
        tree = flags.present("tree")

        if recurse and list_dirs:
            raise Conflict("recurse", "list-dirs")
        if tree and list_dirs:
            raise Conflict("tree", "list-dirs")
        if tree:
            return Recurse(RecurseOptions.deduce(flags, tree=True))
        if recurse:
            return Recurse(RecurseOptions.deduce(flags, tree=False))
        if list_dirs:
            return AsFile()
        return ListDirs()


@final
@dataclass(frozen=True, slots=True)
class AsFile(DirAction):
    """Show directories as regular entries without listing them."""

    def treat_dirs_as_files(self) -> bool:
        return True


@final
@dataclass(frozen=True, slots=True)
class ListDirs(DirAction):
    """List the contents of each directory argument."""


@final
@dataclass(frozen=True, slots=True)
class Recurse(DirAction):
    """List directories and descend into their subdirectories."""

    options: RecurseOptions

    def recurse_options(self) -> RecurseOptions | None:
        return self.options

    def treat_dirs_as_files(self) -> bool:
        return self.options.tree


__all__ = ["AsFile", "DirAction", "ListDirs", "RecurseOptions", "Recurse", "parse_depth"]
