"""
Summary: Options facade turning command-line arguments into a validated configuration.
Why: One entry point returns the configuration and paths, or raises a Misfire.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar, final

from dirlist import __version__
from dirlist.features.options.domain import (
    Capabilities,
    Details,
    DirAction,
    FileEntry,
    FileFilter,
    GridDetails,
    Help,
    Version,
    View,
    deduce_view,
)
from dirlist.platform.logging import logger
from dirlist.ui.cli.args.parser import ArgumentParser

FileT = TypeVar("FileT", bound=FileEntry)

DEFAULT_PATHS: tuple[str, ...] = (".",)


@final
@dataclass(frozen=True, slots=True)
class Options:
    """The user's command-line options, resolved and reconciled."""

    dir_action: DirAction
    filter: FileFilter
    view: View

    @staticmethod
    def resolve(
        args: Sequence[str],
        capabilities: Capabilities | None = None,
    ) -> tuple[Options, list[str]]:
        """Resolve ``args`` into options and the paths to list.

        Args:
            args: Command-line arguments without the program name.
            capabilities: Environment facts; probed from the process when omitted.

        Returns:
            tuple[Options, list[str]]: The configuration and the path arguments,
            which default to the current directory.

        Raises:
            Misfire: Help, version, or the first incompatible flag combination.
        """
        caps = capabilities if capabilities is not None else Capabilities.detect()
        flags = ArgumentParser.parse_flags(args, caps)

        if flags.present("help"):
            raise Help(ArgumentParser.help_text(caps))
        if flags.present("version"):
            raise Version(__version__)

        file_filter = FileFilter.deduce(flags)
        logger.debug("Resolved filter %s", file_filter)

        paths = list(flags.free) or list(DEFAULT_PATHS)

        dir_action = DirAction.deduce(flags)
        logger.debug("Resolved directory action %s", dir_action)

        view = deduce_view(flags, file_filter, dir_action, caps)
        logger.debug("Resolved view %s", view)

        return Options(dir_action=dir_action, filter=file_filter, view=view), paths

    def filter_files(self, files: Sequence[FileT]) -> list[FileT]:
        return self.filter.filter(files)

    def sort_files(self, files: Sequence[FileT]) -> list[FileT]:
        return self.filter.sort(files)

    def should_scan_for_git(self) -> bool:
        """Whether the view shows a git column, making repository discovery worthwhile."""

        view = self.view
        if isinstance(view, GridDetails):
            view = view.details
        if isinstance(view, Details) and view.columns is not None:
            return view.columns.should_scan_for_git()
        return False


__all__ = ["DEFAULT_PATHS", "Options"]
