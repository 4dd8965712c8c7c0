"""
Summary: Gather, filter and sort the records each path argument should show.
Why: Rendering receives ready-ordered sections and never touches the filesystem.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from dirlist.features.options.domain import DirAction, FileFilter, RecurseOptions
from dirlist.platform.filesystem import Directory, FileRecord
from dirlist.platform.logging import logger


@final
@dataclass(frozen=True, slots=True)
class TreeNode:
    """An entry in tree view with its already-ordered children."""

    record: FileRecord
    depth: int
    directory: Directory | None = None
    children: tuple[TreeNode, ...] = ()


@final
@dataclass(frozen=True, slots=True)
class ListingSection:
    """Entries rendered together, optionally under a directory heading."""

    heading: str | None
    directory: Directory | None
    entries: tuple[FileRecord, ...] = ()
    tree: tuple[TreeNode, ...] = ()


@final
@dataclass(slots=True)
class ListingPlan:
    """Everything to render, plus how many path arguments could not be read."""

    sections: list[ListingSection] = field(default_factory=list)
    failures: int = 0


def _stat_argument(raw: str) -> FileRecord | None:
    try:
        return FileRecord.from_path(Path(raw), name=raw)
    except OSError as exc:
        logger.error(exc.strerror or str(exc), extra={"path": raw})
        return None


def _read_directory(path: Path) -> Directory | None:
    try:
        return Directory.read(path)
    except OSError as exc:
        logger.error(exc.strerror or str(exc), extra={"path": str(path)})
        return None


@final
class ListPathsService:
    """Turn the resolved filter and directory action into a listing plan."""

    file_filter: FileFilter
    dir_action: DirAction

    def __init__(self, file_filter: FileFilter, dir_action: DirAction) -> None:
        self.file_filter = file_filter
        self.dir_action = dir_action

    def _ordered(self, records: Sequence[FileRecord]) -> list[FileRecord]:
        return self.file_filter.sort(self.file_filter.filter(records))

    def collect(self, paths: Sequence[str]) -> ListingPlan:
        """Build the listing plan for ``paths`` in argument order.

        Files (and directories when they are shown as files) come first in one
        section, followed by one section per directory argument.
        """
        plan = ListingPlan()
        records: list[FileRecord] = []
        for raw in paths:
            record = _stat_argument(raw)
            if record is None:
                plan.failures += 1
            else:
                records.append(record)

        recurse = self.dir_action.recurse_options()
        if recurse is not None and recurse.tree:
            roots = self.file_filter.sort(records)
            plan.sections.append(
                ListingSection(
                    heading=None,
                    directory=None,
                    tree=tuple(self._tree_node(record, 0, recurse) for record in roots),
                )
            )
            return plan

        treat_as_files = self.dir_action.treat_dirs_as_files()
        files = [r for r in records if treat_as_files or not r.is_directory]
        dirs = [r for r in records if r.is_directory and not treat_as_files]

        if files:
            plan.sections.append(
                ListingSection(heading=None, directory=None, entries=tuple(self.file_filter.sort(files)))
            )

        show_headings = len(records) > 1 or recurse is not None
        for record in self.file_filter.sort(dirs):
            self._list_directory(plan, record.path, record.name, 0, recurse, show_headings)
        return plan

    def _list_directory(
        self,
        plan: ListingPlan,
        path: Path,
        heading: str,
        depth: int,
        recurse: RecurseOptions | None,
        show_headings: bool,
    ) -> None:
        directory = _read_directory(path)
        if directory is None:
            plan.failures += 1
            return

        entries = self._ordered(directory.entries)
        plan.sections.append(
            ListingSection(
                heading=heading if show_headings else None,
                directory=directory,
                entries=tuple(entries),
            )
        )

        if recurse is None or recurse.is_too_deep(depth + 1):
            return
        for entry in entries:
            if entry.is_directory:
                child_heading = str(Path(heading) / entry.name)
                self._list_directory(plan, entry.path, child_heading, depth + 1, recurse, True)

    def _tree_node(self, record: FileRecord, depth: int, recurse: RecurseOptions) -> TreeNode:
        if not record.is_directory or recurse.is_too_deep(depth):
            return TreeNode(record=record, depth=depth)

        directory = _read_directory(record.path)
        if directory is None:
            return TreeNode(record=record, depth=depth)

        children = tuple(
            self._tree_node(child, depth + 1, recurse)
            for child in self._ordered(directory.entries)
        )
        return TreeNode(record=record, depth=depth, directory=directory, children=children)


__all__ = ["ListPathsService", "ListingPlan", "ListingSection", "TreeNode"]
