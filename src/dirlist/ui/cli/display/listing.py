"""src/dirlist/ui/cli/display/listing.py
What: Render listing plans as lines, grids, detail tables or trees with Rich.
Why: Keep console output formatting in one place for every resolved view.
"""

from __future__ import annotations

import grp
import os
import pwd
import stat
from collections.abc import Iterator, Sequence
from datetime import datetime
from functools import lru_cache
from typing import Final, final

from rich import filesize
from rich.columns import Columns as RichColumns
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from dirlist.features.listing import ListingPlan, ListingSection, TreeNode
from dirlist.features.options.domain import (
    Column,
    ColumnKind,
    ColourMode,
    Details,
    Grid,
    GridDetails,
    Lines,
    SizeFormat,
    TimeType,
    View,
)
from dirlist.platform.filesystem import Directory, FileRecord
from dirlist.platform.filesystem.git import UNMODIFIED

DIRECTORY_STYLE: Final[str] = "bold blue"
TIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M"
BINARY_SUFFIXES: Final[list[str]] = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]
NUMERIC_KINDS: Final[frozenset[ColumnKind]] = frozenset(
    {ColumnKind.INODE, ColumnKind.HARD_LINKS, ColumnKind.FILE_SIZE, ColumnKind.BLOCKS}
)


@lru_cache(maxsize=256)
def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


@lru_cache(maxsize=256)
def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_size(size: int, size_format: SizeFormat | None) -> str:
    """Format ``size`` with decimal prefixes, binary prefixes or as a raw count."""

    if size_format is SizeFormat.JUST_BYTES:
        return str(size)
    if size_format is SizeFormat.BINARY_BYTES:
        unit, suffix = filesize.pick_unit_and_suffix(size, BINARY_SUFFIXES, 1024)
        if unit == 1:
            return f"{size} {suffix}"
        return f"{size / unit:.1f} {suffix}"
    return filesize.decimal(size)


def _timestamp(entry: FileRecord, time_type: TimeType | None) -> float:
    if time_type is TimeType.ACCESSED:
        return entry.accessed
    if time_type is TimeType.CREATED:
        return entry.created
    return entry.modified


def _extended_attributes(entry: FileRecord) -> list[str]:
    try:
        names = os.listxattr(entry.path, follow_symlinks=False)
    except OSError:
        return []
    described: list[str] = []
    for name in names:
        try:
            size = len(os.getxattr(entry.path, name, follow_symlinks=False))
        except OSError:
            continue
        described.append(f"{name} ({size})")
    return described


def _flatten(nodes: Sequence[TreeNode], parent: Directory | None = None) -> Iterator[tuple[TreeNode, Directory | None]]:
    for node in nodes:
        yield node, parent
        yield from _flatten(node.children, node.directory)


@final
class ListingDisplay:
    """Render a listing plan for one resolved view."""

    view: View
    console: Console

    def __init__(self, view: View, console: Console | None = None) -> None:
        self.view = view
        self.console = console or self._make_console(view)

    @staticmethod
    def _make_console(view: View) -> Console:
        colours = view.grid.colours if isinstance(view, GridDetails) else view.colours
        width: int | None = None
        if isinstance(view, Grid):
            width = view.console_width
        elif isinstance(view, GridDetails):
            width = view.grid.console_width
        return Console(
            color_system=None if colours is ColourMode.PLAIN else "auto",
            highlight=False,
            width=width,
            soft_wrap=isinstance(view, Lines),
        )

    def show(self, plan: ListingPlan) -> None:
        """Print every section of ``plan``, separated by blank lines."""

        for index, section in enumerate(plan.sections):
            if index:
                self.console.print()
            if section.heading is not None:
                self.console.print(Text(f"{section.heading}:"))
            if section.tree:
                self._show_tree(section.tree)
            else:
                self._show_entries(section)

    def _name(self, entry: FileRecord) -> Text:
        return Text(entry.name, style=DIRECTORY_STYLE if entry.is_directory else "")

    def _details(self) -> Details | None:
        if isinstance(self.view, GridDetails):
            return self.view.details
        if isinstance(self.view, Details):
            return self.view
        return None

    def _show_entries(self, section: ListingSection) -> None:
        view = self.view
        if isinstance(view, Lines):
            for entry in section.entries:
                self.console.print(self._name(entry))
            return

        if isinstance(view, Grid):
            names = [self._name(entry) for entry in section.entries]
            self.console.print(RichColumns(names, column_first=not view.across, padding=(0, 2)))
            return

        details = self._details()
        if details is None or details.columns is None:
            for entry in section.entries:
                self.console.print(self._name(entry))
            return

        columns = details.columns.for_dir(section.directory)
        rows = [(entry, section.directory, self._name(entry)) for entry in section.entries]
        self.console.print(self._table(details, columns, rows))

    def _show_tree(self, nodes: Sequence[TreeNode]) -> None:
        details = self._details()
        if details is not None and details.columns is not None:
            columns = details.columns.for_dir(None)
            rows = [
                (node.record, parent, Text("  " * node.depth).append_text(self._name(node.record)))
                for node, parent in _flatten(nodes)
            ]
            self.console.print(self._table(details, columns, rows))
            return

        for node in nodes:
            tree = Tree(self._name(node.record))
            self._add_children(tree, node)
            self.console.print(tree)

    def _add_children(self, tree: Tree, node: TreeNode) -> None:
        for child in node.children:
            branch = tree.add(self._name(child.record))
            self._add_children(branch, child)

    def _table(
        self,
        details: Details,
        columns: Sequence[Column],
        rows: Sequence[tuple[FileRecord, Directory | None, Text]],
    ) -> Table:
        table = Table(
            show_header=details.header,
            header_style="bold underline",
            box=None,
            pad_edge=False,
            show_edge=False,
        )
        for column in columns:
            table.add_column(column.header, justify="right" if column.kind in NUMERIC_KINDS else "left")
        table.add_column("Name")

        for entry, directory, name in rows:
            cells: list[str | Text] = [self._cell(column, entry, directory) for column in columns]
            if details.xattr:
                for attribute in _extended_attributes(entry):
                    _ = name.append(f"\n  {attribute}")
            cells.append(name)
            table.add_row(*cells)
        return table

    def _cell(self, column: Column, entry: FileRecord, directory: Directory | None) -> str:
        kind = column.kind
        if kind is ColumnKind.INODE:
            return str(entry.inode)
        if kind is ColumnKind.PERMISSIONS:
            return stat.filemode(entry.mode)
        if kind is ColumnKind.HARD_LINKS:
            return str(entry.links)
        if kind is ColumnKind.FILE_SIZE:
            return "-" if entry.is_directory else format_size(entry.size, column.size_format)
        if kind is ColumnKind.BLOCKS:
            return str(entry.blocks)
        if kind is ColumnKind.USER:
            return _user_name(entry.uid)
        if kind is ColumnKind.GROUP:
            return _group_name(entry.gid)
        if kind is ColumnKind.TIMESTAMP:
            return datetime.fromtimestamp(_timestamp(entry, column.time_type)).strftime(TIME_FORMAT)
        if directory is None:
            return UNMODIFIED
        return directory.git_status(entry.name)


__all__ = ["ListingDisplay", "format_size"]
