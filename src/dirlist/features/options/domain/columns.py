"""
Summary: Derive the ordered details-view columns from resolved flags.
Why: Column order is part of the contract and depends on repository context.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final, Protocol, final

from dirlist.features.options.domain.capabilities import Capabilities
from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.size_format import SizeFormat
from dirlist.features.options.domain.time_types import TimeType, TimeTypes


class DirContext(Protocol):
    """Directory being listed, as far as column selection cares."""

    def has_git_repo(self) -> bool:
        """Return whether the directory belongs to a git repository."""
        ...


class ColumnKind(Enum):
    """Identifiers of the columns a details view can show."""

    INODE = "inode"
    PERMISSIONS = "permissions"
    HARD_LINKS = "links"
    FILE_SIZE = "size"
    BLOCKS = "blocks"
    USER = "user"
    GROUP = "group"
    TIMESTAMP = "timestamp"
    GIT_STATUS = "git"


_HEADERS: Final[Mapping[ColumnKind, str]] = {
    ColumnKind.INODE: "Inode",
    ColumnKind.PERMISSIONS: "Permissions",
    ColumnKind.HARD_LINKS: "Links",
    ColumnKind.FILE_SIZE: "Size",
    ColumnKind.BLOCKS: "Blocks",
    ColumnKind.USER: "User",
    ColumnKind.GROUP: "Group",
    ColumnKind.GIT_STATUS: "Git",
}


@final
@dataclass(frozen=True, slots=True)
class Column:
    """A single column; size and timestamp columns carry their format."""

    kind: ColumnKind
    size_format: SizeFormat | None = None
    time_type: TimeType | None = None

    @classmethod
    def file_size(cls, size_format: SizeFormat) -> Column:
        return cls(ColumnKind.FILE_SIZE, size_format=size_format)

    @classmethod
    def timestamp(cls, time_type: TimeType) -> Column:
        return cls(ColumnKind.TIMESTAMP, time_type=time_type)

    @property
    def header(self) -> str:
        """Label shown in the header row."""

        if self.time_type is not None:
            return self.time_type.header
        return _HEADERS[self.kind]


INODE: Final[Column] = Column(ColumnKind.INODE)
PERMISSIONS: Final[Column] = Column(ColumnKind.PERMISSIONS)
HARD_LINKS: Final[Column] = Column(ColumnKind.HARD_LINKS)
BLOCKS: Final[Column] = Column(ColumnKind.BLOCKS)
USER: Final[Column] = Column(ColumnKind.USER)
GROUP: Final[Column] = Column(ColumnKind.GROUP)
GIT_STATUS: Final[Column] = Column(ColumnKind.GIT_STATUS)


@final
@dataclass(frozen=True, slots=True)
class Columns:
    """Column switches resolved from the long-view flags."""

    size_format: SizeFormat = SizeFormat.DECIMAL_BYTES
    time_types: TimeTypes = TimeTypes()
    inode: bool = False
    links: bool = False
    blocks: bool = False
    group: bool = False
    git: bool = False

    @staticmethod
    def deduce(flags: Flags, capabilities: Capabilities) -> Columns:
        """Resolve column switches, failing on size or time conflicts first."""

        return Columns(
            size_format=SizeFormat.deduce(flags),
            time_types=TimeTypes.deduce(flags),
            inode=flags.present("inode"),
            links=flags.present("links"),
            blocks=flags.present("blocks"),
            group=flags.present("group"),
            git=capabilities.git and flags.present("git"),
        )

    def should_scan_for_git(self) -> bool:
        return self.git

    def for_dir(self, directory: DirContext | None) -> list[Column]:
        """Return the columns to show when listing ``directory``.

        The order is fixed: inode, permissions, links, size, blocks, user,
        group, timestamps (modified, created, accessed), then git status.
        """
        columns: list[Column] = []

        if self.inode:
            columns.append(INODE)

        columns.append(PERMISSIONS)

        if self.links:
            columns.append(HARD_LINKS)

        columns.append(Column.file_size(self.size_format))

        if self.blocks:
            columns.append(BLOCKS)

        columns.append(USER)

        if self.group:
            columns.append(GROUP)

        columns.extend(Column.timestamp(time_type) for time_type in self.time_types.selected())

        if directory is not None and self.should_scan_for_git() and directory.has_git_repo():
            columns.append(GIT_STATUS)

        return columns


__all__ = [
    "BLOCKS",
    "GIT_STATUS",
    "GROUP",
    "HARD_LINKS",
    "INODE",
    "PERMISSIONS",
    "USER",
    "Column",
    "ColumnKind",
    "Columns",
    "DirContext",
]
