"""
Summary: Filtering and sorting policy applied to gathered file records.
Why: Listing code stays free of ordering rules such as directories-first.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Final, Protocol, TypeVar, final

from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.sort_field import SortField

_DIGIT_RUN: Final[re.Pattern[str]] = re.compile(r"([0-9]+)")


class FileEntry(Protocol):
    """Metadata the filter needs from a file record."""

    @property
    def name(self) -> str: ...

    @property
    def ext(self) -> str | None: ...

    @property
    def size(self) -> int: ...

    @property
    def inode(self) -> int: ...

    @property
    def modified(self) -> float: ...

    @property
    def accessed(self) -> float: ...

    @property
    def created(self) -> float: ...

    @property
    def is_directory(self) -> bool: ...


FileT = TypeVar("FileT", bound=FileEntry)


def natural_key(name: str) -> tuple[str | int, ...]:
    """Return a key comparing digit runs in ``name`` by numeric value.

    ``re.split`` with a capturing group alternates text and digit runs, so
    odd positions always hold integers and keys stay comparable.
    """
    parts = _DIGIT_RUN.split(name)
    return tuple(int(part) if index % 2 else part for index, part in enumerate(parts))


def _name_key(entry: FileEntry) -> tuple[Any, ...]:
    return (natural_key(entry.name), entry.name)


def _extension_key(entry: FileEntry) -> tuple[Any, ...]:
    return (entry.ext is not None, entry.ext or "", *_name_key(entry))


_SORT_KEYS: Final[Mapping[SortField, Callable[[FileEntry], Any]]] = {
    SortField.NAME: _name_key,
    SortField.EXTENSION: _extension_key,
    SortField.SIZE: lambda entry: entry.size,
    SortField.INODE: lambda entry: entry.inode,
    SortField.MODIFIED_DATE: lambda entry: entry.modified,
    SortField.ACCESSED_DATE: lambda entry: entry.accessed,
    SortField.CREATED_DATE: lambda entry: entry.created,
}


@final
@dataclass(frozen=True, slots=True)
class FileFilter:
    """Which files to hide and in what order to show the rest."""

    list_dirs_first: bool = False
    reverse: bool = False
    show_invisibles: bool = False
    sort_field: SortField = SortField.NAME

    @staticmethod
    def deduce(flags: Flags) -> FileFilter:
        """Build the filter from the sorting and visibility flags."""

        return FileFilter(
            list_dirs_first=flags.present("group-directories-first"),
            reverse=flags.present("reverse"),
            show_invisibles=flags.present("all"),
            sort_field=SortField.deduce(flags),
        )

    def filter(self, files: Iterable[FileT]) -> list[FileT]:
        """Drop dot-files unless invisible files were requested."""

        if self.show_invisibles:
            return list(files)
        return [entry for entry in files if not entry.name.startswith(".")]

    def sort(self, files: Iterable[FileT]) -> list[FileT]:
        """Return ``files`` ordered by the sort field.

        Reversal applies to the whole sorted sequence. Directories-first is
        a separate stable pass run afterwards, so reversing only changes
        the order within the directory and file groups.
        """
        key = _SORT_KEYS.get(self.sort_field)
        ordered = list(files) if key is None else sorted(files, key=key)

        if self.reverse:
            ordered.reverse()

        if self.list_dirs_first:
            ordered.sort(key=lambda entry: not entry.is_directory)

        return ordered


__all__ = ["FileEntry", "FileFilter", "natural_key"]
