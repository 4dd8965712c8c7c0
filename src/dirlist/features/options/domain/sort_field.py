"""
Summary: Sort field vocabulary and its user-word lookup.
Why: Translate the ``--sort`` word into a closed enum with a Name default.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final

from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.misfire import InvalidOptions


class SortField(str, Enum):
    """User-supplied field to sort by."""

    UNSORTED = "none"
    NAME = "name"
    EXTENSION = "extension"
    SIZE = "size"
    INODE = "inode"
    MODIFIED_DATE = "modified"
    ACCESSED_DATE = "accessed"
    CREATED_DATE = "created"

    @staticmethod
    def from_word(word: str) -> SortField:
        """Translate a raw ``--sort`` word into the matching field.

        Raises:
            InvalidOptions: If the word names no known field.
        """
        field = _SORT_WORDS.get(word)
        if field is None:
            raise InvalidOptions.unrecognized("sort", word)
        return field

    @staticmethod
    def deduce(flags: Flags) -> SortField:
        """Resolve the sort field, falling back to name order."""

        word = flags.value("sort")
        if word is None:
            return SortField.NAME
        return SortField.from_word(word)


_SORT_WORDS: Final[Mapping[str, SortField]] = {
    "name": SortField.NAME,
    "filename": SortField.NAME,
    "size": SortField.SIZE,
    "filesize": SortField.SIZE,
    "ext": SortField.EXTENSION,
    "extension": SortField.EXTENSION,
    "mod": SortField.MODIFIED_DATE,
    "modified": SortField.MODIFIED_DATE,
    "acc": SortField.ACCESSED_DATE,
    "accessed": SortField.ACCESSED_DATE,
    "cr": SortField.CREATED_DATE,
    "created": SortField.CREATED_DATE,
    "none": SortField.UNSORTED,
    "inode": SortField.INODE,
}


__all__ = ["SortField"]
