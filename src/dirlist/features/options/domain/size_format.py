"""
Summary: File size prefix formats selected by ``--binary`` and ``--bytes``.
Why: Reject the binary/bytes combination before any column is built.
"""

from __future__ import annotations

from enum import Enum

from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.misfire import Conflict


class SizeFormat(Enum):
    """How file sizes are displayed in the size column."""

    DECIMAL_BYTES = "decimal"
    BINARY_BYTES = "binary"
    JUST_BYTES = "bytes"

    @staticmethod
    def deduce(flags: Flags) -> SizeFormat:
        """Pick the size format from the binary and bytes flags.

        Raises:
            Conflict: If both ``--binary`` and ``--bytes`` were given.
        """
        binary = flags.present("binary")
        just_bytes = flags.present("bytes")

        if binary and just_bytes:
            raise Conflict("binary", "bytes")
        if binary:
            return SizeFormat.BINARY_BYTES
        if just_bytes:
            return SizeFormat.JUST_BYTES
        return SizeFormat.DECIMAL_BYTES


__all__ = ["SizeFormat"]
