"""
Summary: Timestamp selection from ``--time WORD`` or the discrete time flags.
Why: A time word and a discrete time flag together are reported as useless.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final, final

from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.misfire import InvalidOptions, Useless


class TimeType(Enum):
    """One of the timestamps a file carries."""

    ACCESSED = "accessed"
    MODIFIED = "modified"
    CREATED = "created"

    @property
    def header(self) -> str:
        """Column header shown above this timestamp."""

        return _TIME_HEADERS[self]


_TIME_HEADERS: Final[Mapping[TimeType, str]] = {
    TimeType.ACCESSED: "Date Accessed",
    TimeType.MODIFIED: "Date Modified",
    TimeType.CREATED: "Date Created",
}

# Discrete flags in the order they are blamed when combined with --time.
_DISCRETE_FLAGS: Final[tuple[str, ...]] = ("modified", "created", "accessed")


@final
@dataclass(frozen=True, slots=True)
class TimeTypes:
    """Which timestamps to show; any combination is allowed."""

    accessed: bool = False
    modified: bool = True
    created: bool = False

    @staticmethod
    def from_word(word: str) -> TimeTypes:
        """Translate a raw ``--time`` word into a single-timestamp selection.

        Raises:
            InvalidOptions: If the word names no known timestamp.
        """
        selection = _TIME_WORDS.get(word)
        if selection is None:
            raise InvalidOptions.unrecognized("time", word)
        return selection

    @staticmethod
    def deduce(flags: Flags) -> TimeTypes:
        """Resolve the timestamp selection from the time flags.

        Raises:
            Useless: If a discrete time flag accompanies ``--time``.
            InvalidOptions: If the ``--time`` word is not recognised.
        """
        word = flags.value("time")

        if word is not None:
            for name in _DISCRETE_FLAGS:
                if flags.present(name):
                    raise Useless(name, True, "time")
            return TimeTypes.from_word(word)

        accessed = flags.present("accessed")
        modified = flags.present("modified")
        created = flags.present("created")
        if accessed or modified or created:
            return TimeTypes(accessed=accessed, modified=modified, created=created)
        return TimeTypes()

    def selected(self) -> tuple[TimeType, ...]:
        """Return the chosen timestamps in column order."""

        chosen: list[TimeType] = []
        if self.modified:
            chosen.append(TimeType.MODIFIED)
        if self.created:
            chosen.append(TimeType.CREATED)
        if self.accessed:
            chosen.append(TimeType.ACCESSED)
        return tuple(chosen)


_TIME_WORDS: Final[Mapping[str, TimeTypes]] = {
    "mod": TimeTypes(modified=True),
    "modified": TimeTypes(modified=True),
    "acc": TimeTypes(accessed=True, modified=False),
    "accessed": TimeTypes(accessed=True, modified=False),
    "cr": TimeTypes(created=True, modified=False),
    "created": TimeTypes(created=True, modified=False),
}


__all__ = ["TimeType", "TimeTypes"]
