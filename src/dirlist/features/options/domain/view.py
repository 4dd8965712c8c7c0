"""
Summary: Reconcile view flags into exactly one rendering mode.
Why: Flag combinations are checked in a fixed priority so the blamed pair is stable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final, final

from dirlist.features.options.domain.capabilities import Capabilities
from dirlist.features.options.domain.columns import Columns
from dirlist.features.options.domain.dir_action import DirAction, RecurseOptions
from dirlist.features.options.domain.file_filter import FileFilter
from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.misfire import Misfire, Useless, Useless2


class ColourMode(Enum):
    """Whether output is styled."""

    PLAIN = "plain"
    COLOURFUL = "colourful"


@final
@dataclass(frozen=True, slots=True)
class Details:
    """Long listing, or a tree when ``columns`` is ``None``."""

    columns: Columns | None
    header: bool
    recurse: RecurseOptions | None
    filter: FileFilter
    xattr: bool
    colours: ColourMode


@final
@dataclass(frozen=True, slots=True)
class Grid:
    """Names laid out in columns across the terminal width."""

    across: bool
    console_width: int
    colours: ColourMode


@final
@dataclass(frozen=True, slots=True)
class GridDetails:
    """Long listing laid out in grid columns."""

    grid: Grid
    details: Details


@final
@dataclass(frozen=True, slots=True)
class Lines:
    """One name per line."""

    colours: ColourMode


View = Details | Grid | GridDetails | Lines


@final
@dataclass(frozen=True, slots=True)
class Rule:
    """A validation rule: when ``applies`` holds, resolution fails with ``misfire``."""

    applies: Callable[[Flags, Capabilities], bool]
    misfire: Callable[[], Misfire]


def check_rules(rules: tuple[Rule, ...], flags: Flags, capabilities: Capabilities) -> None:
    """Raise the misfire of the first rule that applies."""

    for rule in rules:
        if rule.applies(flags, capabilities):
            raise rule.misfire()


def _useless_without_long(name: str) -> Rule:
    return Rule(
        applies=lambda flags, _caps: flags.present(name),
        misfire=lambda: Useless(name, False, "long"),
    )


LONG_RULES: Final[tuple[Rule, ...]] = (
    Rule(
        applies=lambda flags, _caps: flags.present("across") and not flags.present("grid"),
        misfire=lambda: Useless("across", True, "long"),
    ),
    Rule(
        applies=lambda flags, _caps: flags.present("oneline"),
        misfire=lambda: Useless("oneline", True, "long"),
    ),
)

LONG_ONLY_FLAGS: Final[tuple[str, ...]] = (
    "binary",
    "bytes",
    "inode",
    "links",
    "header",
    "blocks",
    "time",
    "group",
)

WITHOUT_LONG_RULES: Final[tuple[Rule, ...]] = (
    *(_useless_without_long(name) for name in LONG_ONLY_FLAGS),
    Rule(
        applies=lambda flags, caps: caps.git and flags.present("git"),
        misfire=lambda: Useless("git", False, "long"),
    ),
    Rule(
        applies=lambda flags, _caps: (
            flags.present("level")
            and not flags.present("recurse")
            and not flags.present("tree")
        ),
        misfire=lambda: Useless2("level", "recurse", "tree"),
    ),
    Rule(
        applies=lambda flags, caps: caps.xattr and flags.present("extended"),
        misfire=lambda: Useless("extended", False, "long"),
    ),
)

BASE_VIEW_RULES: Final[tuple[Rule, ...]] = (
    Rule(
        applies=lambda flags, _caps: flags.present("oneline") and flags.present("across"),
        misfire=lambda: Useless("across", True, "oneline"),
    ),
)


def _terminal_colours(capabilities: Capabilities) -> ColourMode:
    if capabilities.terminal_width is not None:
        return ColourMode.COLOURFUL
    return ColourMode.PLAIN


def base_view(
    flags: Flags,
    file_filter: FileFilter,
    dir_action: DirAction,
    capabilities: Capabilities,
) -> View:
    """Choose between lines, tree and grid; shared by the long and short paths."""

    width = capabilities.terminal_width
    if width is None:
        # Output is redirected; nothing to lay out against.
        return Lines(colours=ColourMode.PLAIN)

    check_rules(BASE_VIEW_RULES, flags, capabilities)

    if flags.present("oneline"):
        return Lines(colours=ColourMode.COLOURFUL)

    if flags.present("tree"):
        return Details(
            columns=None,
            header=False,
            recurse=dir_action.recurse_options(),
            filter=file_filter,
            xattr=False,
            colours=ColourMode.COLOURFUL,
        )

    return Grid(
        across=flags.present("across"),
        console_width=width,
        colours=ColourMode.COLOURFUL,
    )


def long_details(
    flags: Flags,
    file_filter: FileFilter,
    dir_action: DirAction,
    capabilities: Capabilities,
) -> Details:
    """Validate the long-view flags and build the details configuration."""

    check_rules(LONG_RULES, flags, capabilities)
    return Details(
        columns=Columns.deduce(flags, capabilities),
        header=flags.present("header"),
        recurse=dir_action.recurse_options(),
        filter=file_filter,
        xattr=capabilities.xattr and flags.present("extended"),
        colours=_terminal_colours(capabilities),
    )


def deduce_view(
    flags: Flags,
    file_filter: FileFilter,
    dir_action: DirAction,
    capabilities: Capabilities,
) -> View:
    """Resolve the single view the flags describe.

    With ``--long`` the long-only validation runs, and ``--grid`` folds the
    base-view decision into a grid of details (or whatever else the base
    view resolves to). Without ``--long`` every long-only flag is rejected
    before the base view is chosen.

    Raises:
        Misfire: The first violated rule in priority order.
    """
    if flags.present("long"):
        details = long_details(flags, file_filter, dir_action, capabilities)
        if not flags.present("grid"):
            return details

        view = base_view(flags, file_filter, dir_action, capabilities)
        if isinstance(view, Grid):
            return GridDetails(grid=view, details=details)
        return view

    check_rules(WITHOUT_LONG_RULES, flags, capabilities)
    return base_view(flags, file_filter, dir_action, capabilities)


__all__ = [
    "BASE_VIEW_RULES",
    "LONG_ONLY_FLAGS",
    "LONG_RULES",
    "WITHOUT_LONG_RULES",
    "ColourMode",
    "Details",
    "Grid",
    "GridDetails",
    "Lines",
    "Rule",
    "View",
    "base_view",
    "check_rules",
    "deduce_view",
    "long_details",
]
