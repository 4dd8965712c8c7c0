"""
Summary: Package exports for the option-reconciliation domain.
Why: Offer one import path for resolvers, value objects and misfires.
"""

from dirlist.features.options.domain.capabilities import Capabilities
from dirlist.features.options.domain.columns import Column, ColumnKind, Columns, DirContext
from dirlist.features.options.domain.dir_action import (
    AsFile,
    DirAction,
    ListDirs,
    Recurse,
    RecurseOptions,
)
from dirlist.features.options.domain.file_filter import FileEntry, FileFilter, natural_key
from dirlist.features.options.domain.flags import Flags
from dirlist.features.options.domain.misfire import (
    Conflict,
    FailedParse,
    Help,
    InvalidOptions,
    Misfire,
    Useless,
    Useless2,
    Version,
)
from dirlist.features.options.domain.size_format import SizeFormat
from dirlist.features.options.domain.sort_field import SortField
from dirlist.features.options.domain.time_types import TimeType, TimeTypes
from dirlist.features.options.domain.view import (
    ColourMode,
    Details,
    Grid,
    GridDetails,
    Lines,
    View,
    deduce_view,
)

__all__ = [
    "AsFile",
    "Capabilities",
    "ColourMode",
    "Column",
    "ColumnKind",
    "Columns",
    "Conflict",
    "Details",
    "DirAction",
    "DirContext",
    "FailedParse",
    "FileEntry",
    "FileFilter",
    "Flags",
    "Grid",
    "GridDetails",
    "Help",
    "InvalidOptions",
    "Lines",
    "ListDirs",
    "Misfire",
    "Recurse",
    "RecurseOptions",
    "SizeFormat",
    "SortField",
    "TimeType",
    "TimeTypes",
    "Useless",
    "Useless2",
    "Version",
    "View",
    "deduce_view",
    "natural_key",
]
