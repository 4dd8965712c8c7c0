"""Tests for listing display rendering."""

import stat
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from dirlist.features.listing import ListingPlan, ListingSection, TreeNode
from dirlist.features.options.domain import (
    ColourMode,
    Columns,
    Details,
    FileFilter,
    Grid,
    GridDetails,
    Lines,
    SizeFormat,
    View,
)
from dirlist.platform.filesystem import FileRecord
from dirlist.ui.cli.display import ListingDisplay, format_size


def _record(name: str, *, directory: bool = False, size: int = 0) -> FileRecord:
    mode = (stat.S_IFDIR | 0o755) if directory else (stat.S_IFREG | 0o644)
    return FileRecord(path=Path(name), name=name, size=size, mode=mode, is_directory=directory)


def _details(header: bool = False, columns: Columns | None = None) -> Details:
    return Details(
        columns=columns if columns is not None else Columns(),
        header=header,
        recurse=None,
        filter=FileFilter(),
        xattr=False,
        colours=ColourMode.PLAIN,
    )


def _render(view: View, plan: ListingPlan) -> str:
    buffer = StringIO()
    console = Console(file=buffer, width=80, color_system=None, highlight=False)
    ListingDisplay(view, console=console).show(plan)
    return buffer.getvalue()


@pytest.mark.parametrize(
    ("size", "size_format", "expected"),
    [
        (1234, SizeFormat.JUST_BYTES, "1234"),
        (1234, SizeFormat.DECIMAL_BYTES, "1.2 kB"),
        (512, SizeFormat.BINARY_BYTES, "512 B"),
        (1536, SizeFormat.BINARY_BYTES, "1.5 KiB"),
        (3 * 1024 * 1024, SizeFormat.BINARY_BYTES, "3.0 MiB"),
    ],
)
def test_format_size(size: int, size_format: SizeFormat, expected: str) -> None:
    assert format_size(size, size_format) == expected


def test_lines_view_prints_one_name_per_line() -> None:
    plan = ListingPlan(
        sections=[ListingSection(heading=None, directory=None, entries=(_record("a"), _record("b")))]
    )

    assert _render(Lines(colours=ColourMode.PLAIN), plan) == "a\nb\n"


def test_sections_are_headed_and_separated() -> None:
    plan = ListingPlan(
        sections=[
            ListingSection(heading=None, directory=None, entries=(_record("file"),)),
            ListingSection(heading="dir", directory=None, entries=(_record("inner"),)),
        ]
    )

    assert _render(Lines(colours=ColourMode.PLAIN), plan) == "file\n\ndir:\ninner\n"


def test_grid_view_contains_every_name() -> None:
    names = [f"entry{i}" for i in range(12)]
    plan = ListingPlan(
        sections=[ListingSection(heading=None, directory=None, entries=tuple(_record(n) for n in names))]
    )

    output = _render(Grid(across=False, console_width=80, colours=ColourMode.PLAIN), plan)

    for name in names:
        assert name in output
    assert len(output.splitlines()) < len(names)


def test_details_view_renders_header_and_cells() -> None:
    plan = ListingPlan(
        sections=[
            ListingSection(
                heading=None,
                directory=None,
                entries=(_record("notes.txt", size=1234), _record("src", directory=True)),
            )
        ]
    )

    output = _render(_details(header=True), plan)
    lines = output.splitlines()

    for header in ("Permissions", "Size", "User", "Date Modified", "Name"):
        assert header in lines[0]
    assert "-rw-r--r--" in output
    assert "drwxr-xr-x" in output
    assert "1.2 kB" in output
    assert any(line.rstrip().endswith("src") for line in lines)


def test_details_view_without_header() -> None:
    plan = ListingPlan(sections=[ListingSection(heading=None, directory=None, entries=(_record("a"),))])

    output = _render(_details(header=False), plan)

    assert "Permissions" not in output


def test_grid_details_renders_table() -> None:
    plan = ListingPlan(sections=[ListingSection(heading=None, directory=None, entries=(_record("a", size=5),))])
    view = GridDetails(grid=Grid(across=False, console_width=80, colours=ColourMode.PLAIN), details=_details())

    output = _render(view, plan)

    assert "5 bytes" in output


def test_tree_view_draws_branches() -> None:
    leaf = TreeNode(record=_record("leaf.txt"), depth=1)
    root = TreeNode(record=_record("root", directory=True), depth=0, children=(leaf,))
    plan = ListingPlan(sections=[ListingSection(heading=None, directory=None, tree=(root,))])
    view = Details(
        columns=None,
        header=False,
        recurse=None,
        filter=FileFilter(),
        xattr=False,
        colours=ColourMode.PLAIN,
    )

    output = _render(view, plan)

    assert output.splitlines()[0] == "root"
    assert "leaf.txt" in output.splitlines()[1]


def test_long_tree_indents_names_by_depth() -> None:
    leaf = TreeNode(record=_record("leaf.txt"), depth=1)
    root = TreeNode(record=_record("root", directory=True), depth=0, children=(leaf,))
    plan = ListingPlan(sections=[ListingSection(heading=None, directory=None, tree=(root,))])

    output = _render(_details(), plan)

    assert any(line.rstrip().endswith("  leaf.txt") for line in output.splitlines())


def test_plain_console_is_built_for_redirected_lines() -> None:
    display = ListingDisplay(Lines(colours=ColourMode.PLAIN))

    assert display.console.color_system is None
