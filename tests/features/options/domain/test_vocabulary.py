"""Tests for the sort field, size format and time type vocabularies."""

import pytest

from dirlist.features.options.domain import (
    Conflict,
    Flags,
    InvalidOptions,
    SizeFormat,
    SortField,
    TimeType,
    TimeTypes,
    Useless,
)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("name", SortField.NAME),
        ("filename", SortField.NAME),
        ("size", SortField.SIZE),
        ("filesize", SortField.SIZE),
        ("ext", SortField.EXTENSION),
        ("extension", SortField.EXTENSION),
        ("mod", SortField.MODIFIED_DATE),
        ("modified", SortField.MODIFIED_DATE),
        ("acc", SortField.ACCESSED_DATE),
        ("accessed", SortField.ACCESSED_DATE),
        ("cr", SortField.CREATED_DATE),
        ("created", SortField.CREATED_DATE),
        ("none", SortField.UNSORTED),
        ("inode", SortField.INODE),
    ],
)
def test_sort_words(word: str, expected: SortField) -> None:
    """Every documented sort word maps to its field."""

    assert SortField.from_word(word) is expected


def test_sort_field_defaults_to_name() -> None:
    """Without ``--sort`` files are ordered by name."""

    assert SortField.deduce(Flags.of("long", "reverse")) is SortField.NAME


@pytest.mark.parametrize("word", ["colour", "NAME", "", "sizes"])
def test_unknown_sort_word_is_rejected(word: str) -> None:
    """Unknown or differently-cased words are reported as invalid options."""

    with pytest.raises(InvalidOptions) as excinfo:
        _ = SortField.deduce(Flags.of(sort=word))

    assert str(excinfo.value) == f"Unrecognized option: '--sort {word}'."


@pytest.mark.parametrize(
    ("names", "expected"),
    [
        ((), SizeFormat.DECIMAL_BYTES),
        (("binary",), SizeFormat.BINARY_BYTES),
        (("bytes",), SizeFormat.JUST_BYTES),
    ],
)
def test_size_format(names: tuple[str, ...], expected: SizeFormat) -> None:
    """Binary and bytes flags each pick their format; decimal is the default."""

    assert SizeFormat.deduce(Flags.of(*names)) is expected


def test_binary_and_bytes_conflict() -> None:
    """Binary and bytes together are a conflict regardless of other flags."""

    with pytest.raises(Conflict) as excinfo:
        _ = SizeFormat.deduce(Flags.of("bytes", "long", "binary"))

    assert excinfo.value == Conflict("binary", "bytes")


def test_time_types_default_to_modified() -> None:
    """With no time flags only the modification time is shown."""

    assert TimeTypes.deduce(Flags.of()) == TimeTypes(accessed=False, modified=True, created=False)


def test_discrete_time_flags_are_used_verbatim() -> None:
    """Accessed and created may be requested together."""

    time_types = TimeTypes.deduce(Flags.of("accessed", "created"))

    assert time_types == TimeTypes(accessed=True, modified=False, created=True)
    assert time_types.selected() == (TimeType.CREATED, TimeType.ACCESSED)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("mod", TimeTypes(modified=True)),
        ("modified", TimeTypes(modified=True)),
        ("acc", TimeTypes(accessed=True, modified=False)),
        ("accessed", TimeTypes(accessed=True, modified=False)),
        ("cr", TimeTypes(created=True, modified=False)),
        ("created", TimeTypes(created=True, modified=False)),
    ],
)
def test_time_words(word: str, expected: TimeTypes) -> None:
    """Each time word selects exactly one timestamp."""

    assert TimeTypes.deduce(Flags.of(time=word)) == expected


@pytest.mark.parametrize("flag", ["modified", "created", "accessed"])
def test_time_word_with_discrete_flag_is_useless(flag: str) -> None:
    """A discrete time flag next to ``--time`` is blamed as useless given time."""

    with pytest.raises(Useless) as excinfo:
        _ = TimeTypes.deduce(Flags.of(flag, time="mod"))

    assert excinfo.value == Useless(flag, True, "time")


def test_modified_is_blamed_before_other_time_flags() -> None:
    """The discrete flags are checked in modified, created, accessed order."""

    with pytest.raises(Useless) as excinfo:
        _ = TimeTypes.deduce(Flags.of("accessed", "created", "modified", time="cr"))

    assert excinfo.value == Useless("modified", True, "time")


def test_unknown_time_word_is_rejected() -> None:
    """An unknown time word names the word in the diagnostic."""

    with pytest.raises(InvalidOptions) as excinfo:
        _ = TimeTypes.deduce(Flags.of(time="birth"))

    assert str(excinfo.value) == "Unrecognized option: '--time birth'."


def test_time_type_headers() -> None:
    """Timestamp columns carry readable headers."""

    assert TimeType.MODIFIED.header == "Date Modified"
    assert TimeType.ACCESSED.header == "Date Accessed"
    assert TimeType.CREATED.header == "Date Created"
