"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from dirlist.config import Config, default_config_path


def test_missing_file_gives_defaults(isolated_config: Path) -> None:
    """No file on disk means no log file and no default arguments."""

    config = Config.load()

    assert config.log_file is None
    assert config.default_args == []
    assert not isolated_config.exists()


def test_load_reads_toml(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(
        'log_file = "~/logs/dirlist.log"\ndefault_args = ["--group-directories-first", "-a"]\n'
    )

    config = Config.load()

    assert config.log_file == Path("~/logs/dirlist.log").expanduser()
    assert config.default_args == ["--group-directories-first", "-a"]


def test_empty_log_file_means_none(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('log_file = "  "\n')

    assert Config.load().log_file is None


def test_load_is_cached_until_reset(isolated_config: Path) -> None:
    first = Config.load()
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('default_args = ["-l"]\n')

    assert Config.load() is first

    Config.reset()
    assert Config.load().default_args == ["-l"]


def test_explicit_file_bypasses_cache(tmp_path: Path) -> None:
    cached = Config.load()
    explicit = tmp_path / "other.toml"
    _ = explicit.write_text('default_args = ["--reverse"]\n')

    loaded = Config.load(explicit)

    assert loaded is not cached
    assert loaded.default_args == ["--reverse"]


def test_unknown_keys_are_ignored_with_warning(isolated_config: Path, mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("dirlist.config.config.logger")
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('colour = "always"\ndefault_args = []\n')

    config = Config.load()

    assert config.default_args == []
    mock_logger.warning.assert_called_once()
    assert "colour" in mock_logger.warning.call_args.args[1]


def test_invalid_toml_is_logged_and_raised(isolated_config: Path, mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("dirlist.config.config.logger")
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("default_args = [\n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()

    mock_logger.error.assert_called_once()


def test_default_args_must_be_strings(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("default_args = [1, 2]\n")

    with pytest.raises(ValueError):
        _ = Config.load()


def test_default_config_path_honours_override(isolated_config: Path) -> None:
    assert default_config_path() == isolated_config.resolve()


def test_default_args_must_be_a_list(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text('default_args = "-l"\n')

    with pytest.raises(ValueError):
        _ = Config.load()
