"""Shared pytest fixtures for dirlist tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from dirlist.features.options.domain import Capabilities

TERMINAL = Capabilities(terminal_width=80, xattr=True, git=True)
REDIRECTED = Capabilities(terminal_width=None, xattr=False, git=False)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the cached instance."""

    from dirlist.config import Config

    config_file = tmp_path / "dirlist-config" / "config.toml"
    monkeypatch.setenv("DIRLIST_CONFIG", str(config_file))
    monkeypatch.delenv("DIRLIST_LOG_LEVEL", raising=False)
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()


@pytest.fixture
def terminal() -> Capabilities:
    """Capabilities of an interactive 80-column terminal with every feature enabled."""

    return TERMINAL


@pytest.fixture
def redirected() -> Capabilities:
    """Capabilities when stdout is redirected and optional features are disabled."""

    return REDIRECTED
