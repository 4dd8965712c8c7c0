"""Shared path utilities for configuration locations.

Policy:
- Config: ``$XDG_CONFIG_HOME/dirlist/config.toml`` (``~/.config`` when unset),
  unless overridden by ``DIRLIST_CONFIG``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "DIRLIST_CONFIG"
_ENV_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def config_home(env: Mapping[str, str] | None = None) -> Path:
    """Return the base directory for per-user configuration."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_HOME,
        default_factory=lambda: Path.home() / ".config",
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: config_home(env) / "dirlist" / "config.toml",
    )


__all__ = ["config_home", "default_config_path", "resolve_overridable_path"]
