"""Configuration management for dirlist."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from dirlist.config.paths import default_config_path
from dirlist.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Optional rotating log file
    log_file: Path | None = _path_field()

    # Flags placed in front of the command-line arguments
    default_args: list[str] = field(default_factory=list)

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        if not isinstance(self.default_args, list) or not all(
            isinstance(arg, str) for arg in self.default_args
        ):
            raise ValueError("default_args must be a list of strings")
        self.default_args = list(self.default_args)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read; defaults to the per-user location.

        Returns:
            Config: Loaded configuration, or defaults when no file exists.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            ValueError: If a key holds a value of the wrong type.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        try:
            if not target.exists():
                logger.debug("No configuration at %s; using defaults", target)
                config = cls()
            else:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

                config = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", target)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = config
        cls._loaded_from = target
        return config

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` reads from disk."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
