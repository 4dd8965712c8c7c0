"""Configuration package exports."""

from dirlist.config.config import Config
from dirlist.config.paths import default_config_path

__all__ = ["Config", "default_config_path"]
