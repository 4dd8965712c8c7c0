"""Command execution package for CLI."""

from dirlist.ui.cli.commands.listing import ListCommand

__all__ = ["ListCommand"]
