"""Display helpers for CLI output."""

from dirlist.ui.cli.display.listing import ListingDisplay, format_size

__all__ = ["ListingDisplay", "format_size"]
