"""Command line argument handling package."""

from dirlist.ui.cli.args.options import Options
from dirlist.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "Options"]
