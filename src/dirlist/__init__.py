"""dirlist: a directory lister with strict option reconciliation."""

__version__ = "0.4.0"
