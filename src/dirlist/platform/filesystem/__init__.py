"""Filesystem collaborator exports."""

from dirlist.platform.filesystem.records import Directory, FileRecord

__all__ = ["Directory", "FileRecord"]
