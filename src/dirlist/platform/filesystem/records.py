"""Filesystem-backed file records and directory context.

Where: platform/filesystem/records.py
What: Read ``lstat`` metadata into immutable records and detect git repositories.
Why: Sorting and column selection work on plain values, not on live paths.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from dirlist.platform.filesystem.git import UNMODIFIED, collect_child_statuses
from dirlist.platform.logging import logger


@final
@dataclass(frozen=True, slots=True)
class FileRecord:
    """Metadata observed for a single filesystem entry."""

    path: Path
    name: str
    size: int = 0
    inode: int = 0
    modified: float = 0.0
    accessed: float = 0.0
    created: float = 0.0
    mode: int = 0
    links: int = 1
    blocks: int = 0
    uid: int = 0
    gid: int = 0
    is_directory: bool = False

    @property
    def ext(self) -> str | None:
        """Text after the last dot of the name, if there is one."""

        index = self.name.rfind(".")
        if index < 0:
            return None
        return self.name[index + 1 :]

    def is_dotfile(self) -> bool:
        return self.name.startswith(".")

    @classmethod
    def from_path(cls, path: Path, name: str | None = None) -> FileRecord:
        """Build a record from ``lstat`` metadata.

        Args:
            path: Entry to inspect; symlinks are not followed.
            name: Display name; defaults to the last path component.

        Raises:
            OSError: If the entry cannot be inspected.
        """
        st = os.lstat(path)
        return cls(
            path=path,
            name=name if name is not None else (path.name or str(path)),
            size=st.st_size,
            inode=st.st_ino,
            modified=st.st_mtime,
            accessed=st.st_atime,
            created=st.st_ctime,
            mode=st.st_mode,
            links=st.st_nlink,
            blocks=getattr(st, "st_blocks", 0),
            uid=st.st_uid,
            gid=st.st_gid,
            is_directory=stat.S_ISDIR(st.st_mode),
        )


@final
@dataclass(slots=True)
class Directory:
    """A directory whose entries have been read."""

    path: Path
    entries: list[FileRecord] = field(default_factory=list)
    _git_repo: bool | None = field(default=None, init=False, repr=False)
    _git_statuses: dict[str, str] | None = field(default=None, init=False, repr=False)

    @classmethod
    def read(cls, path: Path) -> Directory:
        """Read every entry of ``path``; unreadable entries are logged and skipped.

        Raises:
            OSError: If the directory itself cannot be listed.
        """
        entries: list[FileRecord] = []
        with os.scandir(path) as iterator:
            for dir_entry in iterator:
                try:
                    entries.append(FileRecord.from_path(Path(dir_entry.path), dir_entry.name))
                except OSError as exc:
                    logger.warning(exc.strerror or str(exc), extra={"path": dir_entry.path})
        return cls(path=path, entries=entries)

    def has_git_repo(self) -> bool:
        """Return whether this directory or one of its parents holds ``.git``."""

        if self._git_repo is None:
            here = self.path.resolve()
            self._git_repo = any((p / ".git").exists() for p in [here, *here.parents])
        return self._git_repo

    def git_status(self, name: str) -> str:
        """Return the two-letter git status of the child called ``name``."""

        if self._git_statuses is None:
            self._git_statuses = collect_child_statuses(self.path)
        return self._git_statuses.get(name, UNMODIFIED)


__all__ = ["Directory", "FileRecord"]
