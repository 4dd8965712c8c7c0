"""Git status lookup for directory listings.

Where: platform/filesystem/git.py
What: Summarise ``git status --porcelain`` codes per direct child of a directory.
Why: The git column needs one code per listed entry, including directories.
"""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from pathlib import Path
from typing import Final

from dirlist.platform.logging import logger

GIT_TIMEOUT_SECONDS: Final[float] = 1.0
UNMODIFIED: Final[str] = "--"


def _run_git(cwd: Path, args: list[str]) -> subprocess.CompletedProcess[bytes] | None:
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            capture_output=True,
            check=False,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git %s failed in %s: %s", args[0], cwd, exc)
        return None


def _iter_porcelain_records(payload: bytes) -> Iterator[tuple[str, str]]:
    """Yield ``(status, path)`` pairs from ``--porcelain=v1 -z`` output."""

    fields = payload.decode("utf-8", errors="surrogateescape").split("\0")
    index = 0
    while index < len(fields):
        record = fields[index]
        index += 1
        if len(record) < 4:
            continue
        status, path = record[:2], record[3:]
        if status[0] in "RC":
            # Renames and copies carry the source path as the next field.
            index += 1
        yield status, path


def _merge(existing: str, status: str) -> str:
    """Combine two porcelain codes column by column, keeping the first change seen."""

    return "".join(new if old in " -" else old for old, new in zip(existing, status))


def collect_child_statuses(directory: Path) -> dict[str, str]:
    """Map each direct child name of ``directory`` to its two-letter git status.

    Changes below a child directory are attributed to that child. Returns an
    empty mapping when ``directory`` is not inside a work tree.
    """
    directory = directory.resolve()
    toplevel = _run_git(directory, ["rev-parse", "--show-toplevel"])
    if toplevel is None or toplevel.returncode != 0:
        return {}
    repo_root = Path(toplevel.stdout.decode("utf-8", errors="surrogateescape").strip()).resolve()

    status_proc = _run_git(
        directory,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal", "--", "."],
    )
    if status_proc is None or status_proc.returncode != 0:
        return {}

    statuses: dict[str, str] = {}
    for status, rel_path in _iter_porcelain_records(status_proc.stdout):
        target = repo_root / rel_path.rstrip("/")
        if not target.is_relative_to(directory) or target == directory:
            continue
        child = target.relative_to(directory).parts[0]
        code = status.replace(" ", "-")
        statuses[child] = _merge(statuses.get(child, UNMODIFIED), code)
    return statuses


__all__ = ["UNMODIFIED", "collect_child_statuses"]
