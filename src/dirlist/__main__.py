"""Module entry point for ``python -m dirlist``."""

from dirlist.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
