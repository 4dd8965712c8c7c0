"""src/dirlist/ui/cli/commands/listing.py
What: Run a listing for resolved options and path arguments.
Why: Connect the listing use case to the console display.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from dirlist.features.listing import ListPathsService
from dirlist.platform.logging import logger
from dirlist.ui.cli.args.options import Options
from dirlist.ui.cli.display.listing import ListingDisplay

PATH_FAILURE_EXIT_CODE = 1


@final
class ListCommand:
    """List the requested paths."""

    options: Options
    service: ListPathsService
    display: ListingDisplay

    def __init__(self, options: Options, display: ListingDisplay | None = None) -> None:
        """Initialize the command.

        Args:
            options: Resolved command-line options.
            display: Display to render into; built from the view when omitted.
        """
        self.options = options
        self.service = ListPathsService(options.filter, options.dir_action)
        self.display = display or ListingDisplay(options.view)

    def execute(self, paths: Sequence[str]) -> int:
        """List ``paths`` and return the process exit code."""

        plan = self.service.collect(paths)
        self.display.show(plan)
        if plan.failures:
            logger.debug("%d path(s) could not be listed", plan.failures)
            return PATH_FAILURE_EXIT_CODE
        return 0
