"""Command line interface for dirlist."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import final

from dirlist.config import Config
from dirlist.features.options.domain import Capabilities, Help, Misfire, Version
from dirlist.platform.logging import console_level_from_env, logger, setup_logger
from dirlist.ui.cli.args import Options
from dirlist.ui.cli.commands import ListCommand

INTERRUPTED_EXIT_CODE = 130
FAILURE_EXIT_CODE = 1


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: Sequence[str] | None = None,
        capabilities: Capabilities | None = None,
    ) -> int:
        """Resolve command line arguments and list the requested paths.

        Args:
            args_list: List of command line arguments (for testing).
            capabilities: Environment facts (for testing); probed when omitted.

        Returns:
            int: Process exit code.
        """
        try:
            try:
                configuration = Config.load()
            except (OSError, ValueError):
                # Config.load has already reported the failure.
                return FAILURE_EXIT_CODE

            _ = setup_logger(
                log_file=configuration.log_file,
                console_level=console_level_from_env(),
            )

            raw_args = list(sys.argv[1:] if args_list is None else args_list)
            args = [*configuration.default_args, *raw_args]

            try:
                options, paths = Options.resolve(args, capabilities)
            except Misfire as misfire:
                return CommandProcessor._report_misfire(misfire)

            return ListCommand(options).execute(paths)

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return INTERRUPTED_EXIT_CODE
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return FAILURE_EXIT_CODE

    @staticmethod
    def _report_misfire(misfire: Misfire) -> int:
        """Print help or version text, or log the diagnostic, and return its exit code."""

        if isinstance(misfire, (Help, Version)):
            _ = sys.stdout.write(f"{misfire}\n")
        else:
            logger.error("%s", misfire, extra={"misfire": misfire})
        return misfire.error_code


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code: 0 on success, 2 for help, 3 for other
        option misfires, 1 when a path could not be listed.
    """
    return CommandProcessor.process_command()
