"""Command line argument grammar."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, NoReturn, final, override

from dirlist.features.options.domain import Capabilities, Flags, InvalidOptions

USAGE: Final[str] = "Usage:\n  dirlist [options] [files...]"


@final
@dataclass(frozen=True, slots=True)
class FlagSpec:
    """One recognised option."""

    short: str | None
    long: str
    help: str
    metavar: str | None = None

    @property
    def dest(self) -> str:
        return self.long.replace("-", "_")

    @property
    def option_strings(self) -> list[str]:
        names = [f"--{self.long}"]
        if self.short is not None:
            names.insert(0, f"-{self.short}")
        return names


FLAG_SPECS: Final[tuple[FlagSpec, ...]] = (
    FlagSpec("1", "oneline", "display one entry per line"),
    FlagSpec("a", "all", "show dot-files"),
    FlagSpec("b", "binary", "use binary prefixes in file sizes"),
    FlagSpec("B", "bytes", "list file sizes in bytes, without prefixes"),
    FlagSpec("d", "list-dirs", "list directories as regular files"),
    FlagSpec("g", "group", "show group as well as user"),
    FlagSpec("G", "grid", "display entries in a grid view (default)"),
    FlagSpec(None, "group-directories-first", "list directories before other files"),
    FlagSpec("h", "header", "show a header row at the top"),
    FlagSpec("H", "links", "show number of hard links"),
    FlagSpec("i", "inode", "show each file's inode number"),
    FlagSpec("l", "long", "display extended details and attributes"),
    FlagSpec("L", "level", "maximum depth of recursion", metavar="DEPTH"),
    FlagSpec("m", "modified", "display timestamp of most recent modification"),
    FlagSpec("r", "reverse", "reverse order of files"),
    FlagSpec("R", "recurse", "recurse into directories"),
    FlagSpec("s", "sort", "field to sort by", metavar="WORD"),
    FlagSpec("S", "blocks", "show number of file system blocks"),
    FlagSpec("t", "time", "which timestamp to show for a file", metavar="WORD"),
    FlagSpec("T", "tree", "recurse into subdirectories in a tree view"),
    FlagSpec("u", "accessed", "display timestamp of last access for a file"),
    FlagSpec("U", "created", "display timestamp of creation for a file"),
    FlagSpec("x", "across", "sort multi-column view entries across"),
    FlagSpec(None, "version", "display version of dirlist"),
    FlagSpec("?", "help", "show list of command-line options"),
)

GIT_FLAG: Final[FlagSpec] = FlagSpec(None, "git", "show git status")
EXTENDED_FLAG: Final[FlagSpec] = FlagSpec(
    "@", "extended", "display extended attribute keys and sizes in long (-l) output"
)


class _RaisingArgumentParser(argparse.ArgumentParser):
    """Parser that reports grammar errors as ``InvalidOptions`` instead of exiting."""

    @override
    def error(self, message: str) -> NoReturn:
        raise InvalidOptions(message)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def flag_specs(capabilities: Capabilities) -> tuple[FlagSpec, ...]:
        """Return the recognised options; capability-gated ones only when enabled."""

        specs = list(FLAG_SPECS)
        if capabilities.git:
            specs.append(GIT_FLAG)
        if capabilities.xattr:
            specs.append(EXTENDED_FLAG)
        return tuple(specs)

    @staticmethod
    def create_parser(capabilities: Capabilities) -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _RaisingArgumentParser(
            prog="dirlist",
            usage=argparse.SUPPRESS,
            add_help=False,
            allow_abbrev=False,
        )

        for spec in ArgumentParser.flag_specs(capabilities):
            if spec.metavar is None:
                _ = parser.add_argument(
                    *spec.option_strings,
                    dest=spec.dest,
                    action="store_true",
                    help=spec.help,
                )
            else:
                _ = parser.add_argument(
                    *spec.option_strings,
                    dest=spec.dest,
                    metavar=spec.metavar,
                    help=spec.help,
                )

        _ = parser.add_argument("paths", nargs="*", metavar="FILE", help=argparse.SUPPRESS)
        return parser

    @staticmethod
    def help_text(capabilities: Capabilities) -> str:
        """Return the usage line followed by the option list."""

        options = ArgumentParser.create_parser(capabilities).format_help().rstrip()
        return f"{USAGE}\n\n{options}"

    @staticmethod
    def bind_option_values(args: Sequence[str], specs: Sequence[FlagSpec]) -> list[str]:
        """Join each valued option with the word that follows it.

        ``-1`` is a registered flag, so argparse reads any ``-N`` word as an
        option and never as a value. Rewriting ``--level -5`` (and ``-L -5``,
        or ``-RL -5``) to ``--level=-5`` keeps the value for later validation.
        Words after ``--`` are left untouched.
        """
        valued: dict[str, str] = {}
        switches: set[str] = set()
        for spec in specs:
            if spec.metavar is not None:
                valued.update((name, spec.long) for name in spec.option_strings)
            elif spec.short is not None:
                switches.add(spec.short)

        bound: list[str] = []
        words = iter(args)
        for word in words:
            if word == "--":
                bound.append(word)
                bound.extend(words)
                break

            prefix = ""
            long = valued.get(word)
            if long is None and len(word) > 2 and word[0] == "-" and word[1] != "-":
                # A cluster of switches ending in a valued short option.
                long = valued.get(f"-{word[-1]}")
                if long is not None and set(word[1:-1]) <= switches:
                    prefix = word[:-1]
                else:
                    long = None

            value = next(words, None) if long is not None else None
            if long is None or value is None:
                # A trailing valued option is left for argparse to report.
                bound.append(word)
                continue
            if prefix:
                bound.append(prefix)
            bound.append(f"--{long}={value}")
        return bound

    @staticmethod
    def parse_flags(args: Sequence[str], capabilities: Capabilities) -> Flags:
        """Parse ``args`` into a read-only flag set.

        Options and paths may be intermixed, and option values may begin
        with a dash.

        Raises:
            InvalidOptions: If the arguments do not fit the grammar.
        """
        specs = ArgumentParser.flag_specs(capabilities)
        parser = ArgumentParser.create_parser(capabilities)
        namespace = parser.parse_intermixed_args(ArgumentParser.bind_option_values(args, specs))

        values = {spec.long: getattr(namespace, spec.dest) for spec in specs}
        return Flags(values=values, free=tuple(namespace.paths))


__all__ = ["ArgumentParser", "FlagSpec", "FLAG_SPECS", "USAGE"]
