"""
Summary: Misfire hierarchy describing every non-listing outcome of option resolution.
Why: Callers receive a typed reason with exact user-facing wording and exit code.
"""

from __future__ import annotations

from typing import ClassVar, override

HELP_EXIT_CODE = 2
ERROR_EXIT_CODE = 3


class Misfire(Exception):
    """Base class for anything that happens instead of listing files.

    Misfires compare by type and arguments so tests and callers can match
    them as values.
    """

    error_code: ClassVar[int] = ERROR_EXIT_CODE

    @override
    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == getattr(other, "args", None)

    @override
    def __hash__(self) -> int:
        return hash((type(self), self.args))

    @override
    def __repr__(self) -> str:
        arguments = ", ".join(repr(arg) for arg in self.args)
        return f"{type(self).__name__}({arguments})"


class InvalidOptions(Misfire):
    """The argument grammar rejected the command line."""

    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def unrecognized(cls, option: str, word: str) -> InvalidOptions:
        """Build the diagnostic for a word that a valued option does not accept."""

        return cls(f"Unrecognized option: '--{option} {word}'.")

    @override
    def __str__(self) -> str:
        return self.message


class Help(Misfire):
    """The user asked for help. Not strictly an error."""

    error_code: ClassVar[int] = HELP_EXIT_CODE

    text: str

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    @override
    def __str__(self) -> str:
        return self.text


class Version(Misfire):
    """The user wanted the version number."""

    version: str

    def __init__(self, version: str) -> None:
        super().__init__(version)
        self.version = version

    @override
    def __str__(self) -> str:
        return f"dirlist {self.version}"


class Conflict(Misfire):
    """Two options were given that conflict with one another."""

    first: str
    second: str

    def __init__(self, first: str, second: str) -> None:
        super().__init__(first, second)
        self.first = first
        self.second = second

    @override
    def __str__(self) -> str:
        return f"Option --{self.first} conflicts with option --{self.second}."


class Useless(Misfire):
    """An option does nothing because another one is, or is not, present.

    ``given`` is true when ``other`` being present makes ``option`` useless,
    and false when ``option`` is useless without ``other``.
    """

    option: str
    given: bool
    other: str

    def __init__(self, option: str, given: bool, other: str) -> None:
        super().__init__(option, given, other)
        self.option = option
        self.given = given
        self.other = other

    @override
    def __str__(self) -> str:
        if self.given:
            return f"Option --{self.option} is useless given option --{self.other}."
        return f"Option --{self.option} is useless without option --{self.other}."


class Useless2(Misfire):
    """An option does nothing unless one of two other options is present."""

    option: str
    first: str
    second: str

    def __init__(self, option: str, first: str, second: str) -> None:
        super().__init__(option, first, second)
        self.option = option
        self.first = first
        self.second = second

    @override
    def __str__(self) -> str:
        return (
            f"Option --{self.option} is useless without options "
            f"--{self.first} or --{self.second}."
        )


class FailedParse(Misfire):
    """A numeric option could not be parsed as a number."""

    value: str
    reason: str

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(value, reason)
        self.value = value
        self.reason = reason

    @override
    def __str__(self) -> str:
        return f"Failed to parse number: {self.reason}"


__all__ = [
    "ERROR_EXIT_CODE",
    "HELP_EXIT_CODE",
    "Conflict",
    "FailedParse",
    "Help",
    "InvalidOptions",
    "Misfire",
    "Useless",
    "Useless2",
    "Version",
]
