"""
Summary: Read-only view over parsed command-line flags and free arguments.
Why: Keep option resolvers independent from the argument grammar.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import final

FlagValue = bool | str | None


@final
@dataclass(frozen=True, slots=True, eq=False)
class Flags:
    """Flag names mapped to presence (``bool``) or a supplied value (``str``)."""

    values: Mapping[str, FlagValue] = field(default_factory=dict)
    free: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "free", tuple(self.free))

    @classmethod
    def of(cls, *names: str, free: tuple[str, ...] = (), **values: str) -> Flags:
        """Build a flag set from present flag names and valued options.

        Args:
            *names: Long names of boolean flags that were given.
            free: Positional arguments.
            **values: Valued options such as ``sort="size"``.

        Returns:
            Flags: Immutable flag set.
        """
        mapping: dict[str, FlagValue] = {name: True for name in names}
        mapping.update(values)
        return cls(values=mapping, free=free)

    def present(self, name: str) -> bool:
        """Return whether ``name`` was given on the command line."""

        value = self.values.get(name)
        return value is not None and value is not False

    def value(self, name: str) -> str | None:
        """Return the string supplied for a valued option, if any."""

        value = self.values.get(name)
        return value if isinstance(value, str) else None


__all__ = ["FlagValue", "Flags"]
