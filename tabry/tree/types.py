"""Data models of the compiled configuration tree.

The tree is read-only once loaded: includes are already expanded, so every
list holds concrete entries in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

__all__ = ["CommandNode", "OptionType", "TabryArg", "TabryConf", "TabryFlag", "TabryOption"]


class OptionType(StrEnum):
    """Kinds of completion options attached to args and flags."""

    CONST = "const"
    FILE = "file"
    DIR = "dir"
    SHELL = "shell"
    DELEGATE = "delegate"
    INCLUDE = "include"  # only in the raw document, expanded by the loader


@dataclass
class TabryOption:
    """A source of completion values for an argument or a flag value."""

    type: OptionType
    value: str | None = None
    description: str | None = None


@dataclass
class TabryArg:
    """A positional argument."""

    name: str | None = None
    description: str | None = None
    optional: bool = False
    varargs: bool = False
    options: list[TabryOption] = field(default_factory=list)


@dataclass
class TabryFlag:
    """A flag, possibly taking a value (`arg`)."""

    name: str
    aliases: list[str] = field(default_factory=list)
    description: str | None = None
    arg: bool = False
    options: list[TabryOption] = field(default_factory=list)

    @property
    def tokens(self) -> list[str]:
        """Command line spellings of the flag: `-x` for one letter names, `--name` otherwise."""
        return [f"-{name}" if len(name) == 1 else f"--{name}" for name in [self.name, *self.aliases]]


@dataclass
class CommandNode:
    """A node of the command hierarchy.

    The root node has no name, every other node is a subcommand of its parent.
    """

    name: str | None = None
    aliases: list[str] = field(default_factory=list)
    description: str | None = None
    subs: list[CommandNode] = field(default_factory=list)
    flags: list[TabryFlag] = field(default_factory=list)
    args: list[TabryArg] = field(default_factory=list)

    def matches(self, token: str) -> bool:
        """Tell if the token is this node's name or one of its aliases."""
        return token == self.name or token in self.aliases


@dataclass
class TabryConf:
    """A compiled configuration: the root node and the command it completes."""

    root: CommandNode
    cmd: str | None = None
