"""Lookups in the command tree.

Nodes are never stored by the machine: they are resolved from the root on
demand, using the subcommand path as the address.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import PathNotFound

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..tree.types import CommandNode, TabryConf, TabryFlag

__all__ = ["ConfigNavigator"]


class ConfigNavigator:
    """Read-only helpers over a configuration tree."""

    def __init__(self, config: TabryConf) -> None:
        self.config = config

    @staticmethod
    def find_in_subs(subs: Sequence[CommandNode], token: str, exact: bool = True) -> CommandNode | None:
        """Find the child matching `token`.

        An exact match on a name or alias always wins. When `exact` is False,
        a non-empty token which is a prefix of exactly one child is accepted too.

        Args:
            subs: Children of a node
            token: The word to match
            exact: Only accept exact matches
        """
        for sub in subs:
            if sub.matches(token):
                return sub
        if exact or not token:
            return None
        candidates = [sub for sub in subs if any(name.startswith(token) for name in [sub.name or "", *sub.aliases])]
        if len(candidates) == 1:
            return candidates[0]
        return None

    def dig_subs(self, path: Sequence[str]) -> list[CommandNode]:
        """Return the nodes from the root to the one at `path`, both included.

        Raises:
            PathNotFound: If an entry of the path has no matching child
        """
        node = self.config.root
        nodes = [node]
        for name in path:
            child = self.find_in_subs(node.subs, name, exact=True)
            if child is None:
                raise PathNotFound(list(path), name)
            node = child
            nodes.append(node)
        return nodes

    def dig_sub(self, path: Sequence[str]) -> CommandNode:
        """Return the node at `path`.

        Raises:
            PathNotFound: If an entry of the path has no matching child
        """
        return self.dig_subs(path)[-1]

    def effective_flags(self, path: Sequence[str]) -> list[TabryFlag]:
        """Flags usable at `path`: the node's own first, then inherited ones.

        A spelling (`-v`, `--verbose`) defined at several depths belongs to the
        deepest definition. An inherited flag stays usable as long as one of its
        spellings isn't redefined deeper.
        """
        flags: list[TabryFlag] = []
        claimed: set[str] = set()
        for node in reversed(self.dig_subs(path)):
            for flag in node.flags:
                spellings = set(flag.tokens)
                if spellings - claimed:
                    flags.append(flag)
                claimed |= spellings
        return flags

    def find_flag(self, path: Sequence[str], token: str) -> tuple[TabryFlag, str | None] | None:
        """Match `token` against the flags usable at `path` (exact spelling only).

        The deepest flag defining the spelling wins.

        Returns:
            (flag, inline value) for `--name=value` on a flag taking a value,
            (flag, None) for a plain match, None if nothing matches
        """
        flags = self.effective_flags(path)
        for flag in flags:
            if token in flag.tokens:
                return flag, None
        if "=" in token:
            spelling, value = token.split("=", 1)
            for flag in flags:
                if flag.arg and spelling in flag.tokens:
                    return flag, value
        return None
