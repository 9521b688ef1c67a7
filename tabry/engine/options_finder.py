"""Completion candidates for the final machine state.

Literal options are filtered on the word being completed and keep the
declaration order of the configuration. Special options (`file`, `dir`)
ask the shell glue to fall back to its own completion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import SPECIAL_DIR, SPECIAL_FILE
from ..logging_setup import get_logger
from ..tree.types import OptionType
from .navigator import ConfigNavigator
from .state import FlagargMode

if TYPE_CHECKING:
    from ..tree.types import TabryConf, TabryOption
    from .state import MachineState

__all__ = ["OptionWithDescription", "OptionsFinder", "OptionsResults"]

_SPECIAL_TYPES = {OptionType.FILE: SPECIAL_FILE, OptionType.DIR: SPECIAL_DIR}


@dataclass
class OptionWithDescription:
    """A literal completion value."""

    value: str
    desc: str | None = None


@dataclass
class OptionsResults:
    """Options found for a token."""

    token: str
    options: list[OptionWithDescription] = field(default_factory=list)
    special_options: list[str] = field(default_factory=list)

    def insert(self, value: str, desc: str | None = None) -> None:
        """Add a literal option if it starts with the token and isn't there yet."""
        if not value.startswith(self.token):
            return
        if any(opt.value == value for opt in self.options):
            return
        self.options.append(OptionWithDescription(value, desc))

    def insert_special(self, value: str) -> None:
        """Add a special option once."""
        if value not in self.special_options:
            self.special_options.append(value)


class OptionsFinder:
    """Computes the options for the word under the cursor."""

    def __init__(self, config: TabryConf, state: MachineState, include_descriptions: bool = False, debug: bool = False) -> None:
        self.config = config
        self.state = state
        self.include_descriptions = include_descriptions
        self.debug = debug
        self.navigator = ConfigNavigator(config)
        self.log = get_logger("tabry.options", logging.DEBUG if debug else None)

    def options(self, token: str) -> OptionsResults:
        """Return the options for `token`, the partially typed last word.

        Raises:
            PathNotFound: If the state's subcommand path doesn't resolve
        """
        res = OptionsResults(token=token)
        if isinstance(self.state.mode, FlagargMode):
            self._add_options_flagarg(res, self.state.mode.current_flag)
        else:
            self._add_options_subcommand_subs(res)
            self._add_options_subcommand_flags(res)
            self._add_options_subcommand_args(res)
        return res

    def _desc(self, desc: str | None) -> str | None:
        return desc if self.include_descriptions else None

    def _add_options_flagarg(self, res: OptionsResults, flag_name: str) -> None:
        for flag in self.navigator.effective_flags(self.state.subcommand_stack):
            if flag.name == flag_name:
                self._add_options(res, flag.options)
                return
        self.log.warning("Flag %s not found at %s", flag_name, self.state.subcommand_stack)

    def _add_options_subcommand_subs(self, res: OptionsResults) -> None:
        if self.state.args or self.state.dashdash:
            return
        for sub in self.navigator.dig_sub(self.state.subcommand_stack).subs:
            if sub.name:
                res.insert(sub.name, self._desc(sub.description))

    def _add_options_subcommand_flags(self, res: OptionsResults) -> None:
        if self.state.dashdash:
            return
        # an inherited flag is offered under a spelling no deeper flag took
        claimed: set[str] = set()
        for flag in self.navigator.effective_flags(self.state.subcommand_stack):
            spelling = next((token for token in flag.tokens if token not in claimed), None)
            claimed.update(flag.tokens)
            if spelling is None or flag.name in self.state.flags or flag.name in self.state.flag_args:
                continue
            res.insert(spelling, self._desc(flag.description))

    def _add_options_subcommand_args(self, res: OptionsResults) -> None:
        args = self.navigator.dig_sub(self.state.subcommand_stack).args
        if not args:
            return
        index = len(self.state.args)
        if index < len(args):
            arg = args[index]
        elif args[-1].varargs:
            arg = args[-1]
        else:
            return
        self._add_options(res, arg.options)

    def _add_options(self, res: OptionsResults, options: list[TabryOption]) -> None:
        for option in options:
            if option.type == OptionType.CONST:
                if option.value is not None:
                    res.insert(option.value, self._desc(option.description))
            elif option.type in _SPECIAL_TYPES:
                res.insert_special(_SPECIAL_TYPES[option.type])
            elif self.debug:
                self.log.debug("Skipping %s option %r", option.type, option.value)
