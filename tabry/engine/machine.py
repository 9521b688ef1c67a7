"""The completion state machine.

Tokens are consumed left to right. In subcommand mode the first matching
rule wins: subcommand, dashdash, flag, help, and finally plain argument.
In flagarg mode the token is the pending flag's value, whatever it looks like.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..constants import DASHDASH, HELP_TOKENS
from ..logging_setup import get_logger
from ..models import ConfigInconsistency
from .navigator import ConfigNavigator
from .state import FlagargMode, MachineState, SubcommandMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..tree.types import TabryConf

__all__ = ["Machine"]


class Machine:
    """Consumes tokens against a configuration tree, one run per instance."""

    def __init__(self, config: TabryConf, debug: bool = False) -> None:
        self.config = config
        self.navigator = ConfigNavigator(config)
        self.state = MachineState()
        self.debug = debug
        self.log = get_logger("tabry.machine", logging.DEBUG if debug else None)

    @classmethod
    def run(cls, config: TabryConf, tokens: Iterable[str], debug: bool = False) -> Machine:
        """Drive a fresh machine over all the tokens and return it.

        Raises:
            PathNotFound: If the subcommand path stops resolving
            ConfigInconsistency: If the configuration is malformed
        """
        machine = cls(config, debug=debug)
        for token in tokens:
            machine.next(token)
        return machine

    def next(self, token: str) -> None:
        """Consume one token."""
        if isinstance(self.state.mode, FlagargMode):
            self._match_mode_flagarg(self.state.mode, token)
        else:
            self._match_mode_subcommand(token)

    def _match_mode_subcommand(self, token: str) -> None:
        if self._match_subcommand(token) or self._match_dashdash(token) or self._match_flag(token) or self._match_help(token):
            return
        self._match_arg(token)

    def _match_subcommand(self, token: str) -> bool:
        # no subcommand after the first argument or after "--"
        if self.state.args or self.state.dashdash:
            return False

        sub_here = self.navigator.dig_sub(self.state.subcommand_stack)
        sub = self.navigator.find_in_subs(sub_here.subs, token, exact=True)
        if sub is None:
            return False
        if not sub.name:
            msg = f"subcommand matching {token!r} has no name"
            raise ConfigInconsistency(msg)
        self.state.subcommand_stack.append(sub.name)
        self._log(f"STEP subcommand, add {sub.name}")
        return True

    def _match_dashdash(self, token: str) -> bool:
        if self.state.dashdash or token != DASHDASH:
            return False
        self.state.dashdash = True
        self._log("STEP dashdash")
        return True

    def _match_flag(self, token: str) -> bool:
        if self.state.dashdash or not token.startswith("-"):
            return False

        found = self.navigator.find_flag(self.state.subcommand_stack, token)
        if found is None:
            return False
        flag, inline_value = found
        if inline_value is not None:
            self.state.flag_args[flag.name] = inline_value
            self._log(f"STEP flag {flag.name} with inline value {inline_value!r}")
        elif flag.arg:
            self.state.mode = FlagargMode(current_flag=flag.name)
            self._log(f"STEP flag {flag.name}, waiting for its value")
        else:
            self.state.flags[flag.name] = True
            self._log(f"STEP flag {flag.name}")
        return True

    def _match_help(self, token: str) -> bool:
        if self.state.dashdash or token not in HELP_TOKENS:
            return False
        self.state.help = True
        self._log("STEP help")
        return True

    def _match_arg(self, token: str) -> None:
        self.state.args.append(token)
        self._log(f"STEP fell back to argument {token!r}")

    def _match_mode_flagarg(self, mode: FlagargMode, token: str) -> None:
        self.state.flag_args[mode.current_flag] = token
        self.state.mode = SubcommandMode()
        self._log(f"STEP value of flag {mode.current_flag}: {token!r}")

    def _log(self, msg: str) -> None:
        if self.debug:
            self.log.debug("%s; current state: %s", msg, self.state.to_dict())
