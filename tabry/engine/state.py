"""Machine state of one completion run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["FlagargMode", "MachineState", "MachineStateMode", "SubcommandMode"]


@dataclass(frozen=True)
class SubcommandMode:
    """Normal mode: tokens are classified by the matching rules."""


@dataclass(frozen=True)
class FlagargMode:
    """The next token is the value of `current_flag`, taken verbatim."""

    current_flag: str


MachineStateMode = SubcommandMode | FlagargMode


@dataclass
class MachineState:
    """What the machine learned from the tokens consumed so far."""

    mode: MachineStateMode = field(default_factory=SubcommandMode)
    subcommand_stack: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)
    flags: dict[str, bool] = field(default_factory=dict)
    flag_args: dict[str, str] = field(default_factory=dict)
    dashdash: bool = False
    help: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON serializable version of the state."""
        if isinstance(self.mode, FlagargMode):
            mode: dict[str, str] = {"type": "flagarg", "current_flag": self.mode.current_flag}
        else:
            mode = {"type": "subcommand"}
        return {
            "mode": mode,
            "subcommand_stack": list(self.subcommand_stack),
            "args": list(self.args),
            "flags": dict(self.flags),
            "flag_args": dict(self.flag_args),
            "dashdash": self.dashdash,
            "help": self.help,
        }
