"""Completion engine.

This package provides:
- tokenizer: Cursor-aware shell word splitting
- navigator: Lookups in the command tree by subcommand path
- state: The machine state and its mode
- machine: The token-consuming state machine
- options_finder: Completion candidates for the final state
- output: Lines printed for the shell glue
"""

from .machine import Machine
from .options_finder import OptionsFinder, OptionsResults, OptionWithDescription
from .output import format_options
from .state import FlagargMode, MachineState, SubcommandMode
from .tokenizer import TokenizedResult, split_with_comppoint

__all__ = [
    "FlagargMode",
    "Machine",
    "MachineState",
    "OptionWithDescription",
    "OptionsFinder",
    "OptionsResults",
    "SubcommandMode",
    "TokenizedResult",
    "format_options",
    "split_with_comppoint",
]
