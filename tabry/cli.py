"""Tabry command line interface.

Called by the shell glue as `tabry complete "$COMP_LINE" "$COMP_POINT"`;
every line printed on stdout is a completion, diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

import shtab

from .ansi import GREEN, RED, colorize, should_colorize
from .engine.machine import Machine
from .engine.options_finder import OptionsFinder
from .engine.output import format_options
from .engine.tokenizer import split_with_comppoint
from .logging_setup import get_logger, init_logger
from .models import ConfigLoadError, ExitCode, TabryError, TokenizationError
from .settings import Settings
from .tree.finder import all_supported_commands, find_config
from .tree.loader import load_config, validate_config_dict
from .tree.types import TabryConf

__all__ = ["get_parser", "main", "print_options"]

JSON_FILE = {
    "bash": "_shtab_tabry_compgen_JSONFiles",
    "zsh": "_files -g '(*.json|*.JSON)'",
    "tcsh": "f:*.json",
}

PREAMBLE = {
    "bash": """
# $1=COMP_WORDS[1]
_shtab_tabry_compgen_JSONFiles() {
  compgen -d -- $1  # recurse into subdirs
  compgen -f -X '!*?.json' -- $1
}
""",
    "zsh": "",
    "tcsh": "",
}


def get_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="tabry", description="Tab completion engine for command trees")
    shtab.add_argument_to(parser, ["-s", "--print-completion"], preamble=PREAMBLE)
    parser.add_argument("--debug", action="store_true", help="Log machine steps and dump the final state")
    parser.add_argument("--log-file", metavar="filename", help="Also log to a file").complete = shtab.FILE

    subparsers = parser.add_subparsers(dest="command", required=True)

    complete = subparsers.add_parser("complete", help="Print the completions for a command line")
    complete.add_argument("compline", help="The command line typed so far")
    complete.add_argument("comppoint", help="Byte offset of the cursor in the command line")
    complete.add_argument("-d", "--include-descriptions", action="store_true", help="Print descriptions after a tab")
    complete.add_argument(
        "--config",
        metavar="filename",
        type=Path,
        help="Compiled configuration to use instead of looking it up",
    ).complete = JSON_FILE

    options = subparsers.add_parser("options", help="Print the completions for already split tokens")
    options.add_argument("-d", "--include-descriptions", action="store_true", help="Print descriptions after a tab")
    options.add_argument("config", type=Path, help="Compiled configuration").complete = JSON_FILE
    options.add_argument(
        "tokens",
        nargs=argparse.REMAINDER,
        help="Arguments after the command name, the last one being completed",
    )

    validate = subparsers.add_parser("validate", help="Check a compiled configuration file")
    validate.add_argument("config", type=Path, help="Compiled configuration").complete = JSON_FILE

    subparsers.add_parser("commands", help="List the commands having a configuration on the import path")
    return parser


def print_options(
    config: TabryConf,
    tokens: list[str],
    last_token: str,
    include_descriptions: bool = False,
    debug: bool = False,
    out: TextIO | None = None,
) -> None:
    """Run the machine over the tokens and print the options for the last one.

    Raises:
        PathNotFound: If the machine's path stops resolving
        ConfigInconsistency: If the configuration is malformed
    """
    out = out or sys.stdout
    machine = Machine.run(config, tokens, debug=debug)

    if debug:
        print(json.dumps(machine.state.to_dict(), indent=2), file=out)

    finder = OptionsFinder(config, machine.state, include_descriptions=include_descriptions, debug=debug)
    for line in format_options(finder.options(last_token)):
        print(line, file=out)


def _run_complete(args: argparse.Namespace, settings: Settings) -> int:
    try:
        comppoint = int(args.comppoint)
    except ValueError as e:
        raise TokenizationError(f"invalid comppoint: {args.comppoint}") from e
    tokenized = split_with_comppoint(args.compline, comppoint)
    config_file = args.config or find_config(tokenized.command_basename, settings.import_path)
    print_options(load_config(config_file), tokenized.arguments, tokenized.last_argument, args.include_descriptions, settings.debug)
    return ExitCode.SUCCESS


def _run_options(args: argparse.Namespace, settings: Settings) -> int:
    tokens = list(args.tokens)
    last_token = tokens.pop() if tokens else ""
    print_options(load_config(args.config), tokens, last_token, args.include_descriptions, settings.debug)
    return ExitCode.SUCCESS


def _run_validate(args: argparse.Namespace, _settings: Settings) -> int:
    path: Path = args.config
    use_colors = should_colorize(sys.stdout)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigLoadError(f"can't read {path}: {e}") from e

    errors = validate_config_dict(data)
    if not errors:
        # includes are only resolved when building the tree
        try:
            load_config(path)
        except ConfigLoadError as e:
            errors = [str(e)]

    if errors:
        for error in errors:
            print(f"  ERROR: {error}")
        summary = f"Found {len(errors)} error(s) in {path}"
        print(colorize(summary, RED) if use_colors else summary)
        return ExitCode.CONFIG_ERROR
    summary = f"{path} is valid!"
    print(colorize(summary, GREEN) if use_colors else summary)
    return ExitCode.SUCCESS


def _run_commands(_args: argparse.Namespace, settings: Settings) -> int:
    for command in all_supported_commands(settings.import_path):
        print(command)
    return ExitCode.SUCCESS


HANDLERS: dict[str, Callable[[argparse.Namespace, Settings], int]] = {
    "complete": _run_complete,
    "options": _run_options,
    "validate": _run_validate,
    "commands": _run_commands,
}


def main(argv: list[str] | None = None) -> int:
    """Run the CLI, returning the exit code."""
    args = get_parser().parse_args(argv)
    settings = Settings.from_env()
    if args.debug:
        settings.debug = True
    if args.log_file:
        settings.log_file = args.log_file

    init_logger(settings.log_file, debug=settings.debug)
    log = get_logger("tabry")

    try:
        return HANDLERS[args.command](args, settings)
    except ConfigLoadError as e:
        log.error("%s", e)
        return ExitCode.CONFIG_ERROR
    except TabryError as e:
        log.error("%s error: %s", e.kind, e)
        return ExitCode.COMPLETION_ERROR
