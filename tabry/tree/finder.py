"""Locating compiled configurations on the import path.

A command `foo` is completed by the first `foo.json` found in the
directories of the import path, in order.
"""

from __future__ import annotations

from pathlib import Path

from ..logging_setup import get_logger
from ..models import ConfigLoadError

__all__ = ["all_supported_commands", "find_config"]

CONFIG_SUFFIX = ".json"


def find_config(command: str, import_path: list[str]) -> Path:
    """Return the configuration file completing `command`.

    Args:
        command: Basename of the command being completed
        import_path: Directories to search, in priority order

    Raises:
        ConfigLoadError: If no directory holds a configuration for the command
    """
    log = get_logger("tabry.finder")
    if not command or "/" in command:
        raise ConfigLoadError(f"invalid command name {command!r}")
    for directory in import_path:
        candidate = Path(directory) / f"{command}{CONFIG_SUFFIX}"
        if candidate.is_file():
            log.debug("Found %s", candidate)
            return candidate
    raise ConfigLoadError(f"no configuration found for {command!r} in {':'.join(import_path) or '(empty import path)'}")


def all_supported_commands(import_path: list[str]) -> list[str]:
    """List the commands having a configuration on the import path, sorted."""
    commands: set[str] = set()
    for directory in import_path:
        folder = Path(directory)
        if not folder.is_dir():
            continue
        commands.update(f.stem for f in folder.iterdir() if f.suffix == CONFIG_SUFFIX and f.is_file())
    return sorted(commands)
