"""Compiled configuration loading.

Reads the JSON document, validates it against the schema and builds the
read-only command tree, splicing `{"include": ...}` references in place.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from ..logging_setup import get_logger
from ..models import ConfigLoadError
from .schema import ROOT_SCHEMA, ConfigValidator
from .types import CommandNode, OptionType, TabryArg, TabryConf, TabryFlag, TabryOption

__all__ = ["config_from_dict", "load_config", "validate_config_dict"]

T = TypeVar("T")


def validate_config_dict(data: Any) -> list[str]:  # noqa: ANN401
    """Validate a decoded configuration document.

    Returns:
        List of error messages (empty if the document is valid)
    """
    if not isinstance(data, dict):
        return [f"[root] Expected object, got {type(data).__name__}"]
    validator = ConfigValidator(data, "root", get_logger("tabry.config"))
    errors = validator.validate(ROOT_SCHEMA)
    validator.warn_unknown_keys(ROOT_SCHEMA)
    return errors


class _TreeBuilder:
    """Builds the command tree from a validated document."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.option_includes: dict[str, list[dict]] = data.get("option_includes", {})
        self.arg_includes: dict[str, dict[str, list[dict]]] = data.get("arg_includes", {})
        self._expanding: list[str] = []

    def _enter(self, key: str) -> None:
        if key in self._expanding:
            raise ConfigLoadError(f"include cycle: {' -> '.join([*self._expanding, key])}")
        self._expanding.append(key)

    def _splice(self, items: list[dict], kind: str, build: Callable[[dict], T]) -> list[T]:
        """Build a subs/flags/args list, replacing include references by the included items.

        Included items are built while their include is being expanded, so
        an include reachable from itself is reported as a cycle.
        """
        result: list[T] = []
        for item in items:
            if "include" not in item:
                result.append(build(item))
                continue
            name = item["include"]
            if name not in self.arg_includes:
                raise ConfigLoadError(f"include {name!r} not found")
            self._enter(f"arg_includes.{name}")
            try:
                result.extend(self._splice(self.arg_includes[name].get(kind, []), kind, build))
            finally:
                self._expanding.pop()
        return result

    def options(self, items: list[dict]) -> list[TabryOption]:
        """Build options, expanding `include` options from `option_includes`."""
        result: list[TabryOption] = []
        for item in items:
            option_type = OptionType(item["type"])
            if option_type != OptionType.INCLUDE:
                result.append(TabryOption(type=option_type, value=item.get("value"), description=item.get("description")))
                continue
            name = item.get("value")
            if name not in self.option_includes:
                raise ConfigLoadError(f"option include {name!r} not found")
            self._enter(f"option_includes.{name}")
            try:
                result.extend(self.options(self.option_includes[name]))
            finally:
                self._expanding.pop()
        return result

    def flag(self, item: dict) -> TabryFlag:
        return TabryFlag(
            name=item["name"],
            aliases=list(item.get("aliases", [])),
            description=item.get("description"),
            arg=item.get("arg", False),
            options=self.options(item.get("options", [])),
        )

    def arg(self, item: dict) -> TabryArg:
        return TabryArg(
            name=item.get("name"),
            description=item.get("description"),
            optional=item.get("optional", False),
            varargs=item.get("varargs", False),
            options=self.options(item.get("options", [])),
        )

    def node(self, item: dict) -> CommandNode:
        return CommandNode(
            name=item.get("name"),
            aliases=list(item.get("aliases", [])),
            description=item.get("description"),
            subs=self._splice(item.get("subs", []), "subs", self.node),
            flags=self._splice(item.get("flags", []), "flags", self.flag),
            args=self._splice(item.get("args", []), "args", self.arg),
        )


def config_from_dict(data: Any) -> TabryConf:  # noqa: ANN401
    """Build a configuration from a decoded JSON document.

    Raises:
        ConfigLoadError: If the document is invalid or an include can't be resolved
    """
    errors = validate_config_dict(data)
    if errors:
        raise ConfigLoadError("invalid configuration", errors)
    root = _TreeBuilder(data).node(data)
    root.name = None
    return TabryConf(root=root, cmd=data.get("cmd"))


def load_config(filename: str | Path) -> TabryConf:
    """Load a compiled configuration file.

    Raises:
        ConfigLoadError: If the file can't be read, decoded or validated
    """
    path = Path(filename)
    log = get_logger("tabry.config")
    log.debug("Loading %s", path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigLoadError(f"can't read {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"problem reading {path}: {e}") from e
    try:
        return config_from_dict(data)
    except ConfigLoadError as e:
        raise ConfigLoadError(f"{path}: {e}") from e
