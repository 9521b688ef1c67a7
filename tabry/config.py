"""Typed access to loosely typed runtime settings (environment variables)."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import logging

__all__ = ["BOOL_FALSE_STRINGS", "BOOL_TRUE_STRINGS", "Configuration", "coerce_to_bool"]

BOOL_TRUE_STRINGS = frozenset({"true", "yes", "on", "1", "enabled"})
BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: Any, default: bool = False) -> bool:  # noqa: ANN401
    """Coerce a value to boolean, handling loose typing.

    Args:
        value: The value to coerce
        default: Default value if value is None

    Returns:
        The boolean value

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


class Configuration(dict):
    """Dict wrapper providing typed accessors."""

    def __init__(
        self,
        *args: Any,  # noqa: ANN401
        logger: logging.Logger,
        **kwargs: Any,  # noqa: ANN401
    ):
        """Initialize the configuration object.

        Args:
            *args: Arguments for dict
            logger: Logger instance to use for warnings
            **kwargs: Keyword arguments for dict
        """
        super().__init__(*args, **kwargs)
        self.log = logger

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean value, see `coerce_to_bool`."""
        value = self.get(name)
        if isinstance(value, str) and value.strip() and value.lower().strip() not in BOOL_TRUE_STRINGS | BOOL_FALSE_STRINGS:
            self.log.warning("Invalid value for boolean option %s: %s, considering it true", name, value)
        return coerce_to_bool(value, default)

    def get_str(self, name: str, default: str = "") -> str:
        """Get a string value."""
        value = self.get(name)
        if value is None:
            return default
        return str(value)

    def get_path_list(self, name: str) -> list[str]:
        """Get a list of paths from a `os.pathsep` separated value.

        Empty entries are dropped, `~` and variables are expanded.
        """
        value = self.get_str(name)
        return [os.path.expanduser(os.path.expandvars(part)) for part in value.split(os.pathsep) if part.strip()]
