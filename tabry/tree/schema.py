"""Validation framework and schema of the compiled configuration document.

Provides declarative schema definitions (ConfigField, ConfigItems) and a
validator supporting type checking, required fields, choices, nested
lists of objects and fuzzy matching for typo detection.

Used by:
- the loader, before building the command tree
- 'tabry validate' to report every problem of a compiled file at once
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .types import OptionType

if TYPE_CHECKING:
    import logging

__all__ = [
    "ARG_SCHEMA",
    "FLAG_SCHEMA",
    "NODE_SCHEMA",
    "OPTION_SCHEMA",
    "ROOT_SCHEMA",
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "format_config_error",
]


@dataclass
class ConfigField:
    """Describes an expected field of a configuration object.

    Attributes:
        name: The key name
        field_type: Expected type (str, bool, list, dict)
        required: Whether the field is required
        description: Human-readable description
        choices: List of valid values for enum-like fields
        items: Schema of the objects contained in a list field
        values: Schema of the values of a dict field
        values_are_list: If True, each value of a dict field is a list of `values` objects
        allow_include: If True, list items may be `{"include": "<name>"}` references
    """

    name: str
    field_type: type = str
    required: bool = False
    description: str = ""
    choices: list | None = None
    items: ConfigItems | None = None
    values: ConfigItems | None = None
    values_are_list: bool = False
    allow_include: bool = False


class ConfigItems(list):
    """A list of ConfigField items."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Find a similar key using fuzzy matching."""
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    if matches:
        return matches[0]
    return None


def format_config_error(location: str, field: str, message: str, suggestion: str = "") -> str:
    """Format a configuration error message.

    Args:
        location: Where the object lives in the document (eg: "subs[0].flags[2]")
        field: Field name that has the error
        message: Error description
        suggestion: Optional suggestion for fixing the error

    Returns:
        Formatted error message
    """
    msg = f"[{location}] Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


_TYPE_NAMES = {str: "string", bool: "boolean", list: "array", dict: "object"}


class ConfigValidator:
    """Validates one configuration object (and its nested objects) against a schema."""

    def __init__(self, config: dict, location: str, logger: logging.Logger) -> None:
        """Initialize the validator.

        Args:
            config: The object to validate
            location: Position of the object in the document, for messages
            logger: Logger instance for warnings
        """
        self.config = config
        self.location = location
        self.log = logger

    def validate(self, schema: ConfigItems) -> list[str]:
        """Validate the object against schema.

        Args:
            schema: List of ConfigField definitions

        Returns:
            List of error messages (empty if validation passed)
        """
        errors: list[str] = []

        for field_def in schema:
            value = self.config.get(field_def.name)

            if value is None:
                if field_def.required:
                    errors.append(format_config_error(self.location, field_def.name, "Missing required field"))
                continue

            if not self._type_matches(field_def.field_type, value):
                errors.append(
                    format_config_error(
                        self.location,
                        field_def.name,
                        f"Expected {_TYPE_NAMES[field_def.field_type]}, got {type(value).__name__}",
                    )
                )
                continue

            if field_def.choices is not None and value not in field_def.choices:
                choices_str = ", ".join(repr(c) for c in field_def.choices)
                errors.append(
                    format_config_error(self.location, field_def.name, f"Invalid value {value!r}", f"Valid options: {choices_str}")
                )

            if field_def.field_type is list:
                errors.extend(self._validate_list(field_def, value))
            elif field_def.field_type is dict and field_def.values is not None:
                errors.extend(self._validate_dict_values(field_def, value))

        return errors

    @staticmethod
    def _type_matches(expected: type, value: Any) -> bool:  # noqa: ANN401
        """Check the JSON type of a value (bools are not accepted as numbers or strings)."""
        if expected is str:
            return isinstance(value, str)
        if expected is bool:
            return isinstance(value, bool)
        return isinstance(value, expected)

    def _validate_list(self, field_def: ConfigField, value: list) -> list[str]:
        """Validate the items of a list field."""
        errors: list[str] = []
        for index, item in enumerate(value):
            item_location = f"{self._child_prefix()}{field_def.name}[{index}]"
            if field_def.items is None:
                if not isinstance(item, str):
                    errors.append(format_config_error(item_location, field_def.name, f"Expected string, got {type(item).__name__}"))
                continue
            if not isinstance(item, dict):
                errors.append(format_config_error(item_location, field_def.name, f"Expected object, got {type(item).__name__}"))
                continue
            errors.extend(self._validate_child(item, item_location, INCLUDE_SCHEMA if self._is_include(field_def, item) else field_def.items))
        return errors

    def _validate_dict_values(self, field_def: ConfigField, value: dict) -> list[str]:
        """Validate every value of a dict field against the `values` schema.

        Values are lists of objects when `values_are_list` is set, single objects otherwise.
        """
        schema: ConfigItems = field_def.values  # type: ignore[assignment]
        errors: list[str] = []
        for key, child_value in value.items():
            child_location = f"{self._child_prefix()}{field_def.name}.{key}"
            if field_def.values_are_list:
                if not isinstance(child_value, list):
                    errors.append(format_config_error(child_location, key, f"Expected array, got {type(child_value).__name__}"))
                    continue
                children = [(f"{child_location}[{index}]", child) for index, child in enumerate(child_value)]
            else:
                children = [(child_location, child_value)]
            for location, child in children:
                if not isinstance(child, dict):
                    errors.append(format_config_error(location, key, f"Expected object, got {type(child).__name__}"))
                    continue
                errors.extend(self._validate_child(child, location, schema))
        return errors

    def _validate_child(self, item: dict, location: str, schema: ConfigItems) -> list[str]:
        child_validator = ConfigValidator(item, location, self.log)
        errors = child_validator.validate(schema)
        child_validator.warn_unknown_keys(schema)
        return errors

    @staticmethod
    def _is_include(field_def: ConfigField, item: dict) -> bool:
        return field_def.allow_include and "include" in item

    def _child_prefix(self) -> str:
        return "" if self.location == "root" else f"{self.location}."

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log warnings for unknown keys.

        Args:
            schema: List of ConfigField definitions

        Returns:
            List of warning messages
        """
        warnings = []
        known_keys = [f.name for f in schema]

        for key in self.config:
            if key in known_keys:
                continue

            similar = _find_similar_key(key, known_keys)
            if similar:
                msg = f"[{self.location}] Unknown key '{key}' (did you mean '{similar}'?)"
            else:
                msg = f"[{self.location}] Unknown key '{key}' - will be ignored"

            self.log.warning(msg)
            warnings.append(msg)

        return warnings


INCLUDE_SCHEMA = ConfigItems(
    ConfigField("include", str, required=True, description="Name of the include to splice in"),
)

OPTION_SCHEMA = ConfigItems(
    ConfigField("type", str, required=True, choices=[t.value for t in OptionType]),
    ConfigField("value", str, description="Constant value, include name or command"),
    ConfigField("description", str),
)

ARG_SCHEMA = ConfigItems(
    ConfigField("name", str),
    ConfigField("description", str),
    ConfigField("optional", bool),
    ConfigField("varargs", bool),
    ConfigField("options", list, items=OPTION_SCHEMA),
)

FLAG_SCHEMA = ConfigItems(
    ConfigField("name", str, required=True),
    ConfigField("aliases", list),
    ConfigField("description", str),
    ConfigField("arg", bool, description="The flag takes a value"),
    ConfigField("options", list, items=OPTION_SCHEMA),
)

NODE_SCHEMA = ConfigItems(
    ConfigField("name", str),
    ConfigField("aliases", list),
    ConfigField("description", str),
    ConfigField("flags", list, items=FLAG_SCHEMA, allow_include=True),
    ConfigField("args", list, items=ARG_SCHEMA, allow_include=True),
)
NODE_SCHEMA.append(ConfigField("subs", list, items=NODE_SCHEMA, allow_include=True))

ARG_INCLUDE_SCHEMA = ConfigItems(
    ConfigField("subs", list, items=NODE_SCHEMA, allow_include=True),
    ConfigField("flags", list, items=FLAG_SCHEMA, allow_include=True),
    ConfigField("args", list, items=ARG_SCHEMA, allow_include=True),
)

ROOT_SCHEMA = ConfigItems(
    *NODE_SCHEMA,
    ConfigField("cmd", str, description="Command completed by this configuration"),
    ConfigField("option_includes", dict, values=OPTION_SCHEMA, values_are_list=True),
    ConfigField("arg_includes", dict, values=ARG_INCLUDE_SCHEMA),
)
