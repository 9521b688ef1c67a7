"""Error kinds, exceptions and exit codes."""

from enum import IntEnum, StrEnum

__all__ = [
    "ConfigInconsistency",
    "ConfigLoadError",
    "ErrorKind",
    "ExitCode",
    "PathNotFound",
    "TabryError",
    "TokenizationError",
]


class ErrorKind(StrEnum):
    """Category of a completion failure."""

    TOKENIZATION = "tokenization"
    PATH_NOT_FOUND = "path_not_found"
    CONFIG_INCONSISTENCY = "config_inconsistency"
    CONFIG_LOAD = "config_load"


class TabryError(Exception):
    """Base class for every error aborting a completion run."""

    kind: ErrorKind


class TokenizationError(TabryError):
    """The cursor position or the quoting of the line can't be handled."""

    kind = ErrorKind.TOKENIZATION


class PathNotFound(TabryError):
    """A subcommand path doesn't resolve in the command tree."""

    kind = ErrorKind.PATH_NOT_FOUND

    def __init__(self, path: list[str], missing: str) -> None:
        super().__init__(f"subcommand {missing!r} not found while resolving {' '.join(path)!r}")
        self.path = path
        self.missing = missing


class ConfigInconsistency(TabryError):
    """The compiled configuration is malformed (eg: a matched sub has no name)."""

    kind = ErrorKind.CONFIG_INCONSISTENCY


class ConfigLoadError(TabryError):
    """The configuration file can't be found, read or validated."""

    kind = ErrorKind.CONFIG_LOAD

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        if self.errors:
            message = "\n".join([message, *self.errors])
        super().__init__(message)


class ExitCode(IntEnum):
    """Exit codes of the tabry CLI."""

    SUCCESS = 0
    USAGE_ERROR = 2  # invalid arguments, same as argparse
    CONFIG_ERROR = 3  # config not found or invalid
    COMPLETION_ERROR = 4  # tokenizer or machine failure
