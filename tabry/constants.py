"""Shared constants for tabry."""

__all__ = [
    "DASHDASH",
    "ENV_DEBUG",
    "ENV_IMPORT_PATH",
    "ENV_LOG_FILE",
    "HELP_TOKENS",
    "SPECIAL_DIR",
    "SPECIAL_FILE",
]

# Environment variables
ENV_DEBUG = "TABRY_DEBUG"
ENV_IMPORT_PATH = "TABRY_IMPORT_PATH"
ENV_LOG_FILE = "TABRY_LOG_FILE"

# Marker tokens
DASHDASH = "--"
HELP_TOKENS = frozenset({"help", "--help", "-?"})

# Special options, understood by the shell glue as "fall back to your own completion"
SPECIAL_FILE = "file"
SPECIAL_DIR = "dir"
