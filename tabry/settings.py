"""Runtime settings of the tabry CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config import Configuration
from .constants import ENV_DEBUG, ENV_IMPORT_PATH, ENV_LOG_FILE
from .logging_setup import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["Settings"]


@dataclass
class Settings:
    """Settings for one invocation.

    `debug` is passed down explicitly to the engine, nothing reads the
    environment after this object is built.
    """

    debug: bool = False
    import_path: list[str] = field(default_factory=list)
    log_file: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build the settings from environment variables."""
        conf = Configuration(os.environ if environ is None else environ, logger=get_logger("tabry.settings"))
        return cls(
            debug=conf.get_bool(ENV_DEBUG),
            import_path=conf.get_path_list(ENV_IMPORT_PATH),
            log_file=conf.get_str(ENV_LOG_FILE) or None,
        )
