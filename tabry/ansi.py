"""Terminal colors for diagnostics.

Completion candidates are never colored: only stderr logs and the
`tabry validate` report go through here.
"""

import os
import sys
from typing import TextIO

__all__ = ["BOLD", "DIM", "GREEN", "RED", "RESET", "YELLOW", "colorize", "sgr", "should_colorize"]

BOLD = "1"
DIM = "2"
RED = "31"
GREEN = "32"
YELLOW = "33"

RESET = "\x1b[0m"


def sgr(*codes: str) -> str:
    """Return the escape sequence selecting `codes`, empty without codes."""
    return f"\x1b[{';'.join(codes)}m" if codes else ""


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell if `stream` (stderr by default) gets colors.

    NO_COLOR wins over FORCE_COLOR, which wins over TTY detection.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    stream = sys.stderr if stream is None else stream
    return bool(getattr(stream, "isatty", None) and stream.isatty())


def colorize(text: str, *codes: str) -> str:
    """Wrap `text` between the sequence for `codes` and a reset."""
    return f"{sgr(*codes)}{text}{RESET}" if codes else text
