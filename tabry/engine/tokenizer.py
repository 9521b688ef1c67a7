"""Cursor-aware shell word splitting.

Only the text left of the cursor matters: it is split the way a POSIX shell
splits words, and the word holding the cursor is returned separately as the
one being completed.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass

from ..models import TokenizationError

__all__ = ["TokenizedResult", "split_with_comppoint"]

# Appended at the cursor position: it always ends up at the end of the last word
_CURSOR_MARK = "\x00"

# Unterminated quotes are closed before giving up
_QUOTE_CLOSERS = ("", '"', "'")


@dataclass
class TokenizedResult:
    """A command line split around the cursor."""

    command_basename: str
    arguments: list[str]  # words fully left of the cursor, command excluded
    last_argument: str  # the word holding the cursor, possibly empty


def _shell_split(text: str) -> list[str]:
    """Split like a shell, closing an unterminated quote if needed."""
    for closer in _QUOTE_CLOSERS:
        try:
            return shlex.split(text + closer)
        except ValueError:
            continue
    raise TokenizationError(f"can't split {text!r}")


def split_with_comppoint(compline: str, comppoint: int) -> TokenizedResult:
    """Split the command line, the cursor being at byte offset `comppoint`.

    Args:
        compline: The command line typed so far
        comppoint: Byte offset of the cursor in the UTF-8 encoded line

    Raises:
        TokenizationError: If the offset is out of range or inside a character,
            or if the cursor is still within the command name
    """
    encoded = compline.encode("utf-8")
    if not 0 <= comppoint <= len(encoded):
        raise TokenizationError(f"comppoint {comppoint} out of range for a {len(encoded)} bytes line")
    try:
        before = encoded[:comppoint].decode("utf-8")
    except UnicodeDecodeError as e:
        raise TokenizationError(f"comppoint {comppoint} is inside a multi-byte character") from e
    if _CURSOR_MARK in before:
        raise TokenizationError("NUL character in command line")

    words = _shell_split(before + _CURSOR_MARK)
    if not words or not words[-1].endswith(_CURSOR_MARK):
        raise TokenizationError(f"can't locate the cursor in {before!r}")
    if len(words) == 1:
        raise TokenizationError("the cursor is within the command name")

    return TokenizedResult(
        command_basename=os.path.basename(words[0]),
        arguments=words[1:-1],
        last_argument=words[-1][: -len(_CURSOR_MARK)],
    )
