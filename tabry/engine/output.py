"""Lines printed for the shell glue."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .options_finder import OptionsResults

__all__ = ["format_options"]


def format_options(results: OptionsResults) -> list[str]:
    """Return the output lines for the options found.

    Literal options come first, one per line, as `value` or `value<TAB>desc`.
    Special options follow after an empty line; when there are no literal
    options an extra empty line is added so the glue can tell the two apart.
    """
    lines = [opt.value if opt.desc is None else f"{opt.value}\t{opt.desc}" for opt in results.options]
    if results.special_options:
        if not results.options:
            lines.append("")
        lines.append("")
        lines.extend(results.special_options)
    return lines
