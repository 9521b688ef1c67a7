"""Tests for the ansi module."""

import os
from io import StringIO
from unittest.mock import patch

from tabry.ansi import BOLD, DIM, GREEN, RED, RESET, YELLOW, colorize, sgr, should_colorize


def test_colorize_single_code():
    assert colorize("valid", GREEN) == "\x1b[32mvalid\x1b[0m"


def test_colorize_multiple_codes():
    assert colorize("errors", RED, BOLD) == "\x1b[31;1merrors\x1b[0m"


def test_colorize_no_codes():
    """Without codes the text is unchanged."""
    assert colorize("plain") == "plain"


def test_sgr():
    assert sgr(YELLOW, DIM) == "\x1b[33;2m"
    assert sgr() == ""
    assert RESET == "\x1b[0m"


class TestShouldColorize:
    """Color detection."""

    def test_no_color(self):
        with patch.dict(os.environ, {"NO_COLOR": "1", "FORCE_COLOR": "1"}):
            assert should_colorize(StringIO()) is False

    def test_force_color(self):
        with patch.dict(os.environ, {"FORCE_COLOR": "1", "NO_COLOR": ""}):
            assert should_colorize(StringIO()) is True

    def test_non_tty(self):
        """Completion output is captured by the shell, never a TTY."""
        with patch.dict(os.environ, {"NO_COLOR": "", "FORCE_COLOR": ""}):
            assert should_colorize(StringIO()) is False
