"""Tests for the printed completion lines."""

from tabry.engine.options_finder import OptionsResults, OptionWithDescription
from tabry.engine.output import format_options


def test_plain_options():
    results = OptionsResults(token="", options=[OptionWithDescription("start"), OptionWithDescription("stop")])
    assert format_options(results) == ["start", "stop"]


def test_descriptions_after_tab():
    results = OptionsResults(token="", options=[OptionWithDescription("start", "Start it"), OptionWithDescription("stop")])
    assert format_options(results) == ["start\tStart it", "stop"]


def test_special_options_after_empty_line():
    results = OptionsResults(token="", options=[OptionWithDescription("-")], special_options=["file"])
    assert format_options(results) == ["-", "", "file"]


def test_only_special_options_get_two_empty_lines():
    results = OptionsResults(token="", special_options=["file", "dir"])
    assert format_options(results) == ["", "", "file", "dir"]


def test_nothing():
    assert format_options(OptionsResults(token="x")) == []
