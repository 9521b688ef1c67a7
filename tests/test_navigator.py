"""Tests for the configuration navigator."""

import pytest

from tabry.engine.navigator import ConfigNavigator
from tabry.models import ErrorKind, PathNotFound
from tabry.tree.loader import config_from_dict
from tabry.tree.types import CommandNode


@pytest.fixture
def navigator(vehicles):
    return ConfigNavigator(vehicles)


class TestDigSub:
    """Resolving nodes by path."""

    def test_empty_path_is_root(self, navigator, vehicles):
        assert navigator.dig_sub([]) is vehicles.root

    def test_nested_path(self, navigator):
        node = navigator.dig_sub(["move", "go"])
        assert node.name == "go"

    def test_dig_subs_returns_the_whole_path(self, navigator):
        names = [node.name for node in navigator.dig_subs(["move", "crash"])]
        assert names == [None, "move", "crash"]

    def test_missing_entry(self, navigator):
        with pytest.raises(PathNotFound) as exc_info:
            navigator.dig_sub(["move", "fly"])
        assert exc_info.value.kind == ErrorKind.PATH_NOT_FOUND
        assert exc_info.value.missing == "fly"

    def test_does_not_mutate_path(self, navigator):
        path = ["move"]
        navigator.dig_sub(path)
        assert path == ["move"]


class TestFindInSubs:
    """Matching a token against children."""

    SUBS = [CommandNode(name="start"), CommandNode(name="status", aliases=["st"]), CommandNode(name="stop")]

    def test_exact(self):
        assert ConfigNavigator.find_in_subs(self.SUBS, "stop").name == "stop"

    def test_alias(self):
        assert ConfigNavigator.find_in_subs(self.SUBS, "st").name == "status"

    def test_exact_rejects_prefix(self):
        assert ConfigNavigator.find_in_subs(self.SUBS, "sta") is None

    def test_unambiguous_prefix(self):
        assert ConfigNavigator.find_in_subs(self.SUBS, "stat", exact=False).name == "status"

    def test_ambiguous_prefix(self):
        assert ConfigNavigator.find_in_subs(self.SUBS, "sta", exact=False) is None

    def test_empty_token_never_matches(self):
        assert ConfigNavigator.find_in_subs([CommandNode(name="only")], "", exact=False) is None

    def test_no_match(self):
        assert ConfigNavigator.find_in_subs(self.SUBS, "restart", exact=False) is None


class TestFlags:
    """Flag lookups."""

    def test_root_flags(self, navigator):
        assert [flag.name for flag in navigator.effective_flags([])] == ["verbose", "quiet", "config"]

    def test_inherited_flags_deepest_first(self, navigator):
        names = [flag.name for flag in navigator.effective_flags(["move", "go"])]
        assert names == ["speed", "dry-run", "verbose", "verbose", "quiet", "config"]

    def test_deepest_definition_wins(self, navigator):
        verbose = next(flag for flag in navigator.effective_flags(["move"]) if flag.name == "verbose")
        assert verbose.description == "Report every move"

    def test_shadowed_flag_keeps_its_other_spellings(self, navigator):
        """move redefines --verbose only, -v still reaches the root flag."""
        flag, _ = navigator.find_flag(["move"], "-v")
        assert flag.description == "Talk more"
        flag, _ = navigator.find_flag(["move"], "--verbose")
        assert flag.description == "Report every move"

    def test_fully_redefined_flag_is_hidden(self):
        config = config_from_dict({"flags": [{"name": "force"}], "subs": [{"name": "rm", "flags": [{"name": "force", "description": "Really"}]}]})
        flags = ConfigNavigator(config).effective_flags(["rm"])
        assert [flag.description for flag in flags] == ["Really"]

    def test_find_flag_by_short_alias(self, navigator):
        flag, value = navigator.find_flag([], "-v")
        assert flag.name == "verbose"
        assert value is None

    def test_find_flag_long(self, navigator):
        flag, _ = navigator.find_flag(["move"], "--dry-run")
        assert flag.name == "dry-run"

    def test_find_flag_inline_value(self, navigator):
        flag, value = navigator.find_flag(["move"], "--speed=fast")
        assert flag.name == "speed"
        assert value == "fast"

    def test_inline_value_only_for_flags_with_arg(self, navigator):
        assert navigator.find_flag(["move"], "--dry-run=yes") is None

    def test_no_abbreviation(self, navigator):
        assert navigator.find_flag(["move"], "--spe") is None

    def test_flag_of_another_branch(self, navigator):
        assert navigator.find_flag(["build"], "--speed") is None
