"""Tests for locating configurations on the import path."""

import pytest

from tabry.models import ConfigLoadError
from tabry.tree.finder import all_supported_commands, find_config


@pytest.fixture
def import_path(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / "git.json").write_text("{}")
    (second / "git.json").write_text("{}")
    (second / "docker.json").write_text("{}")
    (second / "notes.txt").write_text("")
    (second / "folder.json").mkdir()
    return [str(first), str(second)]


def test_first_directory_wins(import_path, tmp_path):
    assert find_config("git", import_path) == tmp_path / "first" / "git.json"


def test_later_directory(import_path, tmp_path):
    assert find_config("docker", import_path) == tmp_path / "second" / "docker.json"


def test_not_found(import_path):
    with pytest.raises(ConfigLoadError, match="no configuration found for 'hg'"):
        find_config("hg", import_path)


def test_directories_are_not_configs(import_path):
    with pytest.raises(ConfigLoadError):
        find_config("folder", import_path)


@pytest.mark.parametrize("command", ["", "../git", "a/b"])
def test_invalid_command_name(import_path, command):
    with pytest.raises(ConfigLoadError, match="invalid command name"):
        find_config(command, import_path)


def test_empty_import_path():
    with pytest.raises(ConfigLoadError, match="empty import path"):
        find_config("git", [])


def test_all_supported_commands(import_path, tmp_path):
    assert all_supported_commands([*import_path, str(tmp_path / "missing")]) == ["docker", "git"]
