"""Tests for settings and typed configuration access."""

import os

import pytest

from tabry.config import Configuration, coerce_to_bool
from tabry.settings import Settings


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        ("", False),
        ("  ", False),
        ("0", False),
        ("No", False),
        ("off", False),
        ("disabled", False),
        ("1", True),
        ("yes", True),
        ("anything", True),
        (1, True),
        (0, False),
    ],
)
def test_coerce_to_bool(value, expected):
    assert coerce_to_bool(value) is expected


def test_coerce_to_bool_default():
    assert coerce_to_bool(None, default=True) is True


class TestConfiguration:
    """Typed accessors."""

    def test_get_bool(self, test_logger):
        conf = Configuration({"a": "true", "b": "off"}, logger=test_logger)
        assert conf.get_bool("a") is True
        assert conf.get_bool("b") is False
        assert conf.get_bool("missing", default=True) is True

    def test_get_bool_warns_on_odd_values(self, test_logger, mocker):
        warning = mocker.patch.object(test_logger, "warning")
        conf = Configuration({"debug": "maybe"}, logger=test_logger)
        assert conf.get_bool("debug") is True
        warning.assert_called_once()

    def test_get_str(self, test_logger):
        conf = Configuration({"n": 3}, logger=test_logger)
        assert conf.get_str("n") == "3"
        assert conf.get_str("missing", "dflt") == "dflt"

    def test_get_path_list(self, test_logger, monkeypatch):
        monkeypatch.setenv("HOME", "/home/someone")
        conf = Configuration({"path": os.pathsep.join(["~/tabry", "", "/etc/tabry"])}, logger=test_logger)
        assert conf.get_path_list("path") == ["/home/someone/tabry", "/etc/tabry"]

    def test_get_path_list_missing(self, test_logger):
        assert Configuration(logger=test_logger).get_path_list("path") == []


class TestSettings:
    """Settings read from the environment."""

    def test_defaults(self):
        assert Settings.from_env({}) == Settings()

    def test_from_mapping(self):
        settings = Settings.from_env(
            {
                "TABRY_DEBUG": "1",
                "TABRY_IMPORT_PATH": os.pathsep.join(["/a", "/b"]),
                "TABRY_LOG_FILE": "/tmp/tabry.log",
            }
        )
        assert settings == Settings(debug=True, import_path=["/a", "/b"], log_file="/tmp/tabry.log")

    def test_from_process_environment(self, monkeypatch):
        monkeypatch.setenv("TABRY_DEBUG", "no")
        monkeypatch.setenv("TABRY_IMPORT_PATH", "/x")
        monkeypatch.delenv("TABRY_LOG_FILE", raising=False)
        assert Settings.from_env() == Settings(debug=False, import_path=["/x"])
