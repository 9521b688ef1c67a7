" generic fixtures "
import json
import logging
from pathlib import Path

import pytest

from tabry.tree.loader import config_from_dict, load_config

FIXTURES = Path(__file__).parent / "fixtures"
VEHICLES_FILE = FIXTURES / "vehicles.json"

START_STOP = {
    "subs": [
        {"name": "start", "description": "Start the service"},
        {"name": "stop", "description": "Stop the service"},
    ]
}


def pytest_configure():
    "Runs once before all"
    from tabry.logging_setup import init_logger

    init_logger("/dev/null", debug=True)


@pytest.fixture
def test_logger():
    "A silent logger"
    logger = logging.getLogger("tabry.tests")
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


@pytest.fixture(scope="session")
def vehicles_file():
    return VEHICLES_FILE


@pytest.fixture(scope="session")
def vehicles_data():
    "The decoded vehicles document"
    return json.loads(VEHICLES_FILE.read_text())


@pytest.fixture(scope="session")
def vehicles():
    "The vehicles configuration tree"
    return load_config(VEHICLES_FILE)


@pytest.fixture
def start_stop():
    "A root with two plain subcommands"
    return config_from_dict(START_STOP)
