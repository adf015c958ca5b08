"""Shared fixtures for roadmap tests."""

import pendulum
import pytest

from roadmap import configuration
from roadmap.configuration import get_default_configuration
from roadmap.initialize import configure_logging
from roadmap.repository.configuration import CONFIGURATION_REPO


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    configure_logging("WARNING")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    CONFIGURATION_REPO.reset()
    yield config_dir
    CONFIGURATION_REPO.reset()


@pytest.fixture
def config():
    return get_default_configuration()


@pytest.fixture
def now():
    return pendulum.datetime(2024, 3, 15, 12, tz="UTC")
