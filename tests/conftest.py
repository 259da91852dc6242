"""Pytest fixtures for tests."""

import logging
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from click.testing import CliRunner

from pillcolor.models import AppConfig, ClassifierThresholds


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI installs so they don't leak between tests."""
    yield
    package_logger = logging.getLogger("pillcolor")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def strict_white_config(config_path):
    """Config on disk that only calls very bright samples White."""
    config = AppConfig(thresholds=ClassifierThresholds(white_value=90))
    config.save(config_path)
    return config_path


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()
