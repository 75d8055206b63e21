"""
Pytest configuration and fixtures for candlepatterns tests.
"""

import logging
import os
from typing import Generator

import pytest
from unittest.mock import patch

from candlepatterns.patterns.pattern_config import reset_pattern_config


@pytest.fixture(autouse=True)
def default_pattern_config() -> Generator[None, None, None]:
    """Run every test against the default thresholds."""
    reset_pattern_config()
    yield
    reset_pattern_config()


@pytest.fixture(autouse=True)
def clean_package_logger() -> Generator[None, None, None]:
    """Undo handler setup done by Config.apply/setup_logger."""
    yield
    package_logger = logging.getLogger("candlepatterns")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def mock_env_vars() -> Generator[dict, None, None]:
    """Mock environment variables for testing."""
    test_env = {
        "CANDLEPATTERNS_LOG_LEVEL": "DEBUG",
        "CANDLEPATTERNS_LOG_MAX_SIZE": "1MB",
        "CANDLEPATTERNS_LOG_BACKUP_COUNT": "2",
        "CANDLEPATTERNS_LOG_CONSOLE": "false",
    }

    with patch.dict(os.environ, test_env, clear=False):
        yield test_env
