"""Shared fixtures."""

import pytest
from loguru import logger

from gh2bb.config.config import Config


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers added during a test, e.g. by the CLI."""
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record['message']), level='DEBUG'
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def config(tmp_path):
    """Configuration with the mirror clone placed under tmp_path."""
    return Config(prefix='myorg', git={'temp_dir': str(tmp_path)})
