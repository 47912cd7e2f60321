import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """CLIs reconfigure loguru sinks; restore the default stderr sink after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
