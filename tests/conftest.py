"""Shared fixtures for the cwver test suite."""
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by CLI runs so they never outlive the captured streams."""
    yield
    logger.remove()
    logger.disable("cwver")
