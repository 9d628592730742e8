"""Pytest configuration and shared fixtures."""

import logging

import pytest

from stylecheck.config import Configuration


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("stylecheck")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def configuration():
    return Configuration()

