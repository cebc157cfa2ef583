"""
Shared fixtures for primality tests.
"""

import logging
import os
import random

import pytest

from primality.config import reset_settings


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source owned by a single test."""
    return random.Random(20240917)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way the test found it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear cached settings and PRIMALITY_* variables around a test."""
    for key in list(os.environ):
        if key.startswith("PRIMALITY_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()
