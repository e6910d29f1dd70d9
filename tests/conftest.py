# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest

from storefront.config.settings import Settings


@pytest.fixture(autouse=True)
def no_mock_latency() -> Generator[None, None, None]:
    """Drop the simulated sample-data delay so tests run instantly."""
    with patch.object(Settings, "MOCK_LATENCY", 0.0):
        yield
