"""Pytest configuration and shared fixtures."""

import pytest
from solders.pubkey import Pubkey


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (run offline)")


def pytest_collection_modifyitems(config, items):
    """Every test here is offline; mark them as unit tests."""
    for item in items:
        item.add_marker(pytest.mark.unit)


@pytest.fixture
def program_id():
    return Pubkey.new_unique()


@pytest.fixture
def pool_seed():
    return bytes(range(32))
