"""
Accounts Test Configuration and Fixtures

Shared fixtures for account registry and resolver tests.

To run:
    pytest tests/accounts/
"""

import pytest

from accounts import MockAccountRegistry


@pytest.fixture
def mock_registry():
    """
    Provide a MockAccountRegistry with three accounts, alice active.

    Usage:
        def test_something(mock_registry):
            mock_registry.set_current("bob")
    """
    return MockAccountRegistry(["alice", "bob", "carol"], current="alice")


@pytest.fixture
def empty_registry():
    """Registry with no accounts at all"""
    return MockAccountRegistry()


def pytest_configure(config):
    """
    Configure pytest with custom markers.

    Same markers as the other test packages for consistency.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Full integration tests")
