"""Pytest configuration for live end-to-end tests against TheTVDB.

These tests hit the real service, so they are skipped unless
TVDBCLIENT_E2E_TESTS=1 is set. A TVDB_API_KEY in the environment is needed
as well; tests that need it skip when it is missing.
"""

import os

import pytest

from tvdbclient.settings import Settings


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests requiring TVDBCLIENT_E2E_TESTS=1"
    )
    config.addinivalue_line("markers", "api: Tests requiring a real API key")


def pytest_collection_modifyitems(config, items):
    """Skip E2E tests unless explicitly enabled."""
    if not os.environ.get("TVDBCLIENT_E2E_TESTS"):
        skip_e2e = pytest.mark.skip(reason="E2E tests require TVDBCLIENT_E2E_TESTS=1")
        for item in items:
            if "e2e" in item.keywords:
                item.add_marker(skip_e2e)


@pytest.fixture
def tvdb_api_key() -> str:
    """The live API key, or skip the test."""
    key = Settings().TVDB_API_KEY
    if not key:
        pytest.skip("Test requires TVDB_API_KEY")
    return key
