"""
Shared pytest fixtures for the Pritunl client test suite.

This module provides fixtures that are automatically available to all test files:
- A test ClientConfig pointing at a mocked base URL
- An opened PritunlClient
- A respx router that intercepts every httpx request to the mocked API

No test in this suite talks to a real Pritunl server.
"""

from collections.abc import Generator

import pytest
import respx

from pritunl_client.api.client import PritunlClient
from pritunl_client.config import ClientConfig
from tests.constants import BASE_URL, TEST_SECRET, TEST_TOKEN

# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture
def config() -> ClientConfig:
    """Create a test configuration."""
    return ClientConfig(url=BASE_URL, token=TEST_TOKEN, secret=TEST_SECRET, timeout=5.0)


@pytest.fixture(autouse=True)
def clean_pritunl_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables from leaking into config tests."""
    for name in (
        "PRITUNL_URL",
        "PRITUNL_TOKEN",
        "PRITUNL_SECRET",
        "PRITUNL_INSECURE",
        "PRITUNL_TIMEOUT",
        "PRITUNL_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def api() -> Generator[respx.MockRouter, None, None]:
    """
    Mock the Pritunl API.

    Routes are registered relative to BASE_URL. Any request that does not
    match a registered route fails the test.
    """
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client(config: ClientConfig, api: respx.MockRouter) -> Generator[PritunlClient, None, None]:
    """Create an opened API client whose requests go to the mocked API."""
    with PritunlClient(config) as client:
        yield client
