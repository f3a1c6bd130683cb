"""Fixtures for tests against a live directory service.

They run only when ``MFADEFAULT_*`` settings and a test account
(``MFADEFAULT_TEST_PRINCIPAL``) are provided in the environment.
"""

import os

import pytest
from mfadefault import DirectoryClient, DirectorySettings, ValidationError


@pytest.fixture
def live_settings():
    """Directory settings from the environment, or skip."""
    try:
        settings = DirectorySettings.from_env()
        settings.credential()
    except ValidationError as e:
        pytest.skip(f"No live directory configured: {e.message}")
    return settings


@pytest.fixture
def live_principal():
    """Principal name of a disposable test account, or skip."""
    principal = os.environ.get("MFADEFAULT_TEST_PRINCIPAL")
    if not principal:
        pytest.skip("MFADEFAULT_TEST_PRINCIPAL is not set")
    return principal


@pytest.fixture
def integration_client(live_settings):
    """Create a connected client for integration tests."""
    with DirectoryClient.from_settings(live_settings) as client:
        client.connect(live_settings.credential())
        yield client
