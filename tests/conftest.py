"""Test configuration and common utilities.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import respx
from mfadefault import DirectoryClient, ServiceCredential

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def base_url() -> str:
    """Return base URL for the test directory.

    Returns:
        str: The base URL for testing.

    """
    return "https://directory.test/v1"


@pytest.fixture
def principal_name() -> str:
    """Return a test principal name."""
    return "jdoe@contoso.test"


@pytest.fixture
def credential() -> ServiceCredential:
    """Return a test service credential."""
    return ServiceCredential(
        tenant_id="tenant-123",
        client_id="client-abc",
        client_secret="s3cret-value",
    )


@pytest.fixture
def client(base_url: str) -> Generator[DirectoryClient, None, None]:
    """Create test client.

    Yields:
        DirectoryClient: Configured test client.

    """
    with DirectoryClient(base_url=base_url, timeout=5.0) as client:
        yield client


@pytest.fixture
def mock_directory() -> Generator[respx.MockRouter, None, None]:
    """Mock the directory HTTP API.

    Yields:
        The mock router for HTTP requests.

    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def token_response() -> dict[str, Any]:
    """Sample client-credentials token response."""
    return {
        "access_token": "test-access-token",
        "token_type": "Bearer",
        "expires_in": 3600,
    }


@pytest.fixture
def make_user(principal_name: str) -> Callable[..., dict[str, Any]]:
    """Return a builder for user payloads from (type, is_default) pairs."""

    def build(*methods: tuple[str, bool]) -> dict[str, Any]:
        return {
            "userPrincipalName": principal_name,
            "displayName": "Jane Doe",
            "accountEnabled": True,
            "strongAuthenticationMethods": [
                {"methodType": method_type, "isDefault": is_default}
                for method_type, is_default in methods
            ],
        }

    return build


@pytest.fixture
def sample_error_response() -> dict[str, Any]:
    """Sample error response.

    Returns:
        dict[str, Any]: Sample error response data.

    """
    return {
        "error": {
            "code": "REQUEST_DENIED",
            "message": "Insufficient privileges to complete the operation",
            "details": {"scope": "Directory.ReadWrite.All"},
        },
    }
