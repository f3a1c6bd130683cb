"""Base HTTP client for directory service operations.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, Callable
from urllib.parse import urljoin

import httpx  # type: ignore[import-untyped]

from .exceptions import (
    DirectoryError,
    NetworkError,
    TimeoutError as DirectoryTimeoutError,
    create_error_from_response,
)

logger = logging.getLogger(__name__)

# HTTP Error Status Constants
HTTP_SUCCESS_THRESHOLD = 400
HTTP_NO_CONTENT = 204

USER_AGENT = "mfadefault/1.0.0"


class RequestConfig(NamedTuple):
    """Configuration for HTTP requests."""

    json_data: dict[str, Any] | None = None
    form_data: dict[str, str | None] | None = None
    params: dict[str, Any] | None = None
    timeout: float | None = None


class BaseClient:
    """Base HTTP client for making directory API requests.

    Requests are made once. Failures are mapped onto the
    :mod:`mfadefault.exceptions` hierarchy and never retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize base HTTP client.

        Args:
            base_url: The base URL of the directory API
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests

        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self._access_token: str | None = None

        self._client = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    def __enter__(self) -> BaseClient:
        """Context manager entry.

        Returns:
            The client instance.

        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Context manager exit."""
        self._client.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def set_access_token(self, token: str) -> None:
        """Set the access token for authenticated requests."""
        self._access_token = token

    def clear_access_token(self) -> None:
        """Clear the access token."""
        self._access_token = None

    def get_access_token(self) -> str | None:
        """Get the current access token.

        Returns:
            Current access token or None if not set.

        """
        return self._access_token

    def resolve_url(self, endpoint: str) -> str:
        """Resolve an endpoint path or absolute URL against the base URL."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return urljoin(self.base_url, endpoint.lstrip("/"))

    def _make_request_generic(
        self,
        method: str,
        endpoint: str,
        parser: Callable[[httpx.Response], Any],
        *,
        config: RequestConfig | None = None,
        authenticated: bool = True,
    ) -> Any:
        """Make a single HTTP request using a generic parser.

        Args:
            method: HTTP method (GET, PATCH, etc.)
            endpoint: API endpoint path or absolute URL
            parser: Function to parse the response
            config: Request configuration
            authenticated: Whether to send the bearer token

        Returns:
            Parsed response data.

        Raises:
            DirectoryError: For API errors reported by the service
            NetworkError: For network-related errors
            DirectoryTimeoutError: For timeout errors

        """
        if config is None:
            config = RequestConfig()

        url = self.resolve_url(endpoint)
        request_timeout = config.timeout or self.timeout

        headers: dict[str, str] = {}
        if authenticated and self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        logger.debug("%s %s", method, url)
        try:
            response = self._execute_request(
                method, url, headers, config, request_timeout
            )
        except httpx.TimeoutException as e:
            raise DirectoryTimeoutError("Request timeout") from e
        except httpx.NetworkError as e:
            raise NetworkError("Network error") from e

        if response.status_code < HTTP_SUCCESS_THRESHOLD:
            return parser(response)

        error_info = self._parse_error_response(response)
        self._raise_api_error(response.status_code, error_info)

    def make_request(
        self,
        method: str,
        endpoint: str,
        *,
        config: RequestConfig | None = None,
        authenticated: bool = True,
    ) -> dict[str, Any]:
        """Make an HTTP request expecting a JSON response.

        Returns:
            Parsed JSON response data, or an empty dict for empty bodies.

        """
        return self._make_request_generic(
            method,
            endpoint,
            parser=self._parse_json,
            config=config,
            authenticated=authenticated,
        )

    def _execute_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        config: RequestConfig,
        timeout: float,
    ) -> httpx.Response:
        """Execute the actual HTTP request.

        Returns:
            The HTTP response.

        """
        if config.form_data:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            return self._client.request(
                method,
                url,
                data=config.form_data,
                params=config.params,
                headers=headers,
                timeout=timeout,
            )

        return self._client.request(
            method,
            url,
            json=config.json_data,
            params=config.params,
            headers=headers,
            timeout=timeout,
        )

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any]:
        if response.status_code == HTTP_NO_CONTENT or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise DirectoryError(
                "Invalid JSON in directory response",
                "INVALID_RESPONSE",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _parse_error_response(response: httpx.Response) -> dict[str, Any]:
        """Parse error response from the API.

        Accepts both ``{"error": {"code": ..., "message": ...}}`` and the
        OAuth ``{"error": "<code>", "error_description": ...}`` shapes.

        Returns:
            Parsed error data.

        """
        try:
            error_data = response.json()
        except ValueError:
            return {"message": response.text, "code": "UNKNOWN_ERROR"}

        if not isinstance(error_data, dict):
            return {"message": response.text, "code": "UNKNOWN_ERROR"}

        error = error_data.get("error", {})
        if isinstance(error, str):
            return {
                "code": error,
                "message": error_data.get("error_description") or error,
            }
        if isinstance(error, dict):
            return error
        return {"message": response.text, "code": "UNKNOWN_ERROR"}

    @staticmethod
    def _raise_api_error(status_code: int, error_info: dict[str, Any]) -> None:
        """Raise appropriate error for API response.

        Args:
            status_code: HTTP status code
            error_info: Error information from response

        """
        raise create_error_from_response(status_code, error_info)
