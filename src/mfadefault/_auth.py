"""Session service for directory authentication.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

import logging

import pydantic

from ._base import BaseClient, RequestConfig
from .exceptions import AuthenticationError, AuthorizationError, ValidationError
from .models import ServiceCredential, TokenResponse

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_ENDPOINT = "/oauth2/token"


class SessionService:
    """Service for establishing directory sessions."""

    def __init__(self, client: BaseClient, token_url: str | None = None) -> None:
        """Initialize session service.

        Args:
            client: The base HTTP client
            token_url: Token endpoint path or URL. May contain a
                ``{tenant_id}`` placeholder.

        """
        self._client = client
        self._token_url = token_url or DEFAULT_TOKEN_ENDPOINT

    def connect(self, credential: ServiceCredential) -> TokenResponse:
        """Authenticate with a client-credentials grant.

        The bearer token is stored on the client for subsequent requests.

        Args:
            credential: Service-account credential

        Returns:
            The token response.

        Raises:
            AuthenticationError: If the token endpoint rejects the credential.

        """
        # A failed connect must not leave the previous identity in place.
        self._client.clear_access_token()

        endpoint = self._token_url.replace("{tenant_id}", credential.tenant_id)
        config = RequestConfig(form_data=credential.token_form())
        try:
            response = self._client.make_request(
                "POST", endpoint, config=config, authenticated=False
            )
        except (ValidationError, AuthorizationError) as e:
            raise AuthenticationError(e.message, e.details) from e

        try:
            token = TokenResponse.model_validate(response)
        except pydantic.ValidationError as e:
            msg = "Token endpoint returned no usable access token"
            raise AuthenticationError(msg, e.errors(include_url=False)) from e
        if not token.access_token:
            msg = "Token endpoint returned an empty access token"
            raise AuthenticationError(msg)

        self._client.set_access_token(token.access_token)
        logger.info(
            "Directory session established for client %s (tenant %s)",
            credential.client_id,
            credential.tenant_id,
        )
        return token

    def disconnect(self) -> None:
        """Drop the current session token."""
        self._client.clear_access_token()

    @property
    def is_connected(self) -> bool:
        """Whether a bearer token is held."""
        return self._client.get_access_token() is not None
