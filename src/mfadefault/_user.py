"""User service for the directory API.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

import pydantic

from ._base import BaseClient, RequestConfig
from .exceptions import DirectoryError
from .models import StrongAuthenticationMethod, UpdateMethodsRequest, UserRecord


def user_endpoint(principal_name: str) -> str:
    """Return the API path of a user, quoting the principal name."""
    return f"/users/{quote(principal_name, safe='@')}"


class UserService:
    """Service for directory user operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize user service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    def get_user(self, principal_name: str) -> UserRecord:
        """Get a user by principal name.

        Args:
            principal_name: User principal name

        Returns:
            The user record including its MFA methods.

        """
        data = self._client.make_request("GET", user_endpoint(principal_name))
        try:
            return UserRecord.model_validate(data)
        except pydantic.ValidationError as e:
            raise DirectoryError(
                f"Malformed user record for {principal_name}",
                "INVALID_RESPONSE",
                e.errors(include_url=False),
            ) from e

    def update_user(
        self,
        principal_name: str,
        methods: Iterable[StrongAuthenticationMethod],
    ) -> None:
        """Replace a user's MFA method list.

        Args:
            principal_name: User principal name
            methods: Complete replacement method list

        Raises:
            ConflictError: If the user changed between the read and this write

        """
        body = UpdateMethodsRequest(strong_authentication_methods=list(methods))
        config = RequestConfig(json_data=body.model_dump(by_alias=True))
        self._client.make_request(
            "PATCH",
            user_endpoint(principal_name),
            config=config,
        )
