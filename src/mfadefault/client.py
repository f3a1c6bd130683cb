"""Directory client using service composition.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

from typing import Self

import httpx  # type: ignore[import-untyped]

from ._auth import SessionService
from ._base import BaseClient
from ._user import UserService
from .config import DirectorySettings
from .models import ServiceCredential, TokenResponse


class DirectoryClient:
    """Directory client holding one authenticated session."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        token_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize directory client.

        Args:
            base_url: Base URL of the directory API
            timeout: Request timeout in seconds
            token_url: Token endpoint path or URL, may contain ``{tenant_id}``
            transport: Optional httpx transport

        """
        self._client = BaseClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

        self.session = SessionService(self._client, token_url=token_url)
        self.users = UserService(self._client)

    @classmethod
    def from_settings(cls, settings: DirectorySettings) -> Self:
        """Create a client from :class:`DirectorySettings`."""
        return cls(
            settings.base_url,
            timeout=settings.timeout,
            token_url=settings.token_url,
        )

    def __enter__(self) -> Self:
        """Context manager entry.

        Returns:
            The client instance.

        """
        self._client.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Context manager exit."""
        self._client.__exit__(exc_type, exc_val, exc_tb)

    def close(self) -> None:
        """Close the client and clean up resources."""
        self._client.close()

    def connect(self, credential: ServiceCredential) -> TokenResponse:
        """Establish a directory session with a service credential."""
        return self.session.connect(credential)

    def disconnect(self) -> None:
        """Drop the current session."""
        self.session.disconnect()

    @property
    def is_connected(self) -> bool:
        """Whether the client holds a session token."""
        return self.session.is_connected
