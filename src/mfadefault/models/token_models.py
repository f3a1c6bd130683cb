"""Credential and token models for directory sessions.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from pydantic import BaseModel, SecretStr

DEFAULT_SCOPE = "https://directory.default/.default"


class ServiceCredential(BaseModel):
    """Service-account credential with directory write permission."""

    tenant_id: str
    client_id: str
    client_secret: SecretStr
    scope: str = DEFAULT_SCOPE

    def token_form(self) -> dict[str, str]:
        """Form fields for a client-credentials token request."""
        return {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self.client_secret.get_secret_value(),
            "scope": self.scope,
        }


class TokenResponse(BaseModel):
    """Token response model."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
