"""Connection settings for the directory client.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, SecretStr

from .exceptions import ValidationError
from .models import DEFAULT_SCOPE, ServiceCredential

ENV_PREFIX = "MFADEFAULT_"


class DirectorySettings(BaseModel):
    """Settings for reaching and authenticating to the directory service."""

    base_url: str
    token_url: str | None = None
    timeout: float = 30.0
    tenant_id: str | None = None
    client_id: str | None = None
    client_secret: SecretStr | None = None
    scope: str = DEFAULT_SCOPE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DirectorySettings:
        """Build settings from ``MFADEFAULT_*`` environment variables.

        Raises:
            ValidationError: If ``MFADEFAULT_BASE_URL`` is missing.

        """
        env = os.environ if environ is None else environ
        values = {
            field: env[ENV_PREFIX + field.upper()]
            for field in cls.model_fields
            if env.get(ENV_PREFIX + field.upper())
        }
        if "base_url" not in values:
            msg = f"{ENV_PREFIX}BASE_URL is not set"
            raise ValidationError(msg)
        return cls.model_validate(values)

    def credential(self) -> ServiceCredential:
        """Return the service credential held by these settings.

        Raises:
            ValidationError: If any credential field is missing.

        """
        missing = [
            name
            for name in ("tenant_id", "client_id", "client_secret")
            if getattr(self, name) is None
        ]
        if missing:
            msg = f"Incomplete directory credential, missing: {', '.join(missing)}"
            raise ValidationError(msg, {"missing": missing})
        return ServiceCredential(
            tenant_id=self.tenant_id,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scope=self.scope,
        )
