"""Directory user models.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from pydantic import BaseModel, ConfigDict, Field

from .mfa_models import StrongAuthenticationMethod


class UserRecord(BaseModel):
    """Directory user record, reduced to the fields this package touches."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_principal_name: str = Field(alias="userPrincipalName")
    display_name: str | None = Field(default=None, alias="displayName")
    strong_authentication_methods: list[StrongAuthenticationMethod] = Field(
        default_factory=list, alias="strongAuthenticationMethods"
    )


class UpdateMethodsRequest(BaseModel):
    """Body of the user update call that replaces the method list."""

    model_config = ConfigDict(populate_by_name=True)

    strong_authentication_methods: list[StrongAuthenticationMethod] = Field(
        alias="strongAuthenticationMethods"
    )
