"""MFA (Multi-Factor Authentication) models for the directory service.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import MethodNotConfiguredError


class MFAMethodType(str, Enum):
    """Strong authentication method types a directory account can carry."""

    PHONE_APP_NOTIFICATION = "PhoneAppNotification"
    ONE_WAY_SMS = "OneWaySMS"
    TWO_WAY_VOICE_MOBILE = "TwoWayVoiceMobile"
    PHONE_APP_OTP = "PhoneAppOTP"


class StrongAuthenticationMethod(BaseModel):
    """One configured MFA method on a user record.

    ``method_type`` keeps the raw remote string so types this package does
    not know about are written back unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    method_type: str = Field(alias="methodType")
    is_default: bool = Field(default=False, alias="isDefault")


class SetDefaultStatus(str, Enum):
    """Outcome of a set-default call."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    NOT_CONFIGURED = "not_configured"


class SetDefaultResult(BaseModel):
    """Per-account result of setting the default MFA method."""

    principal_name: str
    target_type: MFAMethodType
    status: SetDefaultStatus
    methods: list[StrongAuthenticationMethod]

    @property
    def succeeded(self) -> bool:
        """Whether the account now has the target as its default method."""
        return self.status is not SetDefaultStatus.NOT_CONFIGURED

    def raise_for_status(self) -> SetDefaultResult:
        """Raise :class:`MethodNotConfiguredError` if nothing was written.

        Returns:
            The result itself, for chaining.

        """
        if self.status is SetDefaultStatus.NOT_CONFIGURED:
            raise MethodNotConfiguredError(self.principal_name, self.target_type.value)
        return self
