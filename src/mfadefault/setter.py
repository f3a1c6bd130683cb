"""Setting the default MFA method on a directory account.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .client import DirectoryClient
from .exceptions import AuthenticationError, MethodNotConfiguredError, ValidationError
from .models import (
    MFAMethodType,
    ServiceCredential,
    SetDefaultResult,
    SetDefaultStatus,
    StrongAuthenticationMethod,
)

logger = logging.getLogger(__name__)


def _coerce_method_type(target_type: MFAMethodType | str) -> MFAMethodType:
    try:
        return MFAMethodType(target_type)
    except ValueError as e:
        allowed = ", ".join(m.value for m in MFAMethodType)
        msg = f"Unknown MFA method type {target_type!r}, expected one of: {allowed}"
        raise ValidationError(msg) from e


def apply_default_method(
    methods: Sequence[StrongAuthenticationMethod],
    target_type: MFAMethodType | str,
) -> list[StrongAuthenticationMethod]:
    """Return a copy of ``methods`` with exactly one default.

    The first entry whose type equals ``target_type`` becomes the default and
    every other entry is cleared, so duplicate or pre-existing defaults are
    normalized away. Order is preserved and the input is not modified.

    Raises:
        MethodNotConfiguredError: If no entry has the target type.

    """
    target = _coerce_method_type(target_type).value
    index = next(
        (i for i, method in enumerate(methods) if method.method_type == target),
        None,
    )
    if index is None:
        raise MethodNotConfiguredError(None, target)

    return [
        method.model_copy(update={"is_default": i == index})
        for i, method in enumerate(methods)
    ]


class MFADefaultSetter:
    """Changes which MFA method a directory account uses by default."""

    def __init__(self, client: DirectoryClient) -> None:
        """Initialize the setter.

        Args:
            client: Directory client, connected or not

        """
        self._client = client

    def set_default_method(
        self,
        principal_name: str,
        target_type: MFAMethodType | str,
        credential: ServiceCredential | None = None,
    ) -> SetDefaultResult:
        """Make ``target_type`` the only default MFA method of an account.

        Reads the user's methods, and when the target type is configured
        writes back the full list with the flag moved. When it is not
        configured a warning is logged and nothing is written.

        Args:
            principal_name: User principal name
            target_type: Method type to make default
            credential: Credential used to (re)connect; when omitted the
                client's existing session is reused

        Returns:
            The per-account result.

        Raises:
            ValidationError: For a blank principal name or unknown type
            AuthenticationError: If no session can be established

        """
        if not principal_name or not principal_name.strip():
            msg = "principal_name must be a non-empty string"
            raise ValidationError(msg)
        target = _coerce_method_type(target_type)

        self._ensure_session(credential)

        user = self._client.users.get_user(principal_name)
        current = user.strong_authentication_methods

        try:
            updated = apply_default_method(current, target)
        except MethodNotConfiguredError:
            logger.warning(
                "%s is not configured for %s, default method left unchanged",
                target.value,
                principal_name,
            )
            return SetDefaultResult(
                principal_name=principal_name,
                target_type=target,
                status=SetDefaultStatus.NOT_CONFIGURED,
                methods=list(current),
            )

        self._client.users.update_user(principal_name, updated)

        if updated == list(current):
            status = SetDefaultStatus.UNCHANGED
            logger.info("%s already defaults to %s", principal_name, target.value)
        else:
            status = SetDefaultStatus.UPDATED
            logger.info("Default MFA method for %s set to %s", principal_name, target.value)

        return SetDefaultResult(
            principal_name=principal_name,
            target_type=target,
            status=status,
            methods=updated,
        )

    def _ensure_session(self, credential: ServiceCredential | None) -> None:
        if credential is not None:
            self._client.connect(credential)
        elif self._client.is_connected:
            logger.debug("Reusing existing directory session")
        else:
            msg = "No directory session and no credential supplied"
            raise AuthenticationError(msg)
