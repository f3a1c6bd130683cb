"""mfadefault models package.

Copyright (c) 2025 mfadefault. All rights reserved.
"""

from .mfa_models import (
    MFAMethodType,
    StrongAuthenticationMethod,
    SetDefaultStatus,
    SetDefaultResult,
)
from .token_models import DEFAULT_SCOPE, ServiceCredential, TokenResponse
from .user_models import UserRecord, UpdateMethodsRequest

__all__ = [
    # MFA models
    "MFAMethodType",
    "StrongAuthenticationMethod",
    "SetDefaultStatus",
    "SetDefaultResult",
    # Token models
    "DEFAULT_SCOPE",
    "ServiceCredential",
    "TokenResponse",
    # User models
    "UserRecord",
    "UpdateMethodsRequest",
]
