"""
mfadefault

Client library for changing the default multi-factor authentication method
on cloud directory user accounts. Authenticates to the directory service,
reads the account's configured MFA methods and writes them back with
exactly one marked as default.
"""

from .client import DirectoryClient
from .config import DirectorySettings
from .exceptions import *
from .models import *
from .setter import MFADefaultSetter, apply_default_method

__version__ = "1.0.0"

__all__ = [
    "DirectoryClient",
    "DirectorySettings",
    "MFADefaultSetter",
    "apply_default_method",
    # Exceptions
    "DirectoryError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "TimeoutError",
    "MethodNotConfiguredError",
    # Models
    "MFAMethodType",
    "StrongAuthenticationMethod",
    "SetDefaultStatus",
    "SetDefaultResult",
    "ServiceCredential",
    "TokenResponse",
    "UserRecord",
]
