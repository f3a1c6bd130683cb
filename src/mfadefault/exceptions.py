"""
Exception classes for the mfadefault package.
"""

from __future__ import annotations

from typing import Any


class DirectoryError(Exception):
    """Base exception for directory service errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.status_code = status_code


class _StatusError(DirectoryError):
    """Directory error tied to one HTTP status."""

    error_code = "UNKNOWN_ERROR"
    http_status: int | None = None
    default_message = "An error occurred"

    def __init__(self, message: str | None = None, details: Any | None = None) -> None:
        super().__init__(
            message or self.default_message, self.error_code, details, self.http_status
        )


class ValidationError(_StatusError):
    """Raised when request or input validation fails."""

    error_code = "VALIDATION_ERROR"
    http_status = 400
    default_message = "Invalid request"


class AuthenticationError(_StatusError):
    """Raised when a directory session cannot be established."""

    error_code = "AUTHENTICATION_ERROR"
    http_status = 401
    default_message = "Authentication failed"


class AuthorizationError(_StatusError):
    """Raised when the session lacks directory permissions."""

    error_code = "AUTHORIZATION_ERROR"
    http_status = 403
    default_message = "Insufficient permissions"


class NotFoundError(_StatusError):
    """Raised when a user is not found."""

    error_code = "NOT_FOUND_ERROR"
    http_status = 404
    default_message = "User not found"


class ConflictError(_StatusError):
    """Raised when the directory rejects a concurrent change to a user."""

    error_code = "CONFLICT_ERROR"
    http_status = 409
    default_message = "User was modified concurrently"


class NetworkError(_StatusError):
    """Raised when the directory cannot be reached."""

    error_code = "NETWORK_ERROR"
    default_message = "Network error"


class TimeoutError(_StatusError):  # noqa: A001
    """Raised when a request times out."""

    error_code = "TIMEOUT_ERROR"
    default_message = "Request timeout"


class RateLimitError(DirectoryError):
    """Raised when the directory throttles the caller."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message, "RATE_LIMIT_ERROR", details, 429)
        self.retry_after = retry_after


class ServerError(DirectoryError):
    """Raised when the directory service fails."""

    def __init__(
        self,
        message: str = "Internal server error",
        details: Any | None = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message, "SERVER_ERROR", details, status_code)


class MethodNotConfiguredError(DirectoryError):
    """Raised when an account has no MFA method of the requested type."""

    def __init__(self, principal_name: str | None, method_type: str) -> None:
        account = principal_name or "account"
        super().__init__(
            f"{method_type} is not configured for {account}",
            "METHOD_NOT_CONFIGURED",
            {"principal_name": principal_name, "method_type": method_type},
        )
        self.principal_name = principal_name
        self.method_type = method_type


# Status codes whose error class takes (message, details).
_STATUS_ERRORS: dict[int, type[DirectoryError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
}


def create_error_from_response(
    status_code: int,
    error_response: dict[str, Any | None] | None = None,
    default_message: str | None = None,
) -> DirectoryError:
    """Map a failed directory response onto the exception hierarchy.

    Args:
        status_code: HTTP status of the response
        error_response: Parsed error body (``code``, ``message``,
            ``details`` and, for throttling, ``retry_after``)
        default_message: Message used when the body carries none

    Returns:
        The error to raise.

    """
    info = error_response or {}
    message = info.get("message") or default_message or "An error occurred"
    details = info.get("details")

    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code](str(message), details)
    if status_code == 429:
        return RateLimitError(str(message), info.get("retry_after"), details)
    if status_code >= 500:
        return ServerError(str(message), details, status_code)
    return DirectoryError(
        str(message), str(info.get("code") or "UNKNOWN_ERROR"), details, status_code
    )
