"""Custom exceptions for the unifi-udm HTTP client."""

from __future__ import annotations

from dataclasses import dataclass, field

# Login error code the UDM returns while it throttles authentication attempts.
CODE_LIMIT_REACHED: str = "AUTHENTICATION_FAILED_LIMIT_REACHED"


class UDMError(Exception):
    """Base exception for all unifi-udm errors."""


class UDMConfigError(UDMError):
    """Raised when the client configuration is incomplete."""


class UDMRequestError(UDMError):
    """Raised when a network-level error occurs (connection refused, TLS, timeout, etc.)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url!r} failed: {cause}")


class UDMCancelledError(UDMError):
    """Raised when the caller cancels a login while it is waiting to retry."""


class UDMParseError(UDMError):
    """Raised when a successful response body cannot be decoded."""


class UDMAuthError(UDMError):
    """Raised when the UDM rejects a login.

    Args:
        message: Server-supplied message (or a local description).
        code: Server error code, e.g. ``AUTHENTICATION_FAILED_LIMIT_REACHED``.
        status_code: HTTP status of the final login attempt.
        attempts: Number of login attempts made.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        attempts: int = 1,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.attempts = attempts
        super().__init__(f"authentication failed: {message}")


class UDMMissingSessionError(UDMAuthError):
    """Raised when login returned HTTP 200 without a session cookie."""

    def __init__(self, status_code: int | None = 200) -> None:
        super().__init__(
            "no JWT was returned by the server", status_code=status_code
        )


class UDMTokenDecodeError(UDMError):
    """Raised when the session cookie is not a structurally valid JWT."""


@dataclass
class UDMOperationError(UDMError):
    """Raised when a resource operation receives a non-200 response.

    Only :attr:`message` takes part in equality; the remaining attributes are
    diagnostic context.
    """

    message: str
    status_code: int | None = field(default=None, compare=False)
    url: str | None = field(default=None, compare=False)
    code: str | None = field(default=None, compare=False)
    error_code: int | None = field(default=None, compare=False)
    details: object = field(default=None, compare=False)

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UDMNotFoundError(UDMError):
    """Raised when a lookup by identifier finds no matching entity."""

    kind: str
    resource_id: str

    def __post_init__(self) -> None:
        super().__init__(f"no {self.kind} found with an ID of {self.resource_id!r}")
