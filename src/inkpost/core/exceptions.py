"""Centralized, structured exception hierarchy for Inkpost.

This module defines the custom exceptions raised by the services. They carry
a machine-readable `code` naming the kind of failure and a human-readable
`message` that is safe to show to the client. The API layer maps each class
to an HTTP status in `inkpost.core.handlers`, so services never deal with
status codes or response envelopes.
"""

from typing import Final

__all__: Final = [
    "InkpostError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "PermissionError",
    "IdentityVerificationError",
    "ValidationError",
    "PasswordPolicyError",
    "UserAlreadyExistsError",
    "DuplicateUserError",
    "UserNotFoundError",
    "DatabaseError",
]


class InkpostError(Exception):
    """Base exception class for all custom errors in the Inkpost application.

    Attributes:
        message (str): A human-readable error message.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "internal_error"

    def __init__(self, message: str, code: str = "internal_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Auth-related errors
# ---------------------------------------------------------------------------


class AuthenticationError(InkpostError):
    """Raised when a request carries no usable credential.

    Maps to a `401 Unauthorized` HTTP status code.
    """

    def __init__(self, message: str, code: str = "unauthenticated"):
        super().__init__(message, code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when the supplied email/password pair does not verify.

    Maps to a `403 Forbidden` HTTP status, which is what the signin client
    expects for a rejected login.
    """

    def __init__(self, message: str, code: str = "invalid_credentials"):
        super().__init__(message, code)


class PermissionError(InkpostError):
    """Raised when a credential is present but rejected.

    Covers tampered or undecodable access tokens and federated sign-ins that
    are not allowed to reach a password account. Maps to `403 Forbidden`.
    """

    def __init__(self, message: str, code: str = "forbidden"):
        super().__init__(message, code)


class IdentityVerificationError(AuthenticationError):
    """Raised when the external identity provider rejects an ID token.

    The google-auth client treats this as a server-side failure, so it maps
    to `500 Internal Server Error`.
    """

    def __init__(self, message: str, code: str = "identity_verification_failed"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class ValidationError(InkpostError):
    """Raised for malformed or incomplete client input. Maps to `403`."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


class PasswordPolicyError(ValidationError):
    """Raised when a password does not meet the required security policy."""

    def __init__(self, message: str, code: str = "password_policy_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Domain / persistence errors
# ---------------------------------------------------------------------------


class UserAlreadyExistsError(InkpostError):
    """Raised when attempting to create a user that already exists.

    Signals a conflict on email or username. Maps to `403 Forbidden`.
    """

    def __init__(self, message: str, code: str = "conflict"):
        super().__init__(message, code)


class DuplicateUserError(UserAlreadyExistsError):
    """Raised when the store's unique constraint rejects a new user."""

    def __init__(self, message: str, code: str = "duplicate_user_error"):
        super().__init__(message, code)


class UserNotFoundError(InkpostError):
    """Raised when no account matches the supplied email. Maps to `403`."""

    def __init__(self, message: str = "Email not found", code: str = "not_found"):
        super().__init__(message, code)


class DatabaseError(InkpostError):
    """Raised for store failures, including partially applied writes.

    The message is chosen by the service and is safe to return to the client;
    driver errors are logged, never echoed. Maps to `500`.
    """

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)
