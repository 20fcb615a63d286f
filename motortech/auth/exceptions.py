"""Auth domain exceptions.

Authentication and authorization related exceptions. The three token
failures (expired, invalid, unverifiable) are distinct classes so callers can
tell them apart, though all render as 401.
"""

from motortech.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    InternalError,
    ValidationError,
)


# Authentication errors (401)
class MissingTokenError(AuthenticationError):
    """Raised when a protected route is called without a bearer token."""

    error_type = "missing_token"

    def __init__(self, message: str = "Access token required"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when email/password combination is invalid.

    The message is identical for unknown emails and wrong passwords.
    """

    error_type = "invalid_credentials"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when the token signature or format is wrong."""

    error_type = "invalid_token"

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenExpiredError(AuthenticationError):
    """Raised when the token is past its expiry."""

    error_type = "token_expired"

    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class TokenVerificationError(AuthenticationError):
    """Raised for any other token decode failure (missing or malformed claims)."""

    error_type = "token_verification_failed"

    def __init__(self, message: str = "Token verification failed"):
        super().__init__(message)


# Authorization errors (403)
class AdminRequiredError(AuthorizationError):
    """Raised when admin privileges are required."""

    error_type = "admin_required"

    def __init__(self, message: str = "Admin access required"):
        super().__init__(message)


# Validation errors (400) - auth specific
class WeakPasswordError(ValidationError):
    """Raised when password does not meet length requirements."""

    error_type = "weak_password"

    def __init__(self, message: str = "Password must be at least 6 characters long"):
        super().__init__(message)


# Internal errors (500)
class TokenConfigurationError(InternalError):
    """Raised when no signing secret is configured."""

    error_type = "token_configuration_error"

    def __init__(self, message: str = "JWT secret not configured"):
        super().__init__(message)
