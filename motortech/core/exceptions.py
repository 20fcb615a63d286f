"""App-wide exception hierarchy.

This module provides the base exception classes with automatic HTTP status code
mapping. Domain packages (auth, user, car, inspection, upload) derive their own
errors from these bases.
"""


class AppException(Exception):
    """Base exception for all application errors.

    All custom exceptions inherit from this class and define their own
    status_code and error_type for consistent API responses.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


# Authentication errors (401)
class AuthenticationError(AppException):
    """Base class for authentication failures."""

    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


# Authorization errors (403)
class AuthorizationError(AppException):
    """Base class for authorization failures."""

    status_code = 403
    error_type = "authorization_error"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class PermissionDeniedError(AuthorizationError):
    """Raised when the actor is neither the resource owner nor an admin."""

    error_type = "permission_denied"

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message)


# Not found errors (404)
class NotFoundError(AppException):
    """Base class for resource not found errors."""

    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


# Conflict errors (409)
class ConflictError(AppException):
    """Base class for resource conflict errors."""

    status_code = 409
    error_type = "conflict"

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message)


# Validation errors (400)
class ValidationError(AppException):
    """Base class for validation errors."""

    status_code = 400
    error_type = "validation_error"

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message)


class BadRequestError(ValidationError):
    """Raised for general bad request errors."""

    error_type = "bad_request"

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


class NoFieldsToUpdateError(ValidationError):
    """Raised when a partial update carries no fields at all."""

    error_type = "no_fields_to_update"

    def __init__(self, message: str = "No valid fields to update"):
        super().__init__(message)


class FieldNotClearableError(ValidationError):
    """Raised when a patch sets a required column to null."""

    error_type = "field_not_clearable"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} cannot be cleared")


# Internal errors (500)
class InternalError(AppException):
    """Raised for internal server errors."""

    status_code = 500
    error_type = "internal_error"

    def __init__(self, message: str = "An internal error occurred"):
        super().__init__(message)
