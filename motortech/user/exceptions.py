"""User domain exceptions."""

from motortech.core.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when user cannot be found."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class EmailExistsError(ConflictError):
    """Raised when attempting to register with an existing email."""

    error_type = "email_exists"

    def __init__(self, message: str = "User with this email already exists"):
        super().__init__(message)


class SelfRoleChangeError(ValidationError):
    """Raised when an admin tries to change their own role."""

    error_type = "self_role_change"

    def __init__(self, message: str = "Cannot change your own role"):
        super().__init__(message)
