"""Inspection domain exceptions."""

from motortech.core.exceptions import ConflictError, NotFoundError, ValidationError


class InspectionNotFoundError(NotFoundError):
    error_type = "inspection_not_found"

    def __init__(self, message: str = "Inspection not found"):
        super().__init__(message)


class PastInspectionDateError(ValidationError):
    """Raised when the requested date is not strictly in the future."""

    error_type = "past_inspection_date"

    def __init__(self, message: str = "Inspection date must be in the future"):
        super().__init__(message)


class CarNotApprovedError(ValidationError):
    """Raised when booking against a listing that is not approved."""

    error_type = "car_not_approved"

    def __init__(self, message: str = "Can only book inspections for approved cars"):
        super().__init__(message)


class DuplicateInspectionError(ConflictError):
    error_type = "duplicate_inspection"

    def __init__(
        self, message: str = "You already have a pending inspection for this car"
    ):
        super().__init__(message)
