"""Car domain exceptions."""

from motortech.core.exceptions import NotFoundError, ValidationError


class CarNotFoundError(NotFoundError):
    """Raised when a listing does not exist or must not be revealed."""

    error_type = "car_not_found"

    def __init__(self, message: str = "Car not found"):
        super().__init__(message)


class InvalidPriceError(ValidationError):
    error_type = "invalid_price"

    def __init__(self, message: str = "Price must be greater than 0"):
        super().__init__(message)


class InvalidYearError(ValidationError):
    error_type = "invalid_year"

    def __init__(self, min_year: int, max_year: int):
        super().__init__(f"Invalid year: must be between {min_year} and {max_year}")
