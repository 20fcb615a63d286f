"""Upload domain exceptions."""

from motortech.core.exceptions import BadRequestError, InternalError


class ImageHostingError(InternalError):
    """Raised when the image host rejects or fails a request."""

    error_type = "image_hosting_error"

    def __init__(self, message: str = "Image hosting request failed"):
        super().__init__(message)


class InvalidImageError(BadRequestError):
    """Raised for non-image, oversized or too many files."""

    error_type = "invalid_image"

    def __init__(self, message: str = "Only image files are allowed"):
        super().__init__(message)
