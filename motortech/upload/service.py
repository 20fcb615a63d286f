"""Image hosting on Cloudinary.

The cloudinary SDK is synchronous; calls run in the threadpool so uploads
never block the event loop. SDK failures are mapped to `ImageHostingError`
and are not retried.
"""

import asyncio
import io
import logging
from dataclasses import dataclass
from typing import Annotated, Any

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
import cloudinary.utils
from fastapi import Depends, UploadFile
from fastapi.concurrency import run_in_threadpool

from motortech.core.constants import MAX_IMAGES_PER_REQUEST
from motortech.core.deps import SettingsDep
from motortech.core.settings import Settings, get_settings
from motortech.upload.exceptions import ImageHostingError, InvalidImageError

logger = logging.getLogger(__name__)

# Applied to every upload: fit within 1200x800, let the CDN pick quality/format.
UPLOAD_TRANSFORMATION: list[dict[str, Any]] = [
    {"width": 1200, "height": 800, "crop": "limit"},
    {"quality": "auto"},
    {"fetch_format": "auto"},
]


def init_image_hosting(settings: Settings | None = None) -> None:
    """Apply Cloudinary credentials to the SDK (idempotent).

    Without a cloud name, uploads fail with ImageHostingError at call time.
    """
    settings = settings or get_settings()
    if not settings.cloudinary_cloud_name:
        logger.warning("Cloudinary is not configured; image uploads are disabled")
        return
    cloudinary.config(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
        secure=True,
    )


def check_content_type(content_type: str | None) -> None:
    if not content_type or not content_type.startswith("image/"):
        raise InvalidImageError()


def check_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        raise InvalidImageError(f"Image exceeds the {max_bytes // (1024 * 1024)}MB limit")


def check_batch_size(count: int) -> None:
    if count == 0:
        raise InvalidImageError("No image files provided")
    if count > MAX_IMAGES_PER_REQUEST:
        raise InvalidImageError(
            f"At most {MAX_IMAGES_PER_REQUEST} images can be uploaded at once"
        )


@dataclass(frozen=True)
class UploadedImage:
    url: str
    public_id: str
    width: int
    height: int


@dataclass(frozen=True)
class ImageFile:
    data: bytes
    content_type: str | None


async def read_image(upload: UploadFile, max_bytes: int) -> ImageFile:
    """Read an uploaded file without buffering more than `max_bytes + 1` bytes.

    The content type and the size the client declared are checked before
    anything is read.

    Raises:
        InvalidImageError: If the file is not an image or is too large
    """
    check_content_type(upload.content_type)
    if upload.size is not None:
        check_size(upload.size, max_bytes)
    data = await upload.read(max_bytes + 1)
    check_size(len(data), max_bytes)
    return ImageFile(data=data, content_type=upload.content_type)


class ImageHostingService:
    """Upload, delete and transform images on the configured Cloudinary account."""

    def __init__(self, folder: str, max_bytes: int) -> None:
        self._folder = folder
        self._max_bytes = max_bytes

    def validate(self, data: bytes, content_type: str | None) -> None:
        """Raises InvalidImageError for non-image or oversized payloads."""
        check_content_type(content_type)
        check_size(len(data), self._max_bytes)

    def _upload_sync(self, data: bytes) -> UploadedImage:
        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                resource_type="image",
                folder=self._folder,
                transformation=UPLOAD_TRANSFORMATION,
            )
        except cloudinary.exceptions.Error as e:
            logger.error("Cloudinary upload failed: %s", e)
            raise ImageHostingError("Failed to upload image") from e
        return UploadedImage(
            url=result["secure_url"],
            public_id=result["public_id"],
            width=result["width"],
            height=result["height"],
        )

    async def upload(self, data: bytes, content_type: str | None) -> UploadedImage:
        """Validate and upload one image.

        Raises:
            InvalidImageError: If the payload is not an acceptable image
            ImageHostingError: If the upload fails
        """
        self.validate(data, content_type)
        return await run_in_threadpool(self._upload_sync, data)

    async def upload_many(self, files: list[ImageFile]) -> list[UploadedImage]:
        """Validate every file, then upload them concurrently.

        Nothing is uploaded unless all files pass validation.
        """
        check_batch_size(len(files))
        for f in files:
            self.validate(f.data, f.content_type)
        return list(
            await asyncio.gather(
                *(run_in_threadpool(self._upload_sync, f.data) for f in files)
            )
        )

    def _delete_sync(self, public_id: str) -> None:
        try:
            result = cloudinary.uploader.destroy(public_id)
        except cloudinary.exceptions.Error as e:
            logger.error("Cloudinary delete failed: %s", e)
            raise ImageHostingError("Failed to delete image") from e
        if result.get("result") != "ok":
            logger.warning(
                "Cloudinary refused delete of %s: %s", public_id, result.get("result")
            )
            raise ImageHostingError("Failed to delete image")

    async def delete(self, public_id: str) -> None:
        await run_in_threadpool(self._delete_sync, public_id)

    def transform_url(self, public_id: str, transformations: dict[str, Any]) -> str:
        """Build a secure delivery URL with the given transformation options."""
        try:
            url, _ = cloudinary.utils.cloudinary_url(
                public_id, **{**transformations, "secure": True}
            )
        except (cloudinary.exceptions.Error, TypeError, ValueError) as e:
            raise ImageHostingError("Failed to generate transformed URL") from e
        return url


def get_image_hosting_service(settings: SettingsDep) -> ImageHostingService:
    return ImageHostingService(
        folder=settings.cloudinary_folder, max_bytes=settings.max_upload_bytes
    )


ImageHostingDep = Annotated[ImageHostingService, Depends(get_image_hosting_service)]
