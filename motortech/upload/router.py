"""Upload domain router.

All routes require authentication. Files are checked for type and size
before being read, then handed to the image host; nothing is stored locally.
"""

from typing import Annotated

from fastapi import APIRouter, File, UploadFile

from motortech.auth.dependencies import CurrentActorDep
from motortech.core.constants import CommonResponses, Routes
from motortech.core.deps import SettingsDep
from motortech.core.schemas import MessageEnvelope
from motortech.upload.schemas import (
    ImageEnvelope,
    ImageListEnvelope,
    ImageRead,
    TransformEnvelope,
    TransformRequest,
)
from motortech.upload.service import ImageHostingDep, check_batch_size, read_image

router = APIRouter(
    prefix=Routes.UPLOAD.prefix,
    tags=[Routes.UPLOAD.tag],
    responses={
        **CommonResponses.BAD_REQUEST,
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.INTERNAL_ERROR,
    },
)


@router.post("/image", response_model=ImageEnvelope)
async def upload_image(
    image: Annotated[UploadFile, File()],
    _actor: CurrentActorDep,
    hosting: ImageHostingDep,
    settings: SettingsDep,
):
    file = await read_image(image, settings.max_upload_bytes)
    uploaded = await hosting.upload(file.data, file.content_type)
    return ImageEnvelope(
        message="Image uploaded successfully",
        image=ImageRead.model_validate(uploaded),
    )


@router.post("/images", response_model=ImageListEnvelope)
async def upload_images(
    images: Annotated[list[UploadFile], File()],
    _actor: CurrentActorDep,
    hosting: ImageHostingDep,
    settings: SettingsDep,
):
    """Upload up to 10 images in one request."""
    check_batch_size(len(images))
    files = [await read_image(f, settings.max_upload_bytes) for f in images]
    uploaded = await hosting.upload_many(files)
    return ImageListEnvelope(
        message=f"{len(uploaded)} images uploaded successfully",
        images=[ImageRead.model_validate(u) for u in uploaded],
    )


@router.delete("/image/{public_id:path}", response_model=MessageEnvelope)
async def delete_image(public_id: str, _actor: CurrentActorDep, hosting: ImageHostingDep):
    """Delete by public id. Ids include the folder, e.g. motortech/cars/abc."""
    await hosting.delete(public_id)
    return MessageEnvelope(message="Image deleted successfully")


@router.post("/transform", response_model=TransformEnvelope)
async def transform_image(
    payload: TransformRequest, _actor: CurrentActorDep, hosting: ImageHostingDep
):
    url = hosting.transform_url(payload.public_id, payload.transformations)
    return TransformEnvelope(transformed_url=url)
