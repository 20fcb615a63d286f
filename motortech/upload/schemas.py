"""Upload domain schemas."""

from typing import Any

from pydantic import Field

from motortech.core.schemas import CamelModel, Envelope, MessageEnvelope


class ImageRead(CamelModel):
    url: str
    public_id: str
    width: int
    height: int


class TransformRequest(CamelModel):
    public_id: str = Field(min_length=1)
    transformations: dict[str, Any] = Field(default_factory=dict)


class ImageEnvelope(MessageEnvelope):
    image: ImageRead


class ImageListEnvelope(MessageEnvelope):
    images: list[ImageRead]


class TransformEnvelope(Envelope):
    transformed_url: str
