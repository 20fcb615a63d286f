"""Shared schema building blocks.

Every request/response schema derives from `CamelModel`: attributes are
snake_case in Python and camelCase on the wire. Responses are wrapped in the
`{success, message?, ...payload}` envelope.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def serialize_utc(value: datetime) -> str:
    """Format datetime as ISO 8601 string in UTC with a Z suffix.

    Naive values are assumed to already be UTC (SQLite drops tzinfo).
    """
    if value.tzinfo is not None:
        utc_value = value.astimezone(UTC)
    else:
        utc_value = value.replace(tzinfo=UTC)
    return utc_value.replace(microsecond=0).isoformat().replace("+00:00", "Z")


UTCDateTime = Annotated[datetime, PlainSerializer(serialize_utc, return_type=str)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(CamelModel):
    """Base for successful responses."""

    success: bool = True


class MessageEnvelope(Envelope):
    """Envelope for mutations, which always carry a human-readable message."""

    message: str


class Pagination(CamelModel):
    limit: int
    offset: int
    total: int
