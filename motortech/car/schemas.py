"""Car domain schemas.

Prices arrive as decimal major-unit amounts and are returned as integer
minor units (cents), exactly as stored.
"""

import uuid
from decimal import Decimal
from enum import Enum

from pydantic import Field

from motortech.car.models import CarStatus
from motortech.core.schemas import (
    CamelModel,
    Envelope,
    MessageEnvelope,
    Pagination,
    UTCDateTime,
)
from motortech.user.schemas import UserContact


class CarModerationStatus(str, Enum):
    """Values accepted by the admin moderation endpoint.

    `rejected` is not a stored status: it sends the listing back to pending.
    """

    pending = "pending"
    approved = "approved"
    rejected = "rejected"

    def to_car_status(self) -> CarStatus:
        if self is CarModerationStatus.approved:
            return CarStatus.approved
        return CarStatus.pending


class CarCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    price: Decimal
    brand: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    year: int
    description: str | None = None
    images: list[str] = Field(default_factory=list)


class CarUpdate(CamelModel):
    """Partial update. Absent fields are untouched; null clears description."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    price: Decimal | None = None
    brand: str | None = Field(default=None, min_length=1, max_length=100)
    model: str | None = Field(default=None, min_length=1, max_length=100)
    year: int | None = None
    description: str | None = None
    images: list[str] | None = None


class CarStatusUpdate(CamelModel):
    status: CarStatus


class CarModerationUpdate(CamelModel):
    status: CarModerationStatus


class CarFilters(CamelModel):
    status: CarStatus | None = None
    brand: str | None = None
    model: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None


class CarRead(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    price: int
    brand: str
    model: str
    year: int
    description: str | None
    images: list[str]
    status: CarStatus
    created_at: UTCDateTime


class CarDetail(CarRead):
    """Listing joined with its owner's contact fields."""

    user: UserContact | None = None


class CarSummary(CamelModel):
    """Listing fields embedded in inspection responses."""

    id: uuid.UUID
    title: str
    brand: str
    model: str
    year: int
    price: int
    status: CarStatus


class CarEnvelope(Envelope):
    car: CarDetail


class CarMessageEnvelope(MessageEnvelope):
    car: CarRead


class CarListEnvelope(Envelope):
    cars: list[CarDetail]
    pagination: Pagination
