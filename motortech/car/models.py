"""Car listing models."""

import uuid
from enum import Enum

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, Relationship, SQLModel

from motortech.core.mixins import CreatedAtMixin
from motortech.user.models import User


class CarStatus(str, Enum):
    """Persisted listing status.

    - pending: awaiting moderation (also where rejected listings go back to)
    - approved: publicly visible
    """

    pending = "pending"
    approved = "approved"


class Car(CreatedAtMixin, SQLModel, table=True):
    """Vehicle-for-sale listing.

    `price` is stored in minor units (cents).
    """

    __tablename__: str = "cars"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True)
    title: str = Field(max_length=255)
    price: int
    brand: str = Field(max_length=100, index=True)
    model: str = Field(max_length=100)
    year: int
    description: str | None = Field(default=None, sa_column=Column(Text))
    images: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    status: CarStatus = Field(default=CarStatus.pending, max_length=20, index=True)

    user: User | None = Relationship()
