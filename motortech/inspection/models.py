"""Inspection appointment models."""

import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, Relationship, SQLModel

from motortech.car.models import Car
from motortech.core.mixins import CreatedAtMixin
from motortech.user.models import User


class InspectionStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"


class Inspection(CreatedAtMixin, SQLModel, table=True):
    """A prospective buyer's appointment to view a listing."""

    __tablename__: str = "inspections"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True)
    car_id: uuid.UUID = Field(foreign_key="cars.id", index=True)
    date: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    notes: str | None = Field(default=None, sa_column=Column(Text))
    status: InspectionStatus = Field(
        default=InspectionStatus.pending, max_length=20, index=True
    )

    user: User | None = Relationship()
    car: Car | None = Relationship()
