"""Inspection domain schemas."""

import uuid
from datetime import datetime

from motortech.car.schemas import CarSummary
from motortech.core.schemas import (
    CamelModel,
    Envelope,
    MessageEnvelope,
    Pagination,
    UTCDateTime,
)
from motortech.inspection.models import InspectionStatus
from motortech.user.schemas import UserContact


class InspectionCreate(CamelModel):
    car_id: uuid.UUID
    date: datetime
    notes: str | None = None


class InspectionUpdate(CamelModel):
    """Partial update. An explicit null clears notes; date cannot be null."""

    date: datetime | None = None
    notes: str | None = None


class InspectionStatusUpdate(CamelModel):
    status: InspectionStatus


class InspectionFilters(CamelModel):
    status: InspectionStatus | None = None


class InspectionRead(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    car_id: uuid.UUID
    date: UTCDateTime
    notes: str | None
    status: InspectionStatus
    created_at: UTCDateTime


class InspectionDetail(InspectionRead):
    """Inspection joined with the listing and the requester."""

    car: CarSummary | None = None
    user: UserContact | None = None


class InspectionEnvelope(Envelope):
    inspection: InspectionDetail


class InspectionMessageEnvelope(MessageEnvelope):
    inspection: InspectionRead


class InspectionListEnvelope(Envelope):
    inspections: list[InspectionDetail]
    pagination: Pagination
