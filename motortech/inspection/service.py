"""Inspection lifecycle: booking, visibility, rescheduling and confirmation.

Only the requester and admins can see or touch an inspection. Bookings are
accepted only for approved listings and only for dates strictly in the future.
"""

import logging
import uuid
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from sqlalchemy import func
from sqlmodel import Session, col, select

from motortech.auth.context import Actor, can_mutate, ensure_admin
from motortech.car.exceptions import CarNotFoundError
from motortech.car.models import Car, CarStatus
from motortech.core.exceptions import (
    FieldNotClearableError,
    NoFieldsToUpdateError,
    PermissionDeniedError,
)
from motortech.core.pagination import Page
from motortech.inspection.exceptions import (
    CarNotApprovedError,
    DuplicateInspectionError,
    InspectionNotFoundError,
    PastInspectionDateError,
)
from motortech.inspection.models import Inspection, InspectionStatus
from motortech.inspection.schemas import (
    InspectionCreate,
    InspectionFilters,
    InspectionUpdate,
)

logger = logging.getLogger(__name__)


class InspectionOrder(str, Enum):
    by_date = "date"
    by_created_at = "created_at"


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def validate_future_date(value: datetime, now: datetime | None = None) -> datetime:
    """Return the date in UTC if it is strictly after now."""
    date = as_utc(value)
    if date <= (now or datetime.now(UTC)):
        raise PastInspectionDateError()
    return date


def _get_inspection_or_404(session: Session, inspection_id: uuid.UUID) -> Inspection:
    inspection = session.get(Inspection, inspection_id)
    if inspection is None:
        raise InspectionNotFoundError()
    return inspection


def _get_owned_inspection(
    session: Session, actor: Actor, inspection_id: uuid.UUID
) -> Inspection:
    inspection = _get_inspection_or_404(session, inspection_id)
    if not can_mutate(actor, inspection.user_id):
        raise PermissionDeniedError()
    return inspection


def create_inspection(
    session: Session, actor: Actor, data: InspectionCreate
) -> Inspection:
    """Book an inspection for an approved listing.

    Raises:
        PastInspectionDateError: If the date is not strictly in the future
        CarNotFoundError: If the listing does not exist
        CarNotApprovedError: If the listing is not approved
        DuplicateInspectionError: If the actor already has a pending
            inspection for this listing
    """
    date = validate_future_date(data.date)

    car = session.get(Car, data.car_id)
    if car is None:
        raise CarNotFoundError()
    if car.status != CarStatus.approved:
        raise CarNotApprovedError()

    existing = session.exec(
        select(Inspection).where(
            col(Inspection.user_id) == actor.id,
            col(Inspection.car_id) == car.id,
            col(Inspection.status) == InspectionStatus.pending,
        )
    ).first()
    if existing is not None:
        raise DuplicateInspectionError()

    inspection = Inspection(
        user_id=actor.id,
        car_id=car.id,
        date=date,
        notes=data.notes or None,
        status=InspectionStatus.pending,
    )
    session.add(inspection)
    session.commit()
    session.refresh(inspection)

    logger.info(
        "Inspection booked",
        extra={"actor_id": actor.id, "car_id": car.id, "inspection_id": inspection.id},
    )
    return inspection


def list_inspections(
    session: Session,
    actor: Actor,
    filters: InspectionFilters,
    page: Page,
    order: InspectionOrder = InspectionOrder.by_date,
) -> tuple[list[Inspection], int]:
    """Return one page of inspections plus the filtered total.

    Non-admins are always limited to their own inspections.
    """
    conditions: list[Any] = []
    if not actor.is_admin:
        conditions.append(col(Inspection.user_id) == actor.id)
    if filters.status is not None:
        conditions.append(col(Inspection.status) == filters.status)

    order_column = (
        col(Inspection.date)
        if order is InspectionOrder.by_date
        else col(Inspection.created_at)
    )
    statement = (
        select(Inspection)
        .where(*conditions)
        .order_by(order_column.desc())
        .offset(page.offset)
        .limit(page.limit)
    )
    inspections = list(session.exec(statement).all())
    total = session.exec(
        select(func.count()).select_from(Inspection).where(*conditions)
    ).one()
    return inspections, total


def get_inspection(
    session: Session, actor: Actor, inspection_id: uuid.UUID
) -> Inspection:
    """Raises InspectionNotFoundError or PermissionDeniedError."""
    return _get_owned_inspection(session, actor, inspection_id)


def update_inspection(
    session: Session, actor: Actor, inspection_id: uuid.UUID, patch: InspectionUpdate
) -> Inspection:
    """Reschedule and/or change notes as requester or admin.

    Raises:
        InspectionNotFoundError / PermissionDeniedError: As for get
        NoFieldsToUpdateError: If the patch is empty
        FieldNotClearableError: If date is explicitly null
        PastInspectionDateError: If the new date is not strictly in the future
    """
    inspection = _get_owned_inspection(session, actor, inspection_id)

    update_data = patch.model_dump(exclude_unset=True)
    if not update_data:
        raise NoFieldsToUpdateError()
    if "date" in update_data:
        if update_data["date"] is None:
            raise FieldNotClearableError("date")
        update_data["date"] = validate_future_date(update_data["date"])

    for key, value in update_data.items():
        setattr(inspection, key, value)
    session.add(inspection)
    session.commit()
    session.refresh(inspection)
    return inspection


def delete_inspection(session: Session, actor: Actor, inspection_id: uuid.UUID) -> None:
    inspection = _get_owned_inspection(session, actor, inspection_id)
    session.delete(inspection)
    session.commit()
    logger.info(
        "Inspection deleted",
        extra={"actor_id": actor.id, "inspection_id": inspection_id},
    )


def set_inspection_status(
    session: Session,
    actor: Actor,
    inspection_id: uuid.UUID,
    status: InspectionStatus,
) -> Inspection:
    """Confirm an inspection or return it to pending. Admin only."""
    ensure_admin(actor)
    inspection = _get_inspection_or_404(session, inspection_id)
    inspection.status = status
    session.add(inspection)
    session.commit()
    session.refresh(inspection)

    logger.info(
        "Inspection status set to %s",
        status.value,
        extra={"actor_id": actor.id, "inspection_id": inspection.id},
    )
    return inspection


def count_inspections(session: Session, status: InspectionStatus | None = None) -> int:
    statement = select(func.count()).select_from(Inspection)
    if status is not None:
        statement = statement.where(col(Inspection.status) == status)
    return session.exec(statement).one()
