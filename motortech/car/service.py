"""Listing lifecycle: creation, visibility, edits, deletion and moderation.

Visibility rules:
- collections: non-admin and anonymous actors only ever see approved listings
- single listing: a pending listing is visible to its owner and admins only;
  everyone else gets the same 404 as for a missing row
"""

import logging
import uuid
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, func
from sqlmodel import Session, col, select

from motortech.auth.context import Actor, can_mutate, ensure_admin
from motortech.car.exceptions import CarNotFoundError, InvalidPriceError, InvalidYearError
from motortech.car.models import Car, CarStatus
from motortech.car.schemas import CarCreate, CarFilters, CarUpdate
from motortech.core.constants import MAX_CAR_YEAR_AHEAD, MIN_CAR_YEAR
from motortech.core.exceptions import (
    FieldNotClearableError,
    NoFieldsToUpdateError,
    PermissionDeniedError,
)
from motortech.core.money import to_minor_units
from motortech.core.pagination import Page
from motortech.inspection.models import Inspection

logger = logging.getLogger(__name__)

# Columns that may not be set to null through a patch.
_REQUIRED_FIELDS = ("title", "price", "brand", "model", "year", "images")


def validate_price(price: Decimal) -> int:
    """Check a major-unit price and return it in minor units."""
    minor = to_minor_units(price)
    if price <= 0 or minor <= 0:
        raise InvalidPriceError()
    return minor


def validate_year(year: int, today: datetime | None = None) -> int:
    max_year = (today or datetime.now(UTC)).year + MAX_CAR_YEAR_AHEAD
    if year < MIN_CAR_YEAR or year > max_year:
        raise InvalidYearError(MIN_CAR_YEAR, max_year)
    return year


def _get_car_or_404(session: Session, car_id: uuid.UUID) -> Car:
    car = session.get(Car, car_id)
    if car is None:
        raise CarNotFoundError()
    return car


def _get_mutable_car(session: Session, actor: Actor, car_id: uuid.UUID) -> Car:
    car = _get_car_or_404(session, car_id)
    if not can_mutate(actor, car.user_id):
        raise PermissionDeniedError()
    return car


def create_car(session: Session, actor: Actor, data: CarCreate) -> Car:
    """Create a pending listing owned by the actor.

    Raises:
        InvalidPriceError: If price <= 0
        InvalidYearError: If year is outside [1900, current year + 1]
    """
    price = validate_price(data.price)
    year = validate_year(data.year)

    car = Car(
        user_id=actor.id,
        title=data.title,
        price=price,
        brand=data.brand,
        model=data.model,
        year=year,
        description=data.description or None,
        images=list(data.images),
        status=CarStatus.pending,
    )
    session.add(car)
    session.commit()
    session.refresh(car)

    logger.info("Car listing created", extra={"actor_id": actor.id, "car_id": car.id})
    return car


def _visible_status(actor: Actor | None, requested: CarStatus | None) -> CarStatus | None:
    if actor is None or not actor.is_admin:
        return CarStatus.approved
    return requested


def list_cars(
    session: Session, actor: Actor | None, filters: CarFilters, page: Page
) -> tuple[list[Car], int]:
    """Return one page of listings, newest first, plus the filtered total."""
    conditions: list[Any] = []

    status = _visible_status(actor, filters.status)
    if status is not None:
        conditions.append(col(Car.status) == status)
    if filters.brand:
        conditions.append(col(Car.brand) == filters.brand)
    if filters.model:
        conditions.append(col(Car.model) == filters.model)
    if filters.min_price is not None:
        conditions.append(col(Car.price) >= to_minor_units(filters.min_price))
    if filters.max_price is not None:
        conditions.append(col(Car.price) <= to_minor_units(filters.max_price))

    statement = (
        select(Car)
        .where(*conditions)
        .order_by(col(Car.created_at).desc())
        .offset(page.offset)
        .limit(page.limit)
    )
    cars = list(session.exec(statement).all())
    total = session.exec(select(func.count()).select_from(Car).where(*conditions)).one()
    return cars, total


def get_car(session: Session, actor: Actor | None, car_id: uuid.UUID) -> Car:
    """Fetch a single listing the actor is allowed to see.

    Raises:
        CarNotFoundError: If missing, or pending and the actor is neither the
            owner nor an admin
    """
    car = _get_car_or_404(session, car_id)
    if car.status != CarStatus.approved and not can_mutate(actor, car.user_id):
        raise CarNotFoundError()
    return car


def update_car(
    session: Session, actor: Actor, car_id: uuid.UUID, patch: CarUpdate
) -> Car:
    """Apply a partial update as owner or admin.

    Validation runs before anything is written.

    Raises:
        CarNotFoundError: If the listing does not exist
        PermissionDeniedError: If the actor is neither owner nor admin
        NoFieldsToUpdateError: If the patch is empty
        FieldNotClearableError: If a required column is set to null
        InvalidPriceError / InvalidYearError: As for create
    """
    car = _get_mutable_car(session, actor, car_id)

    update_data = patch.model_dump(exclude_unset=True)
    if not update_data:
        raise NoFieldsToUpdateError()
    for field in _REQUIRED_FIELDS:
        if field in update_data and update_data[field] is None:
            raise FieldNotClearableError(field)
    if "price" in update_data:
        update_data["price"] = validate_price(update_data["price"])
    if "year" in update_data:
        validate_year(update_data["year"])

    for key, value in update_data.items():
        setattr(car, key, value)
    session.add(car)
    session.commit()
    session.refresh(car)
    return car


def delete_car(session: Session, actor: Actor, car_id: uuid.UUID) -> int:
    """Delete a listing and its inspections in one transaction.

    Inspections are deleted first so the listing row is never referenced
    by a dangling inspection. Returns the number of inspections removed.

    Raises:
        CarNotFoundError: If the listing does not exist
        PermissionDeniedError: If the actor is neither owner nor admin
    """
    car = _get_mutable_car(session, actor, car_id)
    try:
        result = session.exec(
            delete(Inspection).where(col(Inspection.car_id) == car.id)
        )
        session.delete(car)
        session.commit()
    except Exception:
        session.rollback()
        raise

    removed = result.rowcount or 0
    logger.info(
        "Car listing deleted with %d inspection(s)",
        removed,
        extra={"actor_id": actor.id, "car_id": car_id},
    )
    return removed


def set_car_status(
    session: Session, actor: Actor, car_id: uuid.UUID, status: CarStatus
) -> Car:
    """Moderate a listing. Admin only.

    Raises:
        AdminRequiredError: If the actor is not an admin
        CarNotFoundError: If the listing does not exist
    """
    ensure_admin(actor)
    car = _get_car_or_404(session, car_id)
    car.status = status
    session.add(car)
    session.commit()
    session.refresh(car)

    logger.info(
        "Car listing status set to %s",
        status.value,
        extra={"actor_id": actor.id, "car_id": car.id},
    )
    return car


def count_cars(session: Session, status: CarStatus | None = None) -> int:
    statement = select(func.count()).select_from(Car)
    if status is not None:
        statement = statement.where(col(Car.status) == status)
    return session.exec(statement).one()
