"""Car domain router.

Public browsing (optional auth), owner/admin edits and admin moderation.
"""

import uuid
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from motortech.auth.dependencies import AdminActorDep, CurrentActorDep, OptionalActorDep
from motortech.car import service
from motortech.car.models import CarStatus
from motortech.car.schemas import (
    CarCreate,
    CarDetail,
    CarEnvelope,
    CarFilters,
    CarListEnvelope,
    CarMessageEnvelope,
    CarRead,
    CarStatusUpdate,
    CarUpdate,
)
from motortech.core.constants import CommonResponses, Routes
from motortech.core.deps import SessionDep
from motortech.core.exceptions import BadRequestError
from motortech.core.pagination import PageDep
from motortech.core.schemas import MessageEnvelope, Pagination

router = APIRouter(
    prefix=Routes.CARS.prefix,
    tags=[Routes.CARS.tag],
    responses={**CommonResponses.BAD_REQUEST},
)


def get_car_filters(
    actor: OptionalActorDep,
    status: str | None = None,
    brand: str | None = None,
    model: str | None = None,
    min_price: Annotated[Decimal | None, Query(alias="minPrice")] = None,
    max_price: Annotated[Decimal | None, Query(alias="maxPrice")] = None,
) -> CarFilters:
    """Build listing filters from the query string.

    `status` only applies to admins, so it is only validated for them.
    """
    car_status = None
    if status and actor is not None and actor.is_admin:
        try:
            car_status = CarStatus(status)
        except ValueError as e:
            raise BadRequestError(f"Invalid status filter: {status}") from e
    return CarFilters(
        status=car_status,
        brand=brand,
        model=model,
        min_price=min_price,
        max_price=max_price,
    )


CarFiltersDep = Annotated[CarFilters, Depends(get_car_filters)]


@router.get("", response_model=CarListEnvelope)
async def list_cars(
    actor: OptionalActorDep, filters: CarFiltersDep, page: PageDep, session: SessionDep
):
    """List listings, newest first.

    Anonymous and non-admin callers only ever get approved listings; the
    status filter is honored for admins only.
    """
    cars, total = service.list_cars(session, actor, filters, page)
    return CarListEnvelope(
        cars=[CarDetail.model_validate(car) for car in cars],
        pagination=Pagination(limit=page.limit, offset=page.offset, total=total),
    )


@router.get(
    "/{car_id}",
    response_model=CarEnvelope,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_car(car_id: uuid.UUID, actor: OptionalActorDep, session: SessionDep):
    """Get one listing. Pending listings are 404 unless owner or admin."""
    car = service.get_car(session, actor, car_id)
    return CarEnvelope(car=CarDetail.model_validate(car))


@router.post(
    "",
    response_model=CarMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def create_car(data: CarCreate, actor: CurrentActorDep, session: SessionDep):
    """Submit a listing. It starts pending until an admin approves it."""
    car = service.create_car(session, actor, data)
    return CarMessageEnvelope(
        message="Car listing created successfully", car=CarRead.model_validate(car)
    )


@router.patch(
    "/{car_id}",
    response_model=CarMessageEnvelope,
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.NOT_FOUND,
    },
)
async def update_car(
    car_id: uuid.UUID, patch: CarUpdate, actor: CurrentActorDep, session: SessionDep
):
    """Edit a listing. Owner or admin only."""
    car = service.update_car(session, actor, car_id, patch)
    return CarMessageEnvelope(
        message="Car updated successfully", car=CarRead.model_validate(car)
    )


@router.delete(
    "/{car_id}",
    response_model=MessageEnvelope,
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.NOT_FOUND,
    },
)
async def delete_car(car_id: uuid.UUID, actor: CurrentActorDep, session: SessionDep):
    """Delete a listing and its inspections. Owner or admin only."""
    service.delete_car(session, actor, car_id)
    return MessageEnvelope(message="Car deleted successfully")


@router.patch(
    "/{car_id}/status",
    response_model=CarMessageEnvelope,
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.NOT_FOUND,
    },
)
async def set_car_status(
    car_id: uuid.UUID, payload: CarStatusUpdate, actor: AdminActorDep, session: SessionDep
):
    """Approve a listing or send it back to pending. Admin only."""
    car = service.set_car_status(session, actor, car_id, payload.status)
    return CarMessageEnvelope(
        message=f"Car {payload.status.value} successfully",
        car=CarRead.model_validate(car),
    )
