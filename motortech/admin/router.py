"""Admin domain router.

Every route requires an admin actor (router-level dependency); handlers
that need the actor itself also take `AdminActorDep`.
"""

import uuid

from fastapi import APIRouter, Depends

from motortech.admin import service
from motortech.admin.schemas import StatsEnvelope
from motortech.auth.dependencies import AdminActorDep, require_admin
from motortech.car import service as car_service
from motortech.car.router import CarFiltersDep
from motortech.car.schemas import (
    CarDetail,
    CarListEnvelope,
    CarMessageEnvelope,
    CarModerationUpdate,
    CarRead,
)
from motortech.core.constants import CommonResponses, Routes
from motortech.core.deps import SessionDep
from motortech.core.pagination import PageDep
from motortech.core.schemas import MessageEnvelope, Pagination
from motortech.inspection import service as inspection_service
from motortech.inspection.router import InspectionFiltersDep
from motortech.inspection.schemas import (
    InspectionDetail,
    InspectionListEnvelope,
    InspectionMessageEnvelope,
    InspectionRead,
    InspectionStatusUpdate,
)
from motortech.inspection.service import InspectionOrder
from motortech.user.models import UserRole
from motortech.user.schemas import (
    UserListEnvelope,
    UserMessageEnvelope,
    UserRead,
    UserRoleUpdate,
)

router = APIRouter(
    prefix=Routes.ADMIN.prefix,
    tags=[Routes.ADMIN.tag],
    dependencies=[Depends(require_admin)],
    responses={
        **CommonResponses.BAD_REQUEST,
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
    },
)


@router.get("/stats", response_model=StatsEnvelope)
async def get_stats(actor: AdminActorDep, session: SessionDep):
    """Platform totals and moderation queue sizes."""
    return StatsEnvelope(stats=service.get_stats(session, actor))


@router.get("/users", response_model=UserListEnvelope)
async def list_users(
    actor: AdminActorDep,
    page: PageDep,
    session: SessionDep,
    role: UserRole | None = None,
):
    users, total = service.list_users(session, actor, role, page)
    return UserListEnvelope(
        users=[UserRead.model_validate(u) for u in users],
        pagination=Pagination(limit=page.limit, offset=page.offset, total=total),
    )


@router.patch(
    "/users/{user_id}/role",
    response_model=UserMessageEnvelope,
    responses={**CommonResponses.NOT_FOUND},
)
async def change_user_role(
    user_id: uuid.UUID,
    payload: UserRoleUpdate,
    actor: AdminActorDep,
    session: SessionDep,
):
    """Change another user's role. Admins cannot change their own."""
    user = service.change_user_role(session, actor, user_id, payload.role)
    return UserMessageEnvelope(
        message=f"User role updated to {payload.role.value}",
        user=UserRead.model_validate(user),
    )


@router.get("/cars", response_model=CarListEnvelope)
async def list_cars(
    actor: AdminActorDep, filters: CarFiltersDep, page: PageDep, session: SessionDep
):
    """All listings in any status, with owner contact details."""
    cars, total = car_service.list_cars(session, actor, filters, page)
    return CarListEnvelope(
        cars=[CarDetail.model_validate(car) for car in cars],
        pagination=Pagination(limit=page.limit, offset=page.offset, total=total),
    )


@router.patch(
    "/cars/{car_id}/status",
    response_model=CarMessageEnvelope,
    responses={**CommonResponses.NOT_FOUND},
)
async def moderate_car(
    car_id: uuid.UUID,
    payload: CarModerationUpdate,
    actor: AdminActorDep,
    session: SessionDep,
):
    """Approve or reject a listing. Rejected listings go back to pending."""
    car = car_service.set_car_status(
        session, actor, car_id, payload.status.to_car_status()
    )
    return CarMessageEnvelope(
        message=f"Car listing {payload.status.value} successfully",
        car=CarRead.model_validate(car),
    )


@router.delete(
    "/cars/{car_id}",
    response_model=MessageEnvelope,
    responses={**CommonResponses.NOT_FOUND},
)
async def delete_car(car_id: uuid.UUID, actor: AdminActorDep, session: SessionDep):
    car_service.delete_car(session, actor, car_id)
    return MessageEnvelope(message="Car and related inspections deleted successfully")


@router.get("/inspections", response_model=InspectionListEnvelope)
async def list_inspections(
    actor: AdminActorDep,
    filters: InspectionFiltersDep,
    page: PageDep,
    session: SessionDep,
):
    """All inspections, most recently booked first."""
    inspections, total = inspection_service.list_inspections(
        session, actor, filters, page, order=InspectionOrder.by_created_at
    )
    return InspectionListEnvelope(
        inspections=[InspectionDetail.model_validate(i) for i in inspections],
        pagination=Pagination(limit=page.limit, offset=page.offset, total=total),
    )


@router.patch(
    "/inspections/{inspection_id}/status",
    response_model=InspectionMessageEnvelope,
    responses={**CommonResponses.NOT_FOUND},
)
async def set_inspection_status(
    inspection_id: uuid.UUID,
    payload: InspectionStatusUpdate,
    actor: AdminActorDep,
    session: SessionDep,
):
    inspection = inspection_service.set_inspection_status(
        session, actor, inspection_id, payload.status
    )
    return InspectionMessageEnvelope(
        message=f"Inspection {payload.status.value} successfully",
        inspection=InspectionRead.model_validate(inspection),
    )


@router.delete(
    "/inspections/{inspection_id}",
    response_model=MessageEnvelope,
    responses={**CommonResponses.NOT_FOUND},
)
async def delete_inspection(
    inspection_id: uuid.UUID, actor: AdminActorDep, session: SessionDep
):
    inspection_service.delete_inspection(session, actor, inspection_id)
    return MessageEnvelope(message="Inspection deleted successfully")
