"""Inspection domain router.

Every route requires authentication. Non-admins only ever see and change
their own inspections; status changes are admin-only.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status

from motortech.auth.dependencies import AdminActorDep, CurrentActorDep
from motortech.core.constants import CommonResponses, Routes
from motortech.core.deps import SessionDep
from motortech.core.pagination import PageDep
from motortech.core.schemas import MessageEnvelope, Pagination
from motortech.inspection import service
from motortech.inspection.models import InspectionStatus
from motortech.inspection.schemas import (
    InspectionCreate,
    InspectionDetail,
    InspectionEnvelope,
    InspectionFilters,
    InspectionListEnvelope,
    InspectionMessageEnvelope,
    InspectionRead,
    InspectionStatusUpdate,
    InspectionUpdate,
)

router = APIRouter(
    prefix=Routes.INSPECTIONS.prefix,
    tags=[Routes.INSPECTIONS.tag],
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.UNAUTHORIZED},
)


def get_inspection_filters(status: InspectionStatus | None = None) -> InspectionFilters:
    return InspectionFilters(status=status)


InspectionFiltersDep = Annotated[InspectionFilters, Depends(get_inspection_filters)]


@router.get("", response_model=InspectionListEnvelope)
async def list_inspections(
    actor: CurrentActorDep,
    filters: InspectionFiltersDep,
    page: PageDep,
    session: SessionDep,
):
    """List inspections by appointment date, latest first.

    Admins see all inspections; everyone else sees only their own.
    """
    inspections, total = service.list_inspections(session, actor, filters, page)
    return InspectionListEnvelope(
        inspections=[InspectionDetail.model_validate(i) for i in inspections],
        pagination=Pagination(limit=page.limit, offset=page.offset, total=total),
    )


@router.get(
    "/{inspection_id}",
    response_model=InspectionEnvelope,
    responses={**CommonResponses.FORBIDDEN, **CommonResponses.NOT_FOUND},
)
async def get_inspection(
    inspection_id: uuid.UUID, actor: CurrentActorDep, session: SessionDep
):
    inspection = service.get_inspection(session, actor, inspection_id)
    return InspectionEnvelope(inspection=InspectionDetail.model_validate(inspection))


@router.post(
    "",
    response_model=InspectionMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.CONFLICT},
)
async def create_inspection(
    data: InspectionCreate, actor: CurrentActorDep, session: SessionDep
):
    """Book an inspection for an approved listing at a future date."""
    inspection = service.create_inspection(session, actor, data)
    return InspectionMessageEnvelope(
        message="Inspection appointment created successfully",
        inspection=InspectionRead.model_validate(inspection),
    )


@router.patch(
    "/{inspection_id}",
    response_model=InspectionMessageEnvelope,
    responses={**CommonResponses.FORBIDDEN, **CommonResponses.NOT_FOUND},
)
async def update_inspection(
    inspection_id: uuid.UUID,
    patch: InspectionUpdate,
    actor: CurrentActorDep,
    session: SessionDep,
):
    """Reschedule or edit notes. Requester or admin only."""
    inspection = service.update_inspection(session, actor, inspection_id, patch)
    return InspectionMessageEnvelope(
        message="Inspection updated successfully",
        inspection=InspectionRead.model_validate(inspection),
    )


@router.delete(
    "/{inspection_id}",
    response_model=MessageEnvelope,
    responses={**CommonResponses.FORBIDDEN, **CommonResponses.NOT_FOUND},
)
async def delete_inspection(
    inspection_id: uuid.UUID, actor: CurrentActorDep, session: SessionDep
):
    service.delete_inspection(session, actor, inspection_id)
    return MessageEnvelope(message="Inspection deleted successfully")


@router.patch(
    "/{inspection_id}/status",
    response_model=InspectionMessageEnvelope,
    responses={**CommonResponses.FORBIDDEN, **CommonResponses.NOT_FOUND},
)
async def set_inspection_status(
    inspection_id: uuid.UUID,
    payload: InspectionStatusUpdate,
    actor: AdminActorDep,
    session: SessionDep,
):
    """Confirm an inspection or return it to pending. Admin only."""
    inspection = service.set_inspection_status(
        session, actor, inspection_id, payload.status
    )
    return InspectionMessageEnvelope(
        message=f"Inspection {payload.status.value} successfully",
        inspection=InspectionRead.model_validate(inspection),
    )
