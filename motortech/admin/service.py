"""Admin aggregation: platform counts and user role management.

Listing and inspection moderation reuse the car and inspection services;
this module only adds what has no owner-facing counterpart.
"""

import logging
import uuid

from sqlalchemy import func
from sqlmodel import Session, col, select

from motortech.admin.schemas import PlatformStats
from motortech.auth.context import Actor, ensure_admin
from motortech.car.models import CarStatus
from motortech.car.service import count_cars
from motortech.core.pagination import Page
from motortech.inspection.models import InspectionStatus
from motortech.inspection.service import count_inspections
from motortech.user.exceptions import SelfRoleChangeError, UserNotFoundError
from motortech.user.models import User, UserRole

logger = logging.getLogger(__name__)


def get_stats(session: Session, actor: Actor) -> PlatformStats:
    ensure_admin(actor)
    total_users = session.exec(select(func.count()).select_from(User)).one()
    return PlatformStats(
        total_users=total_users,
        total_cars=count_cars(session),
        total_inspections=count_inspections(session),
        pending_cars=count_cars(session, CarStatus.pending),
        pending_inspections=count_inspections(session, InspectionStatus.pending),
    )


def list_users(
    session: Session, actor: Actor, role: UserRole | None, page: Page
) -> tuple[list[User], int]:
    """Return one page of users, newest first, plus the filtered total."""
    ensure_admin(actor)
    conditions = []
    if role is not None:
        conditions.append(col(User.role) == role)

    statement = (
        select(User)
        .where(*conditions)
        .order_by(col(User.created_at).desc())
        .offset(page.offset)
        .limit(page.limit)
    )
    users = list(session.exec(statement).all())
    total = session.exec(select(func.count()).select_from(User).where(*conditions)).one()
    return users, total


def change_user_role(
    session: Session, actor: Actor, user_id: uuid.UUID, role: UserRole
) -> User:
    """Set another user's role.

    Raises:
        AdminRequiredError: If the actor is not an admin
        UserNotFoundError: If the user does not exist
        SelfRoleChangeError: If the actor targets their own account
    """
    ensure_admin(actor)
    user = session.get(User, user_id)
    if user is None:
        raise UserNotFoundError()
    if user.id == actor.id:
        raise SelfRoleChangeError()

    user.role = role
    session.add(user)
    session.commit()
    session.refresh(user)

    logger.info(
        "User role changed to %s",
        role.value,
        extra={"actor_id": actor.id, "user_id": user.id},
    )
    return user
