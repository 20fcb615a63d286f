"""Tests for motortech/admin/service.py."""

import uuid
from datetime import UTC, datetime, timedelta

import pytest
from sqlmodel import Session

from motortech.admin.service import change_user_role, get_stats, list_users
from motortech.auth.exceptions import AdminRequiredError
from motortech.car.models import CarStatus
from motortech.core.pagination import Page
from motortech.inspection.models import InspectionStatus
from motortech.user.exceptions import SelfRoleChangeError, UserNotFoundError
from motortech.user.models import UserRole


def test_get_stats(
    session: Session, user, other_user, admin_user, make_car, make_inspection, actor_for
):
    approved = make_car(user, CarStatus.approved)
    make_car(user, CarStatus.pending)
    make_inspection(other_user, approved)
    make_inspection(user, approved, status=InspectionStatus.confirmed)

    stats = get_stats(session, actor_for(admin_user))

    assert stats.total_users == 3
    assert stats.total_cars == 2
    assert stats.total_inspections == 2
    assert stats.pending_cars == 1
    assert stats.pending_inspections == 1


def test_get_stats_requires_admin(session: Session, user, actor_for):
    with pytest.raises(AdminRequiredError):
        get_stats(session, actor_for(user))


def test_list_users_newest_first_with_role_filter(
    session: Session, make_user, admin_user, actor_for
):
    first = make_user("first@example.com")
    first.created_at = datetime(2026, 1, 1, tzinfo=UTC)
    second = make_user("second@example.com")
    second.created_at = datetime(2026, 1, 1, tzinfo=UTC) + timedelta(days=1)
    session.add(first)
    session.add(second)
    session.commit()
    admin = actor_for(admin_user)

    users, total = list_users(session, admin, UserRole.user, Page())

    assert [u.email for u in users] == ["second@example.com", "first@example.com"]
    assert total == 2

    admins, admin_total = list_users(session, admin, UserRole.admin, Page())
    assert [u.id for u in admins] == [admin_user.id]
    assert admin_total == 1


def test_change_user_role(session: Session, user, admin_user, actor_for):
    updated = change_user_role(session, actor_for(admin_user), user.id, UserRole.admin)

    assert updated.role == UserRole.admin


def test_change_own_role_is_rejected(session: Session, admin_user, actor_for):
    with pytest.raises(SelfRoleChangeError) as exc_info:
        change_user_role(session, actor_for(admin_user), admin_user.id, UserRole.user)

    assert exc_info.value.status_code == 400
    session.refresh(admin_user)
    assert admin_user.role == UserRole.admin


def test_change_role_of_missing_user(session: Session, admin_user, actor_for):
    with pytest.raises(UserNotFoundError):
        change_user_role(session, actor_for(admin_user), uuid.uuid4(), UserRole.admin)
