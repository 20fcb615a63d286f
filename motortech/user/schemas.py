"""User domain schemas.

Request and response schemas for user operations.

Security notes:
- password_hash is internal-only, never exposed in responses
- UserUpdateMe is restricted to name/phone to prevent privilege escalation
- role changes go through the admin API only
"""

import uuid

from pydantic import Field

from motortech.core.schemas import (
    CamelModel,
    Envelope,
    MessageEnvelope,
    Pagination,
    UTCDateTime,
)
from motortech.user.models import UserRole


class UserContact(CamelModel):
    """Identity fields joined onto listings and inspections."""

    id: uuid.UUID
    name: str
    email: str
    phone: str | None


class UserRead(UserContact):
    """Full user profile without credentials."""

    role: UserRole
    created_at: UTCDateTime


class UserUpdateMe(CamelModel):
    """Schema for users updating their own profile.

    Absent fields are left untouched; an explicit null phone clears it.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=20)


class UserRoleUpdate(CamelModel):
    role: UserRole


class UserEnvelope(Envelope):
    user: UserRead


class UserMessageEnvelope(MessageEnvelope):
    user: UserRead


class UserListEnvelope(Envelope):
    users: list[UserRead]
    pagination: Pagination
