"""User domain models.

SQLModel table definition for User.
"""

import uuid
from enum import Enum

from sqlmodel import Field, SQLModel

from motortech.core.mixins import CreatedAtMixin


class UserRole(str, Enum):
    """Account role.

    - user: can list cars and book inspections
    - admin: moderates listings and inspections, manages roles
    """

    user = "user"
    admin = "admin"


class User(CreatedAtMixin, SQLModel, table=True):
    """User database model.

    Note: password_hash is internal-only and must never appear in a
    response schema.
    """

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(index=True, unique=True, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    password_hash: str = Field(max_length=255)
    role: UserRole = Field(default=UserRole.user, max_length=20)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin
