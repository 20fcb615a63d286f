"""Authenticated request context and the shared authorization predicates.

An `Actor` is resolved from the bearer token once per request and passed
explicitly into every service call. It is built from token claims only; the
database is not consulted.
"""

import uuid
from dataclasses import dataclass

from motortech.auth.exceptions import AdminRequiredError
from motortech.auth.tokens import TokenClaims
from motortech.user.models import UserRole


@dataclass(frozen=True)
class Actor:
    id: uuid.UUID
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> "Actor":
        return cls(id=claims.user_id, email=claims.email, role=claims.role)


def can_mutate(actor: Actor | None, owner_id: uuid.UUID) -> bool:
    """True when the actor owns the resource or is an admin."""
    if actor is None:
        return False
    return actor.is_admin or actor.id == owner_id


def ensure_admin(actor: Actor) -> None:
    if not actor.is_admin:
        raise AdminRequiredError()
