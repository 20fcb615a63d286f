"""Reusable model mixins."""

from datetime import UTC, datetime

from sqlalchemy import text
from sqlmodel import Field


def utc_now() -> datetime:
    """Return current UTC time without microseconds."""
    return datetime.now(UTC).replace(microsecond=0)


class CreatedAtMixin:
    """Mixin that adds an immutable created_at timestamp.

    Usage:
        class Car(CreatedAtMixin, SQLModel, table=True):
            id: uuid.UUID = Field(primary_key=True)
    """

    created_at: datetime = Field(
        default_factory=utc_now,
        index=True,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
    )
