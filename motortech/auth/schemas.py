"""Auth domain schemas.

Request and response schemas for authentication operations.
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, Field

from motortech.core.schemas import CamelModel, MessageEnvelope
from motortech.user.schemas import UserRead


def _check_email_format(value: str) -> str:
    """Validate the address format but keep the caller's spelling.

    Emails are stored and compared exactly as entered.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email address: {e}") from e
    return value


RawEmail = Annotated[str, Field(max_length=255), AfterValidator(_check_email_format)]


class AuthRegister(CamelModel):
    """Request schema for user registration."""

    name: str = Field(min_length=1, max_length=255)
    email: RawEmail
    phone: str | None = Field(default=None, max_length=20)
    password: str = Field(min_length=1)


class AuthLogin(CamelModel):
    """Request schema for email/password login."""

    email: RawEmail
    password: str = Field(min_length=1)


class AuthSession(MessageEnvelope):
    """Response schema for register and login: the profile plus a bearer token."""

    user: UserRead
    token: str
