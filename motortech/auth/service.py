"""Credential store operations: registration, login and self-service profile.

Route handlers stay thin and delegate here. Password hashes never leave this
module except as the stored column value.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from motortech.auth.context import Actor
from motortech.auth.exceptions import InvalidCredentialsError, WeakPasswordError
from motortech.auth.passwords import (
    DEFAULT_ROUNDS,
    MIN_PASSWORD_LENGTH,
    hash_password,
    verify_password,
)
from motortech.auth.schemas import AuthLogin, AuthRegister
from motortech.core.exceptions import FieldNotClearableError, NoFieldsToUpdateError
from motortech.user.exceptions import EmailExistsError, UserNotFoundError
from motortech.user.models import User, UserRole
from motortech.user.schemas import UserUpdateMe

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes and newer releases reject longer input.
MAX_PASSWORD_BYTES = 72


def check_password_policy(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakPasswordError()
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise WeakPasswordError("Password must be at most 72 bytes long")


def get_user_by_email(session: Session, email: str) -> User | None:
    return session.exec(select(User).where(User.email == email)).first()


def register_user(
    session: Session, data: AuthRegister, *, rounds: int = DEFAULT_ROUNDS
) -> User:
    """Create a user with role `user`.

    Raises:
        WeakPasswordError: If the password is shorter than 6 characters
        EmailExistsError: If the email is already registered
    """
    check_password_policy(data.password)

    if get_user_by_email(session, data.email) is not None:
        raise EmailExistsError()

    user = User(
        name=data.name,
        email=data.email,
        phone=data.phone or None,
        password_hash=hash_password(data.password, rounds=rounds),
        role=UserRole.user,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent registration of the same email.
        session.rollback()
        raise EmailExistsError() from e
    session.refresh(user)

    logger.info("User registered", extra={"user_id": user.id})
    return user


def authenticate(session: Session, data: AuthLogin) -> User:
    """Return the user matching the credentials.

    Raises:
        InvalidCredentialsError: For an unknown email or a wrong password alike
    """
    user = get_user_by_email(session, data.email)
    if user is None or not verify_password(data.password, user.password_hash):
        raise InvalidCredentialsError()
    return user


def get_profile(session: Session, actor: Actor) -> User:
    """Fetch the actor's current row (the token may outlive the account)."""
    user = session.get(User, actor.id)
    if user is None:
        raise UserNotFoundError()
    return user


def update_profile(session: Session, actor: Actor, patch: UserUpdateMe) -> User:
    """Apply a partial name/phone update to the actor's own profile.

    Raises:
        NoFieldsToUpdateError: If the patch is empty
        FieldNotClearableError: If name is explicitly null
        UserNotFoundError: If the account no longer exists
    """
    update_data = patch.model_dump(exclude_unset=True)
    if not update_data:
        raise NoFieldsToUpdateError()
    if "name" in update_data and update_data["name"] is None:
        raise FieldNotClearableError("name")

    user = get_profile(session, actor)
    for key, value in update_data.items():
        setattr(user, key, value)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user
