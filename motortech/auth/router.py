"""Auth domain router.

Registration, login and self-service profile routes. Handlers are thin and
delegate to `motortech.auth.service`.
"""

from fastapi import APIRouter, status

from motortech.auth import service
from motortech.auth.dependencies import CurrentActorDep
from motortech.auth.schemas import AuthLogin, AuthRegister, AuthSession
from motortech.auth.tokens import TokenServiceDep
from motortech.core.constants import CommonResponses, Routes
from motortech.core.deps import SessionDep, SettingsDep
from motortech.user.schemas import (
    UserEnvelope,
    UserMessageEnvelope,
    UserRead,
    UserUpdateMe,
)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST},
)


@router.post(
    "/register",
    response_model=AuthSession,
    status_code=status.HTTP_201_CREATED,
    responses={**CommonResponses.CONFLICT},
)
def register(
    register_data: AuthRegister,
    session: SessionDep,
    settings: SettingsDep,
    token_service: TokenServiceDep,
):
    """Register a new user and return a bearer token for it.

    Runs in the threadpool: bcrypt hashing is CPU-bound.
    The email is stored exactly as entered.
    """
    user = service.register_user(session, register_data, rounds=settings.bcrypt_rounds)
    return AuthSession(
        message="User registered successfully",
        user=UserRead.model_validate(user),
        token=token_service.issue(user),
    )


@router.post(
    "/login",
    response_model=AuthSession,
    responses={**CommonResponses.UNAUTHORIZED},
)
def login(
    payload: AuthLogin, session: SessionDep, token_service: TokenServiceDep
):
    """Login with email/password.

    Unknown emails and wrong passwords produce the same 401 response.
    Runs in the threadpool like `register`.
    """
    user = service.authenticate(session, payload)
    return AuthSession(
        message="Login successful",
        user=UserRead.model_validate(user),
        token=token_service.issue(user),
    )


@router.get(
    "/me",
    response_model=UserEnvelope,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.NOT_FOUND},
)
async def read_me(actor: CurrentActorDep, session: SessionDep):
    """Return the current user's profile, read fresh from the database."""
    user = service.get_profile(session, actor)
    return UserEnvelope(user=UserRead.model_validate(user))


@router.patch(
    "/me",
    response_model=UserMessageEnvelope,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.NOT_FOUND},
)
async def update_me(actor: CurrentActorDep, patch: UserUpdateMe, session: SessionDep):
    """Update the current user's name and/or phone.

    Email and role cannot be changed here.
    """
    user = service.update_profile(session, actor, patch)
    return UserMessageEnvelope(
        message="Profile updated successfully", user=UserRead.model_validate(user)
    )
