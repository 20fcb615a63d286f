"""Auth domain dependencies.

Resolve the request's `Actor` from an `Authorization: Bearer <token>` header
in one of three modes:

- required (`CurrentActorDep`): no token -> 401, bad token -> 401
- optional (`OptionalActorDep`): no/bad token -> anonymous, never raises
- admin (`AdminActorDep`): required, plus role must be admin -> else 403
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from motortech.auth.context import Actor, ensure_admin
from motortech.auth.exceptions import MissingTokenError
from motortech.auth.tokens import TokenServiceDep
from motortech.core.exceptions import AppException

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

BearerDep = Annotated[HTTPAuthorizationCredentials | None, Depends(security)]


def get_current_actor(token_service: TokenServiceDep, credentials: BearerDep) -> Actor:
    """Verify the bearer token and return the actor it identifies.

    Raises:
        MissingTokenError: If no bearer token was sent
        TokenConfigurationError: If no signing secret is configured (500)
        TokenExpiredError / InvalidTokenError / TokenVerificationError:
            If the token does not verify
    """
    if credentials is None:
        raise MissingTokenError()
    claims = token_service.verify(credentials.credentials)
    return Actor.from_claims(claims)


def get_optional_actor(
    token_service: TokenServiceDep, credentials: BearerDep
) -> Actor | None:
    """Like get_current_actor, but anonymous instead of failing."""
    if credentials is None:
        return None
    try:
        claims = token_service.verify(credentials.credentials)
    except AppException as e:
        logger.debug("Ignoring unusable token on optional route: %s", e.error_type)
        return None
    return Actor.from_claims(claims)


# Type aliases for dependency injection
CurrentActorDep = Annotated[Actor, Depends(get_current_actor)]
OptionalActorDep = Annotated[Actor | None, Depends(get_optional_actor)]


def get_admin_actor(actor: CurrentActorDep) -> Actor:
    """Verify the current actor has admin privileges.

    Raises:
        AdminRequiredError: If the actor is not an admin
    """
    ensure_admin(actor)
    return actor


AdminActorDep = Annotated[Actor, Depends(get_admin_actor)]


def require_admin(_actor: AdminActorDep) -> None:
    """Require admin privileges without injecting the actor.

    Use as a router-level dependency:
        router = APIRouter(dependencies=[Depends(require_admin)])
    """
    pass  # Admin check already validated by AdminActorDep
