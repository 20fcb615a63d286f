"""Signed session tokens.

Tokens are HS256 JWTs carrying the user's id (`sub`), email and role plus the
standard `iat`/`exp` claims. There is no revocation list: a token stays valid
until it expires, even if the user's role changes in the meantime.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Annotated, Protocol

import jwt
from fastapi import Depends

from motortech.auth.exceptions import (
    InvalidTokenError,
    TokenConfigurationError,
    TokenExpiredError,
    TokenVerificationError,
)
from motortech.core.deps import SettingsDep
from motortech.user.models import UserRole

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_EXPIRES_IN = timedelta(days=7)
_REQUIRED_CLAIMS = ["sub", "email", "role", "iat", "exp"]


@dataclass(frozen=True)
class TokenClaims:
    """Decoded and type-checked token claims."""

    user_id: uuid.UUID
    email: str
    role: UserRole
    issued_at: datetime
    expires_at: datetime


class TokenSubject(Protocol):
    """Anything a token can be issued for (normally a User row)."""

    id: uuid.UUID
    email: str
    role: UserRole


class TokenService:
    """Issues and verifies session tokens with a process-wide secret."""

    def __init__(
        self,
        secret: str | None,
        expires_in: timedelta = DEFAULT_EXPIRES_IN,
        algorithm: str = ALGORITHM,
    ) -> None:
        self._secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    def _require_secret(self) -> str:
        if not self._secret:
            raise TokenConfigurationError()
        return self._secret

    def issue(self, subject: TokenSubject, now: datetime | None = None) -> str:
        """Sign a token for the given user.

        Raises:
            TokenConfigurationError: If no secret is configured
        """
        secret = self._require_secret()
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": str(subject.id),
            "email": subject.email,
            "role": UserRole(subject.role).value,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Verify signature and expiry, then parse the claims.

        Raises:
            TokenConfigurationError: If no secret is configured
            TokenExpiredError: If the token is past its expiry
            InvalidTokenError: If the signature or encoding is wrong
            TokenVerificationError: For any other decode failure
        """
        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except (jwt.DecodeError, jwt.InvalidAlgorithmError) as e:
            # DecodeError covers bad signatures and malformed segments.
            raise InvalidTokenError() from e
        except jwt.PyJWTError as e:
            logger.debug("Token rejected: %s", e)
            raise TokenVerificationError() from e

        try:
            return TokenClaims(
                user_id=uuid.UUID(str(payload["sub"])),
                email=str(payload["email"]),
                role=UserRole(payload["role"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
            )
        except (TypeError, ValueError) as e:
            logger.debug("Token claims malformed: %s", e)
            raise TokenVerificationError() from e


def get_token_service(settings: SettingsDep) -> TokenService:
    return TokenService(secret=settings.jwt_secret, expires_in=settings.jwt_expires_in)


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
