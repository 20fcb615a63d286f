"""Centralized infrastructure dependency aliases for FastAPI routes.

Domain-specific dependencies (actors, image hosting) live with their domain:
    from motortech.core.deps import SessionDep, SettingsDep
    from motortech.auth.dependencies import CurrentActorDep, AdminActorDep
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from motortech.core.settings import Settings, get_settings
from motortech.db.engine import get_session

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]
