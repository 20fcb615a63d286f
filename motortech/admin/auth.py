from collections.abc import Callable

from fastapi.concurrency import run_in_threadpool
from sqladmin.authentication import AuthenticationBackend
from sqlmodel import Session
from starlette.requests import Request

from motortech.auth.passwords import verify_password
from motortech.auth.service import get_user_by_email
from motortech.core.settings import get_settings
from motortech.db.engine import engine
from motortech.user.models import UserRole

SESSION_KEY = "backoffice_user"


class AdminAuth(AuthenticationBackend):
    """SQLAdmin auth against admin accounts in the users table."""

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        # SQLAdmin signs its session cookie with this secret.
        settings = get_settings()
        super().__init__(secret_key=settings.session_secret_key)
        self._session_factory = session_factory or (lambda: Session(engine))

    def _find_admin_id(self, email: str, password: str) -> str | None:
        with self._session_factory() as session:
            user = get_user_by_email(session, email)
            if (
                user is not None
                and user.role == UserRole.admin
                and verify_password(password, user.password_hash)
            ):
                return str(user.id)
        return None

    async def login(self, request: Request) -> bool:
        form = await request.form()
        email = str(form.get("username", form.get("email", ""))).strip()
        password = str(form.get("password", ""))
        if not email or not password:
            return False

        # Database lookup and bcrypt check are blocking.
        user_id = await run_in_threadpool(self._find_admin_id, email, password)
        if user_id is None:
            return False
        request.session[SESSION_KEY] = user_id
        return True

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get(SESSION_KEY))
