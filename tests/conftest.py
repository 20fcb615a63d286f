import inspect
import os
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

# Settings are read at import time by motortech.db.engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import motortech.models  # noqa: E402, F401
from motortech.auth.context import Actor  # noqa: E402
from motortech.auth.passwords import hash_password  # noqa: E402
from motortech.auth.tokens import TokenService  # noqa: E402
from motortech.car.models import Car, CarStatus  # noqa: E402
from motortech.core.settings import Settings, get_settings  # noqa: E402
from motortech.db.engine import get_session  # noqa: E402
from motortech.inspection.models import Inspection, InspectionStatus  # noqa: E402
from motortech.main import app  # noqa: E402
from motortech.upload.service import (  # noqa: E402
    ImageHostingService,
    UploadedImage,
    get_image_hosting_service,
)
from motortech.user.models import User, UserRole  # noqa: E402

TEST_PASSWORD = "secret123"
TEST_ROUNDS = 4


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite shared across threads for the duration of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(
        env_name="test",
        database_url="sqlite://",
        session_secret_key="test-session-secret",
        jwt_secret="test-jwt-secret",
        jwt_expires_days=7,
        bcrypt_rounds=TEST_ROUNDS,
        cloudinary_folder="motortech/cars",
        max_upload_mb=1,
    )


@pytest.fixture(name="token_service")
def token_service_fixture(settings: Settings):
    return TokenService(secret=settings.jwt_secret, expires_in=settings.jwt_expires_in)


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session) -> Callable[..., User]:
    def _make_user(
        email: str,
        name: str = "Test User",
        role: UserRole = UserRole.user,
        password: str = TEST_PASSWORD,
        phone: str | None = None,
    ) -> User:
        user = User(
            name=name,
            email=email,
            phone=phone,
            password_hash=hash_password(password, rounds=TEST_ROUNDS),
            role=role,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture(name="user")
def user_fixture(make_user):
    return make_user("seller@example.com", name="Sam Seller", phone="+15550100")


@pytest.fixture(name="other_user")
def other_user_fixture(make_user):
    return make_user("buyer@example.com", name="Bea Buyer")


@pytest.fixture(name="admin_user")
def admin_user_fixture(make_user):
    return make_user("admin@example.com", name="Ada Admin", role=UserRole.admin)


@pytest.fixture(name="actor_for")
def actor_for_fixture() -> Callable[[User], Actor]:
    """Build the request actor a token for this user would resolve to."""

    def _actor_for(user: User) -> Actor:
        return Actor(id=user.id, email=user.email, role=user.role)

    return _actor_for


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(token_service: TokenService) -> Callable[[User], dict]:
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue(user)}"}

    return _headers


@pytest.fixture(name="make_car")
def make_car_fixture(session: Session) -> Callable[..., Car]:
    def _make_car(
        owner: User,
        status: CarStatus = CarStatus.approved,
        title: str = "2018 Toyota Corolla",
        brand: str = "Toyota",
        model: str = "Corolla",
        year: int = 2018,
        price: int = 1_250_000,
        created_at: datetime | None = None,
    ) -> Car:
        car = Car(
            user_id=owner.id,
            title=title,
            price=price,
            brand=brand,
            model=model,
            year=year,
            images=["https://res.cloudinary.com/demo/image/upload/car.jpg"],
            status=status,
        )
        if created_at is not None:
            car.created_at = created_at
        session.add(car)
        session.commit()
        session.refresh(car)
        return car

    return _make_car


@pytest.fixture(name="make_inspection")
def make_inspection_fixture(session: Session) -> Callable[..., Inspection]:
    def _make_inspection(
        requester: User,
        car: Car,
        status: InspectionStatus = InspectionStatus.pending,
        date: datetime | None = None,
        created_at: datetime | None = None,
    ) -> Inspection:
        inspection = Inspection(
            user_id=requester.id,
            car_id=car.id,
            date=date or datetime.now(UTC) + timedelta(days=3),
            notes="Morning please",
            status=status,
        )
        if created_at is not None:
            inspection.created_at = created_at
        session.add(inspection)
        session.commit()
        session.refresh(inspection)
        return inspection

    return _make_inspection


@pytest.fixture(name="mock_image_hosting")
def mock_image_hosting_fixture():
    mock_service = MagicMock(spec=ImageHostingService)
    mock_service.upload.return_value = UploadedImage(
        url="https://res.cloudinary.com/demo/image/upload/motortech/cars/abc.jpg",
        public_id="motortech/cars/abc",
        width=1200,
        height=800,
    )
    return mock_service


@pytest.fixture(name="client")
def client_fixture(
    session: Session, settings: Settings, mock_image_hosting: MagicMock
):
    """Create a test client with overridden dependencies."""

    def get_session_override():
        return session

    def get_settings_override():
        return settings

    def get_image_hosting_override():
        return mock_image_hosting

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_settings] = get_settings_override
    app.dependency_overrides[get_image_hosting_service] = get_image_hosting_override

    client = TestClient(app, raise_server_exceptions=False)
    yield client

    app.dependency_overrides.clear()
