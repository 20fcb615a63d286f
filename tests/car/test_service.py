"""Tests for motortech/car/service.py - listing lifecycle rules."""

import uuid
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from motortech.auth.exceptions import AdminRequiredError
from motortech.car.exceptions import CarNotFoundError, InvalidPriceError, InvalidYearError
from motortech.car.models import Car, CarStatus
from motortech.car.schemas import CarCreate, CarFilters, CarUpdate
from motortech.car.service import (
    create_car,
    delete_car,
    get_car,
    list_cars,
    set_car_status,
    update_car,
    validate_price,
    validate_year,
)
from motortech.core.exceptions import (
    FieldNotClearableError,
    NoFieldsToUpdateError,
    PermissionDeniedError,
)
from motortech.core.pagination import Page
from motortech.inspection.models import Inspection


def _car_data(**overrides) -> CarCreate:
    data = {
        "title": "2019 Honda Civic",
        "price": Decimal("15000.50"),
        "brand": "Honda",
        "model": "Civic",
        "year": 2019,
        "description": "One owner",
        "images": ["https://img.example/1.jpg"],
    }
    data.update(overrides)
    return CarCreate(**data)


# --- validation ---


def test_validate_price_rounds_half_up():
    assert validate_price(Decimal("15000.505")) == 1_500_051


@pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1"), Decimal("0.001")])
def test_validate_price_rejects_non_positive(price):
    with pytest.raises(InvalidPriceError):
        validate_price(price)


def test_validate_year_bounds():
    today = datetime(2026, 6, 1, tzinfo=UTC)

    assert validate_year(1900, today) == 1900
    assert validate_year(2027, today) == 2027
    with pytest.raises(InvalidYearError) as exc_info:
        validate_year(2028, today)
    assert exc_info.value.message == "Invalid year: must be between 1900 and 2027"
    with pytest.raises(InvalidYearError):
        validate_year(1899, today)


# --- create ---


def test_create_car_is_pending_and_owned(session: Session, user, actor_for):
    car = create_car(session, actor_for(user), _car_data())

    assert car.status == CarStatus.pending
    assert car.user_id == user.id
    assert car.price == 1_500_050
    assert car.images == ["https://img.example/1.jpg"]


def test_create_car_next_year_allowed(session: Session, user, actor_for):
    next_year = datetime.now(UTC).year + 1

    car = create_car(session, actor_for(user), _car_data(year=next_year))

    assert car.year == next_year


def test_create_car_invalid_year_writes_nothing(session: Session, user, actor_for):
    with pytest.raises(InvalidYearError):
        create_car(session, actor_for(user), _car_data(year=1800))

    assert session.exec(select(Car)).all() == []


# --- list ---


def test_list_non_admin_sees_only_approved(session: Session, user, make_car, actor_for):
    approved = make_car(user, CarStatus.approved)
    make_car(user, CarStatus.pending)

    for actor in (None, actor_for(user)):
        cars, total = list_cars(
            session, actor, CarFilters(status=CarStatus.pending), Page()
        )
        assert [c.id for c in cars] == [approved.id]
        assert total == 1


def test_list_admin_status_filter(session: Session, user, admin_user, make_car, actor_for):
    make_car(user, CarStatus.approved)
    pending = make_car(user, CarStatus.pending)
    admin = actor_for(admin_user)

    cars, total = list_cars(session, admin, CarFilters(status=CarStatus.pending), Page())
    assert [c.id for c in cars] == [pending.id]
    assert total == 1

    _, total_all = list_cars(session, admin, CarFilters(), Page())
    assert total_all == 2


def test_list_filters_and_order(session: Session, user, make_car):
    base = datetime(2026, 1, 1, tzinfo=UTC)
    older = make_car(user, price=1_000_000, created_at=base)
    newer = make_car(user, price=2_000_000, created_at=base + timedelta(hours=1))
    make_car(user, brand="Ford", model="Focus", created_at=base + timedelta(hours=2))

    cars, total = list_cars(session, None, CarFilters(brand="Toyota"), Page())
    assert [c.id for c in cars] == [newer.id, older.id]
    assert total == 2

    cars, _ = list_cars(
        session,
        None,
        CarFilters(min_price=Decimal("10000"), max_price=Decimal("10000")),
        Page(),
    )
    assert [c.id for c in cars] == [older.id]


def test_list_total_ignores_page_window(session: Session, user, make_car):
    for _ in range(3):
        make_car(user)

    cars, total = list_cars(session, None, CarFilters(), Page(limit=1, offset=1))

    assert len(cars) == 1
    assert total == 3


# --- get ---


def test_pending_car_visibility(
    session: Session, user, other_user, admin_user, make_car, actor_for
):
    car = make_car(user, CarStatus.pending)

    assert get_car(session, actor_for(user), car.id).id == car.id
    assert get_car(session, actor_for(admin_user), car.id).id == car.id
    with pytest.raises(CarNotFoundError):
        get_car(session, actor_for(other_user), car.id)
    with pytest.raises(CarNotFoundError):
        get_car(session, None, car.id)


# --- update ---


def test_update_by_non_owner_is_denied(session: Session, user, other_user, make_car, actor_for):
    car = make_car(user)

    with pytest.raises(PermissionDeniedError):
        update_car(session, actor_for(other_user), car.id, CarUpdate(title="Mine now"))


def test_update_by_admin(session: Session, user, admin_user, make_car, actor_for):
    car = make_car(user)

    updated = update_car(
        session, actor_for(admin_user), car.id, CarUpdate(price=Decimal("99.99"))
    )

    assert updated.price == 9999
    assert updated.title == "2018 Toyota Corolla"


def test_update_empty_patch(session: Session, user, make_car, actor_for):
    car = make_car(user)

    with pytest.raises(NoFieldsToUpdateError):
        update_car(session, actor_for(user), car.id, CarUpdate())


def test_update_clears_description_but_not_title(session: Session, user, make_car, actor_for):
    car = make_car(user)
    actor = actor_for(user)

    updated = update_car(session, actor, car.id, CarUpdate(description=None))
    assert updated.description is None

    with pytest.raises(FieldNotClearableError):
        update_car(session, actor, car.id, CarUpdate(title=None))


def test_update_revalidates_year(session: Session, user, make_car, actor_for):
    car = make_car(user)

    with pytest.raises(InvalidYearError):
        update_car(session, actor_for(user), car.id, CarUpdate(year=1850))

    session.refresh(car)
    assert car.year == 2018


@pytest.mark.parametrize("price", [Decimal("0"), Decimal("-5"), Decimal("0.004")])
def test_update_revalidates_price(session: Session, user, make_car, actor_for, price):
    """Test a non-positive price, or one that rounds to 0 cents, is rejected on update."""
    car = make_car(user)

    with pytest.raises(InvalidPriceError):
        update_car(
            session, actor_for(user), car.id, CarUpdate(price=price, title="Changed")
        )

    session.refresh(car)
    assert car.price == 1_250_000
    assert car.title == "2018 Toyota Corolla"


def test_update_price_stored_in_cents(session: Session, user, make_car, actor_for):
    car = make_car(user)

    updated = update_car(
        session, actor_for(user), car.id, CarUpdate(price=Decimal("9999.99"))
    )

    assert updated.price == 999_999


def test_update_replaces_images(session: Session, user, make_car, actor_for):
    car = make_car(user)

    updated = update_car(
        session, actor_for(user), car.id, CarUpdate(images=["a.jpg", "b.jpg"])
    )

    assert updated.images == ["a.jpg", "b.jpg"]


def test_update_missing_car(session: Session, user, actor_for):
    with pytest.raises(CarNotFoundError):
        update_car(session, actor_for(user), uuid.uuid4(), CarUpdate(title="x"))


# --- delete ---


def test_delete_cascades_to_inspections(
    session: Session, user, other_user, make_car, make_inspection, actor_for
):
    car = make_car(user)
    keep = make_car(user, title="Other car")
    make_inspection(other_user, car)
    make_inspection(user, car)
    kept_inspection = make_inspection(other_user, keep)

    removed = delete_car(session, actor_for(user), car.id)

    assert removed == 2
    assert session.get(Car, car.id) is None
    remaining = session.exec(select(Inspection)).all()
    assert [i.id for i in remaining] == [kept_inspection.id]


def test_delete_failure_keeps_listing_and_inspections(
    session: Session, user, other_user, make_car, make_inspection, actor_for, monkeypatch
):
    """Test a failed delete rolls back the inspection removal too."""
    car = make_car(user)
    make_inspection(other_user, car)
    make_inspection(user, car)

    def failing_commit():
        raise OperationalError("DELETE FROM cars", {}, Exception("disk I/O error"))

    monkeypatch.setattr(session, "commit", failing_commit)

    with pytest.raises(OperationalError):
        delete_car(session, actor_for(user), car.id)

    monkeypatch.undo()
    assert session.get(Car, car.id) is not None
    remaining = session.exec(select(Inspection).where(Inspection.car_id == car.id)).all()
    assert len(remaining) == 2


def test_delete_by_non_owner_is_denied(session: Session, user, other_user, make_car, actor_for):
    car = make_car(user)

    with pytest.raises(PermissionDeniedError):
        delete_car(session, actor_for(other_user), car.id)

    assert session.get(Car, car.id) is not None


# --- status ---


def test_set_status_requires_admin(session: Session, user, make_car, actor_for):
    car = make_car(user, CarStatus.pending)

    with pytest.raises(AdminRequiredError):
        set_car_status(session, actor_for(user), car.id, CarStatus.approved)


def test_set_status_approves(session: Session, user, admin_user, make_car, actor_for):
    car = make_car(user, CarStatus.pending)

    updated = set_car_status(session, actor_for(admin_user), car.id, CarStatus.approved)

    assert updated.status == CarStatus.approved
