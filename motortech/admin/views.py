from sqladmin import ModelView

from motortech.car.models import Car
from motortech.inspection.models import Inspection
from motortech.user.models import User


class UserAdmin(ModelView, model=User):
    name = "User"
    name_plural = "Users"
    icon = "fa-solid fa-user"

    column_list = [
        User.email,
        User.name,
        User.phone,
        User.role,
        User.id,
        User.created_at,
    ]
    column_searchable_list = [User.email, User.name]
    column_sortable_list = [User.email, User.name, User.role, User.created_at]

    # Hashes are set through registration only.
    column_details_exclude_list = [User.password_hash]
    form_excluded_columns = [User.password_hash]
    can_create = False


class CarAdmin(ModelView, model=Car):
    name = "Car"
    name_plural = "Cars"
    icon = "fa-solid fa-car"

    column_list = [
        Car.title,
        Car.brand,
        Car.model,
        Car.year,
        Car.price,
        Car.status,
        Car.user_id,
        Car.created_at,
    ]
    column_searchable_list = [Car.title, Car.brand, Car.model]
    column_sortable_list = [Car.price, Car.year, Car.status, Car.created_at]
    # Listing deletes must cascade to inspections (car.service.delete_car).
    can_delete = False


class InspectionAdmin(ModelView, model=Inspection):
    name = "Inspection"
    name_plural = "Inspections"
    icon = "fa-solid fa-calendar-check"

    column_list = [
        Inspection.date,
        Inspection.status,
        Inspection.car_id,
        Inspection.user_id,
        Inspection.notes,
        Inspection.created_at,
    ]
    column_sortable_list = [Inspection.date, Inspection.status, Inspection.created_at]
