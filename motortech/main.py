from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqladmin import Admin

from motortech.admin.auth import AdminAuth
from motortech.admin.views import CarAdmin, InspectionAdmin, UserAdmin
from motortech.core.constants import BACKOFFICE_BASE_URL
from motortech.core.cors import add_cors_middleware
from motortech.core.exception_handlers import register_exception_handlers
from motortech.core.logging import configure_logging
from motortech.core.request_logging import add_request_logging_middleware
from motortech.db.engine import engine
from motortech.router import api_router
from motortech.upload.service import init_image_hosting

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_image_hosting()
    yield


app = FastAPI(title="MotorTech", version="0.1.0", lifespan=lifespan)

app.include_router(api_router)

add_request_logging_middleware(app)
add_cors_middleware(app)
register_exception_handlers(app)

# SQLAdmin back office; /admin is taken by the admin API.
admin = Admin(
    app=app,
    engine=engine,
    authentication_backend=AdminAuth(),
    base_url=BACKOFFICE_BASE_URL,
    title="MotorTech Back Office",
)
admin.add_view(UserAdmin)
admin.add_view(CarAdmin)
admin.add_view(InspectionAdmin)
