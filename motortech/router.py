"""Central API router aggregating all domain routers."""

from fastapi import APIRouter

from motortech.admin.router import router as admin_router
from motortech.auth.router import router as auth_router
from motortech.car.router import router as car_router
from motortech.health.router import router as health_router
from motortech.inspection.router import router as inspection_router
from motortech.upload.router import router as upload_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(car_router)
api_router.include_router(inspection_router)
api_router.include_router(admin_router)
api_router.include_router(upload_router)
