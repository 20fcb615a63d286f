"""Tests for motortech/main.py - Application lifespan and wiring."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from motortech.main import app, lifespan


@pytest.mark.asyncio
async def test_lifespan_initializes_image_hosting():
    mock_app = FastAPI()

    with patch("motortech.main.init_image_hosting") as mock_init:
        async with lifespan(mock_app):
            mock_init.assert_called_once()


def test_api_routes_registered():
    paths = {route.path for route in app.routes}

    for path in (
        "/health",
        "/auth/register",
        "/auth/login",
        "/auth/me",
        "/cars",
        "/cars/{car_id}",
        "/cars/{car_id}/status",
        "/inspections",
        "/inspections/{inspection_id}",
        "/inspections/{inspection_id}/status",
        "/admin/stats",
        "/admin/users",
        "/admin/users/{user_id}/role",
        "/admin/cars",
        "/admin/cars/{car_id}",
        "/admin/cars/{car_id}/status",
        "/admin/inspections",
        "/admin/inspections/{inspection_id}",
        "/admin/inspections/{inspection_id}/status",
        "/upload/image",
        "/upload/images",
        "/upload/image/{public_id:path}",
        "/upload/transform",
    ):
        assert path in paths, path


def test_backoffice_mounted_apart_from_admin_api():
    paths = {route.path for route in app.routes}

    assert "/backoffice" in paths
