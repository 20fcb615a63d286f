"""
App-wide constants for route configuration.

This module provides a single source of truth for route prefixes, tags,
pagination bounds and common response definitions for API routes.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints."""

    AUTH = RouteConfig(prefix="/auth", tag="auth")
    CARS = RouteConfig(prefix="/cars", tag="cars")
    INSPECTIONS = RouteConfig(prefix="/inspections", tag="inspections")
    ADMIN = RouteConfig(prefix="/admin", tag="admin")
    UPLOAD = RouteConfig(prefix="/upload", tag="upload")
    HEALTH = RouteConfig(prefix="/health", tag="health")


# Back-office (SQLAdmin) mount point. Kept apart from the /admin API prefix.
BACKOFFICE_BASE_URL = "/backoffice"

# Pagination
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100

# Listing year bounds (upper bound is current year + this offset)
MIN_CAR_YEAR = 1900
MAX_CAR_YEAR_AHEAD = 1

MAX_IMAGES_PER_REQUEST = 10


# Common response definitions for reuse across routers
# Use these when configuring APIRouter or individual endpoints
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    UNAUTHORIZED: dict[int, dict[str, Any]] = {
        401: {"description": "Not authenticated or invalid token"}
    }
    FORBIDDEN: dict[int, dict[str, Any]] = {
        403: {"description": "Not the owner or lacks admin privileges"}
    }
    NOT_FOUND: dict[int, dict[str, Any]] = {404: {"description": "Resource not found"}}
    CONFLICT: dict[int, dict[str, Any]] = {
        409: {"description": "Resource already exists"}
    }
    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {"description": "Invalid request data"}
    }
    INTERNAL_ERROR: dict[int, dict[str, Any]] = {
        500: {"description": "Misconfiguration or upstream service failure"}
    }
