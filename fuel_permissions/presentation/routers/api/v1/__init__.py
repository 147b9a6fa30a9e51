"""API v1 routers.

Admin Resources:
    /api/v1/admin/system-admins  - System administrator management
"""

from fastapi import APIRouter

from fuel_permissions.core.config import settings
from fuel_permissions.presentation.routers.api.v1.admin import admin_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(admin_router)

__all__ = [
    "v1_router",
]
