"""Request/response schemas for the HTTP API."""

from fuel_permissions.schemas.system_admin_schemas import (
    SystemAdminsRequest,
    SystemAdminsResponse,
)

__all__ = [
    "SystemAdminsRequest",
    "SystemAdminsResponse",
]
