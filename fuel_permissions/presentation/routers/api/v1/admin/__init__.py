"""Admin API handlers.

All handlers require a system administrator.

Handlers:
    get_system_admins     - List current system administrators
    replace_system_admins - Replace system administrators and reload policy
"""

from fuel_permissions.presentation.routers.api.v1.admin.system_admins import (
    admin_router,
    get_system_admins,
    replace_system_admins,
)

__all__ = [
    "admin_router",
    "get_system_admins",
    "replace_system_admins",
]
