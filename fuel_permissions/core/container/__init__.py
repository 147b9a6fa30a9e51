"""Container module - Centralized dependency injection.

The container is organized into modules by concern:
- infrastructure: Core services (logging, database, policy store)
- authorization: Permissions engine singleton

Usage:
    from fuel_permissions.core.container import get_permissions, get_logger
"""

from fuel_permissions.core.container.authorization import (
    get_permissions,
    init_permissions,
    reset_permissions,
)
from fuel_permissions.core.container.infrastructure import (
    get_database,
    get_logger,
    get_policy_store,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    "get_policy_store",
    # Authorization
    "get_permissions",
    "init_permissions",
    "reset_permissions",
]
