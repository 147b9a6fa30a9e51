"""Infrastructure errors package.

Usage:
    from fuel_permissions.infrastructure.errors import DatabaseError
"""

from fuel_permissions.infrastructure.errors.infrastructure_error import (
    DatabaseError,
    InfrastructureError,
)

__all__ = [
    "InfrastructureError",
    "DatabaseError",
]
