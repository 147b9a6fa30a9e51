"""Database persistence infrastructure.

This module provides:
- Base model for all database entities
- Database connection and session management
"""

from fuel_permissions.infrastructure.persistence.base import BaseModel
from fuel_permissions.infrastructure.persistence.database import Database

__all__ = [
    "BaseModel",
    "Database",
]
