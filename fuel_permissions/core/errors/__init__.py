"""Core errors package.

Usage:
    from fuel_permissions.core.errors import DomainError, AuthorizationError
"""

from fuel_permissions.core.errors.common_errors import (
    AuthorizationError,
    ValidationError,
)
from fuel_permissions.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "AuthorizationError",
]
