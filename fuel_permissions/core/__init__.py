"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Application settings

The core module has NO dependencies on infrastructure or presentation.
"""

from fuel_permissions.core.enums import ErrorCode
from fuel_permissions.core.errors import (
    AuthorizationError,
    DomainError,
    ValidationError,
)
from fuel_permissions.core.result import Failure, Result, Success

__all__ = [
    "AuthorizationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]
