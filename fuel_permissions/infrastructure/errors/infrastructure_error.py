"""Infrastructure layer error types.

Architecture:
- Infrastructure catches exceptions and maps them to DomainError subclasses
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode records the original failure kind
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from fuel_permissions.core.errors import DomainError
from fuel_permissions.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Policy storage failure.

    Wraps SQLAlchemy exceptions raised while loading, inserting or deleting
    policy tuples. Always carries ErrorCode.STORAGE_FAILURE.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Database-specific error code.
        details: Additional context (operation, original error type).
    """

    pass
