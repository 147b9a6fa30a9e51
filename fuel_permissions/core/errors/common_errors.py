"""Common error classes used across layers.

Error Types:
- ValidationError: Input validation failures (unknown role or action name)
- AuthorizationError: The subject may not perform the action on the resource

An AuthorizationError never says whether the resource exists. Unknown
resources and missing grants produce the same error.
"""

from dataclasses import dataclass

from fuel_permissions.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required (e.g. "write").
        details: Additional context.
    """

    required_permission: str | None = None
