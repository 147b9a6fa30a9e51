"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Authorization errors (PERMISSION_*)
- Storage errors (STORAGE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_ROLE = "invalid_role"
    INVALID_ACTION = "invalid_action"
    VALIDATION_FAILED = "validation_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # Storage errors
    STORAGE_FAILURE = "storage_failure"
