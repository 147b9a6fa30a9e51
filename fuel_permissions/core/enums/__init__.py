"""Core enums package.

Usage:
    from fuel_permissions.core.enums import ErrorCode, Environment
"""

from fuel_permissions.core.enums.environment import Environment
from fuel_permissions.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
