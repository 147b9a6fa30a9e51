"""Domain enums package.

Usage:
    from fuel_permissions.domain.enums import Action, GroupRole
"""

from fuel_permissions.domain.enums.group_role import GroupRole
from fuel_permissions.domain.enums.permission import Action

__all__ = ["Action", "GroupRole"]
