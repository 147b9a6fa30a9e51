"""Roles a user can hold inside a group (organization or team).

Role Hierarchy:
    owner > admin > member

    - owner: Full control of the group profile and membership
    - admin: Same actions as owner on the group itself
    - member: Read-only access to the group profile

Precedence and implied actions live in
fuel_permissions.infrastructure.authorization.role_table.

Usage:
    from fuel_permissions.domain.enums import GroupRole

    engine.add_user_group_role("alice", "org-osrf", GroupRole.OWNER)
"""

from enum import Enum


class GroupRole(str, Enum):
    """Roles inside a group.

    String Enum:
        Inherits from str for easy serialization and storage.
        Values are lowercase to match the persisted policy format and the
        role names reported by get_groups_and_roles_for_user().
    """

    OWNER = "owner"
    """Group creator or promoted owner. Read and write on the group."""

    ADMIN = "admin"
    """Group administrator. Read and write on the group."""

    MEMBER = "member"
    """Plain member. Read on the group."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values ['owner', 'admin', 'member'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
