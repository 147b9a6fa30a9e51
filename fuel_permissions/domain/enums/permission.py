"""Actions that can be authorized on a resource.

Resources are opaque strings (a model id, a world id, an organization name),
so only the action side of a permission is enumerated.

Usage:
    from fuel_permissions.domain.enums import Action

    result = engine.is_authorized(subject, "org-osrf", Action.WRITE)
"""

from enum import Enum


class Action(str, Enum):
    """Actions that can be performed on resources.

    String Enum:
        Inherits from str for easy serialization and storage.
        Values are lowercase to match the persisted policy format.

    Action Semantics:
        READ: View, list, download operations
        WRITE: Create, update, delete operations
    """

    READ = "read"
    """View/list access to resource."""

    WRITE = "write"
    """Create/update/delete access to resource."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid action.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid action.
        """
        return value in cls.values()
