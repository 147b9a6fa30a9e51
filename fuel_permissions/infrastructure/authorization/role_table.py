"""Static role table: implied actions and precedence of group roles.

Precedence (highest first): owner > admin > member.
Owner and admin imply the same actions on their group; member is read-only.

When a user holds several roles in one group, the highest one is reported
and used for decisions. Adding a lower role later never demotes the user.
"""

from collections.abc import Iterable
from typing import Final

from fuel_permissions.core.enums import ErrorCode
from fuel_permissions.core.errors import ValidationError
from fuel_permissions.core.result import Failure, Result, Success
from fuel_permissions.domain.enums import Action, GroupRole

ROLE_PRECEDENCE: Final[dict[GroupRole, int]] = {
    GroupRole.OWNER: 3,
    GroupRole.ADMIN: 2,
    GroupRole.MEMBER: 1,
}

ROLE_ACTIONS: Final[dict[GroupRole, frozenset[Action]]] = {
    GroupRole.OWNER: frozenset({Action.READ, Action.WRITE}),
    GroupRole.ADMIN: frozenset({Action.READ, Action.WRITE}),
    GroupRole.MEMBER: frozenset({Action.READ}),
}


def highest_role(roles: Iterable[GroupRole]) -> GroupRole | None:
    """Collapse coexisting roles into the one with the highest precedence.

    Args:
        roles: Roles held by one user in one group (possibly empty).

    Returns:
        GroupRole | None: Highest role, or None when roles is empty.
    """
    return max(roles, key=ROLE_PRECEDENCE.__getitem__, default=None)


def role_permits(role: GroupRole, action: Action) -> bool:
    """Check whether a role implies an action on its own group."""
    return action in ROLE_ACTIONS[role]


def compare_roles(role1: GroupRole, role2: GroupRole) -> int:
    """Compare two roles by precedence.

    Args:
        role1: First role.
        role2: Second role.

    Returns:
        int: Positive if role1 outranks role2, zero if equal, negative otherwise.
    """
    return ROLE_PRECEDENCE[role1] - ROLE_PRECEDENCE[role2]


def parse_role(name: str) -> Result[GroupRole, ValidationError]:
    """Parse a role name ('owner', 'admin', 'member').

    Args:
        name: Role name as sent by clients.

    Returns:
        Success(GroupRole) or Failure(ValidationError) for unknown names.
    """
    if not GroupRole.is_valid(name):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_ROLE,
                message=f"Unknown role: {name}",
                field="role",
                details={"allowed": ", ".join(GroupRole.values())},
            )
        )
    return Success(value=GroupRole(name))
