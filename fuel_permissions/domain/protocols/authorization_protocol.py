"""Authorization protocol (port) for group-aware access control.

This protocol defines the contract every other subsystem uses to ask "may
this subject do this to that resource?" and to maintain the underlying
grants and group memberships.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides the ADAPTER (PermissionsEngine)
- Presentation depends on the protocol only

Usage:
    from fuel_permissions.domain.protocols import AuthorizationProtocol

    authz: AuthorizationProtocol = Depends(get_permissions)

    result = authz.is_authorized("alice", "world-7", Action.WRITE)
    if isinstance(result, Failure):
        raise HTTPException(403, result.error.message)

    # Creating an organization seeds its owner
    authz.add_user_group_role("alice", "org-osrf", GroupRole.OWNER)

    # Granting a team access to a resource
    authz.add_permission("team-sim", "world-7", Action.WRITE)
"""

from typing import TYPE_CHECKING, Protocol

from fuel_permissions.core.errors import AuthorizationError, ValidationError
from fuel_permissions.core.result import Result
from fuel_permissions.domain.enums import Action, GroupRole

if TYPE_CHECKING:
    from fuel_permissions.infrastructure.errors import DatabaseError


class AuthorizationProtocol(Protocol):
    """Protocol for the permissions engine.

    Decision order for is_authorized():
        1. System administrators are always allowed.
        2. If the resource is a group, the subject's highest role in it
           decides (owner/admin: read+write, member: read).
        3. A direct grant (subject, resource, action) allows.
        4. A grant to any group the subject belongs to allows,
           whatever the subject's role in that group.
        5. Otherwise denied.

    Error Handling:
        Queries return Failure(AuthorizationError) on denial. Denial never
        reveals whether the resource exists.
        Mutations return Success(True) when the policy changed,
        Success(False) for a no-op, and Failure(DatabaseError) when the
        store rejected the write (the in-memory policy is then unchanged).
    """

    def init(self, admins_csv: str) -> Result[None, "DatabaseError"]:
        """Load all persisted tuples and install the initial system admins.

        Args:
            admins_csv: Comma-separated system administrator ids.

        Returns:
            Success(None) or Failure(DatabaseError).
        """
        ...

    def reload(self, admins_csv: str) -> Result[None, "DatabaseError"]:
        """Re-read all tuples and atomically replace the system admin set.

        Args:
            admins_csv: Comma-separated ids. Entries are trimmed; empty
                entries are dropped.

        Returns:
            Success(None) or Failure(DatabaseError). On failure the previous
            policy and admin set stay in effect.
        """
        ...

    def is_authorized(
        self,
        subject: str,
        resource: str,
        action: Action,
    ) -> Result[bool, AuthorizationError]:
        """Decide whether subject may perform action on resource.

        Args:
            subject: Resolved user (or group) identifier.
            resource: Resource identifier (may be a group name).
            action: Requested action.

        Returns:
            Success(True) if allowed, Failure(AuthorizationError) otherwise.
        """
        ...

    def is_authorized_for_role(
        self,
        user: str,
        group: str,
        role: GroupRole,
    ) -> Result[bool, AuthorizationError]:
        """Check that user can act as role (or above) inside group.

        Args:
            user: User identifier.
            group: Group identifier.
            role: Minimum role required.

        Returns:
            Success(True) if allowed, Failure(AuthorizationError) otherwise.
        """
        ...

    def is_system_admin(self, subject: str) -> bool:
        """Check whether subject is in the current system admin set."""
        ...

    @property
    def system_admins(self) -> frozenset[str]:
        """Current system admin set."""
        ...

    def add_permission(
        self,
        subject: str,
        resource: str,
        action: Action,
    ) -> Result[bool, "DatabaseError"]:
        """Grant action on resource to a user or group (idempotent)."""
        ...

    def remove_permission(
        self,
        subject: str,
        resource: str,
        action: Action,
    ) -> Result[bool, "DatabaseError"]:
        """Revoke one direct grant; a missing grant is a no-op."""
        ...

    def remove_resource(self, resource: str) -> Result[bool, "DatabaseError"]:
        """Delete every grant on resource, whoever holds it."""
        ...

    def add_user_group_role(
        self,
        user: str,
        group: str,
        role: GroupRole,
    ) -> Result[bool, "DatabaseError"]:
        """Give user a role in group, keeping any roles already held."""
        ...

    def add_user_group_role_string(
        self,
        user: str,
        group: str,
        role: str,
    ) -> Result[bool, "ValidationError | DatabaseError"]:
        """Same as add_user_group_role() with a role name."""
        ...

    def remove_user_group_role(
        self,
        user: str,
        group: str,
        role: GroupRole,
    ) -> Result[bool, "DatabaseError"]:
        """Remove one role of user in group, keeping the others."""
        ...

    def remove_user_from_group(
        self,
        user: str,
        group: str,
    ) -> Result[bool, "DatabaseError"]:
        """Remove every role of user in group."""
        ...

    def remove_user(self, user: str) -> Result[bool, "DatabaseError"]:
        """Remove every grant held by user and every membership of user."""
        ...

    def remove_group(self, group: str) -> Result[bool, "DatabaseError"]:
        """Remove every membership in group and every grant held by group."""
        ...

    def role_of(self, user: str, group: str) -> GroupRole | None:
        """Highest role of user in group, or None if not a member."""
        ...

    def get_groups_and_roles_for_user(self, user: str) -> dict[str, str]:
        """Map each group of user to the user's highest role name in it."""
        ...

    def get_groups_for_user(self, user: str) -> list[str]:
        """Groups the user belongs to."""
        ...

    def get_users_for_group(self, group: str) -> list[str]:
        """Users holding any role in group."""
        ...

    def user_belongs_to_group(self, user: str, group: str) -> bool:
        """Check whether user holds any role in group."""
        ...
