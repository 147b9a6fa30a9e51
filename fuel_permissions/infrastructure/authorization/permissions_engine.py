"""Permissions engine: group-aware RBAC decision and policy maintenance.

Implements AuthorizationProtocol on top of:
- a PolicyStoreProtocol for durable tuples (write-through)
- an immutable PolicySnapshot mirroring the store in memory
- the static role table
- the AdminRegistry of system administrators

Decision order (first match wins):
    1. System administrator            -> allowed
    2. Resource is a group the subject belongs to: the subject's highest
       role in it must imply the action (owner/admin: read+write,
       member: read)
    3. Direct grant (subject, resource, action)
    4. Grant (group, resource, action) for any group the subject belongs
       to, whatever the subject's role in that group
    5. Otherwise                       -> denied

Concurrency:
    Readers take the current snapshot reference and never lock.
    Writers hold one lock across "write to store, then publish new snapshot",
    so readers observe the state before or after a mutation, never a mix.
    A failed store write leaves the snapshot untouched.
"""

import threading

from fuel_permissions.core.enums import ErrorCode
from fuel_permissions.core.errors import AuthorizationError, ValidationError
from fuel_permissions.core.result import Failure, Result, Success
from fuel_permissions.domain.enums import Action, GroupRole
from fuel_permissions.domain.protocols.logger_protocol import LoggerProtocol
from fuel_permissions.domain.protocols.policy_store_protocol import (
    PolicyStoreProtocol,
)
from fuel_permissions.domain.value_objects import (
    GrantPattern,
    GrantTuple,
    MembershipPattern,
    MembershipTuple,
    PolicyPattern,
    PolicyTuple,
)
from fuel_permissions.infrastructure.authorization.admin_registry import (
    AdminRegistry,
)
from fuel_permissions.infrastructure.authorization.policy_snapshot import (
    PolicySnapshot,
)
from fuel_permissions.infrastructure.authorization.role_table import (
    compare_roles,
    highest_role,
    parse_role,
    role_permits,
)
from fuel_permissions.infrastructure.errors import DatabaseError

# Names of the rule that allowed a request (logged at debug level)
RULE_SYSTEM_ADMIN = "system_admin"
RULE_GROUP_ROLE = "group_role"
RULE_DIRECT_GRANT = "direct_grant"
RULE_GROUP_GRANT = "group_grant"


class PermissionsEngine:
    """Authorization engine shared by every request handler.

    One instance is built at startup by the container and injected where
    needed. All methods are safe to call from many threads at once.

    Attributes:
        _store: Durable policy store.
        _logger: Structured logger bound to this component.
        _admins: System administrator registry.
        _snapshot: Current immutable policy snapshot.
        _write_lock: Serializes mutations and reloads.
    """

    def __init__(
        self,
        store: PolicyStoreProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize engine with an empty policy.

        Call init() before serving requests.

        Args:
            store: Durable policy store.
            logger: Structured logger.
        """
        self._store = store
        self._logger = logger.bind(component="permissions_engine")
        self._admins = AdminRegistry()
        self._snapshot = PolicySnapshot()
        self._write_lock = threading.Lock()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def init(self, admins_csv: str) -> Result[None, DatabaseError]:
        """Load every persisted tuple and install the initial system admins.

        Args:
            admins_csv: Comma-separated system administrator ids.

        Returns:
            Success(None) or Failure(DatabaseError). A failure here means the
            service must not start.
        """
        return self._load(admins_csv, event="policy_initialized")

    def reload(self, admins_csv: str) -> Result[None, DatabaseError]:
        """Re-read all tuples and replace the system admin set.

        The admin set is replaced wholesale; it is never merged with the
        previous one.

        Args:
            admins_csv: Comma-separated ids; entries are trimmed and empty
                entries dropped.

        Returns:
            Success(None) or Failure(DatabaseError). On failure the previous
            policy and admin set remain in effect.
        """
        return self._load(admins_csv, event="policy_reloaded")

    def _load(self, admins_csv: str, *, event: str) -> Result[None, DatabaseError]:
        with self._write_lock:
            loaded = self._store.load_all()
            if isinstance(loaded, Failure):
                self._logger.error(
                    "policy_load_failed",
                    error_code=loaded.error.code.value,
                    error_message=loaded.error.message,
                )
                return loaded

            snapshot = PolicySnapshot.from_policy_set(loaded.value)
            self._snapshot = snapshot
            admins = self._admins.replace(admins_csv)

        self._logger.info(
            event,
            grants=len(snapshot.grants),
            memberships=len(snapshot.memberships),
            system_admins=len(admins),
        )
        self._logger.info("system_admins_replaced", system_admins=sorted(admins))
        return Success(value=None)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def system_admins(self) -> frozenset[str]:
        """Current system administrator set."""
        return self._admins.members

    def is_system_admin(self, subject: str) -> bool:
        """Check whether subject is a system administrator.

        Args:
            subject: Subject identifier.

        Returns:
            bool: True if subject is in the current admin set.
        """
        return self._admins.contains(subject)

    def is_authorized(
        self,
        subject: str,
        resource: str,
        action: Action,
    ) -> Result[bool, AuthorizationError]:
        """Check if subject may perform action on resource.

        Unknown resources are denied exactly like explicit absence of a
        grant, so callers cannot probe for existence through this method.

        Args:
            subject: Resolved user (or group) identifier.
            resource: Resource identifier (may be a group name).
            action: Requested action.

        Returns:
            Success(True) if allowed, Failure(AuthorizationError) otherwise.
        """
        rule = self._decide(subject, resource, Action(action))

        self._logger.debug(
            "authorization_decision",
            subject=subject,
            resource=resource,
            action=Action(action).value,
            allowed=rule is not None,
            rule=rule,
        )

        if rule is None:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Unauthorized",
                    required_permission=Action(action).value,
                )
            )
        return Success(value=True)

    def _decide(self, subject: str, resource: str, action: Action) -> str | None:
        """Run the decision steps against the current snapshot.

        Returns:
            str | None: Name of the allowing rule, or None if denied.
        """
        if self._admins.contains(subject):
            return RULE_SYSTEM_ADMIN

        snapshot = self._snapshot

        if snapshot.is_group(resource):
            role = highest_role(snapshot.roles_of(subject, resource))
            if role is not None and role_permits(role, action):
                return RULE_GROUP_ROLE

        if snapshot.has_grant(subject, resource, action):
            return RULE_DIRECT_GRANT

        # Membership-gated: any role in the granted group is enough.
        subject_groups = snapshot.groups_of(subject)
        if subject_groups and not snapshot.grantees(resource, action).isdisjoint(
            subject_groups
        ):
            return RULE_GROUP_GRANT

        return None

    def is_authorized_for_role(
        self,
        user: str,
        group: str,
        role: GroupRole,
    ) -> Result[bool, AuthorizationError]:
        """Check that user can act as role (or above) in group.

        A group owner can act as admin, a member cannot. System
        administrators can act as any role in any group.

        Args:
            user: User identifier.
            group: Group identifier.
            role: Minimum role required.

        Returns:
            Success(True) if allowed, Failure(AuthorizationError) otherwise.
        """
        if self._admins.contains(user):
            return Success(value=True)

        current = self.role_of(user, group)
        if current is not None and compare_roles(current, role) >= 0:
            return Success(value=True)

        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message="Unauthorized",
                required_permission=GroupRole(role).value,
            )
        )

    def role_of(self, user: str, group: str) -> GroupRole | None:
        """Get the highest role of user in group.

        Args:
            user: User identifier.
            group: Group identifier.

        Returns:
            GroupRole | None: Highest role held, None if not a member.
        """
        return highest_role(self._snapshot.roles_of(user, group))

    def get_groups_and_roles_for_user(self, user: str) -> dict[str, str]:
        """Get the groups of user with the user's role in each.

        When several roles coexist for one group, the highest one is
        reported (owner > admin > member).

        Args:
            user: User identifier.

        Returns:
            dict[str, str]: group -> role name. Empty for unknown users.
        """
        groups = self._snapshot.groups_of(user)
        return {
            group: role.value
            for group, roles in groups.items()
            if (role := highest_role(roles)) is not None
        }

    def get_groups_for_user(self, user: str) -> list[str]:
        """Get the groups user belongs to (sorted)."""
        return sorted(self._snapshot.groups_of(user))

    def get_users_for_group(self, group: str) -> list[str]:
        """Get the users holding any role in group (sorted)."""
        return sorted(self._snapshot.members_of(group))

    def user_belongs_to_group(self, user: str, group: str) -> bool:
        """Check whether user holds any role in group."""
        return bool(self._snapshot.roles_of(user, group))

    # =========================================================================
    # Grant mutations
    # =========================================================================

    def add_permission(
        self,
        subject: str,
        resource: str,
        action: Action,
    ) -> Result[bool, DatabaseError]:
        """Grant action on resource to a user or group.

        Args:
            subject: User or group identifier.
            resource: Resource identifier.
            action: Action to allow.

        Returns:
            Success(True) if added, Success(False) if it already existed,
            Failure(DatabaseError) if the store rejected the write.
        """
        grant = GrantTuple(subject=subject, resource=resource, action=Action(action))
        return self._insert(grant, event="permission_added")

    def remove_permission(
        self,
        subject: str,
        resource: str,
        action: Action,
    ) -> Result[bool, DatabaseError]:
        """Revoke one direct grant.

        Removing write when only read was granted (or the reverse) changes
        nothing and is not an error.

        Returns:
            Success(True) if removed, Success(False) if absent,
            Failure(DatabaseError) on storage failure.
        """
        pattern = GrantPattern(
            subject=subject, resource=resource, action=Action(action)
        )
        return self._delete(pattern, event="permission_removed")

    def remove_resource(self, resource: str) -> Result[bool, DatabaseError]:
        """Delete every grant on resource, whoever holds it.

        Called when a protected entity is deleted, so a future entity
        reusing the same identifier does not inherit stale grants.
        Memberships are never touched.

        Returns:
            Success(True) if any grant was removed, Success(False) otherwise,
            Failure(DatabaseError) on storage failure.
        """
        return self._delete(GrantPattern(resource=resource), event="resource_removed")

    # =========================================================================
    # Membership mutations
    # =========================================================================

    def add_user_group_role(
        self,
        user: str,
        group: str,
        role: GroupRole,
    ) -> Result[bool, DatabaseError]:
        """Give user a role in group.

        Existing roles of user in group are kept: adding member after owner
        leaves both tuples and the user is still reported as owner.

        Returns:
            Success(True) if added, Success(False) if the exact tuple existed,
            Failure(DatabaseError) on storage failure.
        """
        membership = MembershipTuple(user=user, group=group, role=GroupRole(role))
        return self._insert(membership, event="user_group_role_added")

    def add_user_group_role_string(
        self,
        user: str,
        group: str,
        role: str,
    ) -> Result[bool, ValidationError | DatabaseError]:
        """Same as add_user_group_role() but takes a role name.

        Returns:
            Failure(ValidationError) if role is not 'owner', 'admin' or
            'member'; otherwise the result of add_user_group_role().
        """
        parsed = parse_role(role)
        if isinstance(parsed, Failure):
            return parsed
        return self.add_user_group_role(user, group, parsed.value)

    def remove_user_group_role(
        self,
        user: str,
        group: str,
        role: GroupRole,
    ) -> Result[bool, DatabaseError]:
        """Remove one role of user in group, keeping any other roles."""
        pattern = MembershipPattern(user=user, group=group, role=GroupRole(role))
        return self._delete(pattern, event="user_group_role_removed")

    def remove_user_from_group(
        self,
        user: str,
        group: str,
    ) -> Result[bool, DatabaseError]:
        """Remove every role of user in group.

        Keeping at least one owner in a group is the caller's job.
        """
        pattern = MembershipPattern(user=user, group=group)
        return self._delete(pattern, event="user_removed_from_group")

    def remove_user(self, user: str) -> Result[bool, DatabaseError]:
        """Remove every grant held by user and every membership of user."""
        return self._delete(
            GrantPattern(subject=user),
            MembershipPattern(user=user),
            event="user_removed",
        )

    def remove_group(self, group: str) -> Result[bool, DatabaseError]:
        """Remove every membership in group and every grant held by group.

        Grants whose resource is the group itself are removed separately
        with remove_resource(group).
        """
        return self._delete(
            GrantPattern(subject=group),
            MembershipPattern(group=group),
            event="group_removed",
        )

    # =========================================================================
    # Write-through helpers
    # =========================================================================

    def _insert(self, item: PolicyTuple, *, event: str) -> Result[bool, DatabaseError]:
        with self._write_lock:
            snapshot = self._snapshot
            if snapshot.contains(item):
                return Success(value=False)

            stored = self._store.insert(item)
            if isinstance(stored, Failure):
                self._log_store_failure(event, stored.error, item=repr(item))
                return stored

            self._snapshot = snapshot.with_tuple(item)

        self._logger.info(event, **self._describe(item))
        return Success(value=True)

    def _delete(
        self, *patterns: PolicyPattern, event: str
    ) -> Result[bool, DatabaseError]:
        with self._write_lock:
            snapshot = self._snapshot
            if not snapshot.matches_any(*patterns):
                return Success(value=False)

            deleted = self._store.delete(*patterns)
            if isinstance(deleted, Failure):
                self._log_store_failure(event, deleted.error, patterns=repr(patterns))
                return deleted

            self._snapshot = snapshot.without(*patterns)

        self._logger.info(event, patterns=repr(patterns), deleted=deleted.value)
        return Success(value=True)

    def _log_store_failure(
        self, event: str, error: DatabaseError, **context: str
    ) -> None:
        self._logger.error(
            "policy_store_error",
            operation=event,
            error_code=error.code.value,
            error_message=error.message,
            **context,
        )

    @staticmethod
    def _describe(item: PolicyTuple) -> dict[str, str]:
        if isinstance(item, GrantTuple):
            return {
                "subject": item.subject,
                "resource": item.resource,
                "action": item.action.value,
            }
        return {"user": item.user, "group": item.group, "role": item.role.value}
