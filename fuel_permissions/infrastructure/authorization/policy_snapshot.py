"""Immutable in-memory policy snapshot.

The permissions engine evaluates every request against a PolicySnapshot.
A snapshot is never modified after construction: mutations build a new
snapshot and the engine publishes it with one reference assignment. Readers
therefore need no lock and always see one consistent state.

Indexes (built on construction, patched by the copy-on-write builders):
    grantees:  (resource, action) -> subjects holding that grant
    groups:    user -> group -> roles held
    members:   group -> users holding any role
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from fuel_permissions.domain.enums import Action, GroupRole
from fuel_permissions.domain.value_objects import (
    GrantPattern,
    GrantTuple,
    MembershipPattern,
    MembershipTuple,
    PolicyPattern,
    PolicySet,
    PolicyTuple,
)

_NO_ROLES: frozenset[GroupRole] = frozenset()
_NO_SUBJECTS: frozenset[str] = frozenset()
_NO_GROUPS: Mapping[str, frozenset[GroupRole]] = MappingProxyType({})


class PolicySnapshot:
    """Read-only view of all grant and membership tuples.

    Attributes:
        grants: All grant tuples.
        memberships: All membership tuples.
    """

    __slots__ = ("grants", "memberships", "_grantees", "_groups", "_members")

    def __init__(
        self,
        grants: Iterable[GrantTuple] = (),
        memberships: Iterable[MembershipTuple] = (),
    ) -> None:
        """Build a snapshot and its lookup indexes.

        Args:
            grants: Grant tuples.
            memberships: Membership tuples.
        """
        self.grants: frozenset[GrantTuple] = frozenset(grants)
        self.memberships: frozenset[MembershipTuple] = frozenset(memberships)

        grantees: defaultdict[tuple[str, Action], set[str]] = defaultdict(set)
        for grant in self.grants:
            grantees[(grant.resource, grant.action)].add(grant.subject)

        groups: defaultdict[str, defaultdict[str, set[GroupRole]]] = defaultdict(
            lambda: defaultdict(set)
        )
        members: defaultdict[str, set[str]] = defaultdict(set)
        for membership in self.memberships:
            groups[membership.user][membership.group].add(membership.role)
            members[membership.group].add(membership.user)

        self._grantees: dict[tuple[str, Action], frozenset[str]] = {
            key: frozenset(subjects) for key, subjects in grantees.items()
        }
        self._groups: dict[str, Mapping[str, frozenset[GroupRole]]] = {
            user: MappingProxyType(
                {group: frozenset(roles) for group, roles in by_group.items()}
            )
            for user, by_group in groups.items()
        }
        self._members: dict[str, frozenset[str]] = {
            group: frozenset(users) for group, users in members.items()
        }

    @classmethod
    def from_policy_set(cls, policy: PolicySet) -> "PolicySnapshot":
        """Build a snapshot from a policy store load."""
        return cls(grants=policy.grants, memberships=policy.memberships)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_grant(self, subject: str, resource: str, action: Action) -> bool:
        """Check for a direct grant."""
        return subject in self._grantees.get((resource, action), _NO_SUBJECTS)

    def grantees(self, resource: str, action: Action) -> frozenset[str]:
        """Subjects (users or groups) directly granted action on resource."""
        return self._grantees.get((resource, action), _NO_SUBJECTS)

    def is_group(self, name: str) -> bool:
        """Check whether name is a known group (has at least one member)."""
        return name in self._members

    def roles_of(self, user: str, group: str) -> frozenset[GroupRole]:
        """Every role user holds in group (empty if not a member)."""
        return self._groups.get(user, _NO_GROUPS).get(group, _NO_ROLES)

    def groups_of(self, user: str) -> Mapping[str, frozenset[GroupRole]]:
        """Groups of user with the roles held in each."""
        return self._groups.get(user, _NO_GROUPS)

    def members_of(self, group: str) -> frozenset[str]:
        """Users holding any role in group."""
        return self._members.get(group, _NO_SUBJECTS)

    def contains(self, item: PolicyTuple) -> bool:
        """Check whether the exact tuple is present."""
        if isinstance(item, GrantTuple):
            return item in self.grants
        return item in self.memberships

    def matches_any(self, *patterns: PolicyPattern) -> bool:
        """Check whether any tuple is selected by any of the patterns."""
        grants, memberships = self._select(patterns)
        return bool(grants or memberships)

    # ------------------------------------------------------------------
    # Copy-on-write builders
    #
    # Builders patch only the index entries touched by the change. Untouched
    # entries are immutable and shared with the previous snapshot.
    # ------------------------------------------------------------------

    @classmethod
    def _assemble(
        cls,
        grants: frozenset[GrantTuple],
        memberships: frozenset[MembershipTuple],
        grantees: dict[tuple[str, Action], frozenset[str]],
        groups: dict[str, Mapping[str, frozenset[GroupRole]]],
        members: dict[str, frozenset[str]],
    ) -> "PolicySnapshot":
        snapshot = cls.__new__(cls)
        snapshot.grants = grants
        snapshot.memberships = memberships
        snapshot._grantees = grantees
        snapshot._groups = groups
        snapshot._members = members
        return snapshot

    def with_tuple(self, item: PolicyTuple) -> "PolicySnapshot":
        """Return a new snapshot that also contains item."""
        if self.contains(item):
            return self

        if isinstance(item, GrantTuple):
            key = (item.resource, item.action)
            grantees = dict(self._grantees)
            grantees[key] = grantees.get(key, _NO_SUBJECTS) | {item.subject}
            return self._assemble(
                self.grants | {item},
                self.memberships,
                grantees,
                self._groups,
                self._members,
            )

        by_group = dict(self._groups.get(item.user, _NO_GROUPS))
        by_group[item.group] = by_group.get(item.group, _NO_ROLES) | {item.role}
        groups = dict(self._groups)
        groups[item.user] = MappingProxyType(by_group)
        members = dict(self._members)
        members[item.group] = members.get(item.group, _NO_SUBJECTS) | {item.user}
        return self._assemble(
            self.grants,
            self.memberships | {item},
            self._grantees,
            groups,
            members,
        )

    def without(self, *patterns: PolicyPattern) -> "PolicySnapshot":
        """Return a new snapshot with every tuple matched by patterns removed."""
        removed_grants, removed_memberships = self._select(patterns)
        if not removed_grants and not removed_memberships:
            return self

        grantees = self._grantees
        if removed_grants:
            grantees = dict(grantees)
            for grant in removed_grants:
                key = (grant.resource, grant.action)
                remaining = grantees[key] - {grant.subject}
                if remaining:
                    grantees[key] = remaining
                else:
                    del grantees[key]

        groups, members = self._groups, self._members
        if removed_memberships:
            groups, members = dict(groups), dict(members)
            touched: dict[str, dict[str, frozenset[GroupRole]]] = {}
            for membership in removed_memberships:
                by_group = touched.setdefault(
                    membership.user, dict(groups[membership.user])
                )
                roles = by_group[membership.group] - {membership.role}
                if roles:
                    by_group[membership.group] = roles
                    continue
                del by_group[membership.group]
                users = members[membership.group] - {membership.user}
                if users:
                    members[membership.group] = users
                else:
                    del members[membership.group]
            for user, by_group in touched.items():
                if by_group:
                    groups[user] = MappingProxyType(by_group)
                else:
                    del groups[user]

        return self._assemble(
            self.grants - removed_grants,
            self.memberships - removed_memberships,
            grantees,
            groups,
            members,
        )

    def _select(
        self, patterns: Iterable[PolicyPattern]
    ) -> tuple[frozenset[GrantTuple], frozenset[MembershipTuple]]:
        grant_patterns = [p for p in patterns if isinstance(p, GrantPattern)]
        membership_patterns = [
            p for p in patterns if isinstance(p, MembershipPattern)
        ]
        grants = frozenset(
            grant
            for grant in self.grants
            if any(pattern.matches(grant) for pattern in grant_patterns)
        )
        memberships = frozenset(
            membership
            for membership in self.memberships
            if any(pattern.matches(membership) for pattern in membership_patterns)
        )
        return grants, memberships
