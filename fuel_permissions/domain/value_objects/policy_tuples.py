"""Policy tuples: the two facts the permissions engine reasons about.

GrantTuple:
    (subject, resource, action) - subject may perform action on resource.
    The subject can be a user or a group; the resource can be any
    application id or a group's own name. The tuple itself carries no
    notion of "group resource"; that is decided at query time.

MembershipTuple:
    (user, group, role) - user holds role in group. Several roles for the
    same (user, group) pair can coexist.

Patterns select tuples for deletion. A field left as None matches anything.

Usage:
    from fuel_permissions.domain.value_objects import GrantPattern, GrantTuple

    grant = GrantTuple(subject="team-a", resource="world-7", action=Action.READ)
    GrantPattern(resource="world-7").matches(grant)  # True
"""

from dataclasses import dataclass, field

from fuel_permissions.domain.enums import Action, GroupRole


@dataclass(frozen=True, slots=True, kw_only=True)
class GrantTuple:
    """Direct permission of a subject on a resource.

    Attributes:
        subject: User or group identifier receiving the permission.
        resource: Protected resource identifier.
        action: Action allowed on the resource.
    """

    subject: str
    resource: str
    action: Action


@dataclass(frozen=True, slots=True, kw_only=True)
class MembershipTuple:
    """Role of a user inside a group.

    Attributes:
        user: User identifier.
        group: Group identifier (organization or team name).
        role: Role held by the user in the group.
    """

    user: str
    group: str
    role: GroupRole


@dataclass(frozen=True, slots=True, kw_only=True)
class GrantPattern:
    """Selector over grant tuples (None = wildcard).

    Raises:
        ValueError: If every field is None. Wiping all grants is never
            a valid request.
    """

    subject: str | None = None
    resource: str | None = None
    action: Action | None = None

    def __post_init__(self) -> None:
        """Reject patterns that would match every grant."""
        if self.subject is None and self.resource is None and self.action is None:
            raise ValueError("GrantPattern needs at least one field")

    def matches(self, grant: GrantTuple) -> bool:
        """Check whether a grant is selected by this pattern.

        Args:
            grant: Grant to test.

        Returns:
            bool: True if every non-None field equals the grant's field.
        """
        return (
            (self.subject is None or self.subject == grant.subject)
            and (self.resource is None or self.resource == grant.resource)
            and (self.action is None or self.action == grant.action)
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class MembershipPattern:
    """Selector over membership tuples (None = wildcard).

    Raises:
        ValueError: If every field is None.
    """

    user: str | None = None
    group: str | None = None
    role: GroupRole | None = None

    def __post_init__(self) -> None:
        """Reject patterns that would match every membership."""
        if self.user is None and self.group is None and self.role is None:
            raise ValueError("MembershipPattern needs at least one field")

    def matches(self, membership: MembershipTuple) -> bool:
        """Check whether a membership is selected by this pattern.

        Args:
            membership: Membership to test.

        Returns:
            bool: True if every non-None field equals the membership's field.
        """
        return (
            (self.user is None or self.user == membership.user)
            and (self.group is None or self.group == membership.group)
            and (self.role is None or self.role == membership.role)
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicySet:
    """Every persisted tuple, as returned by a policy store load.

    Attributes:
        grants: All grant tuples.
        memberships: All membership tuples.
    """

    grants: frozenset[GrantTuple] = field(default_factory=frozenset)
    memberships: frozenset[MembershipTuple] = field(default_factory=frozenset)


type PolicyTuple = GrantTuple | MembershipTuple
type PolicyPattern = GrantPattern | MembershipPattern
