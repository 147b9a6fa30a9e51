"""In-memory policy store.

Implements PolicyStoreProtocol without durability. Used when
POLICY_STORE_BACKEND=memory (local development) and in unit tests.
"""

import threading

from fuel_permissions.core.result import Result, Success
from fuel_permissions.domain.value_objects import (
    GrantPattern,
    GrantTuple,
    MembershipPattern,
    MembershipTuple,
    PolicyPattern,
    PolicySet,
    PolicyTuple,
)
from fuel_permissions.infrastructure.errors import DatabaseError


class InMemoryPolicyStore:
    """Policy store backed by two Python sets.

    Every call holds an internal lock, so each call is atomic on its own.
    """

    def __init__(self, initial: PolicySet | None = None) -> None:
        """Initialize store.

        Args:
            initial: Tuples to start with (e.g. fixtures).
        """
        self._lock = threading.Lock()
        self._grants: set[GrantTuple] = set(initial.grants) if initial else set()
        self._memberships: set[MembershipTuple] = (
            set(initial.memberships) if initial else set()
        )

    def load_all(self) -> Result[PolicySet, DatabaseError]:
        """Return a copy of every stored tuple."""
        with self._lock:
            return Success(
                value=PolicySet(
                    grants=frozenset(self._grants),
                    memberships=frozenset(self._memberships),
                )
            )

    def insert(self, item: PolicyTuple) -> Result[None, DatabaseError]:
        """Store a tuple; duplicates collapse."""
        with self._lock:
            if isinstance(item, GrantTuple):
                self._grants.add(item)
            else:
                self._memberships.add(item)
        return Success(value=None)

    def delete(self, *patterns: PolicyPattern) -> Result[int, DatabaseError]:
        """Delete every tuple matched by any pattern."""
        with self._lock:
            grants = {
                grant
                for grant in self._grants
                for pattern in patterns
                if isinstance(pattern, GrantPattern) and pattern.matches(grant)
            }
            memberships = {
                membership
                for membership in self._memberships
                for pattern in patterns
                if isinstance(pattern, MembershipPattern)
                and pattern.matches(membership)
            }
            self._grants -= grants
            self._memberships -= memberships
        return Success(value=len(grants) + len(memberships))
