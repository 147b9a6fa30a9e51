"""Policy store protocol (port) for durable tuple storage.

The permissions engine keeps every tuple in memory and writes each mutation
through to a policy store. Any backend works as long as each call is atomic
on its own.

Implementations:
    - SqlAlchemyPolicyStore: Production (policy_tuple table)
    - InMemoryPolicyStore: Development and testing

Error Handling:
    Storage failures are returned as Failure(DatabaseError), never raised.
    The engine passes them to its caller unchanged.
"""

from typing import TYPE_CHECKING, Protocol

from fuel_permissions.core.result import Result
from fuel_permissions.domain.value_objects import (
    PolicyPattern,
    PolicySet,
    PolicyTuple,
)

if TYPE_CHECKING:
    from fuel_permissions.infrastructure.errors import DatabaseError


class PolicyStoreProtocol(Protocol):
    """Durable storage for grant and membership tuples."""

    def load_all(self) -> Result[PolicySet, "DatabaseError"]:
        """Load every persisted tuple.

        Returns:
            Success(PolicySet) or Failure(DatabaseError).
        """
        ...

    def insert(self, item: PolicyTuple) -> Result[None, "DatabaseError"]:
        """Persist a single tuple.

        Inserting a tuple that already exists must not create a duplicate.

        Args:
            item: Grant or membership tuple.

        Returns:
            Success(None) or Failure(DatabaseError).
        """
        ...

    def delete(self, *patterns: PolicyPattern) -> Result[int, "DatabaseError"]:
        """Delete every tuple matched by any of the patterns.

        All patterns are applied in one transaction: either every matching
        tuple is deleted or none is.

        Args:
            *patterns: Grant and/or membership patterns.

        Returns:
            Success(number of deleted tuples) or Failure(DatabaseError).
        """
        ...
