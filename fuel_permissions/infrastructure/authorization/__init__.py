"""Authorization infrastructure.

Exports the permissions engine (AuthorizationProtocol adapter) and the
policy store implementations.
"""

from fuel_permissions.infrastructure.authorization.memory_store import (
    InMemoryPolicyStore,
)
from fuel_permissions.infrastructure.authorization.permissions_engine import (
    PermissionsEngine,
)
from fuel_permissions.infrastructure.authorization.sqlalchemy_store import (
    SqlAlchemyPolicyStore,
)

__all__ = [
    "InMemoryPolicyStore",
    "PermissionsEngine",
    "SqlAlchemyPolicyStore",
]
