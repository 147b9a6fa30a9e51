"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, human-readable or JSON)
- Database (SQLAlchemy engine and sessions)
- Policy store (database or in-memory)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fuel_permissions.core.config import settings
from fuel_permissions.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from fuel_permissions.domain.protocols.logger_protocol import LoggerProtocol
    from fuel_permissions.domain.protocols.policy_store_protocol import (
        PolicyStoreProtocol,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from fuel_permissions.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    ).bind(app=settings.app_name, environment=settings.environment.value)


# ============================================================================
# Persistence (Application-Scoped)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_policy_store() -> "PolicyStoreProtocol":
    """Get policy store singleton (app-scoped).

    Returns the adapter selected by POLICY_STORE_BACKEND:
        - 'database': SqlAlchemyPolicyStore (durable)
        - 'memory': InMemoryPolicyStore (local development only)

    Returns:
        Policy store implementing PolicyStoreProtocol.
    """
    if settings.policy_store_backend == "memory":
        from fuel_permissions.infrastructure.authorization.memory_store import (
            InMemoryPolicyStore,
        )

        return InMemoryPolicyStore()

    from fuel_permissions.infrastructure.authorization.sqlalchemy_store import (
        SqlAlchemyPolicyStore,
    )

    return SqlAlchemyPolicyStore(database=get_database())
