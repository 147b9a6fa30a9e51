"""Authorization dependency factories.

The permissions engine is an app-scoped singleton. It is initialized once
during FastAPI lifespan startup (policy loaded from the store, system
admins read from settings) and injected into request handlers afterwards.
"""

from typing import TYPE_CHECKING

from fuel_permissions.core.config import settings
from fuel_permissions.core.container.infrastructure import (
    get_logger,
    get_policy_store,
)
from fuel_permissions.core.result import Failure

if TYPE_CHECKING:
    from fuel_permissions.domain.protocols.authorization_protocol import (
        AuthorizationProtocol,
    )


# Module-level state for engine singleton
_permissions: "AuthorizationProtocol | None" = None


# ============================================================================
# Authorization (group-aware RBAC)
# ============================================================================


def init_permissions() -> "AuthorizationProtocol":
    """Initialize the permissions engine at application startup.

    Creates the engine with:
    - Policy store selected by POLICY_STORE_BACKEND
    - Initial system administrators from SYSTEM_ADMINS

    MUST be called during FastAPI lifespan startup.

    Returns:
        Initialized engine.

    Raises:
        RuntimeError: If the engine is already initialized or the policy
            could not be loaded.
    """
    global _permissions

    if _permissions is not None:
        raise RuntimeError("Permissions engine already initialized")

    from fuel_permissions.infrastructure.authorization.permissions_engine import (
        PermissionsEngine,
    )

    logger = get_logger()
    engine = PermissionsEngine(store=get_policy_store(), logger=logger)

    result = engine.init(settings.system_admins)
    if isinstance(result, Failure):
        logger.critical(
            "permissions_init_failed",
            error_code=result.error.code.value,
            error_message=result.error.message,
        )
        raise RuntimeError(f"Failed to load policy: {result.error.message}")

    _permissions = engine
    return engine


def get_permissions() -> "AuthorizationProtocol":
    """Get the permissions engine singleton.

    MUST be called after init_permissions() during startup.

    Returns:
        The initialized engine.

    Raises:
        RuntimeError: If called before init_permissions().

    Usage:
        from fastapi import Depends

        @router.get("/worlds/{resource_id}")
        def get_world(
            resource_id: str,
            authz: AuthorizationProtocol = Depends(get_permissions),
        ): ...
    """
    if _permissions is None:
        raise RuntimeError(
            "Permissions engine not initialized. "
            "Call init_permissions() during startup."
        )
    return _permissions


def reset_permissions() -> None:
    """Drop the engine singleton (application shutdown and tests)."""
    global _permissions
    _permissions = None
