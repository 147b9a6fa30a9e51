"""System administrator admin handlers.

Handlers:
    get_system_admins     - GET /api/v1/admin/system-admins
    replace_system_admins - PUT /api/v1/admin/system-admins

Both require the caller to be a system administrator. Replacing the set
also reloads every tuple from the policy store.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from fuel_permissions.core.container import get_permissions
from fuel_permissions.core.result import Failure
from fuel_permissions.domain.protocols.authorization_protocol import (
    AuthorizationProtocol,
)
from fuel_permissions.presentation.routers.api.middleware.authorization_dependencies import (
    require_system_admin,
)
from fuel_permissions.schemas.system_admin_schemas import (
    SystemAdminsRequest,
    SystemAdminsResponse,
)

admin_router = APIRouter(prefix="/admin", tags=["Admin"])


@admin_router.get("/system-admins", response_model=SystemAdminsResponse)
def get_system_admins(
    _admin_check: None = Depends(require_system_admin()),
    authz: AuthorizationProtocol = Depends(get_permissions),
) -> SystemAdminsResponse:
    """List current system administrators.

    GET /api/v1/admin/system-admins → 200 OK
    """
    return SystemAdminsResponse(admins=sorted(authz.system_admins))


@admin_router.put("/system-admins", response_model=SystemAdminsResponse)
def replace_system_admins(
    data: SystemAdminsRequest,
    _admin_check: None = Depends(require_system_admin()),
    authz: AuthorizationProtocol = Depends(get_permissions),
) -> SystemAdminsResponse:
    """Replace system administrators and reload the policy.

    PUT /api/v1/admin/system-admins → 200 OK

    Args:
        data: New comma-separated administrator list.
        _admin_check: System administrator verification.
        authz: Permissions engine (injected).

    Returns:
        SystemAdminsResponse with the newly installed set.

    Raises:
        HTTPException 503: If the policy store could not be read. The
            previous policy and administrators stay in effect.
    """
    result = authz.reload(data.admins)
    if isinstance(result, Failure):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Policy store unavailable",
        )
    return SystemAdminsResponse(admins=sorted(authz.system_admins))
