"""Authorization dependencies.

FastAPI dependencies that ask the permissions engine whether the current
subject may proceed. Identity is resolved upstream: an authentication layer
stores the subject id on request.state.subject before these run.

Dependencies are plain (sync) functions, so FastAPI runs them in its
threadpool and the engine serves many requests concurrently.

Usage:
    # Resource-protected route
    @router.put("/worlds/{resource_id}")
    def update_world(
        resource_id: str,
        _: None = Depends(require_permission(Action.WRITE)),
    ): ...

    # Group role route
    @router.post("/organizations/{group}/members")
    def add_member(
        group: str,
        _: None = Depends(require_group_role(GroupRole.ADMIN)),
    ): ...
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from fuel_permissions.core.container import get_permissions
from fuel_permissions.core.result import Failure
from fuel_permissions.domain.enums import Action, GroupRole
from fuel_permissions.domain.protocols.authorization_protocol import (
    AuthorizationProtocol,
)


def get_current_subject(request: Request) -> str:
    """Get the resolved subject id of the current request.

    Args:
        request: FastAPI request object.

    Returns:
        str: Subject id set by the authentication layer.

    Raises:
        HTTPException 401: If no subject was resolved.
    """
    subject = getattr(request.state, "subject", None)
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return subject


def require_permission(
    action: Action,
    resource_param: str = "resource_id",
) -> Callable[..., None]:
    """Create a dependency that requires action on the path's resource.

    Args:
        action: Required action.
        resource_param: Name of the path parameter holding the resource id.

    Returns:
        Dependency function that validates the subject may act on the resource.

    Raises:
        HTTPException 403: If the engine denies the request.
    """

    def permission_checker(
        request: Request,
        subject: Annotated[str, Depends(get_current_subject)],
        authz: Annotated[AuthorizationProtocol, Depends(get_permissions)],
    ) -> None:
        resource = request.path_params.get(resource_param)
        if resource is None:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Unauthorized",
            )

        result = authz.is_authorized(subject, resource, action)
        if isinstance(result, Failure):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=result.error.message,
            )

    return permission_checker


def require_group_role(
    role: GroupRole,
    group_param: str = "group",
) -> Callable[..., None]:
    """Create a dependency that requires role (or above) in the path's group.

    Args:
        role: Minimum group role.
        group_param: Name of the path parameter holding the group id.

    Returns:
        Dependency function that validates the subject's role in the group.

    Raises:
        HTTPException 403: If the subject does not hold the role.
    """

    def role_checker(
        request: Request,
        subject: Annotated[str, Depends(get_current_subject)],
        authz: Annotated[AuthorizationProtocol, Depends(get_permissions)],
    ) -> None:
        group = request.path_params.get(group_param)
        if group is None:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Unauthorized",
            )

        result = authz.is_authorized_for_role(subject, group, role)
        if isinstance(result, Failure):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{role.value}' required",
            )

    return role_checker


def require_system_admin() -> Callable[..., None]:
    """Create a dependency that only lets system administrators through.

    Raises:
        HTTPException 403: If the subject is not a system administrator.
    """

    def admin_checker(
        subject: Annotated[str, Depends(get_current_subject)],
        authz: Annotated[AuthorizationProtocol, Depends(get_permissions)],
    ) -> None:
        if not authz.is_system_admin(subject):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="System administrator required",
            )

    return admin_checker
