"""System administrator request/response schemas.

RESTful Endpoints (system admins only):
    GET    /api/v1/admin/system-admins  - List current system admins
    PUT    /api/v1/admin/system-admins  - Replace system admins and reload policy
"""

from pydantic import BaseModel, ConfigDict, Field


class SystemAdminsRequest(BaseModel):
    """Request schema for replacing the system administrator set.

    PUT /api/v1/admin/system-admins
    Returns: 200 OK

    The whole set is replaced; entries are trimmed and empty entries dropped.
    """

    admins: str = Field(
        ...,
        description="Comma-separated subject ids",
        examples=["user3, user2"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "admins": "root, ops-lead",
            }
        }
    )


class SystemAdminsResponse(BaseModel):
    """Response schema listing the current system administrators."""

    admins: list[str] = Field(
        ...,
        description="Current system administrators (sorted)",
    )
