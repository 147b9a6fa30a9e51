"""
Main FastAPI application entry point.

Startup loads the whole policy from the configured store and installs the
initial system administrators. The application refuses to start if the
policy cannot be loaded.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fuel_permissions.core.config import settings
from fuel_permissions.presentation.routers.api.v1 import v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Initialize permissions engine, load policy
    - Shutdown: Drop engine, close database connections

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from fuel_permissions.core.container import (
        get_database,
        init_permissions,
        reset_permissions,
    )

    init_permissions()

    yield

    reset_permissions()
    if settings.policy_store_backend == "database":
        get_database().close()


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Group-aware access control for simulation assets",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}
