"""
Application factory.

Builds the FastAPI app from an explicit Settings instance and a Container
wired from it. Run with:

    uvicorn authgate.main:create_app --factory
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from authgate.application.commands import RegisterUser
from authgate.container import Container, build_container
from authgate.core.config import Settings
from authgate.core.result import Failure
from authgate.domain.enums import UserRole
from authgate.presentation.routers.api.errors import register_exception_handlers
from authgate.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from authgate.presentation.routers.api.v1 import api_router
from authgate.presentation.routers.system import router as system_router


async def seed_bootstrap_admin(container: Container) -> None:
    """Create the configured admin account if it does not exist yet."""
    settings = container.settings
    if not settings.bootstrap_admin_email or not settings.bootstrap_admin_password:
        return
    if await container.users.find_by_email(settings.bootstrap_admin_email):
        return

    result = await container.directory.register(
        RegisterUser(
            name="admin",
            email=settings.bootstrap_admin_email,
            password=settings.bootstrap_admin_password,
            role=UserRole.ADMIN,
        )
    )
    if isinstance(result, Failure):
        container.logger.error(
            "bootstrap_admin_failed", error_code=result.error.code.value
        )
    else:
        container.logger.info("bootstrap_admin_created", user_id=str(result.value.id))


def create_app(
    settings: Settings | None = None,
    container: Container | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        container: Pre-built container (tests inject one backed by fakeredis).

    Returns:
        Configured FastAPI application.
    """
    if container is None:
        container = build_container(settings or Settings())
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: seed bootstrap admin. Shutdown: close the Redis pool."""
        await seed_bootstrap_admin(container)
        container.logger.info(
            "application_started",
            app_name=settings.app_name,
            environment=settings.environment.value,
        )
        yield
        await container.aclose()

    app = FastAPI(
        title=settings.app_name,
        description="Session and credential lifecycle service",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    # Wire trace middleware (request correlation)
    app.add_middleware(TraceMiddleware)

    # Register global exception handlers (RFC 7807 error responses)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(system_router)

    return app
