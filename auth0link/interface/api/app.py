"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from auth0link.interface.api.errors import register_error_handlers
from auth0link.interface.api.routes import auth, health, users
from auth0link.util.di.container import create_container, setup_di
from auth0link.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does it in production.

    Args:
        container: DI container; the production container is built if omitted
    """
    instrument_httpx()

    app_instance = FastAPI(
        title="Auth0 Link API",
        description="Keeps local users linked to their Auth0 accounts",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)

    return app_instance
