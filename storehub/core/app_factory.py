"""
Application factory for FastAPI.

Builds the application: middleware, exception handlers, routes and the
health endpoint.
"""

import logging
from typing import Any

from fastapi import FastAPI

from storehub.api.exception_handlers import register_exception_handlers
from storehub.api.middleware.logging_middleware import RequestLoggingMiddleware
from storehub.api.router import api_router
from storehub.config.settings import Settings, get_settings
from storehub.core.container import get_container
from storehub.core.lifecycle import lifespan
from storehub.database.async_db import check_database_health

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def create_app(self) -> FastAPI:
        """
        Create and configure the FastAPI application.

        Returns:
            Configured FastAPI application instance.
        """
        app = self._create_base_app()

        self._configure_middleware(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_V1_STR}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_V1_STR}/redoc" if self._settings.DEBUG else None,
            lifespan=lifespan,
        )

    def _configure_middleware(self, app: FastAPI) -> None:
        app.add_middleware(RequestLoggingMiddleware)
        logger.info("Middleware configured")

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        app.include_router(api_router, prefix=self._settings.API_V1_STR)
        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        """Add health check endpoint."""

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, Any]:
            """
            Report service status, backends and per-topic event counts.
            """
            container = get_container()
            result: dict[str, Any] = {
                "status": "ok",
                "environment": self._settings.ENVIRONMENT,
                "version": self._settings.VERSION,
                "storage": self._settings.STORAGE_BACKEND,
                "events": self._settings.EVENT_BACKEND,
                "events_published": {
                    topic: container.event_counter.get(topic) for topic in container.topics.all()
                },
            }

            if container.uses_database:
                try:
                    await check_database_health()
                    result["database"] = "ok"
                except Exception as e:
                    logger.warning(f"Database health check failed: {e}")
                    result["database"] = "unavailable"
                    result["status"] = "degraded"

            return result


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create FastAPI application using the factory.

    Args:
        settings: Optional settings override

    Returns:
        Configured FastAPI application
    """
    return AppFactory(settings).create_app()
