"""
Application lifecycle management using the FastAPI lifespan pattern.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storehub.core.container import DependencyContainer, get_container

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Startup connects the event publisher; shutdown closes it and releases
    the database pool.
    """

    def __init__(self, container: DependencyContainer | None = None) -> None:
        self._container = container
        self._initialized = False

    @property
    def container(self) -> DependencyContainer:
        return self._container or get_container()

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")
        settings = self.container.settings
        logger.info(
            f"{settings.PROJECT_NAME} {settings.VERSION} ({settings.ENVIRONMENT}): "
            f"storage={settings.STORAGE_BACKEND}, events={settings.EVENT_BACKEND}, "
            f"timeout={settings.REQUEST_TIMEOUT_SECONDS}s"
        )

        await self.container.startup()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await self.container.shutdown()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")


# Global lifecycle manager instance
_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()
    await lifecycle.startup()
    try:
        yield
    finally:
        await lifecycle.shutdown()
