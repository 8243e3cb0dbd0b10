"""
Application entry point.

Configures logging and builds the FastAPI application; everything else is
delegated to the application factory.
"""

import logging

from storehub.config.settings import get_settings
from storehub.core.app_factory import create_app
from storehub.core.shared.logger import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT, settings.LOG_FILE)

logger = logging.getLogger(__name__)

app = create_app(settings)


def run() -> None:
    """Console entry point."""
    import uvicorn

    logger.info(f"Starting {settings.PROJECT_NAME} in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "storehub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
