from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from subway.core.config import settings
from subway.core.exceptions import register_exception_handlers
from subway.core.init_db import init_db
from subway.core.logging import configure_logging
from subway.routers.health import router as health_router
from subway.routers.stations import router as stations_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    On startup the database schema is created if missing.
    """
    logger.info("application_starting", environment=settings.environment)
    await init_db()
    yield
    logger.info("application_shutting_down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    This factory function:
    - Configures structured logging.
    - Initializes the FastAPI app with metadata and documentation endpoints.
    - Registers the error handlers and all API routers.

    Returns:
        Configured FastAPI application instance.
    """
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Subway API: station registry",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Register API routers
    app.include_router(health_router)
    app.include_router(stations_router)

    return app


# Application entry point
app = create_app()


def run() -> None:
    """
    Serve the application with uvicorn (`subway-api` console script).

    Equivalent to `uvicorn subway.main:app --host $HOST --port $PORT`.
    """
    uvicorn.run(
        "subway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
