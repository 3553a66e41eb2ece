"""FastAPI application for the job tracker server."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Response, status
from sqlmodel import SQLModel

from apptracker.database import models  # noqa: F401
from apptracker.database.exceptions import JobNotFoundError
from apptracker.database.session import engine
from apptracker.domain_service import InvalidImageError
from apptracker.storage import StorageError, StorageGateway, create_object_store_client
from apptracker.storage.settings import settings as storage_settings

from .exception_handlers import (
    invalid_image_exception_handler,
    job_not_found_exception_handler,
    storage_exception_handler,
)
from .settings import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:     %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Creates database tables and the storage gateway on startup. A storage
    client that cannot be created aborts startup.
    """
    SQLModel.metadata.create_all(engine)

    client = create_object_store_client(storage_settings)
    app.state.storage_gateway = StorageGateway(client)
    logger.info("Storage gateway ready for bucket: %s", storage_settings.bucket_name)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Application Tracker Server",
        description="Job application tracker",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(JobNotFoundError, job_not_found_exception_handler)
    app.add_exception_handler(InvalidImageError, invalid_image_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)

    # Health check endpoint
    @app.get("/healthz")
    async def health_check() -> Response:
        """Check server health status."""
        return Response(status_code=status.HTTP_200_OK)

    from .routers.jobs import router as jobs_router

    app.include_router(jobs_router)

    return app


def run_server() -> None:
    """Run the server using uvicorn."""
    app = create_app()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


# Application instance for ASGI servers
app = create_app()
