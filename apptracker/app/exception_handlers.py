"""Exception handlers mapping service errors to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from apptracker.database.exceptions import JobNotFoundError
from apptracker.domain_service import InvalidImageError
from apptracker.storage import StorageError

logger = logging.getLogger(__name__)


async def job_not_found_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert JobNotFoundError to a 404 response."""
    assert isinstance(exc, JobNotFoundError)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def invalid_image_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert InvalidImageError to a 400 response."""
    assert isinstance(exc, InvalidImageError)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def storage_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert StorageError to a generic 500 response.

    Store details are only logged.
    """
    assert isinstance(exc, StorageError)
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Operation failed"},
    )
