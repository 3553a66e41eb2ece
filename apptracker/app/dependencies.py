"""Dependency injection for FastAPI."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from apptracker.database import JobStore, get_session
from apptracker.domain_service import JobService
from apptracker.storage import StorageGateway


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    yield from get_session()


def get_storage_gateway(request: Request) -> StorageGateway:
    """Get the storage gateway created at startup."""
    return request.app.state.storage_gateway


def get_job_store(
    session: Annotated[Session, Depends(get_db)],
) -> JobStore:
    """Get job store with injected session."""
    return JobStore(session)


def get_job_service(
    store: Annotated[JobStore, Depends(get_job_store)],
    storage: Annotated[StorageGateway, Depends(get_storage_gateway)],
) -> JobService:
    """Get job service with injected dependencies."""
    return JobService(store=store, storage=storage)


# Type alias for dependency injection
JobServiceDep = Annotated[JobService, Depends(get_job_service)]
