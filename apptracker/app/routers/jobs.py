"""Job routes."""

from fastapi import APIRouter, Response, status

from apptracker.app.dependencies import JobServiceDep
from apptracker.app.schemas import (
    JobCreateRequest,
    JobResponse,
    JobsResponse,
    JobUpdateRequest,
)

router = APIRouter(tags=["jobs"])


@router.get("/jobs/{user_id}", response_model=JobsResponse)
def list_jobs(user_id: str, service: JobServiceDep) -> JobsResponse:
    """List all jobs of a user."""
    views = service.list_jobs(user_id)
    return JobsResponse(jobs=[JobResponse.from_view(v) for v in views])


@router.get("/job/{user_id}/{job_id}", response_model=JobResponse)
def get_job(user_id: str, job_id: str, service: JobServiceDep) -> JobResponse:
    """Get a single job."""
    return JobResponse.from_view(service.get_job(user_id, job_id))


@router.post(
    "/job/{user_id}",
    status_code=status.HTTP_201_CREATED,
    response_model=JobResponse,
)
def create_job(
    user_id: str,
    request: JobCreateRequest,
    service: JobServiceDep,
) -> JobResponse:
    """Create a job, storing its image when one is attached."""
    view = service.create_job(
        user_id=user_id,
        position=request.position,
        company=request.company,
        url=request.url,
        status=request.status,
        notes=request.notes,
        image=request.image,
    )
    return JobResponse.from_view(view)


@router.patch("/job/{user_id}/{job_id}", response_model=JobResponse)
def update_job(
    user_id: str,
    job_id: str,
    request: JobUpdateRequest,
    service: JobServiceDep,
) -> JobResponse:
    """Update a job."""
    view = service.update_job(
        user_id,
        job_id,
        position=request.position,
        company=request.company,
        url=request.url,
        status=request.status,
        notes=request.notes,
    )
    return JobResponse.from_view(view)


@router.delete("/job/{user_id}/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(user_id: str, job_id: str, service: JobServiceDep) -> Response:
    """Delete a job and its stored image."""
    service.delete_job(user_id, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
