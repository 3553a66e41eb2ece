"""Request and response schemas for the jobs API."""

from datetime import datetime

from pydantic import BaseModel, Field

from apptracker.domain_service import JobView


class JobCreateRequest(BaseModel):
    """Job creation request."""

    position: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=2048)
    status: str | None = Field(default=None, max_length=64)
    notes: str | None = None
    image: str | None = Field(
        default=None,
        description="Screenshot or resume as base64 or a data URL",
    )


class JobUpdateRequest(BaseModel):
    """Job update request. Omitted fields are left unchanged."""

    position: str | None = Field(default=None, min_length=1, max_length=255)
    company: str | None = Field(default=None, min_length=1, max_length=255)
    url: str | None = Field(default=None, min_length=1, max_length=2048)
    status: str | None = Field(default=None, min_length=1, max_length=64)
    notes: str | None = None


class StatusResponse(BaseModel):
    """Entry of a job's status history."""

    status: str
    created_at: datetime


class JobResponse(BaseModel):
    """Job response."""

    id: str
    position: str
    company: str
    url: str
    image_filename: str | None = None
    image_url: str | None = None
    image_url_expires_at: datetime | None = None
    created_at: datetime
    updated_at: datetime | None = None
    statuses: list[StatusResponse]
    notes: str | None = None

    @classmethod
    def from_view(cls, view: JobView) -> "JobResponse":
        job = view.job
        return cls(
            id=job.public_id,
            position=job.position,
            company=job.company,
            url=job.url,
            image_filename=job.image_filename,
            image_url=view.image_url,
            image_url_expires_at=view.image_url_expires_at,
            created_at=job.created_at,
            updated_at=job.updated_at,
            statuses=[
                StatusResponse(status=s.status, created_at=s.created_at)
                for s in job.statuses
            ],
            notes=job.notes,
        )


class JobsResponse(BaseModel):
    """List of a user's jobs."""

    jobs: list[JobResponse]
