"""Database models (SQLModel)."""

from datetime import UTC, datetime

from sqlmodel import Field, Relationship, SQLModel
from ulid import ULID


def _generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


class JobModel(SQLModel, table=True):
    """Job application tracked for a user."""

    __tablename__ = "jobs"  # pyright: ignore[reportAssignmentType]

    id: int | None = Field(default=None, primary_key=True)
    public_id: str = Field(
        default_factory=_generate_ulid,
        unique=True,
        index=True,
        max_length=26,
    )
    user_id: str = Field(index=True, max_length=128)
    position: str = Field(max_length=255)
    company: str = Field(max_length=255)
    url: str = Field(max_length=2048)
    notes: str | None = Field(default=None)
    # Object key of the uploaded image in the storage bucket
    image_filename: str | None = Field(default=None, max_length=1024)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime | None = Field(default=None)

    statuses: list["JobStatusModel"] = Relationship(
        back_populates="job",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class JobStatusModel(SQLModel, table=True):
    """Entry in a job's status history."""

    __tablename__ = "job_statuses"  # pyright: ignore[reportAssignmentType]

    id: int | None = Field(default=None, primary_key=True)
    job_id: int = Field(foreign_key="jobs.id", index=True)
    status: str = Field(max_length=64)
    created_at: datetime = Field(default_factory=_utc_now)

    job: "JobModel" = Relationship(back_populates="statuses")
