"""Job application domain model."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from ulid import ULID


def _generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


@dataclass
class JobStatus:
    """A single entry in a job's status history."""

    status: str
    created_at: datetime = field(default_factory=_utc_now)


@dataclass
class Job:
    """Job application tracked for a user."""

    user_id: str
    position: str
    company: str
    url: str
    notes: str | None = None
    image_filename: str | None = None
    statuses: list[JobStatus] = field(default_factory=list)
    id: int | None = None
    public_id: str = field(default_factory=_generate_ulid)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime | None = None

    @property
    def current_status(self) -> str | None:
        """Most recent status, or None when no status was recorded.

        Statuses are kept in chronological order.
        """
        if not self.statuses:
            return None
        return self.statuses[-1].status
