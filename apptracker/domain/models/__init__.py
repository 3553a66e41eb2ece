"""Domain models."""

from apptracker.domain.models.job import Job, JobStatus
from apptracker.domain.models.signed_url import SignedURL

__all__ = ["Job", "JobStatus", "SignedURL"]
