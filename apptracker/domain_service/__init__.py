"""Domain service layer."""

from apptracker.domain_service.exceptions import InvalidImageError
from apptracker.domain_service.jobs import JobService, JobView, decode_image

__all__ = [
    "InvalidImageError",
    "JobService",
    "JobView",
    "decode_image",
]
