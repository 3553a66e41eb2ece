"""Job service for tracking job applications.

Images attached to a job are kept in the storage bucket; the job record only
holds the object key. Image URLs handed to callers are signed on every read
and expire after a fixed time, so they are never stored.
"""

import base64
import binascii
import logging
from dataclasses import dataclass
from datetime import datetime

from ulid import ULID

from apptracker.domain.models import Job
from apptracker.domain.protocols import JobStoreProtocol, StorageGatewayProtocol
from apptracker.domain_service.exceptions import InvalidImageError
from apptracker.domain_service.settings import settings

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
    "application/pdf": "pdf",
}
DEFAULT_IMAGE_EXTENSION = "png"


@dataclass
class JobView:
    """Job together with a freshly signed URL for its image."""

    job: Job
    image_url: str | None = None
    image_url_expires_at: datetime | None = None


@dataclass
class DecodedImage:
    """Image bytes decoded from a base64 payload."""

    data: bytes
    extension: str


def decode_image(image: str, max_size: int = settings.max_image_size) -> DecodedImage:
    """Decode a base64 string or data URL.

    Args:
        image: Base64 data, optionally in "data:<mime>;base64,<data>" form
        max_size: Maximum decoded size in bytes

    Returns:
        The decoded image

    Raises:
        InvalidImageError: If the data is malformed, not valid base64 or too large
    """
    extension = DEFAULT_IMAGE_EXTENSION
    if image.startswith("data:"):
        header, separator, image = image.partition(",")
        if not separator:
            raise InvalidImageError("Image data URL has no ',' before the payload")
        mime_type = header[len("data:") :].split(";", 1)[0]
        extension = IMAGE_EXTENSIONS.get(mime_type, DEFAULT_IMAGE_EXTENSION)

    try:
        data = base64.b64decode(image, validate=True)
    except binascii.Error as e:
        raise InvalidImageError(f"Image is not valid base64: {e}") from e

    if len(data) > max_size:
        raise InvalidImageError(
            f"Image size {len(data)} bytes exceeds maximum {max_size} bytes"
        )

    return DecodedImage(data=data, extension=extension)


class JobService:
    """Service for creating, reading, updating and deleting jobs."""

    def __init__(
        self,
        store: JobStoreProtocol,
        storage: StorageGatewayProtocol,
    ) -> None:
        self.store = store
        self.storage = storage

    def _image_key(self, user_id: str, extension: str) -> str:
        return f"{settings.image_key_prefix}/{user_id}/{ULID()}.{extension}"

    def _to_view(self, job: Job) -> JobView:
        if not job.image_filename:
            return JobView(job=job)
        signed = self.storage.sign_download_url(job.image_filename)
        return JobView(
            job=job,
            image_url=signed.url,
            image_url_expires_at=signed.expires_at,
        )

    def create_job(
        self,
        user_id: str,
        position: str,
        company: str,
        url: str,
        status: str | None = None,
        notes: str | None = None,
        image: str | None = None,
    ) -> JobView:
        """Create a job, uploading its image first when one is given.

        The upload is not undone if saving the job fails afterwards, so the
        object is left in the bucket without a job referencing it.
        """
        logger.info("Creating job for user: %s", user_id)

        image_filename = None
        image_url = None
        if image:
            decoded = decode_image(image)
            image_filename = self._image_key(user_id, decoded.extension)
            image_url = self.storage.upload(image_filename, decoded.data)

        job = self.store.create_job(
            user_id=user_id,
            position=position,
            company=company,
            url=url,
            status=status or settings.default_status,
            notes=notes,
            image_filename=image_filename,
        )
        return JobView(job=job, image_url=image_url)

    def get_job(self, user_id: str, job_id: str) -> JobView:
        """Get a job with a freshly signed image URL."""
        return self._to_view(self.store.get_job(user_id, job_id))

    def list_jobs(self, user_id: str) -> list[JobView]:
        """Get all jobs of a user with freshly signed image URLs."""
        return [self._to_view(job) for job in self.store.list_jobs(user_id)]

    def update_job(
        self,
        user_id: str,
        job_id: str,
        position: str | None = None,
        company: str | None = None,
        url: str | None = None,
        status: str | None = None,
        notes: str | None = None,
    ) -> JobView:
        """Update a job's fields and status."""
        job = self.store.update_job(
            user_id,
            job_id,
            position=position,
            company=company,
            url=url,
            status=status,
            notes=notes,
        )
        return self._to_view(job)

    def delete_job(self, user_id: str, job_id: str) -> None:
        """Delete a job and its stored image.

        The image is deleted first; if that fails the job is kept.
        """
        job = self.store.get_job(user_id, job_id)
        if job.image_filename:
            self.storage.delete(job.image_filename)
        self.store.delete_job(user_id, job_id)
        logger.info("Deleted job %s for user: %s", job_id, user_id)
