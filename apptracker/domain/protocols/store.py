"""Store Protocol for job persistence."""

from typing import Protocol

from apptracker.domain.models.job import Job


class JobStoreProtocol(Protocol):
    """Protocol for Job data persistence."""

    def create_job(
        self,
        user_id: str,
        position: str,
        company: str,
        url: str,
        status: str,
        notes: str | None = None,
        image_filename: str | None = None,
    ) -> Job:
        """Create a new job with an initial status.

        Args:
            user_id: Owner of the job
            position: Position applied for
            company: Company name
            url: Link to the job posting
            status: Initial status
            notes: Optional free-form notes
            image_filename: Object key of the stored image, if any

        Returns:
            The created Job instance
        """
        ...

    def get_job(self, user_id: str, job_id: str) -> Job:
        """Get a job by its public_id.

        Args:
            user_id: Owner of the job
            job_id: The job's public ULID

        Returns:
            The Job instance
        """
        ...

    def list_jobs(self, user_id: str) -> list[Job]:
        """Get all jobs of a user, newest first.

        Args:
            user_id: Owner of the jobs

        Returns:
            List of Job instances
        """
        ...

    def update_job(
        self,
        user_id: str,
        job_id: str,
        position: str | None = None,
        company: str | None = None,
        url: str | None = None,
        status: str | None = None,
        notes: str | None = None,
    ) -> Job:
        """Update a job. Fields left as None are kept.

        A status different from the current one is appended to the history.

        Returns:
            The updated Job instance
        """
        ...

    def delete_job(self, user_id: str, job_id: str) -> None:
        """Delete a job and its status history.

        Args:
            user_id: Owner of the job
            job_id: The job's public ULID
        """
        ...
