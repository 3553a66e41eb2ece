"""Job store for database operations."""

from datetime import UTC, datetime

from sqlmodel import Session, col, select

from apptracker.database.exceptions import JobNotFoundError
from apptracker.database.models import JobModel, JobStatusModel
from apptracker.domain.models import Job, JobStatus


class JobStore:
    """Store for Job and JobStatus database operations.

    Implements JobStoreProtocol from apptracker.domain.protocols.store.
    """

    def __init__(self, session: Session) -> None:
        """Initialize store with a database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def _to_domain_job(self, model: JobModel) -> Job:
        """Convert database model to domain model."""
        statuses = sorted(model.statuses, key=lambda s: (s.created_at, s.id or 0))
        return Job(
            id=model.id,
            public_id=model.public_id,
            user_id=model.user_id,
            position=model.position,
            company=model.company,
            url=model.url,
            notes=model.notes,
            image_filename=model.image_filename,
            statuses=[
                JobStatus(status=s.status, created_at=s.created_at) for s in statuses
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _get_job_model(self, user_id: str, job_id: str) -> JobModel:
        """Get job model by owner and public_id."""
        statement = select(JobModel).where(
            JobModel.user_id == user_id,
            JobModel.public_id == job_id,
        )
        model = self.session.exec(statement).first()
        if model is None:
            raise JobNotFoundError(f"Job '{job_id}' not found")
        return model

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
        model = JobModel(
            user_id=user_id,
            position=position,
            company=company,
            url=url,
            notes=notes,
            image_filename=image_filename,
        )
        model.statuses.append(JobStatusModel(status=status))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_domain_job(model)

    def get_job(self, user_id: str, job_id: str) -> Job:
        """Get a job by its public_id.

        Raises:
            JobNotFoundError: If the user has no such job
        """
        return self._to_domain_job(self._get_job_model(user_id, job_id))

    def list_jobs(self, user_id: str) -> list[Job]:
        """Get all jobs of a user, newest first."""
        statement = (
            select(JobModel)
            .where(JobModel.user_id == user_id)
            .order_by(col(JobModel.created_at).desc(), col(JobModel.id).desc())
        )
        return [self._to_domain_job(m) for m in self.session.exec(statement).all()]

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

        Raises:
            JobNotFoundError: If the user has no such job
        """
        model = self._get_job_model(user_id, job_id)

        if position is not None:
            model.position = position
        if company is not None:
            model.company = company
        if url is not None:
            model.url = url
        if notes is not None:
            model.notes = notes

        if status is not None:
            current = self._to_domain_job(model).current_status
            if status != current:
                model.statuses.append(JobStatusModel(status=status))

        model.updated_at = datetime.now(UTC)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_domain_job(model)

    def delete_job(self, user_id: str, job_id: str) -> None:
        """Delete a job and its status history.

        Raises:
            JobNotFoundError: If the user has no such job
        """
        model = self._get_job_model(user_id, job_id)
        self.session.delete(model)
        self.session.commit()
