"""Tests for JobStore."""

import pytest
from sqlmodel import Session

from apptracker.database.exceptions import JobNotFoundError
from apptracker.database.stores import JobStore


@pytest.fixture
def store(session: Session) -> JobStore:
    return JobStore(session)


def _create(store: JobStore, user_id: str = "user-1", **kwargs):
    fields = {
        "position": "Backend Engineer",
        "company": "Acme",
        "url": "https://jobs.example.com/123",
        "status": "applied",
    }
    fields.update(kwargs)
    return store.create_job(user_id=user_id, **fields)


class TestJobStore:
    """Tests for JobStore operations."""

    def test_create_job(self, store: JobStore):
        job = _create(store, notes="Referral", image_filename="screenshots/user-1/a.png")

        assert job.id is not None
        assert len(job.public_id) == 26
        assert job.user_id == "user-1"
        assert job.notes == "Referral"
        assert job.image_filename == "screenshots/user-1/a.png"
        assert [s.status for s in job.statuses] == ["applied"]
        assert job.current_status == "applied"
        assert job.updated_at is None

    def test_get_job(self, store: JobStore):
        created = _create(store)

        job = store.get_job("user-1", created.public_id)

        assert job.public_id == created.public_id
        assert job.position == "Backend Engineer"

    def test_get_job_of_other_user(self, store: JobStore):
        created = _create(store)

        with pytest.raises(JobNotFoundError):
            store.get_job("user-2", created.public_id)

    def test_get_job_not_found(self, store: JobStore):
        with pytest.raises(JobNotFoundError):
            store.get_job("user-1", "01HZZZZZZZZZZZZZZZZZZZZZZZ")

    def test_list_jobs(self, store: JobStore):
        first = _create(store, company="First")
        second = _create(store, company="Second")
        _create(store, user_id="user-2")

        jobs = store.list_jobs("user-1")

        assert [j.public_id for j in jobs] == [second.public_id, first.public_id]

    def test_list_jobs_empty(self, store: JobStore):
        assert store.list_jobs("nobody") == []

    def test_update_job_fields(self, store: JobStore):
        created = _create(store)

        job = store.update_job(
            "user-1", created.public_id, position="Staff Engineer", notes="Call Friday"
        )

        assert job.position == "Staff Engineer"
        assert job.company == "Acme"
        assert job.notes == "Call Friday"
        assert job.updated_at is not None
        assert len(job.statuses) == 1

    def test_update_job_status_appends_history(self, store: JobStore):
        created = _create(store)

        store.update_job("user-1", created.public_id, status="interviewing")
        job = store.update_job("user-1", created.public_id, status="offer")

        assert [s.status for s in job.statuses] == ["applied", "interviewing", "offer"]
        assert job.current_status == "offer"

    def test_update_job_same_status_not_duplicated(self, store: JobStore):
        created = _create(store)

        job = store.update_job("user-1", created.public_id, status="applied")

        assert [s.status for s in job.statuses] == ["applied"]

    def test_update_job_not_found(self, store: JobStore):
        with pytest.raises(JobNotFoundError):
            store.update_job("user-1", "missing", status="offer")

    def test_delete_job(self, store: JobStore):
        created = _create(store)

        store.delete_job("user-1", created.public_id)

        with pytest.raises(JobNotFoundError):
            store.get_job("user-1", created.public_id)

    def test_delete_job_not_found(self, store: JobStore):
        with pytest.raises(JobNotFoundError):
            store.delete_job("user-1", "missing")
