"""Database stores."""

from apptracker.database.stores.job_store import JobStore

__all__ = ["JobStore"]
