"""Database layer."""

from apptracker.database.session import get_session
from apptracker.database.stores import JobStore

__all__ = ["get_session", "JobStore"]
