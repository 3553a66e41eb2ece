"""Database exceptions."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class JobNotFoundError(DatabaseError):
    """Raised when a job is not found."""

    pass
