"""Database session management."""

from collections.abc import Generator

from sqlmodel import Session, create_engine

from apptracker.database.settings import settings

_connect_args = {"check_same_thread": False} if settings.db_type == "sqlite" else {}

engine = create_engine(
    settings.database_url,
    echo=settings.echo,
    connect_args=_connect_args,
)


def get_session() -> Generator[Session, None, None]:
    """Get a database session.

    Yields:
        SQLModel Session instance.
    """
    with Session(engine) as session:
        yield session
