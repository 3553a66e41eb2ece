"""Pytest fixtures for apptracker tests."""

from datetime import UTC, datetime, timedelta
from urllib.parse import urlencode

import pytest
from google.cloud.exceptions import NotFound
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from apptracker.database import models  # noqa: F401
from apptracker.storage import StorageGateway

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)


class FakeBlobWriter:
    """Write stream that stores the object on close."""

    def __init__(self, blob: "FakeBlob") -> None:
        self.blob = blob
        self.buffer = bytearray()
        self.closed = False

    def write(self, data: bytes) -> int:
        self.buffer.extend(data)
        return len(data)

    def close(self) -> None:
        self.closed = True
        self.blob.bucket.objects[self.blob.name] = bytes(self.buffer)


class FakeBlob:
    """In-memory stand-in for google.cloud.storage.Blob."""

    def __init__(self, bucket: "FakeBucket", name: str) -> None:
        self.bucket = bucket
        self.name = name

    def open(self, mode: str = "r", **kwargs) -> FakeBlobWriter:
        self.bucket.open_kwargs.append(kwargs)
        return FakeBlobWriter(self)

    def delete(self, **kwargs) -> None:
        if self.name not in self.bucket.objects:
            raise NotFound(f"No such object: {self.bucket.name}/{self.name}")
        del self.bucket.objects[self.name]

    def generate_signed_url(
        self, expiration: timedelta, method: str = "GET", version=None, **kwargs
    ) -> str:
        self.bucket.signatures += 1
        query = urlencode(
            {
                "X-Goog-Algorithm": "GOOG4-RSA-SHA256",
                "X-Goog-Expires": int(expiration.total_seconds()),
                "X-Goog-Method": method,
                "X-Goog-Signature": f"{self.bucket.signatures:064x}",
            }
        )
        return f"https://storage.googleapis.com/{self.bucket.name}/{self.name}?{query}"


class FakeBucket:
    """In-memory stand-in for google.cloud.storage.Bucket."""

    def __init__(self, name: str = "test-bucket") -> None:
        self.name = name
        self.objects: dict[str, bytes] = {}
        self.open_kwargs: list[dict] = []
        self.signatures = 0

    def blob(self, blob_name: str) -> FakeBlob:
        return FakeBlob(self, blob_name)


class FakeObjectStoreClient:
    """Object store client resolving a single in-memory bucket."""

    def __init__(self, bucket: FakeBucket | None) -> None:
        self.bucket = bucket

    def default_bucket(self) -> FakeBucket:
        if self.bucket is None:
            raise ValueError("no default bucket name is configured")
        return self.bucket


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def fake_bucket() -> FakeBucket:
    """Empty in-memory bucket."""
    return FakeBucket()


@pytest.fixture
def fake_gateway(fake_bucket: FakeBucket) -> StorageGateway:
    """Storage gateway over the in-memory bucket with a fixed clock."""
    return StorageGateway(FakeObjectStoreClient(fake_bucket), clock=lambda: FIXED_NOW)
