"""Domain protocols."""

from apptracker.domain.protocols.storage import (
    BlobProtocol,
    BlobWriterProtocol,
    BucketProtocol,
    ObjectStoreClientProtocol,
    StorageGatewayProtocol,
)
from apptracker.domain.protocols.store import JobStoreProtocol

__all__ = [
    "BlobProtocol",
    "BlobWriterProtocol",
    "BucketProtocol",
    "JobStoreProtocol",
    "ObjectStoreClientProtocol",
    "StorageGatewayProtocol",
]
