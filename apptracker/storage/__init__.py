"""Storage layer - gateway to the Cloud Storage bucket."""

from apptracker.storage.client import ObjectStoreClient, create_object_store_client
from apptracker.storage.exceptions import (
    BucketResolutionError,
    StorageConfigurationError,
    StorageError,
    StorageOperationError,
    StoragePhase,
)
from apptracker.storage.gateway import SIGNED_URL_TTL, StorageGateway

__all__ = [
    "BucketResolutionError",
    "ObjectStoreClient",
    "SIGNED_URL_TTL",
    "StorageConfigurationError",
    "StorageError",
    "StorageGateway",
    "StorageOperationError",
    "StoragePhase",
    "create_object_store_client",
]
