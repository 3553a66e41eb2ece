"""Storage Protocols for object store access."""

from datetime import timedelta
from typing import Any, Protocol

from apptracker.domain.models.signed_url import SignedURL


class BlobWriterProtocol(Protocol):
    """Write stream scoped to a single object."""

    def write(self, data: bytes) -> int:
        """Buffer data for the object."""
        ...

    def close(self) -> None:
        """Finalize the object. Buffered errors may surface here."""
        ...


class BlobProtocol(Protocol):
    """Handle to a single object in a bucket."""

    name: str

    def open(self, mode: str = "r", **kwargs: Any) -> Any:
        """Open a read or write stream for the object."""
        ...

    def delete(self, **kwargs: Any) -> None:
        """Delete the object."""
        ...

    def generate_signed_url(
        self,
        expiration: timedelta,
        method: str = "GET",
        version: str | None = None,
        **kwargs: Any,
    ) -> str:
        """Sign a URL granting `method` access for the `expiration` window."""
        ...


class BucketProtocol(Protocol):
    """Handle to a storage bucket."""

    name: str

    def blob(self, blob_name: str) -> BlobProtocol:
        """Get a handle to the object named `blob_name`."""
        ...


class ObjectStoreClientProtocol(Protocol):
    """Authenticated handle to a blob storage account."""

    def default_bucket(self) -> BucketProtocol:
        """Resolve the configured default bucket.

        Returns:
            Handle to the default bucket

        Raises:
            ValueError: If no default bucket is configured
        """
        ...


class StorageGatewayProtocol(Protocol):
    """Protocol for uploading, signing and deleting stored artifacts."""

    def upload(self, key: str, data: bytes, timeout: float | None = None) -> str:
        """Store data under key.

        Args:
            key: Object key (path-like strings allowed)
            data: Object contents, may be empty
            timeout: Seconds to wait for each store call

        Returns:
            A signed GET URL for the stored object
        """
        ...

    def get_download_url(self, key: str) -> str:
        """Get a freshly signed GET URL for key.

        Args:
            key: Object key

        Returns:
            Signed URL string
        """
        ...

    def sign_download_url(self, key: str) -> SignedURL:
        """Get a freshly signed GET URL for key, including its expiry.

        Args:
            key: Object key

        Returns:
            The SignedURL
        """
        ...

    def delete(self, key: str, timeout: float | None = None) -> None:
        """Delete the object stored under key.

        Args:
            key: Object key
            timeout: Seconds to wait for the store call
        """
        ...
