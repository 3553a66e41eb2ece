"""Storage gateway for uploaded artifacts.

Every operation resolves the default bucket and then makes a single call
against the store. Failures are wrapped with the operation, phase and key and
raised to the caller. Nothing is retried and no compensating action is taken.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from apptracker.domain.models.signed_url import SignedURL
from apptracker.domain.protocols.storage import (
    BucketProtocol,
    ObjectStoreClientProtocol,
)
from apptracker.storage.exceptions import (
    BucketResolutionError,
    StorageOperationError,
    StoragePhase,
)

logger = logging.getLogger(__name__)

SIGNED_URL_TTL = timedelta(minutes=30)
SIGNED_URL_METHOD = "GET"
SIGNED_URL_VERSION = "v4"


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


class StorageGateway:
    """Uploads, signs and deletes objects in the default bucket.

    Implements StorageGatewayProtocol from apptracker.domain.protocols.storage.
    Holds no state besides the client handle and is safe to share between
    threads as long as the client is.
    """

    def __init__(
        self,
        client: ObjectStoreClientProtocol,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize gateway with an authenticated client.

        Args:
            client: Object store client owned for the process lifetime
            clock: Source of the current time used for URL expiry
        """
        self.client = client
        self.clock = clock

    def _resolve_bucket(self, operation: str, key: str) -> BucketProtocol:
        if not key:
            raise ValueError("object key must not be empty")
        try:
            return self.client.default_bucket()
        except Exception as exc:
            logger.error(
                "Storage: error resolving bucket for %s of '%s': %s", operation, key, exc
            )
            raise BucketResolutionError(operation, key, str(exc)) from exc

    @staticmethod
    def _call_kwargs(timeout: float | None) -> dict[str, Any]:
        # retry=None disables the client library's own retry policy
        kwargs: dict[str, Any] = {"retry": None}
        if timeout is not None:
            kwargs["timeout"] = timeout
        return kwargs

    def upload(self, key: str, data: bytes, timeout: float | None = None) -> str:
        """Write data to the object named key and return a signed URL for it.

        The stream is finalized before signing starts. Zero-length data
        creates an empty object.

        Args:
            key: Object key (path-like strings allowed)
            data: Object contents
            timeout: Seconds to wait for each store call

        Returns:
            A signed GET URL for the new object

        Raises:
            BucketResolutionError: If the bucket cannot be resolved
            StorageOperationError: If writing, finalizing or signing fails
        """
        bucket = self._resolve_bucket("upload", key)
        blob = bucket.blob(key)

        try:
            writer = blob.open("wb", **self._call_kwargs(timeout))
            writer.write(data)
        except Exception as exc:
            logger.error("Storage: error writing '%s' to storage: %s", key, exc)
            raise StorageOperationError(
                "upload", StoragePhase.WRITE, key, str(exc)
            ) from exc

        try:
            writer.close()
        except Exception as exc:
            logger.error("Storage: error closing '%s' in storage: %s", key, exc)
            raise StorageOperationError(
                "upload", StoragePhase.FINALIZE, key, str(exc)
            ) from exc

        logger.debug("Storage: uploaded %d bytes to '%s'", len(data), key)
        return self.get_download_url(key)

    def sign_download_url(self, key: str) -> SignedURL:
        """Sign a GET URL for key that expires 30 minutes from now.

        The object is not checked for existence first.

        Args:
            key: Object key

        Returns:
            The SignedURL

        Raises:
            BucketResolutionError: If the bucket cannot be resolved
            StorageOperationError: If signing fails
        """
        bucket = self._resolve_bucket("sign", key)
        # The URL carries the relative TTL; expires_at reports the instant it lapses
        expires_at = self.clock() + SIGNED_URL_TTL

        try:
            url = bucket.blob(key).generate_signed_url(
                version=SIGNED_URL_VERSION,
                expiration=SIGNED_URL_TTL,
                method=SIGNED_URL_METHOD,
            )
        except Exception as exc:
            logger.error("Storage: error signing URL for '%s': %s", key, exc)
            raise StorageOperationError("sign", StoragePhase.SIGN, key, str(exc)) from exc

        return SignedURL(
            url=url,
            key=key,
            method=SIGNED_URL_METHOD,
            expires_at=expires_at,
        )

    def get_download_url(self, key: str) -> str:
        """Get a freshly signed GET URL for key.

        Raises:
            BucketResolutionError: If the bucket cannot be resolved
            StorageOperationError: If signing fails
        """
        return self.sign_download_url(key).url

    def delete(self, key: str, timeout: float | None = None) -> None:
        """Delete the object named key.

        A missing object is reported by the store and raised as is.

        Args:
            key: Object key
            timeout: Seconds to wait for the store call

        Raises:
            BucketResolutionError: If the bucket cannot be resolved
            StorageOperationError: If the store rejects the delete
        """
        bucket = self._resolve_bucket("delete", key)

        try:
            bucket.blob(key).delete(**self._call_kwargs(timeout))
        except Exception as exc:
            logger.error("Storage: error deleting '%s': %s", key, exc)
            raise StorageOperationError(
                "delete", StoragePhase.DELETE, key, str(exc)
            ) from exc

        logger.debug("Storage: deleted '%s'", key)
