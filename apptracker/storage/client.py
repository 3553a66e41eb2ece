"""Cloud Storage client construction."""

import base64
import json
import logging
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.cloud import storage  # type: ignore[import-untyped]
from google.oauth2 import service_account

from apptracker.storage.exceptions import StorageConfigurationError
from apptracker.storage.settings import StorageSettings

logger = logging.getLogger(__name__)


class ObjectStoreClient:
    """Google Cloud Storage account handle bound to a default bucket.

    Implements ObjectStoreClientProtocol from apptracker.domain.protocols.storage.
    """

    client: Any

    def __init__(self, client: Any, default_bucket_name: str | None = None) -> None:
        self.client = client
        self.default_bucket_name = default_bucket_name

    def default_bucket(self) -> Any:
        """Resolve the default bucket.

        Returns:
            google.cloud.storage.Bucket handle

        Raises:
            ValueError: If no default bucket name is configured
        """
        if not self.default_bucket_name:
            raise ValueError("no default bucket name is configured")
        return self.client.bucket(self.default_bucket_name)


def _load_credentials(credentials_base64: str) -> service_account.Credentials:
    """Decode base64 service account JSON into credentials."""
    info = json.loads(base64.b64decode(credentials_base64, validate=True))
    return service_account.Credentials.from_service_account_info(info)


def create_object_store_client(settings: StorageSettings) -> ObjectStoreClient:
    """Create the object store client shared by the whole process.

    Uses the base64 service account credentials when configured, otherwise
    Application Default Credentials.

    Args:
        settings: Storage settings

    Returns:
        The ObjectStoreClient

    Raises:
        StorageConfigurationError: If the credentials are malformed or unusable
    """
    try:
        if settings.credentials_base64:
            credentials = _load_credentials(settings.credentials_base64)
            client = storage.Client(
                project=settings.project_id or credentials.project_id,
                credentials=credentials,
            )
        else:
            client = storage.Client(project=settings.project_id)
    except (ValueError, GoogleAuthError) as exc:
        logger.critical("Storage client failed to create client: %s", exc)
        raise StorageConfigurationError(
            f"Storage client could not be created: {exc}"
        ) from exc

    if not settings.bucket_name:
        logger.warning("No default storage bucket configured")

    return ObjectStoreClient(client, default_bucket_name=settings.bucket_name or None)
