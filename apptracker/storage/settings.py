"""Storage settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Cloud Storage configuration settings.

    Loaded once at process start and never changed afterwards.
    """

    model_config = SettingsConfigDict(
        env_prefix="APPTRACKER_STORAGE_",
        env_file=".env",
        extra="ignore",
    )

    bucket_name: str = ""
    project_id: str | None = None
    # Base64 encoded service account JSON
    credentials_base64: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "credentials_base64",
            "APPTRACKER_STORAGE_CREDENTIALS_BASE64",
            "CREDENTIALS_BASE64",
        ),
    )


settings = StorageSettings()
