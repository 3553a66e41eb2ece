"""Domain service settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class DomainServiceSettings(BaseSettings):
    """Domain service configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="APPTRACKER_SERVICE_",
        env_file=".env",
        extra="ignore",
    )

    # Job image settings
    max_image_size: int = 10 * 1024 * 1024  # bytes
    image_key_prefix: str = "screenshots"

    default_status: str = "applied"


settings = DomainServiceSettings()
