from functools import lru_cache
from threading import Lock
from typing import Optional
import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator
from odb_datasources.shared.core.constants import AWS_SUPPORTED_REGIONS, DEFAULT_AWS_REGION

# Environment Constants
ENV_PRODUCTION = "production"
ENV_STAGING = "staging"
ENV_DEVELOPMENT = "development"
ENV_LOCAL = "local"

_VALID_ENVIRONMENTS = {ENV_PRODUCTION, ENV_STAGING, ENV_DEVELOPMENT, ENV_LOCAL}


@lru_cache
def get_settings() -> "Settings":
    """Returns a singleton instance of the application settings."""
    return Settings()


_settings_reload_lock = Lock()


def reload_settings_from_environment() -> "Settings":
    """
    Atomically rebuild and replace cached settings from environment values.

    This avoids mutating the cached singleton instance in-place.
    """
    logger = structlog.get_logger()
    with _settings_reload_lock:
        logger.info("settings_reload_started")
        get_settings.cache_clear()
        refreshed = get_settings()
        logger.info("settings_reload_completed")
        return refreshed


class Settings(BaseSettings):
    """
    Configuration for the ODB data sources.
    Uses Pydantic-Settings for environment variable parsing from .env.
    """

    APP_NAME: str = "odb-datasources"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    # ENVIRONMENT options: local, development, staging, production
    ENVIRONMENT: str = ENV_DEVELOPMENT
    TESTING: bool = False

    # AWS Credentials (fall back to the default botocore chain when unset)
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_SESSION_TOKEN: Optional[str] = None
    AWS_DEFAULT_REGION: str = DEFAULT_AWS_REGION
    AWS_ENDPOINT_URL: Optional[str] = (
        None  # Local testing (MotoServer/LocalStack)
    )

    # AWS Regions (regional whitelist, empty list allows any region)
    AWS_SUPPORTED_REGIONS: list[str] = AWS_SUPPORTED_REGIONS

    # Per-call bounds for ODB reads
    ODB_READ_TIMEOUT_SECONDS: float = 60.0
    ODB_CONNECT_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )

    @model_validator(mode="after")
    def validate_all_config(self) -> "Settings":
        if self.ENVIRONMENT not in _VALID_ENVIRONMENTS:
            raise ValueError(
                f"ENVIRONMENT must be one of {sorted(_VALID_ENVIRONMENTS)}, got {self.ENVIRONMENT!r}."
            )
        if self.TESTING and self.ENVIRONMENT in {ENV_PRODUCTION, ENV_STAGING}:
            raise ValueError(
                "TESTING must be false in staging/production runtime environments."
            )
        if self.ODB_READ_TIMEOUT_SECONDS <= 0 or self.ODB_CONNECT_TIMEOUT_SECONDS <= 0:
            raise ValueError("ODB read/connect timeouts must be positive.")
        if bool(self.AWS_ACCESS_KEY_ID) != bool(self.AWS_SECRET_ACCESS_KEY):
            raise ValueError(
                "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY must be set together."
            )
        return self
