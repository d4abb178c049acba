"""managed-records configuration via pydantic-settings."""

import warnings
from functools import lru_cache
from urllib.parse import urlsplit

from pydantic_settings import BaseSettings, SettingsConfigDict

_LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


class RecordsSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RECORDS_")

    environment: str = "development"

    # Listing endpoint
    base_url: str = "http://localhost:3000/records"
    timeout: float = 10.0  # seconds
    user_agent: str = "managed-records/0.1.0"

    # Logging
    log_level: str = "INFO"

    @property
    def is_local_endpoint(self) -> bool:
        """True when base_url points at a loopback host."""
        return urlsplit(self.base_url).hostname in _LOCAL_HOSTS

    def validate_for_production(self) -> None:
        """Raise if the development endpoint is used in non-development environments."""
        if not self.is_local_endpoint:
            return

        if self.environment != "development":
            raise RuntimeError(
                f"RECORDS_BASE_URL points at a local endpoint ({self.base_url}) "
                f"in '{self.environment}' environment. "
                "Set RECORDS_BASE_URL to the deployed /records endpoint."
            )

        warnings.warn(
            f"Using local records endpoint {self.base_url}; set RECORDS_BASE_URL for production",
            UserWarning,
            stacklevel=2,
        )


@lru_cache
def get_settings() -> RecordsSettings:
    settings = RecordsSettings()
    settings.validate_for_production()
    return settings
