"""Client configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from airly import endpoints
from utils.logging_utils import get_tagged_logger, mask_secret
logger = get_tagged_logger(__name__, tag="airly/config")


class Settings(BaseSettings):
    """Environment-driven configuration for the Airly client."""
    model_config = SettingsConfigDict(env_prefix="AIRLY_", extra="ignore")

    api_key: str | None = None
    base_url: str = endpoints.BASIC
    language: str = "en"
    request_timeout_seconds: float | None = None  # None waits indefinitely
    log_level: str = "INFO"

    @field_validator("base_url", mode="after")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so path segments can be appended directly."""
        return str(v).rstrip("/") + "/"


settings = Settings()


if __name__ == "__main__":
    logger.logger.setLevel("DEBUG")
    dump = settings.model_dump()
    dump["api_key"] = mask_secret(dump["api_key"])
    logger.debug(f"Loaded settings: {dump}")
