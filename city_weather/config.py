"""Application configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class Settings(BaseSettings):
    """Environment-driven configuration for the city weather gateway."""
    model_config = SettingsConfigDict(env_prefix="CITYWEATHER_", extra="ignore")

    api_key: str | None = None  # OpenWeather appid; required before serving
    geocoding_url: str = "http://api.openweathermap.org/geo/1.0/direct"
    weather_url: str = "https://api.openweathermap.org/data/2.5/weather"
    air_pollution_url: str = "http://api.openweathermap.org/data/2.5/air_pollution"
    request_timeout_seconds: float = 10.0
    log_level: str = "INFO"

    @field_validator("geocoding_url", "weather_url", "air_pollution_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize endpoint URLs to avoid double slashes."""
        return str(v).rstrip("/")


def require_api_key(settings: Settings) -> str:
    """Return the configured API key or fail fast."""
    key = (settings.api_key or "").strip()
    if not key:
        raise ConfigurationError("OpenWeather API key not configured (set CITYWEATHER_API_KEY)")
    return key


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4, exclude={'api_key'})}")
