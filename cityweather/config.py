# ABOUTME: Environment-driven settings for the weather and photo providers.
# ABOUTME: Loads .env via python-dotenv and exposes the image credential as an explicit optional value.

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

DEFAULT_WEATHER_API_URL = "https://wx7jjsj9h2.execute-api.us-east-1.amazonaws.com/prod"
DEFAULT_UNSPLASH_API_URL = "https://api.unsplash.com"


class ImageProviderConfig(BaseModel):
    """Photo-search provider settings handed to the image resolver at construction.

    ``credential`` is None when no access key is configured, which selects the
    placeholder-only path.
    """

    base_url: str = DEFAULT_UNSPLASH_API_URL
    credential: str | None = None

    @field_validator("credential", mode="before")
    @classmethod
    def _blank_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Settings(BaseModel):
    """Application settings resolved from the environment."""

    weather_api_url: str = DEFAULT_WEATHER_API_URL
    unsplash_api_url: str = DEFAULT_UNSPLASH_API_URL
    unsplash_access_key: str | None = None
    log_level: str = "INFO"

    @property
    def image_provider(self) -> ImageProviderConfig:
        return ImageProviderConfig(base_url=self.unsplash_api_url, credential=self.unsplash_access_key)


def load_settings() -> Settings:
    """Read settings from the process environment, after loading any .env file."""
    load_dotenv()
    return Settings(
        weather_api_url=os.environ.get("WEATHER_API_URL", DEFAULT_WEATHER_API_URL),
        unsplash_api_url=os.environ.get("UNSPLASH_API_URL", DEFAULT_UNSPLASH_API_URL),
        unsplash_access_key=os.environ.get("UNSPLASH_ACCESS_KEY"),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
