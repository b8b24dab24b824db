"""Application configuration and settings management."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic.functional_validators import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the news client."""

    news_v2_base_url: str = Field(
        default="https://newsapi.org/v2",
        description="Base URL that GET endpoints are appended to",
        alias="NEWS_V2_BASE_URL",
    )
    json_placeholder_base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        description="Base URL that POST endpoints are appended to",
        alias="JSON_PLACEHOLDER_BASE_URL",
    )
    log_level: str = Field(
        default="INFO",
        description="Package logger level",
        alias="LOG_LEVEL",
    )

    @field_validator("news_v2_base_url", "json_placeholder_base_url", mode="after")
    @classmethod
    def _require_base_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Base URLs must not be empty")
        return value

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Using LRU caching keeps a single settings object per process.
    """

    return Settings()  # type: ignore[call-arg]


class BaseURL(str, Enum):
    NEWS_V2 = "news_v2"
    JSON_PLACEHOLDER = "json_placeholder"

    @property
    def url(self) -> str:
        settings = get_settings()
        if self is BaseURL.NEWS_V2:
            return settings.news_v2_base_url
        return settings.json_placeholder_base_url
