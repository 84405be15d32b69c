# app/config.py
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cloudflare_uri: str = Field(
        default="https://weathered-recipe-d2b6.elishasmile31472.workers.dev",
        description="Roast inference endpoint",
    )
    cloudflare_api: Optional[str] = Field(
        default=None,
        description="Bearer token for the inference endpoint",
    )
    roast_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Upstream request timeout in seconds",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
