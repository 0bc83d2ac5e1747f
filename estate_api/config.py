# estate_api/config.py
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime settings for the listings backend.

    Defaults are the fixed values the service ships with; any of them can be
    overridden with an ``ESTATE_``-prefixed environment variable or a ``.env`` file.
    """

    model_config = SettingsConfigDict(env_prefix="ESTATE_", env_file=".env", extra="ignore")

    host: str = "0.0.0.0"
    port: int = 5000

    properties_file: Path = Field(default=Path("properties.json"), description="JSON store for properties")
    projects_file: Path = Field(default=Path("projects.json"), description="JSON store for projects")

    uploads_dir: Path = Field(default=Path("uploads"), description="Directory holding uploaded images")
    uploads_url: str = "/uploads"

    max_upload_bytes: int = 5 * 1024 * 1024
    allowed_image_types: List[str] = ["image/jpeg", "image/png", "image/gif"]

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
