"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from ``LLMS_TXT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="LLMS_TXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Site metadata
    site_name: str = "My Site"
    site_url: str = "http://localhost:8000"
    site_tagline: str = ""
    admin_email: str = ""

    # Public path of the generated file, relative to the site root
    endpoint: str = "llms.txt"

    # Option persistence; in-memory when unset
    options_path: Optional[Path] = None

    # Content sources: WordPress REST API wins over a static JSON file
    wordpress_url: Optional[str] = None
    content_path: Optional[Path] = None
    request_timeout: float = Field(default=15, gt=0)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    bind_host: str = "0.0.0.0"
    bind_port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
