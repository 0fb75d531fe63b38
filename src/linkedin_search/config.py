# ABOUTME: Configuration module for application settings.
# ABOUTME: Uses pydantic-settings for environment variable overrides and provides cached access.

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api1.unipile.com:13143"


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with the
    LINKEDIN_SEARCH_ prefix (e.g., LINKEDIN_SEARCH_API_KEY).
    """

    model_config = SettingsConfigDict(
        env_prefix="LINKEDIN_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: Annotated[str, Field(description="Base URL of the search API")] = DEFAULT_BASE_URL

    api_key: Annotated[
        str | None, Field(description="Token sent in the X-API-KEY header")
    ] = None

    default_limit: Annotated[
        int, Field(description="Results per page when the caller gives no limit", ge=1, le=100)
    ] = 10

    request_timeout: Annotated[
        float, Field(description="HTTP timeout in seconds", gt=0)
    ] = 30.0

    db_path: Annotated[Path, Field(description="Path to SQLite database file for lists")] = (
        Path.home() / ".linkedin-search" / "data.db"
    )

    log_level: Annotated[str, Field(description="Minimum log level")] = "INFO"

    log_json: Annotated[bool, Field(description="Render logs as JSON lines")] = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings.

    Returns a cached Settings instance. Use get_settings.cache_clear()
    to clear the cache if needed.

    Returns:
        Cached Settings instance.
    """
    return Settings()
