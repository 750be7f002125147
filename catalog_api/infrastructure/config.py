"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Product store
    store_backend: Literal["mongodb", "memory"] = "mongodb"
    mongodb_uri: str | None = None
    database_name: str = "catalog"
    collection_name: str = "products"
    mongodb_timeout_ms: int = 2000

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    fallback_port: int = 3001

    # Access demo
    bearer_token: str = "mysecrettoken"

    # Logging
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
