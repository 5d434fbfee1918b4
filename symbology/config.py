"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    symbology_env: str = "development"
    symbology_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Remote legends, pictures and attribute payloads
    http_timeout_seconds: float = 30.0

    # Icon generation
    placeholder_font_family: str = "Roboto"
    default_marker_size: float = 12.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
