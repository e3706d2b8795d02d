"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from customiser.engine.url_builder import DEFAULT_BASE_TEMPLATE


class Settings(BaseSettings):
    customiser_env: str = "development"
    customiser_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Image rendering
    image_base_template: str = DEFAULT_BASE_TEMPLATE
    default_perspective: str = "F"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
