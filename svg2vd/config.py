"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svg2vd_log_level: str = "info"

    # Conversion defaults (overridable per request / CLI flag)
    svg2vd_color_mode: Literal["android", "legacy"] = "android"
    svg2vd_element_order: Literal["type", "document"] = "type"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
