"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    circlescore_env: str = "development"
    circlescore_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Score board
    score_store_path: str = ""  # empty = package data dir
    recent_scores_limit: int = 5

    # Capture-side minimum before a stroke is scored
    min_stroke_points: int = 20

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
