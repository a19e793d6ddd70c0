"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from circlescore.config import Settings, settings
from circlescore.storage.score_store import ScoreStore


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_score_store() -> ScoreStore:
    path = Path(settings.score_store_path) if settings.score_store_path else None
    return ScoreStore(path=path, recent_limit=settings.recent_scores_limit)
