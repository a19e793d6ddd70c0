"""Score store — best score + recent history in a single JSON file.

The board is a convenience: a missing, corrupted or read-only file degrades to
"no scores" and never fails the caller.

File shape:
    {"best": 87, "recent": [{"score": 87, "timestamp": 1760000000.0}, ...]}
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_PATH = Path(__file__).parent / "data" / "scores.json"


@dataclass
class ScoreRecord:
    """One finished attempt, as an integer percentage."""

    score: int
    timestamp: float = 0.0


@dataclass
class ScoreBoard:
    best: int = 0
    recent: list[ScoreRecord] = field(default_factory=list)


@dataclass(frozen=True)
class SaveResult:
    new_best: bool
    best: int
    persisted: bool


def _valid_percentage(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 100


class ScoreStore:
    """JSON-file score board for CircleScore."""

    def __init__(self, path: Path | None = None, recent_limit: int = 5) -> None:
        if recent_limit < 1:
            raise ValueError("recent_limit must be >= 1")
        self.path = Path(path) if path is not None else _DEFAULT_PATH
        self.recent_limit = recent_limit
        self._lock = threading.Lock()

    def best(self) -> int:
        return self._load().best

    def recent(self) -> list[ScoreRecord]:
        """Most recent first."""
        return self._load().recent

    def board(self) -> ScoreBoard:
        return self._load()

    def save(self, percentage: int) -> SaveResult:
        """Record a finished attempt; updates the best score if strictly higher."""
        if not _valid_percentage(percentage):
            raise ValueError(f"Score must be an integer percentage in [0, 100], got {percentage!r}")

        with self._lock:
            board = self._load()
            new_best = percentage > board.best
            if new_best:
                board.best = percentage
            board.recent.insert(0, ScoreRecord(score=percentage, timestamp=time.time()))
            board.recent = board.recent[: self.recent_limit]
            persisted = self._write(board)

        if new_best:
            logger.info("New best score: %d%%", percentage)
        return SaveResult(new_best=new_best, best=board.best, persisted=persisted)

    def clear(self) -> bool:
        with self._lock:
            return self._write(ScoreBoard())

    def _load(self) -> ScoreBoard:
        if not self.path.exists():
            return ScoreBoard()
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Unreadable score file %s: %s", self.path, e)
            return ScoreBoard()
        return self._parse(data)

    def _parse(self, data: object) -> ScoreBoard:
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed score file %s", self.path)
            return ScoreBoard()

        best = data.get("best", 0)
        if not _valid_percentage(best):
            logger.warning("Ignoring invalid best score %r", best)
            best = 0

        recent: list[ScoreRecord] = []
        raw_recent = data.get("recent", [])
        if isinstance(raw_recent, list):
            for entry in raw_recent:
                if not isinstance(entry, dict) or not _valid_percentage(entry.get("score")):
                    continue
                ts = entry.get("timestamp", 0.0)
                if not isinstance(ts, (int, float)) or isinstance(ts, bool):
                    ts = 0.0
                recent.append(ScoreRecord(score=entry["score"], timestamp=float(ts)))

        return ScoreBoard(best=best, recent=recent[: self.recent_limit])

    def _write(self, board: ScoreBoard) -> bool:
        payload = {"best": board.best, "recent": [asdict(r) for r in board.recent]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".scores-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False)
                os.replace(tmp, self.path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.warning("Could not save scores to %s: %s", self.path, e)
            return False
        return True
