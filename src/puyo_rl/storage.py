"""High score persistence: a single integer in a text file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from puyo_rl.game.events import EVENT_HIGH_SCORE
from puyo_rl.game.core import PuyoGame


logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".puyo_rl_high_score"


class HighScoreStore:
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else DEFAULT_PATH

    def load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            value = int(self.path.read_text(encoding="utf-8").strip())
        except (OSError, ValueError) as exc:
            logger.warning("ignoring unreadable high score file %s: %s", self.path, exc)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{int(value)}\n", encoding="utf-8")

    def attach(self, game: PuyoGame) -> None:
        """Seed ``game`` with the stored value and persist every new record."""
        game.high_score = max(game.high_score, self.load())
        game.events.subscribe(EVENT_HIGH_SCORE, self._on_high_score)

    def _on_high_score(self, sender, value: int, **_: object) -> None:
        self.save(value)
