"""Game configuration."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from term_snake.grid import MIN_SIZE

logger = logging.getLogger(__name__)

# Terminal lines reserved for the score line and margins.
_RESERVED_LINES = 3


class Difficulty(enum.Enum):
    """Reported in the end-of-game summary; does not change any rule."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class GameConfig:
    """Construction-time settings for a single game."""

    rows: int = 20
    cols: int = 20
    difficulty: Difficulty = Difficulty.NORMAL
    initial_length: int = 3
    walls: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < MIN_SIZE or self.cols < MIN_SIZE:
            raise ValueError(
                f"rows and cols must each be at least {MIN_SIZE}."
            )
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        first_col = 1 if self.walls else 0
        if self.start_col - (self.initial_length - 1) < first_col:
            raise ValueError(
                "initial_length does not fit the configured grid; "
                "increase cols or reduce length."
            )

    @property
    def start_row(self) -> int:
        return (self.rows + 1) // 2

    @property
    def start_col(self) -> int:
        return (self.cols + 1) // 2

    @classmethod
    def from_terminal(cls, columns: int, lines: int, **kwargs) -> GameConfig:
        """Fit the grid to a terminal of *columns* × *lines* characters.

        Each cell is two columns wide.
        """
        return cls(rows=lines - _RESERVED_LINES, cols=columns // 2, **kwargs)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        d = asdict(self)
        d["difficulty"] = self.difficulty.value
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        raw = dict(raw)
        if "difficulty" in raw:
            raw["difficulty"] = Difficulty(raw["difficulty"])
        return cls(**raw)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
