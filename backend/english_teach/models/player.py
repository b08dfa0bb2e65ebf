from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import field_validator, model_validator

from .words import CamelModel


class Level(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    DIAMOND = "diamond"

    @property
    def rank(self) -> int:
        return list(Level).index(self)


# (minimum score, level), highest first
LEVEL_THRESHOLDS = [
    (500, Level.DIAMOND),
    (200, Level.GOLD),
    (50, Level.SILVER),
    (0, Level.BRONZE),
]


def calculate_level(score: int) -> Level:
    for minimum, level in LEVEL_THRESHOLDS:
        if score >= minimum:
            return level
    return Level.BRONZE


@dataclass(frozen=True)
class LevelInfo:
    name: str
    emoji: str
    color: str
    next_at: Optional[int]


LEVEL_INFO = {
    Level.BRONZE: LevelInfo(name="ארד", emoji="🥉", color="#CD7F32", next_at=50),
    Level.SILVER: LevelInfo(name="כסף", emoji="🥈", color="#9CA3AF", next_at=200),
    Level.GOLD: LevelInfo(name="זהב", emoji="🥇", color="#F59E0B", next_at=500),
    Level.DIAMOND: LevelInfo(name="יהלום", emoji="💎", color="#06B6D4", next_at=None),
}


def get_level_info(level: Level) -> LevelInfo:
    return LEVEL_INFO[Level(level)]


class Player(CamelModel):
    name: str = ""
    total_score: int = 0
    level: Level = Level.BRONZE
    games_played: int = 0

    @field_validator("total_score")
    @classmethod
    def clamp_score(cls, v: int) -> int:
        return max(0, v)

    @model_validator(mode="after")
    def derive_level(self):
        # Level is never trusted from input; it always follows the score.
        self.level = calculate_level(self.total_score)
        return self

    def merged(self, **updates) -> "Player":
        """Return a new player with ``updates`` applied and the level recomputed."""
        data = self.model_dump()
        data.update(updates)
        return Player.model_validate(data)


def new_player() -> Player:
    return Player(name="", total_score=0, level=Level.BRONZE, games_played=0)
