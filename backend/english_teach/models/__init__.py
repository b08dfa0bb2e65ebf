from .words import CamelModel, Word, WordList
from .player import Level, LevelInfo, Player, calculate_level, get_level_info, new_player


__all__ = [
    "CamelModel",
    "Word",
    "WordList",
    "Level",
    "LevelInfo",
    "Player",
    "calculate_level",
    "get_level_info",
    "new_player",
]
