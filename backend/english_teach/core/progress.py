from __future__ import annotations

import logging

from ..models import Player, new_player
from .backends import DataBackend
from .errors import BackendUnavailable

logger = logging.getLogger(__name__)


class ProgressTracker:
    """
    Holds the single player's score, level and games-played counter.

    The in-memory player is the source of truth during a session; every change
    is pushed to the backend, and a failed push only costs persistence.
    """

    def __init__(self, backend: DataBackend):
        self.backend = backend
        self._player = new_player()

    @property
    def player(self) -> Player:
        return self._player

    def load(self) -> Player:
        try:
            self._player = self.backend.get_player()
        except BackendUnavailable as exc:
            logger.warning("could not load player from %s backend: %s", self.backend.name, exc)
        return self._player

    def _save(self, player: Player) -> Player:
        self._player = player
        try:
            self.backend.save_player(player)
        except BackendUnavailable as exc:
            logger.warning("could not save player to %s backend: %s", self.backend.name, exc)
        return player

    def set_name(self, name: str) -> Player:
        return self._save(self._player.merged(name=name))

    def add_score(self, points: int) -> Player:
        # Player clamps the total at zero and recomputes the level.
        return self._save(self._player.merged(total_score=self._player.total_score + points))

    def increment_games_played(self) -> Player:
        return self._save(self._player.merged(games_played=self._player.games_played + 1))

    def reset(self) -> Player:
        try:
            self._player = self.backend.reset_player()
        except BackendUnavailable as exc:
            logger.warning("could not reset player on %s backend: %s", self.backend.name, exc)
            self._player = new_player()
        return self._player
