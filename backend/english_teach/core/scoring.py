from __future__ import annotations

from dataclasses import dataclass

from ..models import Level, Player
from .progress import ProgressTracker

POINTS_CORRECT = 1
POINTS_WRONG = -1


@dataclass
class AnswerOutcome:
    correct: bool
    player: Player
    previous_level: Level

    @property
    def level_changed(self) -> bool:
        return self.player.level != self.previous_level

    @property
    def leveled_up(self) -> bool:
        return self.player.level.rank > self.previous_level.rank


class ScoringEngine:
    """Applies answer results to the player and keeps per-session counters."""

    def __init__(self, tracker: ProgressTracker):
        self.tracker = tracker
        self.session_score = 0
        self.session_correct = 0
        self.session_wrong = 0

    def apply_answer(self, correct: bool) -> AnswerOutcome:
        previous_level = self.tracker.player.level

        if correct:
            self.session_score += POINTS_CORRECT
            self.session_correct += 1
            player = self.tracker.add_score(POINTS_CORRECT)
        else:
            self.session_score += POINTS_WRONG
            self.session_wrong += 1
            player = self.tracker.add_score(POINTS_WRONG)

        return AnswerOutcome(correct=correct, player=player, previous_level=previous_level)
