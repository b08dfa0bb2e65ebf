from __future__ import annotations

import random
from typing import Optional

from .progress import ProgressTracker
from .quiz import QuizRound, QuizSession
from .scoring import AnswerOutcome, ScoringEngine
from .word_store import WordStore


class GameSession:
    """One sitting of the quiz game for a single list and player."""

    def __init__(
        self,
        store: WordStore,
        tracker: ProgressTracker,
        list_id: int,
        player_name: str,
        rng: Optional[random.Random] = None,
    ):
        # Fails with InsufficientData before the player is touched.
        self.quiz = QuizSession(store.words_by_list(list_id), rng=rng)
        self.list_id = list_id
        self.tracker = tracker
        self.scoring = ScoringEngine(tracker)

        tracker.set_name(player_name)
        tracker.increment_games_played()

    @property
    def current(self) -> Optional[QuizRound]:
        return self.quiz.current

    def next_round(self) -> QuizRound:
        return self.quiz.next_round()

    def answer(self, selected: str) -> Optional[AnswerOutcome]:
        """Score the current round; returns None if it was already answered."""
        current = self.quiz.current
        if current is not None and current.answered:
            return None
        correct = self.quiz.answer(selected)
        return self.scoring.apply_answer(correct)
