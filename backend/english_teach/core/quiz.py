from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, TypeVar

from ..models import Word
from .distractors import DISTRACTOR_WORDS
from .errors import InsufficientData

T = TypeVar("T")

# Correct answer plus up to 8 others
OPTION_COUNT = 9
# How many of the others may come from the same list
LIST_OPTION_COUNT = 4
MIN_PLAYABLE_WORDS = 2


def shuffled(items: Iterable[T], rng: random.Random) -> List[T]:
    """Fisher-Yates shuffle into a new list."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def playable_words(words: Iterable[Word]) -> List[Word]:
    return [w for w in words if w.hebrew and w.hebrew.strip()]


def generate_options(
    correct_word: Word,
    all_words: Sequence[Word],
    rng: random.Random,
    pool: Sequence[str] = DISTRACTOR_WORDS,
    size: int = OPTION_COUNT,
) -> List[str]:
    """
    Build the answer buttons for one round: the correct translation, up to
    LIST_OPTION_COUNT translations from the same list, then words from the
    distractor pool until ``size`` options are reached. No value appears twice;
    when there are not enough distinct values the set is simply smaller.
    """
    correct = correct_word.hebrew

    # dict.fromkeys keeps order and drops repeated translations
    others = dict.fromkeys(
        w.hebrew for w in all_words if w.id != correct_word.id and w.hebrew != correct
    )
    list_options = shuffled(others, rng)[:LIST_OPTION_COUNT]

    used = {correct, *list_options}
    available = [word for word in dict.fromkeys(pool) if word not in used]
    needed = max(0, size - 1 - len(list_options))
    padding = shuffled(available, rng)[:needed]

    return shuffled([correct, *list_options, *padding], rng)


@dataclass
class QuizRound:
    word: Word
    options: List[str]
    answered: bool = False
    is_correct: Optional[bool] = None

    @property
    def correct_answer(self) -> str:
        return self.word.hebrew


class QuizSession:
    """
    An endless run of rounds over one word list.

    Words are dealt from a shuffled deck; when the deck runs out it is
    reshuffled and ``round_number`` goes up, so no word repeats within a pass.
    """

    def __init__(
        self,
        words: Iterable[Word],
        rng: Optional[random.Random] = None,
        pool: Sequence[str] = DISTRACTOR_WORDS,
    ):
        eligible = playable_words(words)
        if len(eligible) < MIN_PLAYABLE_WORDS:
            raise InsufficientData(
                f"At least {MIN_PLAYABLE_WORDS} translated words are needed to play "
                f"(found {len(eligible)})"
            )

        self.rng = rng or random.Random()
        self.pool = pool
        self.words = eligible
        self.remaining: List[Word] = shuffled(eligible, self.rng)
        self.round_number = 1
        self.current: Optional[QuizRound] = None

    @property
    def words_in_round(self) -> int:
        return len(self.words)

    @property
    def word_number(self) -> int:
        """1-based position of the current word within this pass."""
        return self.words_in_round - len(self.remaining)

    def next_round(self) -> QuizRound:
        if not self.remaining:
            self.remaining = shuffled(self.words, self.rng)
            self.round_number += 1

        word = self.remaining.pop(0)
        options = generate_options(word, self.words, self.rng, pool=self.pool)
        self.current = QuizRound(word=word, options=options)
        return self.current

    def answer(self, selected: str) -> bool:
        """Mark the current round. A second answer to the same round is ignored."""
        if self.current is None:
            raise RuntimeError("next_round() must be called before answer()")
        if self.current.answered:
            return bool(self.current.is_correct)

        self.current.answered = True
        self.current.is_correct = selected == self.current.correct_answer
        return self.current.is_correct
