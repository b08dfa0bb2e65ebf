import random
from collections import Counter

import allure
import pytest

from english_teach.core.distractors import DISTRACTOR_WORDS
from english_teach.core.errors import InsufficientData
from english_teach.core.quiz import (
    LIST_OPTION_COUNT,
    OPTION_COUNT,
    QuizSession,
    generate_options,
    shuffled,
)
from english_teach.models import Word

pytestmark = pytest.mark.unit


@allure.feature("Quiz rounds")
class TestShuffle:

    def test_is_a_permutation(self, rng):
        items = list(range(20))
        result = shuffled(items, rng)
        assert sorted(result) == items
        assert items == list(range(20))

    def test_same_seed_same_order(self):
        assert shuffled(range(10), random.Random(7)) == shuffled(range(10), random.Random(7))


@allure.feature("Quiz rounds")
class TestStartSession:

    def test_two_translated_words_start(self, sample_words, rng):
        session = QuizSession(sample_words, rng=rng)
        assert session.words_in_round == 2
        assert session.round_number == 1

    def test_one_word_is_not_enough(self, sample_words):
        with pytest.raises(InsufficientData):
            QuizSession(sample_words[:1])

    def test_blank_translations_do_not_count(self, sample_words):
        words = [sample_words[0], Word(id=3, english="sun", hebrew="   ", list_id=1)]
        with pytest.raises(InsufficientData):
            QuizSession(words)

    def test_untranslated_words_are_skipped(self, sample_words, rng):
        words = sample_words + [Word(id=3, english="sun", hebrew="", list_id=1)]
        session = QuizSession(words, rng=rng)
        assert {w.id for w in session.words} == {1, 2}


@allure.feature("Quiz rounds")
class TestRoundOrder:

    def test_each_pass_uses_every_word_once(self, many_words, rng):
        session = QuizSession(many_words, rng=rng)
        for expected_round in (1, 2, 3):
            seen = [session.next_round().word.id for _ in many_words]
            assert sorted(seen) == [w.id for w in many_words]
            assert session.round_number == expected_round

    def test_round_counter_increments_after_exhaustion(self, sample_words, rng):
        session = QuizSession(sample_words, rng=rng)
        session.next_round()
        session.next_round()
        assert session.round_number == 1
        session.next_round()
        assert session.round_number == 2

    def test_word_number_tracks_position(self, many_words, rng):
        session = QuizSession(many_words, rng=rng)
        session.next_round()
        assert session.word_number == 1
        session.next_round()
        assert session.word_number == 2


@allure.feature("Quiz rounds")
class TestOptions:

    @pytest.mark.parametrize("seed", range(25))
    def test_correct_answer_once_and_no_duplicates(self, many_words, seed):
        session = QuizSession(many_words, rng=random.Random(seed))
        for _ in range(len(many_words) * 2):
            rnd = session.next_round()
            counts = Counter(rnd.options)
            assert counts[rnd.correct_answer] == 1
            assert len(rnd.options) == len(set(rnd.options))

    def test_full_option_set_has_nine(self, many_words, rng):
        options = generate_options(many_words[0], many_words, rng)
        assert len(options) == OPTION_COUNT

    def test_at_most_four_from_the_list(self, many_words, rng):
        correct = many_words[0]
        list_values = {w.hebrew for w in many_words} - {correct.hebrew}
        # keep the pool free of list values so the origin of each option is clear
        pool = [word for word in DISTRACTOR_WORDS if word not in list_values]
        options = generate_options(correct, many_words, rng, pool=pool)
        assert len(list_values.intersection(options)) == LIST_OPTION_COUNT

    def test_duplicate_translations_in_list_are_merged(self, rng):
        words = [
            Word(id=1, english="big", hebrew="גדול", list_id=1),
            Word(id=2, english="large", hebrew="גדול", list_id=1),
            Word(id=3, english="huge", hebrew="ענק", list_id=1),
            Word(id=4, english="giant", hebrew="ענק", list_id=1),
        ]
        options = generate_options(words[0], words, rng, pool=[])
        assert sorted(options) == sorted(["גדול", "ענק"])

    def test_shrinks_when_pool_is_small(self, sample_words, rng):
        options = generate_options(sample_words[0], sample_words, rng, pool=["כלב", "שמש"])
        assert sorted(options) == sorted(["חתול", "כלב", "שמש"])

    def test_pool_never_repeats_the_correct_answer(self, sample_words, rng):
        pool = ["חתול"] * 5 + ["שמש"]
        options = generate_options(sample_words[0], sample_words, rng, pool=pool)
        assert options.count("חתול") == 1


@allure.feature("Quiz rounds")
class TestAnswer:

    def test_correct_answer(self, sample_words, rng):
        session = QuizSession(sample_words, rng=rng)
        rnd = session.next_round()
        assert session.answer(rnd.correct_answer) is True
        assert rnd.answered and rnd.is_correct

    def test_wrong_answer(self, sample_words, rng):
        session = QuizSession(sample_words, rng=rng)
        rnd = session.next_round()
        wrong = next(option for option in rnd.options if option != rnd.correct_answer)
        assert session.answer(wrong) is False
        assert rnd.answered and rnd.is_correct is False

    def test_second_answer_is_ignored(self, sample_words, rng):
        session = QuizSession(sample_words, rng=rng)
        rnd = session.next_round()
        session.answer(rnd.correct_answer)
        assert session.answer("nonsense") is True
        assert rnd.is_correct is True

    def test_answer_before_round(self, sample_words):
        with pytest.raises(RuntimeError):
            QuizSession(sample_words).answer("חתול")
