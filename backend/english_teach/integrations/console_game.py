from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from textwrap import dedent
from typing import Awaitable, Callable, List, Optional

from ..config import settings
from ..core.backends import DataBackend, LocalBackend, choose_backend
from ..core.backup import export_lists_json, export_scores_json
from ..core.errors import BackendUnavailable, InsufficientData, NotFound, ValidationError
from ..core.game import GameSession
from ..core.progress import ProgressTracker
from ..core.translation import TranslationResult, translate_to_hebrew
from ..core.word_store import WordStore
from ..models import Player, Word, WordList, get_level_info

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]
Translator = Callable[[str], Awaitable[TranslationResult]]


def format_player(player: Player) -> str:
    info = get_level_info(player.level)
    lines = [
        f"{info.emoji} {player.name or 'Player'} - {info.name}",
        f"Score: {player.total_score}   Games: {player.games_played}",
    ]
    if info.next_at is not None:
        lines.append(f"Next level in {info.next_at - player.total_score} points")
    return "\n".join(lines)


class ConsoleGame:
    """Text front-end for the quiz: pick a list, answer rounds, see the score."""

    def __init__(
        self,
        backend: DataBackend,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        translator: Translator = translate_to_hebrew,
    ):
        self.store = WordStore(backend)
        self.tracker = ProgressTracker(backend)
        self.input = input_fn
        self.output = output_fn
        self.translator = translator

    def load(self) -> None:
        self.store.load()
        self.tracker.load()

    def show_lists(self) -> None:
        lists = self.store.lists()
        if not lists:
            self.output("No word lists yet.")
            return
        for wl in lists:
            count = len(self.store.words_by_list(wl.id))
            self.output(f"[{wl.id}] {wl.name} ({count} words)")

    def show_scores(self) -> None:
        self.output(format_player(self.tracker.player))

    def play(self, list_id: int, player_name: str, max_rounds: Optional[int] = None) -> Optional[GameSession]:
        try:
            game = GameSession(self.store, self.tracker, list_id, player_name)
        except InsufficientData:
            self.output("At least 2 translated words are needed to play!")
            return None

        played = 0
        while max_rounds is None or played < max_rounds:
            rnd = game.next_round()
            self.output("")
            self.output(
                f"Round {game.quiz.round_number} - word {game.quiz.word_number}/{game.quiz.words_in_round}"
            )
            self.output(f"What is '{rnd.word.english}'?")
            for number, option in enumerate(rnd.options, start=1):
                self.output(f"  {number}. {option}")

            choice = self._ask_choice(len(rnd.options))
            if choice is None:
                break

            outcome = game.answer(rnd.options[choice - 1])
            if outcome.correct:
                self.output("Correct! 🎉")
            else:
                self.output(f"Not quite. The answer is {rnd.correct_answer}")
            if outcome.leveled_up:
                info = get_level_info(outcome.player.level)
                self.output(f"Level up! {info.emoji} {info.name}")
            played += 1

        scoring = game.scoring
        self.output("")
        self.output(
            f"Session: {scoring.session_correct} correct, {scoring.session_wrong} wrong, "
            f"score {scoring.session_score:+d}"
        )
        self.show_scores()
        return game

    def _ask_choice(self, count: int) -> Optional[int]:
        while True:
            raw = self.input("Your answer (q to quit): ").strip().lower()
            if raw in ("q", "quit", "exit"):
                return None
            if raw.isdigit() and 1 <= int(raw) <= count:
                return int(raw)
            self.output(f"Please type a number between 1 and {count}.")

    def export_backup(self, path: Path) -> bool:
        data = self.store.export_backup()
        if data is None:
            self.output("Export failed: storage is unavailable.")
            return False
        path.write_text(data, encoding="utf-8")
        self.output(f"Backup written to {path}")
        return True

    def import_backup(self, path: Path) -> bool:
        try:
            self.store.import_backup(path.read_bytes())
        except (OSError, ValidationError, BackendUnavailable) as exc:
            self.output(f"Import failed: {exc}")
            return False
        self.tracker.load()
        self.output("Backup imported.")
        return True

    def export_lists(self, path: Path) -> bool:
        data = export_lists_json(self.store.lists(), self.store.all_words())
        path.write_text(data, encoding="utf-8")
        self.output(f"Lists written to {path}")
        return True

    def export_scores(self, path: Path) -> bool:
        path.write_text(export_scores_json(self.tracker.player), encoding="utf-8")
        self.output(f"Scores written to {path}")
        return True

    # ---------- List management ----------

    def new_list(self, name: str) -> Optional[WordList]:
        try:
            wl = self.store.add_list(name)
        except ValidationError as exc:
            self.output(f"Could not create list: {exc}")
            return None
        if wl is None:
            self.output("Could not create list: storage is unavailable.")
            return None
        self.output(f"Created list [{wl.id}] {wl.name}")
        return wl

    def delete_list(self, list_id: int) -> bool:
        wl = self.store.get_list(list_id)
        if wl is None:
            self.output(f"List {list_id} not found.")
            return False
        if not self.store.delete_list(list_id):
            self.output("Could not delete list: storage is unavailable.")
            return False
        self.output(f"Deleted list {wl.name} and its words.")
        return True

    def _translate(self, english: str) -> str:
        """Look the word up; on failure ask for the Hebrew by hand (blank skips)."""
        result = asyncio.run(self.translator(english))
        if result.success:
            self.output(f"{english} = {result.translation}")
            return result.translation
        self.output(result.error or "No translation found.")
        return self.input(f"Hebrew for '{english}' (blank to skip): ").strip()

    def add_word(self, list_id: int, english: str, hebrew: Optional[str] = None) -> Optional[Word]:
        english = english.strip()
        if self.store.get_list(list_id) is None:
            self.output(f"List {list_id} not found.")
            return None
        if not english:
            self.output("Could not add word: English word is required")
            return None
        if hebrew is None:
            hebrew = self._translate(english)

        try:
            word = self.store.add_word(english, hebrew, list_id)
        except (ValidationError, NotFound) as exc:
            self.output(f"Could not add word: {exc}")
            return None
        if word is None:
            self.output("Could not add word: storage is unavailable.")
            return None
        self.output(f"Added [{word.id}] {word.english} = {word.hebrew or '?'}")
        return word

    def edit_word(
        self,
        word_id: int,
        english: Optional[str] = None,
        hebrew: Optional[str] = None,
        retranslate: bool = False,
    ) -> Optional[Word]:
        current = self.store.get_word(word_id)
        if current is None:
            self.output(f"Word {word_id} not found.")
            return None
        if retranslate and hebrew is None:
            # a skipped manual entry keeps the current translation
            hebrew = self._translate((english or current.english).strip()) or None

        try:
            word = self.store.update_word(word_id, english=english, hebrew=hebrew)
        except (ValidationError, NotFound) as exc:
            self.output(f"Could not update word: {exc}")
            return None
        if word is None:
            self.output("Could not update word: storage is unavailable.")
            return None
        self.output(f"Updated [{word.id}] {word.english} = {word.hebrew or '?'}")
        return word

    def delete_word(self, word_id: int) -> bool:
        if self.store.get_word(word_id) is None:
            self.output(f"Word {word_id} not found.")
            return False
        if not self.store.delete_word(word_id):
            self.output("Could not delete word: storage is unavailable.")
            return False
        self.output(f"Deleted word {word_id}.")
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="english-teach",
        description="Vocabulary quiz in the terminal.",
        epilog=dedent(
            """
            Uses the REST API at API_BASE_URL when it is reachable,
            otherwise local storage in LOCAL_DATA_DIR.
            """
        ).strip(),
    )
    parser.add_argument("--local", action="store_true", help="skip the API and use local storage")
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="play a quiz on one list")
    play.add_argument("list_id", type=int)
    play.add_argument("--name", default="", help="player name")
    play.add_argument("--rounds", type=int, default=None, help="stop after this many rounds")

    sub.add_parser("lists", help="show the word lists")
    sub.add_parser("scores", help="show the player's score")
    sub.add_parser("reset", help="reset the player's score")

    export = sub.add_parser("export", help="write a backup file")
    export.add_argument("path", type=Path)

    restore = sub.add_parser("import", help="replace all data with a backup file")
    restore.add_argument("path", type=Path)

    new_list = sub.add_parser("new-list", help="create a word list")
    new_list.add_argument("name")

    delete_list = sub.add_parser("delete-list", help="delete a list and its words")
    delete_list.add_argument("list_id", type=int)

    add_word = sub.add_parser("add-word", help="add a word, translating it unless --hebrew is given")
    add_word.add_argument("list_id", type=int)
    add_word.add_argument("english")
    add_word.add_argument("--hebrew", default=None)

    edit_word = sub.add_parser("edit-word", help="change a word or its translation")
    edit_word.add_argument("word_id", type=int)
    edit_word.add_argument("--english", default=None)
    edit_word.add_argument("--hebrew", default=None)
    edit_word.add_argument("--translate", action="store_true", help="look the translation up again")

    delete_word = sub.add_parser("delete-word", help="delete a word")
    delete_word.add_argument("word_id", type=int)

    export_lists = sub.add_parser("export-lists", help="write lists and words to a file")
    export_lists.add_argument("path", type=Path)

    export_scores = sub.add_parser("export-scores", help="write the player's score to a file")
    export_scores.add_argument("path", type=Path)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper())

    backend = LocalBackend(settings.local_data_dir) if args.local else choose_backend()
    game = ConsoleGame(backend)
    game.load()

    if args.command == "play":
        name = args.name or game.input("What's your name? ").strip()
        return 0 if game.play(args.list_id, name, max_rounds=args.rounds) else 1
    if args.command == "lists":
        game.show_lists()
    elif args.command == "scores":
        game.show_scores()
    elif args.command == "reset":
        game.tracker.reset()
        game.show_scores()
    elif args.command == "export":
        return 0 if game.export_backup(args.path) else 1
    elif args.command == "import":
        return 0 if game.import_backup(args.path) else 1
    elif args.command == "new-list":
        return 0 if game.new_list(args.name) else 1
    elif args.command == "delete-list":
        return 0 if game.delete_list(args.list_id) else 1
    elif args.command == "add-word":
        return 0 if game.add_word(args.list_id, args.english, args.hebrew) else 1
    elif args.command == "edit-word":
        word = game.edit_word(args.word_id, args.english, args.hebrew, retranslate=args.translate)
        return 0 if word else 1
    elif args.command == "delete-word":
        return 0 if game.delete_word(args.word_id) else 1
    elif args.command == "export-lists":
        return 0 if game.export_lists(args.path) else 1
    elif args.command == "export-scores":
        return 0 if game.export_scores(args.path) else 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
