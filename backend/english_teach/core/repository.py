from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..config import settings
from ..models import Player, Word, WordList, new_player
from .errors import BackendUnavailable, NotFound, ValidationError

logger = logging.getLogger(__name__)

LISTS_FILENAME = "lists.json"
SCORES_FILENAME = "scores.json"


def next_id(items: Sequence[Any]) -> int:
    return max((item.id for item in items), default=0) + 1


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(message)
    return value


class JsonRepository:
    """
    Word lists, words and the player, kept in two JSON documents:

        lists.json  -> {"lists": [...], "words": [...]}
        scores.json -> {"player": {...}}

    Every mutation reads the document, changes it and rewrites it wholesale.
    There is no locking: the last writer wins.
    """

    def __init__(self, lists_path: Path, scores_path: Path):
        self.lists_path = Path(lists_path)
        self.scores_path = Path(scores_path)

    @classmethod
    def in_directory(cls, directory: Path) -> "JsonRepository":
        directory = Path(directory)
        return cls(directory / LISTS_FILENAME, directory / SCORES_FILENAME)

    # ---------- File helpers ----------

    def is_initialized(self) -> bool:
        return self.lists_path.exists()

    def _read(self, path: Path, default: Dict[str, Any]) -> Dict[str, Any]:
        if not path.exists():
            return default
        try:
            with path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("failed to read %s: %s", path, exc)
            raise BackendUnavailable(f"cannot read {path.name}") from exc

    def _write(self, path: Path, data: Dict[str, Any]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
        except OSError as exc:
            logger.error("failed to write %s: %s", path, exc)
            raise BackendUnavailable(f"cannot write {path.name}") from exc

    def _load_lists(self) -> tuple[List[WordList], List[Word]]:
        data = self._read(self.lists_path, {"lists": [], "words": []})
        lists = [WordList.model_validate(item) for item in data.get("lists", [])]
        words = [Word.model_validate(item) for item in data.get("words", [])]
        return lists, words

    def _save_lists(self, lists: List[WordList], words: List[Word]) -> None:
        self._write(
            self.lists_path,
            {
                "lists": [wl.to_json_dict() for wl in lists],
                "words": [w.to_json_dict() for w in words],
            },
        )

    def _save_player(self, player: Player) -> None:
        self._write(self.scores_path, {"player": player.to_json_dict()})

    # ---------- Lists ----------

    def get_lists(self) -> List[WordList]:
        lists, _ = self._load_lists()
        return lists

    def get_list(self, list_id: int) -> WordList:
        for wl in self.get_lists():
            if wl.id == list_id:
                return wl
        raise NotFound("List not found")

    def create_list(self, name: Optional[str]) -> WordList:
        name = _require_text(name, "Name is required")
        lists, words = self._load_lists()
        wl = WordList(id=next_id(lists), name=name)
        lists.append(wl)
        self._save_lists(lists, words)
        return wl

    def delete_list(self, list_id: int) -> None:
        lists, words = self._load_lists()
        lists = [wl for wl in lists if wl.id != list_id]
        words = [w for w in words if w.list_id != list_id]
        self._save_lists(lists, words)

    # ---------- Words ----------

    def get_words(self, list_id: Optional[int] = None) -> List[Word]:
        _, words = self._load_lists()
        if list_id is None:
            return words
        return [w for w in words if w.list_id == list_id]

    def create_word(self, list_id: int, english: Optional[str], hebrew: Optional[str] = None) -> Word:
        english = _require_text(english, "English word is required")
        lists, words = self._load_lists()
        if not any(wl.id == list_id for wl in lists):
            raise NotFound("List not found")

        w = Word(id=next_id(words), english=english, hebrew=hebrew or "", list_id=list_id)
        words.append(w)
        self._save_lists(lists, words)
        return w

    def update_word(
        self,
        word_id: int,
        english: Optional[str] = None,
        hebrew: Optional[str] = None,
    ) -> Word:
        lists, words = self._load_lists()
        for index, w in enumerate(words):
            if w.id == word_id:
                break
        else:
            raise NotFound("Word not found")

        data: Dict[str, Any] = {}
        if english is not None:
            data["english"] = _require_text(english, "English word is required")
        if hebrew is not None:
            data["hebrew"] = hebrew

        updated = w.model_copy(update=data)
        words[index] = updated
        self._save_lists(lists, words)
        return updated

    def delete_word(self, word_id: int) -> None:
        lists, words = self._load_lists()
        words = [w for w in words if w.id != word_id]
        self._save_lists(lists, words)

    # ---------- Player ----------

    def get_player(self) -> Player:
        data = self._read(self.scores_path, {})
        if "player" not in data:
            return new_player()
        return Player.model_validate(data["player"])

    def update_player(self, **fields: Any) -> Player:
        player = self.get_player().merged(**fields)
        self._save_player(player)
        return player

    def reset_player(self) -> Player:
        player = new_player()
        self._save_player(player)
        return player

    # ---------- Whole state ----------

    def replace_all(self, lists: List[WordList], words: List[Word], player: Player) -> None:
        self._save_lists(lists, words)
        self._save_player(player)


def get_repository() -> JsonRepository:
    """FastAPI dependency: the repository behind the REST API."""
    return JsonRepository.in_directory(settings.data_dir)
