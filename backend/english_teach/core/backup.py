from __future__ import annotations

import json
from collections import Counter
from typing import Any, Dict, List, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..models import Player, Word, WordList
from .errors import InvalidBackup
from .repository import JsonRepository

REQUIRED_SECTIONS = ("lists", "words", "player")


class BackupDocument(BaseModel):
    lists: List[WordList]
    words: List[Word]
    player: Player
    initialized: bool = True

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def export_backup(doc: BackupDocument) -> str:
    return json.dumps(doc.to_json_dict(), ensure_ascii=False, indent=2)


def export_lists_json(lists: List[WordList], words: List[Word]) -> str:
    """Same layout as the server's lists.json."""
    data = {
        "lists": [wl.to_json_dict() for wl in lists],
        "words": [w.to_json_dict() for w in words],
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


def export_scores_json(player: Player) -> str:
    """Same layout as the server's scores.json."""
    return json.dumps({"player": player.to_json_dict()}, ensure_ascii=False, indent=2)


def _duplicate_ids(items) -> List[int]:
    seen = Counter(item.id for item in items)
    return sorted(item_id for item_id, count in seen.items() if count > 1)


def parse_backup(raw: Union[str, bytes, Dict[str, Any]]) -> BackupDocument:
    """
    Validate a backup document. Raises InvalidBackup if it is not UTF-8 JSON,
    misses one of lists/words/player, repeats a list or word id, or has words
    pointing at unknown lists.
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidBackup("Backup is not valid JSON") from exc

    if not isinstance(raw, dict):
        raise InvalidBackup("Backup must be a JSON object")

    missing = [key for key in REQUIRED_SECTIONS if key not in raw]
    if missing:
        raise InvalidBackup(f"Backup is missing: {', '.join(missing)}")

    try:
        doc = BackupDocument.model_validate(raw)
    except PydanticValidationError as exc:
        raise InvalidBackup(f"Backup is malformed: {exc.error_count()} invalid field(s)") from exc

    dup_lists = _duplicate_ids(doc.lists)
    if dup_lists:
        raise InvalidBackup(f"Duplicate list ids: {dup_lists}")
    dup_words = _duplicate_ids(doc.words)
    if dup_words:
        raise InvalidBackup(f"Duplicate word ids: {dup_words}")

    list_ids = {wl.id for wl in doc.lists}
    orphans = sorted({w.list_id for w in doc.words if w.list_id not in list_ids})
    if orphans:
        raise InvalidBackup(f"Words reference unknown lists: {orphans}")
    return doc


def backup_from_repository(repo: JsonRepository) -> BackupDocument:
    return BackupDocument(
        lists=repo.get_lists(),
        words=repo.get_words(),
        player=repo.get_player(),
        initialized=repo.is_initialized(),
    )


def restore_into_repository(repo: JsonRepository, doc: BackupDocument) -> None:
    repo.replace_all(doc.lists, doc.words, doc.player)
