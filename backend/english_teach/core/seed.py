import json
import logging
from pathlib import Path
from typing import Any, Dict

from ..models import Word, WordList, new_player
from .repository import JsonRepository

logger = logging.getLogger(__name__)

DEFAULT_DATASET = Path(__file__).resolve().parent.parent / "data" / "default_lists.json"


def load_default_dataset(path: Path = DEFAULT_DATASET) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def seed_initial_data(repo: JsonRepository, dataset_path: Path = DEFAULT_DATASET) -> bool:
    """Seed the bundled word lists if the repository has no data yet."""
    if repo.is_initialized():
        return False

    data = load_default_dataset(dataset_path)
    lists = [WordList.model_validate(item) for item in data.get("lists", [])]
    words = [Word.model_validate(item) for item in data.get("words", [])]

    # Keep an existing player (scores.json may survive a deleted lists.json)
    player = repo.get_player() if repo.scores_path.exists() else new_player()

    repo.replace_all(lists, words, player)
    logger.info("seeded %d lists and %d words into %s", len(lists), len(words), repo.lists_path.parent)
    return True
