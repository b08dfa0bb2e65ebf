from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar

from ..models import Word, WordList
from .backends import DataBackend
from .backup import BackupDocument, export_backup, parse_backup
from .errors import BackendUnavailable, NotFound

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WordStore:
    """
    In-memory mirror of the word lists held by a DataBackend.

    Reads are served from the cache. Writes go to the backend first and only
    touch the cache once the backend accepted them; if the backend is
    unreachable the write is dropped and the cache stays as it was.
    """

    def __init__(self, backend: DataBackend):
        self.backend = backend
        self._lists: List[WordList] = []
        self._words: List[Word] = []

    def _call(self, action: str, fn: Callable[[], T]) -> Optional[T]:
        try:
            return fn()
        except BackendUnavailable as exc:
            logger.warning("%s failed on %s backend: %s", action, self.backend.name, exc)
            return None

    def _run(self, action: str, fn: Callable[[], None]) -> bool:
        try:
            fn()
        except BackendUnavailable as exc:
            logger.warning("%s failed on %s backend: %s", action, self.backend.name, exc)
            return False
        return True

    def load(self) -> bool:
        """Fetch all lists and their words. Returns False if the backend failed."""

        def fetch():
            lists = self.backend.get_lists()
            words: List[Word] = []
            for wl in lists:
                words.extend(self.backend.get_words(wl.id))
            return lists, words

        result = self._call("load", fetch)
        if result is None:
            return False
        self._lists, self._words = result
        return True

    # ---------- Lists ----------

    def lists(self) -> List[WordList]:
        return list(self._lists)

    def get_list(self, list_id: int) -> Optional[WordList]:
        return next((wl for wl in self._lists if wl.id == list_id), None)

    def add_list(self, name: str) -> Optional[WordList]:
        wl = self._call("add_list", lambda: self.backend.create_list(name))
        if wl is not None:
            self._lists.append(wl)
        return wl

    def delete_list(self, list_id: int) -> bool:
        if not self._run("delete_list", lambda: self.backend.delete_list(list_id)):
            return False
        self._lists = [wl for wl in self._lists if wl.id != list_id]
        self._words = [w for w in self._words if w.list_id != list_id]
        return True

    # ---------- Words ----------

    def words_by_list(self, list_id: int) -> List[Word]:
        return [w for w in self._words if w.list_id == list_id]

    def all_words(self) -> List[Word]:
        return list(self._words)

    def get_word(self, word_id: int) -> Optional[Word]:
        return next((w for w in self._words if w.id == word_id), None)

    def add_word(self, english: str, hebrew: str, list_id: int) -> Optional[Word]:
        w = self._call("add_word", lambda: self.backend.create_word(list_id, english, hebrew))
        if w is not None:
            self._words.append(w)
        return w

    def update_word(
        self,
        word_id: int,
        english: Optional[str] = None,
        hebrew: Optional[str] = None,
    ) -> Optional[Word]:
        if not any(w.id == word_id for w in self._words):
            raise NotFound("Word not found")

        updated = self._call(
            "update_word",
            lambda: self.backend.update_word(word_id, english=english, hebrew=hebrew),
        )
        if updated is not None:
            self._words = [updated if w.id == word_id else w for w in self._words]
        return updated

    def delete_word(self, word_id: int) -> bool:
        if not self._run("delete_word", lambda: self.backend.delete_word(word_id)):
            return False
        self._words = [w for w in self._words if w.id != word_id]
        return True

    # ---------- Backup ----------

    def export_backup(self) -> Optional[str]:
        doc = self._call("export", self.backend.export_state)
        return export_backup(doc) if doc is not None else None

    def import_backup(self, raw) -> BackupDocument:
        """
        Replace all lists, words and the player with a backup document.
        InvalidBackup propagates and nothing is changed.
        """
        doc = parse_backup(raw)
        self.backend.replace_state(doc)
        self._lists = list(doc.lists)
        self._words = list(doc.words)
        return doc
