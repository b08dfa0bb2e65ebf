from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

import httpx

from ..config import Settings, settings as default_settings
from ..models import Player, Word, WordList
from .backup import BackupDocument, backup_from_repository, restore_into_repository
from .errors import BackendUnavailable, NotFound, ValidationError
from .repository import JsonRepository
from .seed import DEFAULT_DATASET, seed_initial_data

logger = logging.getLogger(__name__)


class DataBackend(ABC):
    """Where word lists and the player live: a remote API or local storage."""

    name: str = "abstract"

    @abstractmethod
    def is_available(self) -> bool:
        ...

    # ---------- List ops ----------

    @abstractmethod
    def get_lists(self) -> List[WordList]:
        ...

    @abstractmethod
    def create_list(self, name: str) -> WordList:
        ...

    @abstractmethod
    def delete_list(self, list_id: int) -> None:
        ...

    # ---------- Word ops ----------

    @abstractmethod
    def get_words(self, list_id: int) -> List[Word]:
        ...

    @abstractmethod
    def create_word(self, list_id: int, english: str, hebrew: str = "") -> Word:
        ...

    @abstractmethod
    def update_word(
        self,
        word_id: int,
        english: Optional[str] = None,
        hebrew: Optional[str] = None,
    ) -> Word:
        ...

    @abstractmethod
    def delete_word(self, word_id: int) -> None:
        ...

    # ---------- Score ops ----------

    @abstractmethod
    def get_player(self) -> Player:
        ...

    @abstractmethod
    def save_player(self, player: Player) -> Player:
        ...

    @abstractmethod
    def reset_player(self) -> Player:
        ...

    # ---------- Whole state ----------

    @abstractmethod
    def export_state(self) -> BackupDocument:
        ...

    @abstractmethod
    def replace_state(self, doc: BackupDocument) -> None:
        ...


class HttpBackend(DataBackend):
    """Talks to the REST API. Any transport failure becomes BackendUnavailable."""

    name = "api"

    def __init__(
        self,
        base_url: str = default_settings.api_base_url,
        client: Optional[httpx.Client] = None,
        timeout: float = default_settings.backend_timeout_sec,
    ):
        self.base_url = base_url
        self.client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = self.client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise BackendUnavailable(f"{method} {path} failed: {type(exc).__name__}") from exc

        if resp.status_code == 404:
            raise NotFound(self._error_message(resp, "Not found"))
        if resp.status_code == 400:
            raise ValidationError(self._error_message(resp, "Invalid request"))
        if resp.status_code >= 400:
            raise BackendUnavailable(f"{method} {path} returned {resp.status_code}")

        try:
            return resp.json()
        except ValueError as exc:
            raise BackendUnavailable(f"{method} {path} returned invalid JSON") from exc

    @staticmethod
    def _error_message(resp: httpx.Response, fallback: str) -> str:
        try:
            return resp.json().get("error", fallback)
        except ValueError:
            return fallback

    def is_available(self) -> bool:
        try:
            self._request("GET", "/health")
        except BackendUnavailable:
            return False
        except NotFound:
            # Older servers have no health route; the lists route will do.
            try:
                self._request("GET", "/lists")
            except (BackendUnavailable, NotFound):
                return False
        return True

    def get_lists(self) -> List[WordList]:
        return [WordList.model_validate(item) for item in self._request("GET", "/lists")]

    def create_list(self, name: str) -> WordList:
        return WordList.model_validate(self._request("POST", "/lists", json={"name": name}))

    def delete_list(self, list_id: int) -> None:
        self._request("DELETE", f"/lists/{list_id}")

    def get_words(self, list_id: int) -> List[Word]:
        return [Word.model_validate(item) for item in self._request("GET", f"/lists/{list_id}/words")]

    def create_word(self, list_id: int, english: str, hebrew: str = "") -> Word:
        data = self._request("POST", f"/lists/{list_id}/words", json={"english": english, "hebrew": hebrew})
        return Word.model_validate(data)

    def update_word(self, word_id, english=None, hebrew=None) -> Word:
        payload = {}
        if english is not None:
            payload["english"] = english
        if hebrew is not None:
            payload["hebrew"] = hebrew
        return Word.model_validate(self._request("PUT", f"/words/{word_id}", json=payload))

    def delete_word(self, word_id: int) -> None:
        self._request("DELETE", f"/words/{word_id}")

    def get_player(self) -> Player:
        return Player.model_validate(self._request("GET", "/scores"))

    def save_player(self, player: Player) -> Player:
        return Player.model_validate(self._request("PUT", "/scores", json=player.to_json_dict()))

    def reset_player(self) -> Player:
        return Player.model_validate(self._request("POST", "/scores/reset"))

    def export_state(self) -> BackupDocument:
        return BackupDocument.model_validate(self._request("GET", "/backup"))

    def replace_state(self, doc: BackupDocument) -> None:
        self._request("POST", "/backup", json=doc.to_json_dict())


class LocalBackend(DataBackend):
    """
    Local-only storage: the same JSON layout as the server, kept in a
    directory on this machine and seeded from the bundled word lists the
    first time it is used.
    """

    name = "local"

    def __init__(self, directory: Path, dataset_path: Path = DEFAULT_DATASET):
        self.repo = JsonRepository.in_directory(directory)
        self.dataset_path = dataset_path

    def _ensure_seeded(self) -> JsonRepository:
        seed_initial_data(self.repo, self.dataset_path)
        return self.repo

    def is_available(self) -> bool:
        return True

    def get_lists(self) -> List[WordList]:
        return self._ensure_seeded().get_lists()

    def create_list(self, name: str) -> WordList:
        return self._ensure_seeded().create_list(name)

    def delete_list(self, list_id: int) -> None:
        self._ensure_seeded().delete_list(list_id)

    def get_words(self, list_id: int) -> List[Word]:
        return self._ensure_seeded().get_words(list_id)

    def create_word(self, list_id: int, english: str, hebrew: str = "") -> Word:
        return self._ensure_seeded().create_word(list_id, english, hebrew)

    def update_word(self, word_id, english=None, hebrew=None) -> Word:
        return self._ensure_seeded().update_word(word_id, english=english, hebrew=hebrew)

    def delete_word(self, word_id: int) -> None:
        self._ensure_seeded().delete_word(word_id)

    def get_player(self) -> Player:
        return self.repo.get_player()

    def save_player(self, player: Player) -> Player:
        return self.repo.update_player(**player.model_dump())

    def reset_player(self) -> Player:
        return self.repo.reset_player()

    def export_state(self) -> BackupDocument:
        return backup_from_repository(self._ensure_seeded())

    def replace_state(self, doc: BackupDocument) -> None:
        restore_into_repository(self.repo, doc)


def choose_backend(
    config: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> DataBackend:
    """
    Probe the REST API once; use it if it answers, otherwise fall back to
    local storage for the rest of the session.
    """
    config = config or default_settings
    remote = HttpBackend(config.api_base_url, client=client, timeout=config.backend_timeout_sec)
    if remote.is_available():
        logger.info("using API backend at %s", config.api_base_url)
        return remote

    logger.warning("API at %s unavailable, using local storage in %s", config.api_base_url, config.local_data_dir)
    return LocalBackend(config.local_data_dir)
