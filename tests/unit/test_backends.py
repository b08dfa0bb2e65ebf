import httpx
import pytest
import allure

from english_teach.config import Settings
from english_teach.core.backends import HttpBackend, LocalBackend, choose_backend
from english_teach.core.errors import BackendUnavailable, NotFound
from english_teach.core.progress import ProgressTracker
from english_teach.core.seed import load_default_dataset
from english_teach.core.word_store import WordStore

pytestmark = pytest.mark.unit


def offline_client() -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.Client(base_url="http://offline/api", transport=httpx.MockTransport(handler))


def status_client(status_code: int) -> httpx.Client:
    return httpx.Client(
        base_url="http://broken/api",
        transport=httpx.MockTransport(lambda request: httpx.Response(status_code, json={"error": "boom"})),
    )


@allure.feature("Data backends")
class TestLocalBackend:

    def test_seeded_on_first_use(self, local_backend):
        dataset = load_default_dataset()
        assert len(local_backend.get_lists()) == len(dataset["lists"])

    def test_crud(self, local_backend):
        wl = local_backend.create_list("Food")
        word = local_backend.create_word(wl.id, "bread")
        assert local_backend.update_word(word.id, hebrew="לחם").hebrew == "לחם"
        local_backend.delete_list(wl.id)
        assert local_backend.get_words(wl.id) == []

    def test_data_survives_a_new_instance(self, tmp_path):
        LocalBackend(tmp_path / "store").create_list("Food")
        names = [wl.name for wl in LocalBackend(tmp_path / "store").get_lists()]
        assert "Food" in names

    def test_always_available(self, local_backend):
        assert local_backend.is_available()


@allure.feature("Data backends")
class TestHttpBackendFailures:

    def test_connection_error(self):
        backend = HttpBackend(client=offline_client())
        assert not backend.is_available()
        with pytest.raises(BackendUnavailable):
            backend.get_lists()

    def test_server_error(self):
        with pytest.raises(BackendUnavailable):
            HttpBackend(client=status_client(500)).get_lists()

    def test_not_found_carries_message(self):
        with pytest.raises(NotFound, match="boom"):
            HttpBackend(client=status_client(404)).update_word(1, hebrew="x")


@allure.feature("Data backends")
class TestChooseBackend:

    def test_falls_back_to_local(self, tmp_path):
        config = Settings(api_base_url="http://offline/api", local_data_dir=tmp_path / "local")
        backend = choose_backend(config, client=offline_client())
        assert isinstance(backend, LocalBackend)
        assert backend.repo.lists_path.parent == tmp_path / "local"

    def test_uses_api_when_reachable(self, client, tmp_path):
        config = Settings(api_base_url="http://testserver/api", local_data_dir=tmp_path / "local")
        backend = choose_backend(config, client=client)
        assert isinstance(backend, HttpBackend)


@allure.feature("Data backends")
class TestStoreWithUnavailableBackend:

    def test_load_failure_keeps_empty_cache(self):
        store = WordStore(HttpBackend(client=offline_client()))
        assert store.load() is False
        assert store.lists() == []

    def test_writes_are_dropped_and_cache_kept(self, local_backend):
        store = WordStore(local_backend)
        store.load()
        before = store.lists()

        store.backend = HttpBackend(client=offline_client())
        assert store.add_list("Lost") is None
        assert store.delete_list(before[0].id) is False
        assert store.lists() == before

    def test_tracker_keeps_score_in_memory(self):
        tracker = ProgressTracker(HttpBackend(client=offline_client()))
        tracker.load()
        tracker.add_score(1)
        assert tracker.add_score(1).total_score == 2
        assert tracker.reset().total_score == 0


@allure.feature("Word store")
class TestWordStore:

    def test_load_and_lookup(self, local_backend):
        store = WordStore(local_backend)
        assert store.load()
        first = store.lists()[0]
        assert store.get_list(first.id) == first
        assert store.get_list(999) is None
        assert all(w.list_id == first.id for w in store.words_by_list(first.id))

    def test_add_update_delete_word(self, local_backend):
        store = WordStore(local_backend)
        store.load()
        wl = store.add_list("Weather")
        word = store.add_word("rain", "", wl.id)

        store.update_word(word.id, hebrew="גשם")
        assert store.words_by_list(wl.id)[0].hebrew == "גשם"

        store.delete_word(word.id)
        assert store.words_by_list(wl.id) == []

    def test_update_unknown_word(self, local_backend):
        store = WordStore(local_backend)
        store.load()
        with pytest.raises(NotFound):
            store.update_word(12345, hebrew="x")

    def test_delete_list_cascades_in_cache(self, local_backend):
        store = WordStore(local_backend)
        store.load()
        list_id = store.lists()[0].id
        assert store.words_by_list(list_id)

        store.delete_list(list_id)
        assert store.words_by_list(list_id) == []
        assert local_backend.get_words(list_id) == []
