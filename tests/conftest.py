"""
Shared fixtures: a repository in a temp directory, the API wired to it,
and a couple of small word sets.
"""
import random

import pytest
from fastapi.testclient import TestClient

from english_teach.core.backends import HttpBackend, LocalBackend
from english_teach.core.repository import JsonRepository, get_repository
from english_teach.main import app
from english_teach.models import Word


@pytest.fixture
def repo(tmp_path):
    """Server repository with one list: cat/dog."""
    repository = JsonRepository.in_directory(tmp_path / "data")
    animals = repository.create_list("Animals")
    repository.create_word(animals.id, "cat", "חתול")
    repository.create_word(animals.id, "dog", "כלב")
    return repository


@pytest.fixture
def empty_repo(tmp_path):
    return JsonRepository.in_directory(tmp_path / "empty")


@pytest.fixture
def client(repo):
    # Not used as a context manager: the startup hook would seed settings.data_dir
    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app, base_url="http://testserver/api")
    app.dependency_overrides.clear()


@pytest.fixture
def http_backend(client):
    return HttpBackend(base_url="http://testserver/api", client=client)


@pytest.fixture
def local_backend(tmp_path):
    return LocalBackend(tmp_path / "local")


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sample_words():
    return [
        Word(id=1, english="cat", hebrew="חתול", list_id=1),
        Word(id=2, english="dog", hebrew="כלב", list_id=1),
    ]


@pytest.fixture
def many_words():
    pairs = [
        ("cat", "חתול"), ("dog", "כלב"), ("bird", "ציפור"), ("fish", "דג"),
        ("horse", "סוס"), ("lion", "אריה"), ("red", "אדום"), ("blue", "כחול"),
    ]
    return [
        Word(id=i, english=en, hebrew=he, list_id=1)
        for i, (en, he) in enumerate(pairs, start=1)
    ]
