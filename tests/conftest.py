import pytest
from fastapi.testclient import TestClient

from string_analyzer.analyzer import build_record
from string_analyzer.main import app
from string_analyzer.store import StringStore, get_store


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def records():
    values = ["level", "Hello World", "abc", "racecar", "a b a", "Zebra crossing", "noon"]
    return [build_record(value) for value in values]
