import pytest

from gamedeals.core.database import build_engine
from gamedeals.logic.errors import StorageFailure
from gamedeals.logic.store import GameStore
from gamedeals.logic.validation import normalize_game
from gamedeals.models.games import GameRecord
from tests.conftest import make_game


@pytest.fixture()
def store(engine):
    return GameStore(engine)


def test_insert_assigns_keys_and_find_one_returns_dict(store):
    first = store.insert_one(normalize_game(make_game()))
    second = store.insert_one(normalize_game(make_game(gameID="147", title="Batman: Arkham City")))
    assert first != second

    found = store.find_one(GameRecord.id == second)
    assert found["id"] == second
    assert found["title"] == "Batman: Arkham City"
    assert found["deals"] == [{"storeID": "1", "price": 19.99}, {"storeID": "7", "price": 4.99}]


def test_find_one_missing_returns_none(store):
    assert store.find_one(GameRecord.id == 999) is None


def test_find_all_in_key_order(store):
    keys = [store.insert_one(normalize_game(make_game(gameID=str(n), title=f"Game {n}"))) for n in range(3)]
    assert [game["id"] for game in store.find_all()] == keys


def test_update_one_reports_modified_count(store):
    key = store.insert_one(normalize_game(make_game()))
    replacement = normalize_game(make_game(thumb=None))

    assert store.update_one(key, replacement) == 1
    assert store.find_one(GameRecord.id == key)["thumb"] is None
    # Same values again: nothing modified
    assert store.update_one(key, replacement) == 0


def test_update_one_missing_key(store):
    assert store.update_one(42, normalize_game(make_game())) == 0


def test_delete_one_and_delete_many(store):
    keys = [store.insert_one(normalize_game(make_game(gameID=str(n), title=f"Game {n}"))) for n in range(3)]

    assert store.delete_one(keys[0]) == 1
    assert store.delete_one(keys[0]) == 0
    assert store.delete_many() == 2
    assert store.delete_many() == 0
    assert store.find_all() == []


def test_driver_errors_become_storage_failures():
    # Tables were never created on this engine
    store = GameStore(build_engine("sqlite://"))
    with pytest.raises(StorageFailure):
        store.find_all()
