import copy
import itertools

import pytest
from pymongo.errors import OperationFailure

from terminalco.entities import GameState, Item, Player, Ship
from terminalco.storage import (
    StorageError,
    get_game_state_collection,
    load_game_state,
    save_game_state,
)


class FakeCollection:
    def __init__(self, fail_on=None):
        self.documents = []
        self.fail_on = fail_on
        self._ids = itertools.count(1)

    def _check(self, name):
        if self.fail_on == name:
            raise OperationFailure(f"{name} refused")

    def delete_many(self, query):
        self._check("delete_many")
        self.documents.clear()

    def insert_one(self, document):
        self._check("insert_one")
        document["_id"] = next(self._ids)
        self.documents.append(copy.deepcopy(document))

    def find_one(self, query):
        self._check("find_one")
        return copy.deepcopy(self.documents[0]) if self.documents else None


def _state(turn=1, credits=30):
    player = Player(
        name="tester01",
        role="Operator",
        hp=100,
        inventory=[Item("Shovel", 30, 8.0, "Digs.")],
        credits=credits,
    )
    ship = Ship(location="Company", number_operators_alive=1)
    return GameState(players=[player], ship=ship, turn_number=turn, is_game_over=False)


def test_save_then_load_round_trip(capsys):
    collection = FakeCollection()
    save_game_state(_state(), collection)
    assert load_game_state(collection) == _state()
    out = capsys.readouterr().out
    assert "Game state saved successfully." in out
    assert "Game state loaded." in out


def test_save_replaces_previous_state():
    collection = FakeCollection()
    save_game_state(_state(turn=1), collection)
    save_game_state(_state(turn=2, credits=0), collection)
    assert len(collection.documents) == 1
    assert load_game_state(collection) == _state(turn=2, credits=0)


def test_load_from_empty_collection():
    assert load_game_state(FakeCollection()) is None


@pytest.mark.parametrize("operation", ["delete_many", "insert_one"])
def test_save_failure_raises_storage_error(operation):
    with pytest.raises(StorageError):
        save_game_state(_state(), FakeCollection(fail_on=operation))


def test_load_failure_raises_storage_error():
    with pytest.raises(StorageError):
        load_game_state(FakeCollection(fail_on="find_one"))


def test_load_corrupt_document_raises_storage_error():
    collection = FakeCollection()
    collection.documents.append({"_id": 1, "turn_number": 3})
    with pytest.raises(StorageError):
        load_game_state(collection)


def test_invalid_uri_raises_storage_error():
    with pytest.raises(StorageError):
        get_game_state_collection("not-a-mongo-uri")