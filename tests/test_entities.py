import json

import pytest

from terminalco.entities import GameState, Item, Player, Ship


def _state():
    shovel = Item(name="Shovel", price=30, weight=8.0, description="Digs things.")
    player = Player(name="tester01", role="Operator", hp=100, inventory=[shovel], credits=30)
    ship = Ship(location="Company", number_operators_alive=1, upgrades=["Teleporter"], decorations=[])
    return GameState(players=[player], ship=ship, turn_number=1, is_game_over=False)


def test_item_round_trip():
    item = Item(name="Flashlight", price=15, weight=5.0, description="Light.")
    assert Item.from_dict(item.to_dict()) == item


def test_item_dict_keys():
    item = Item(name="Zap Gun", price=400, weight=11.0, description="Stuns.")
    assert item.to_dict() == {
        "name": "Zap Gun",
        "price": 400,
        "weight": 11.0,
        "description": "Stuns.",
    }


def test_game_state_round_trip_through_json():
    state = _state()
    encoded = json.dumps(state.to_dict())
    assert GameState.from_dict(json.loads(encoded)) == state


def test_game_state_nested_dict_shape():
    data = _state().to_dict()
    assert data["players"][0]["inventory"][0]["name"] == "Shovel"
    assert data["ship"]["location"] == "Company"
    assert data["is_game_over"] is False


def test_from_dict_ignores_extra_keys():
    data = _state().to_dict()
    data["_id"] = "some-object-id"
    assert GameState.from_dict(data) == _state()


def test_player_defaults():
    player = Player(name="a", role="b", hp=1)
    assert player.inventory == []
    assert player.credits == 0


def test_missing_field_raises():
    data = Item(name="x", price=1, weight=0.0, description="d").to_dict()
    del data["price"]
    with pytest.raises(ValueError):
        Item.from_dict(data)


def test_negative_number_rejected():
    data = Player(name="a", role="b", hp=1).to_dict()
    data["credits"] = -5
    with pytest.raises(ValueError):
        Player.from_dict(data)


def test_wrong_type_rejected():
    data = _state().to_dict()
    data["is_game_over"] = "no"
    with pytest.raises(ValueError):
        GameState.from_dict(data)


def test_ship_upgrades_must_be_strings():
    data = Ship(location="Vow", number_operators_alive=2).to_dict()
    data["upgrades"] = [1, 2]
    with pytest.raises(ValueError):
        Ship.from_dict(data)