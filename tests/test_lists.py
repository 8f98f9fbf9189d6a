import pytest

from terminalco.lists import (
    BESTIARY,
    MOONS,
    SHIP_DECORATIONS,
    SHIP_UPGRADES,
    STORE_ITEMS,
    find_moon,
    find_store_item,
)


@pytest.mark.parametrize("name", ["vow", "VOW", "Vow", "vOw"])
def test_find_moon_ignores_case(name):
    assert find_moon(name) == "Vow"


def test_find_moon_every_moon_finds_itself():
    assert [find_moon(moon.upper()) for moon in MOONS] == list(MOONS)


def test_find_moon_unknown():
    assert find_moon("Pluto") is None


def test_find_moon_empty():
    assert find_moon("") is None


def test_find_store_item_by_lowercase_name():
    item = find_store_item("shovel")
    assert item.name == "Shovel"
    assert item.price == 30


def test_find_store_item_returns_copy():
    item = find_store_item("Zap Gun")
    item.price = 1
    assert find_store_item("zap gun").price == 400


def test_find_store_item_unknown():
    assert find_store_item("Jetpack") is None


def test_catalogue_names_are_unique():
    found = [find_store_item(item.name.lower()) for item in STORE_ITEMS]
    assert [item.name for item in found] == [item.name for item in STORE_ITEMS]
    assert [item.price for item in found] == [item.price for item in STORE_ITEMS]
    assert len({name for name, _ in BESTIARY}) == len(BESTIARY)


def test_catalogue_sizes():
    assert len(MOONS) == 13
    assert find_moon("company") == MOONS[-1]
    assert len(STORE_ITEMS) == 12
    assert find_store_item("pro-flashlight").price == 25
    assert len(BESTIARY) == 25
    assert "Teleporter" in SHIP_UPGRADES
    assert "Cozy Lights" in SHIP_DECORATIONS