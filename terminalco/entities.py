"""Game entities: items, players, the ship and the overall game state."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

_U32_MAX = 2**32 - 1


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None
    except TypeError:
        raise ValueError(f"expected a mapping, got {type(data).__name__}") from None


def _u32(data: Mapping[str, Any], key: str) -> int:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"field {key!r} out of range: {value}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _float(data: Mapping[str, Any], key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = _require(data, key)
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean, got {value!r}")
    return value


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = _require(data, key)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"field {key!r} must be a list of strings")
    return list(value)


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = _require(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    return value


@dataclass
class Item:
    """Something that can be bought in the store and carried."""

    name: str
    price: int
    weight: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Item:
        return cls(
            name=_str(data, "name"),
            price=_u32(data, "price"),
            weight=_float(data, "weight"),
            description=_str(data, "description"),
        )


@dataclass
class Player:
    """An operator with health, credits and an inventory."""

    name: str
    role: str
    hp: int
    inventory: list[Item] = field(default_factory=list)
    credits: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Player:
        return cls(
            name=_str(data, "name"),
            role=_str(data, "role"),
            hp=_u32(data, "hp"),
            inventory=[Item.from_dict(entry) for entry in _list(data, "inventory")],
            credits=_u32(data, "credits"),
        )


@dataclass
class Ship:
    """The crew's ship, its location and its fittings."""

    location: str
    number_operators_alive: int
    upgrades: list[str] = field(default_factory=list)
    decorations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ship:
        return cls(
            location=_str(data, "location"),
            number_operators_alive=_u32(data, "number_operators_alive"),
            upgrades=_str_list(data, "upgrades"),
            decorations=_str_list(data, "decorations"),
        )


@dataclass
class GameState:
    """Everything that makes up a running game."""

    players: list[Player]
    ship: Ship
    turn_number: int
    is_game_over: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameState:
        return cls(
            players=[Player.from_dict(entry) for entry in _list(data, "players")],
            ship=Ship.from_dict(_require(data, "ship")),
            turn_number=_u32(data, "turn_number"),
            is_game_over=_bool(data, "is_game_over"),
        )