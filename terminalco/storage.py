"""Persistence of the game state in a MongoDB collection."""

from __future__ import annotations

from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from terminalco.entities import GameState

DEFAULT_URI = "mongodb://localhost:27017"
DATABASE_NAME = "terminal_company"
COLLECTION_NAME = "game_state"
_SERVER_SELECTION_TIMEOUT_MS = 5000


class StorageError(Exception):
    """Raised when the game state store cannot be reached or used."""


def get_game_state_collection(uri: str = DEFAULT_URI) -> Any:
    """Connect, check the server answers a ping, and return the game state collection."""
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=_SERVER_SELECTION_TIMEOUT_MS)
    except PyMongoError as exc:
        raise StorageError(f"Failed to create client: {exc}") from exc
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise StorageError(f"Failed to connect to MongoDB: {exc}") from exc
    return client[DATABASE_NAME][COLLECTION_NAME]


def save_game_state(game_state: GameState, collection: Any = None) -> None:
    """Replace whatever is stored with this game state."""
    if collection is None:
        collection = get_game_state_collection()
    try:
        collection.delete_many({})
    except PyMongoError as exc:
        raise StorageError(f"Failed to delete: {exc}") from exc
    try:
        collection.insert_one(game_state.to_dict())
    except PyMongoError as exc:
        raise StorageError(f"Failed to insert: {exc}") from exc
    print("Game state saved successfully.")


def load_game_state(collection: Any = None) -> GameState | None:
    """Return the stored game state, or None when nothing has been saved."""
    if collection is None:
        collection = get_game_state_collection()
    try:
        document = collection.find_one({})
    except PyMongoError as exc:
        raise StorageError(f"Failed to load: {exc}") from exc
    if document is None:
        return None
    document = {key: value for key, value in document.items() if key != "_id"}
    try:
        state = GameState.from_dict(document)
    except ValueError as exc:
        raise StorageError(f"Failed to load: {exc}") from exc
    print("Game state loaded.")
    return state