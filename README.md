# terminalco

A small text-terminal game. You work as an operator for the Company. You can
list moons, fly the ship between them, browse the store, buy gear with your
credits, scan the surroundings and read the bestiary.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
terminalco
```

The terminal first asks you to accept the Terms and Conditions. Type `ACCEPT`
to continue or `DENY` to quit; case and surrounding spaces do not matter. Any
other answer asks again. After that, these commands are available:

| Command        | What it does                                         |
|----------------|------------------------------------------------------|
| `moons`        | Lists visitable moons                                |
| `go to [moon]` | Travels to a moon                                    |
| `store`        | Shows the store items with prices and descriptions   |
| `scan`         | Reports a random enemy count (0-4) and scrap value (0-999) |
| `bestiary`     | Shows scannable creatures                            |
| `buy [item]`   | Buys an item if you have enough credits              |
| `inventory`    | Shows your inventory                                 |
| `help`         | Shows the command list                               |

An empty line does nothing; anything else prints a hint to type `help`. The
session ends when input runs out (for example Ctrl-D).

A new game starts with one operator, `tester01`, who has 100 HP and 30
credits, and the ship parked at the Company. Moon and item names are matched
without regard to case.

## Using it as a library

```python
from terminalco.terminal import Terminal, new_game_state

terminal = Terminal(new_game_state())
print(terminal.execute("buy shovel"))
print(terminal.execute("inventory"))
```

`Terminal.execute` takes one command line and returns the lines it would
print. `Terminal` also accepts a `random.Random` as `rng`, which makes `scan`
reproducible. `terminalco.terminal.run(input_stream, output_stream, rng)` runs
a whole session, terms prompt included, over any text streams and returns the
`Terminal` used, or `None` if the terms were denied or input ended first.
`parse_terms_response` turns a typed answer into a `TermsResponse`.

`terminalco.lists` holds `MOONS`, `STORE_ITEMS`, `SHIP_UPGRADES`,
`SHIP_DECORATIONS` and `BESTIARY`, with `find_moon` and `find_store_item` for
lookups that ignore case (`find_store_item` returns a fresh copy of the item).
`terminalco.entities` defines the dataclasses `Item`, `Player`, `Ship` and
`GameState`. Each has `to_dict` and `from_dict`; `from_dict` raises
`ValueError` on missing fields or values of the wrong type.

## Saving to MongoDB

`terminalco.storage` keeps a single game state in the `game_state` collection
of the `terminal_company` database:

```python
from terminalco.storage import get_game_state_collection, save_game_state, load_game_state

collection = get_game_state_collection("mongodb://localhost:27017")
save_game_state(state, collection)
restored = load_game_state(collection)
```

`get_game_state_collection` pings the server before returning the collection.
`save_game_state` removes whatever was stored before and inserts the new
state. `load_game_state` returns `None` when nothing has been saved. When no
collection is passed, both connect to `mongodb://localhost:27017`. Failures to
connect, delete, insert or load, and stored documents that do not form a valid
game state, raise `StorageError`.

## What it does not do

The interactive terminal does not save or load games: every session starts
from a new game state, and the storage functions are only available from
Python. There are no commands for ship upgrades or decorations, though their
names are listed in `terminalco.lists`.