"""The interactive ship terminal: command handling and the main loop."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum
from typing import TextIO

from terminalco.entities import GameState, Player, Ship
from terminalco.lists import BESTIARY, MOONS, STORE_ITEMS, find_moon, find_store_item

SEPARATOR = "-------------------------------------------------------------"
PROMPT = "> "

GREETING = (
    "Booting Terminal Company OS...",
    "Welcome to Terminal Company.",
    "Before proceeding, you must accept the Terms and Conditions.",
    "Type 'ACCEPT' to continue or 'DENY' to exit.",
)

HELP_LINES = (
    "moons          - Lists visitable planets",
    "go to [moon]   - Travel to a planet",
    "store          - Show the Store Items",
    "scan           - Scan the environment",
    "bestiary       - Show scannable creatures",
    "buy [item]     - Buy an item",
    "inventory      - Show your inventory",
    "help           - Show this help",
)


class TermsResponse(Enum):
    """Answer given to the terms and conditions prompt."""

    ACCEPT = "ACCEPT"
    DENY = "DENY"
    INVALID = "INVALID"


def parse_terms_response(text: str) -> TermsResponse:
    """Interpret a line typed at the terms prompt."""
    answer = text.strip().upper()
    if answer == TermsResponse.ACCEPT.value:
        return TermsResponse.ACCEPT
    if answer == TermsResponse.DENY.value:
        return TermsResponse.DENY
    return TermsResponse.INVALID


def new_game_state() -> GameState:
    """The state a fresh game starts from: one operator at the Company."""
    return GameState(
        players=[Player(name="tester01", role="Operator", hp=100, inventory=[], credits=30)],
        ship=Ship(location="Company", number_operators_alive=1, upgrades=[], decorations=[]),
        turn_number=1,
        is_game_over=False,
    )


def _strip_prefix(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


class Terminal:
    """Runs terminal commands against a game state."""

    def __init__(self, game_state: GameState | None = None, rng: random.Random | None = None):
        self.game_state = game_state if game_state is not None else new_game_state()
        self.rng = rng if rng is not None else random.Random()

    def execute(self, command: str) -> list[str]:
        """Run one command line and return the lines it prints."""
        command = command.strip()
        if command == "moons":
            return [SEPARATOR, "Visitable Moons:", SEPARATOR, ", ".join(MOONS), SEPARATOR]
        if command.startswith("go to "):
            return self._travel(_strip_prefix(command, "go to ").strip())
        if command == "store":
            return self._store()
        if command == "inventory":
            return self._inventory()
        if command == "scan":
            return [
                SEPARATOR,
                "Environment Scan:",
                SEPARATOR,
                f"Enemies detected: {self.rng.randrange(5)}",
                f"Total value of objects: {self.rng.randrange(1000)} credits",
                SEPARATOR,
            ]
        if command == "bestiary":
            lines = [SEPARATOR, "Scannable Creatures:", SEPARATOR]
            lines.extend(f"- {name}: {description}" for name, description in BESTIARY)
            lines.append(SEPARATOR)
            return lines
        if command == "help":
            return [SEPARATOR, "Commands available:", SEPARATOR, *HELP_LINES, SEPARATOR]
        if command.startswith("buy "):
            return self._buy(_strip_prefix(command, "buy ").strip())
        if command == "":
            return []
        return ["Command not recognized. Type 'help' for the list of commands."]

    def _travel(self, moon: str) -> list[str]:
        if find_moon(moon) is None:
            return [f"'{moon}' Moon not available."]
        ship = self.game_state.ship
        ship.location = moon
        return [
            f"Journey to {moon} underway...",
            f"Your current location is: {ship.location}",
        ]

    def _store(self) -> list[str]:
        lines = [SEPARATOR, "Available Items:"]
        for item in STORE_ITEMS:
            lines += [
                SEPARATOR,
                f"- {item.name}",
                f"- Price: {item.price} credits",
                f"- Description: {item.description}",
            ]
        lines.append(SEPARATOR)
        return lines

    def _inventory(self) -> list[str]:
        lines = [SEPARATOR, "Your Inventory Status:", SEPARATOR]
        player = self.game_state.players[0]
        if not player.inventory:
            lines.append("Your inventory is currently empty. Buy some items from the 'store'!")
        else:
            lines.extend(f"- {item.name}: {item.price} credits" for item in player.inventory)
        return lines

    def _buy(self, item_name: str) -> list[str]:
        item = find_store_item(item_name)
        if item is None:
            return [SEPARATOR, f"'{item_name}' item not available.", SEPARATOR]
        player = self.game_state.players[0]
        if player.credits < item.price:
            return [
                SEPARATOR,
                f"Not enough credits to purchase '{item.name}'.",
                f"You need {item.price} credits, but you have only {player.credits}.",
                SEPARATOR,
            ]
        player.credits -= item.price
        player.inventory.append(item)
        return [
            SEPARATOR,
            f"You have purchased '{item.name}' for {item.price} credits.",
            f"Your remaining credits: {player.credits}",
            SEPARATOR,
        ]


def run(
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
    rng: random.Random | None = None,
) -> Terminal | None:
    """Run an interactive session until the terms are denied or input ends.

    Returns the terminal used for the session, or None if the terms were not accepted.
    """
    source = input_stream if input_stream is not None else sys.stdin
    sink = output_stream if output_stream is not None else sys.stdout

    def emit(lines) -> None:
        for line in lines:
            sink.write(line + "\n")

    def read() -> str | None:
        sink.write(PROMPT)
        sink.flush()
        line = source.readline()
        return line if line else None

    emit(GREETING)
    while True:
        line = read()
        if line is None:
            return None
        response = parse_terms_response(line)
        if response is TermsResponse.ACCEPT:
            emit(["Thank you. Access granted."])
            break
        if response is TermsResponse.DENY:
            emit(["Access denied. Shutting down..."])
            return None
        emit(["Please type 'ACCEPT' or 'DENY'."])

    terminal = Terminal(rng=rng)
    while (line := read()) is not None:
        emit(terminal.execute(line))
    return terminal


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="terminalco", description="Ship terminal game.")
    parser.parse_args(argv)
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())