"""Fixed game catalogues: moons, store items, ship extras and creatures."""

from __future__ import annotations

from dataclasses import replace

from terminalco.entities import Item

MOONS: tuple[str, ...] = (
    "Experimentation",
    "Assurance",
    "Vow",
    "Offense",
    "March",
    "Adamance",
    "Rend",
    "Dine",
    "Titan",
    "Artifice",
    "Embrion",
    "Liquidation",
    "Company",
)

STORE_ITEMS: tuple[Item, ...] = (
    Item("Shovel", 30, 8.0, "A standard-issue shovel. Digs things."),
    Item("Spray Paint", 50, 0.0, "For marking paths or walls."),
    Item("Stun Grenade", 40, 5.0, "A non-lethal grenade to stun creatures."),
    Item(
        "TZP-Inhalant",
        120,
        0.0,
        "Makes you move faster and use less stamina + Squeaky voice.",
    ),
    Item(
        "Walkie-Talkie",
        12,
        0.0,
        "Allows Map Wide Communication (Uses Battery Charge) (Has Large Charge).",
    ),
    Item("Zap Gun", 400, 11.0, "Scans for Monsters and Stuns them (uses battery charge)."),
    Item("Weed Killer", 25, 0.0, "Sprays a non-lethal poison. (Counts as a sound source)"),
    Item(
        "Company Cruiser",
        400,
        0.0,
        "Can be bought for free one time if destroyed or lost. Cannot be carried.",
    ),
    Item(
        "Belt Bag",
        45,
        15.5,
        "A small bag that can be carried in a single hand. Holds 4 items.",
    ),
    Item(
        "Survival Kit",
        138,
        0.0,
        "A kit containing 4 Flashlights, 4 Walkie-talkies, and a Shovel.",
    ),
    Item(
        "Flashlight",
        15,
        5.0,
        "A small portable light source. (Uses battery charge) (Has Large Charge)",
    ),
    Item(
        "Pro-flashlight",
        25,
        5.0,
        "A powerful portable light source. (Uses battery charge) (Has Large Charge)",
    ),
)

SHIP_UPGRADES: tuple[str, ...] = (
    "Teleporter",
    "Inverse Teleporter",
    "Loud Horn",
    "Signal Translator",
)

SHIP_DECORATIONS: tuple[str, ...] = ("Cozy Lights", "Decoy Suit", "Brown Suit", "Purple Suit")

BESTIARY: tuple[tuple[str, str], ...] = (
    ("Barber", "A humanoid clay creature carrying scissors; invisible at range, slashes players when close."),
    ("Bracken", "Shadowy predator that stalks silently; flees when watched, but enrages under prolonged gaze."),
    ("Bunker Spider", "Large territorial spider; hides in webs and attacks aggressively if disturbed."),
    (
        "Butler",
        "Blobfish-like janitor; sweeps harmlessly until it stabs isolated players, then bursts into hornets on death.",
    ),
    ("Coil-Head", "Spring-neck mannequin that moves only when not observed; impossible to kill permanently."),
    ("Ghost Girl", "Spectral girl visible only to her target; suddenly appears and instantly kills them."),
    ("Hoarding Bug", "Insect that gathers scrap into nests; mostly harmless unless provoked."),
    ("Hygrodere", "Slow amorphous slime; kills only by engulfment, but moves very slowly."),
    ("Jester", "Jack-in-the-box entity; after winding up, pops open into a deadly monster."),
    ("Maneater", "Sentient larva; harmless when cared for, lethal if allowed to mature."),
    ("Masked", "Possessive mask that turns victims into Masked entities; hunts and converts players."),
    ("Nutcracker", "Animated wooden soldier with shotgun; shoots players on sight, weak when eye is exposed."),
    ("Snare Flea", "Ceiling-dwelling insect; drops onto players\u2019 heads to suffocate them."),
    ("Spore Lizard", "Small reptile; timid and releases harmless spores when threatened."),
    ("Thumper", "Shark-like biped; deaf but fast, sprints and bites rapidly to kill."),
    ("Baboon Hawk", "Primate-bird hybrid in flocks; harasses players, steals scrap, fights other creatures."),
    ("Earth Leviathan", "Colossal sandworm; erupts from ground after warning, instantly crushing targets."),
    ("Eyeless Dog", "Blind canine hunter; tracks by sound, deadly in packs."),
    ("Forest Keeper", "Giant satyr-like predator; fast and lethal outdoors, grabs and eats victims."),
    ("Old Bird", "Massive mech-like humanoid; flies and attacks with missiles and melee strikes."),
    ("Circuit Bee", "Aggressive bees defending ground hives; swarm with electric shocks."),
    ("Manticoil", "Four-winged bird; completely harmless, flees when approached."),
    ("Roaming Locust", "Insect swarm; harmless, scatters if disturbed, attracted to light."),
    ("Tulip Snake", "Snake that latches onto players\u2019 heads; can lift them briefly before detaching."),
    ("Giant Sapsucker", "Huge woodpecker-like bird; defends nest violently, chases intruders long distances."),
)


def find_moon(name: str) -> str | None:
    """Return the catalogue spelling of a moon, matched without regard to ASCII case."""
    wanted = name.lower()
    return next((moon for moon in MOONS if moon.lower() == wanted), None)


def find_store_item(name: str) -> Item | None:
    """Return a fresh copy of the store item with this name, ignoring case."""
    wanted = name.lower()
    found = next((item for item in STORE_ITEMS if item.name.lower() == wanted), None)
    return replace(found) if found is not None else None