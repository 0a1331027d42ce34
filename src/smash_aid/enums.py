"""Roster, move kinds, and special-slot names.

CHARACTERS lists the page names on the frame-data site, which double as
character identifiers. character_filename() maps an identifier to the name
of its persisted JSON document.
"""

import re

CHARACTERS = [
    "Mario", "Luigi", "Peach", "Bowser", "Yoshi",
    "Rosalina And Luma", "Donkey Kong", "Diddy Kong",
    "Link", "Zelda", "Sheik", "Toon Link", "Samus",
    "Zero Suit Samus", "Pit", "Palutena", "Marth", "Ike",
    "Robin", "Kirby", "King Dedede", "Meta Knight", "Little Mac",
    "Fox", "Pikachu", "Charizard", "Lucario", "Greninja",
    "Captain Falcon", "Villager", "Olimar", "Wii Fit Trainer",
    "Shulk", "Pac-Man", "Mega Man", "Sonic", "Ness", "Falco",
    "Wario", "Lucina", "Dark Pit", "Dr. Mario", "R.O.B", "Ganondorf",
    "Game And Watch", "Bowser Jr", "Duck Hunt", "Jigglypuff",
    "Mewtwo", "Lucas", "Roy", "Ryu", "Cloud", "Corrin", "Bayonetta",
]

# Kinds stored as one record per group; every other kind accumulates a list
SINGLE_RECORD_KINDS = frozenset({"throw", "grab", "defensive"})

# Canonical special slots, in the order they appear on a character page
SPECIAL_SLOTS = ("neutral special", "side special", "up special", "down special")

# Reserved moveset key holding the four special slots
SPECIALS_KEY = "specials"


def character_filename(character: str) -> str:
    """JSON file name for a character identifier.

    >>> character_filename("Dr. Mario")
    'dr_mario.json'
    >>> character_filename("Pac-Man")
    'pac_man.json'
    """
    stem = character.strip().lower().replace(".", "")
    stem = re.sub(r"[\s\-]+", "_", stem)
    stem = re.sub(r"[^\w]", "", stem)
    return f"{stem}.json"
