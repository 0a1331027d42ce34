"""Move-name classification and character alias resolution.

Frame-data tables label their rows loosely: "Ftilt (up angled)", "Jab 1",
"U.Smash", "Nair". classify_move_name() turns such a label into a MoveName
with a canonical group ("forward tilt") and a modifier ("up angled") that
tells variants of one group apart.

Typical usage:
    from smash_aid.aliases import classify_move_name, resolve_character

    classify_move_name("Ftilt (up angled)")  # -> MoveName("forward tilt", "up angled")
    classify_move_name("Jab 1")              # -> MoveName("jab", "1")
    resolve_character("doctor mario")        # -> "dr mario"
"""

import re
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Move abbreviations
# ---------------------------------------------------------------------------

MOVE_ABBREVIATIONS = {
    "utilt": "up tilt",
    "dtilt": "down tilt",
    "ftilt": "forward tilt",
    "fsmash": "forward smash",
    "dsmash": "down smash",
    "usmash": "up smash",
    "airdodge": "air dodge",
    "spotdodge": "spot dodge",
    "dthrow": "down throw",
    "uthrow": "up throw",
    "bthrow": "back throw",
    "fthrow": "forward throw",
    "nair": "neutral air",
    "fair": "forward air",
    "dair": "down air",
    "uair": "up air",
    "bair": "back air",
}


# ---------------------------------------------------------------------------
# Character aliases: spoken word -> word used in character identifiers
# ---------------------------------------------------------------------------

CHARACTER_WORD_ALIASES = {
    "doctor": "dr",
    "junior": "jr",
    "&": "and",
}


@dataclass(frozen=True)
class MoveName:
    """A classified move label: canonical group plus variant modifier."""
    group: str
    modifier: str = ""


def _collapse(text: str) -> str:
    return " ".join(text.split())


def standardize_move_name(name: str) -> str:
    """Lowercase, drop periods, and expand a known abbreviation.

    >>> standardize_move_name("U.Tilt")
    'up tilt'
    >>> standardize_move_name("Falcon Punch")
    'falcon punch'
    """
    key = _collapse(name.lower().replace(".", ""))
    return MOVE_ABBREVIATIONS.get(key, key)


def _is_integer(token: str) -> bool:
    try:
        int(token)
    except ValueError:
        return False
    return True


def classify_move_name(label: str) -> MoveName:
    """Split a raw row label into a canonical group and a modifier.

    Checks in order:
    1. A parenthetical suffix, "Ftilt (up angled)" -> modifier "up angled"
    2. A trailing integer token, "Jab 1" -> modifier "1"
    3. Abbreviation lookup on what remains, "ftilt" -> "forward tilt"

    Never raises; a label nothing matches standardizes to itself.

    Args:
        label: Row header text as it appears in the source table.

    Returns:
        MoveName with a lowercase group and a possibly-empty modifier.
    """
    base = label.strip()
    modifier = ""

    if " (" in base:
        base, _, suffix = base.partition(" (")
        modifier = _collapse(re.sub(r"[(),]", "", suffix.lower()))

    words = base.split()
    if len(words) > 1 and _is_integer(words[-1]):
        modifier = f"{modifier} {words[-1]}".strip()
        base = " ".join(words[:-1])

    return MoveName(group=standardize_move_name(base), modifier=modifier)


# ---------------------------------------------------------------------------
# Character resolution
# ---------------------------------------------------------------------------

def resolve_character(name: str) -> str:
    """Normalize a spoken character name to the wording used in file names.

    "Doctor Mario" and "Dr. Mario" both become "dr mario"; "Bowser Junior"
    becomes "bowser jr".
    """
    words = name.lower().replace(".", "").split()
    return " ".join(CHARACTER_WORD_ALIASES.get(w, w) for w in words)
