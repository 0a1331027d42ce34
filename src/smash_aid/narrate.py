"""Spoken-English descriptions of frame data.

narrate() takes the record(s) stored for one move group and produces text
meant for speech synthesis:

    narrate("Mario", "forward tilt", Attack("5-7", "30", ...))
    # -> "Mario's forward tilt is active frames 5 to 7. Mario can act on frame 30."

Everything here is a pure function of its arguments. Records are frozen and
every step builds a new string.
"""

import re

from smash_aid.errors import UnrecognizedMoveError
from smash_aid.moves import HITBOX_KINDS, MoveRecord

# Kinds whose records carry a first-actionable-frame value
FAF_KINDS = frozenset({"attack", "aerial", "special", "grab", "defensive"})

_LEADING_INT = re.compile(r"^\d+")
_NUMBER_RANGE = re.compile(r"(\d)\s*-\s*(\d)")


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

def spoken_ranges(text: str) -> str:
    """Spell numeric ranges out: "5-7" -> "5 to 7"."""
    return _NUMBER_RANGE.sub(r"\1 to \2", text)


def active_frames(window: str) -> str | None:
    """Phrase an active-window field as "frame(s) ...".

    Returns None when the field doesn't start with a frame number, i.e. it
    is descriptive text like "Max Charge: Frame 98".

    >>> active_frames("4,9,14")
    'frames 4,9 and 14'
    >>> active_frames("5-7")
    'frames 5 to 7'
    >>> active_frames("12")
    'frame 12'
    """
    tokens = window.split()
    if not tokens or not _LEADING_INT.match(tokens[0]):
        return None
    if "," in window:
        items = [item.strip() for item in window.split(",")]
        return f"frames {','.join(items[:-1])} and {items[-1]}"
    if "-" in window:
        return f"frames {spoken_ranges(window)}"
    return f"frame {window}"


def is_multi_hit(move: str) -> bool:
    """Whether a move name covers several hits, e.g. "hit 1-3"."""
    return "hit" in move and "-" in move


def _pluralize(sentence: str) -> str:
    sentence = sentence.replace(" is ", " are ")
    return re.sub(r"\bhit\b", "hits", sentence)


# ---------------------------------------------------------------------------
# Sentences
# ---------------------------------------------------------------------------

def attack_sentence(character: str, move: str, record: MoveRecord, verbose: bool = True) -> str:
    """When a move's hitbox is out.

    With verbose, the sentence is prefixed with the character's name, as when
    the move stands on its own rather than as one part of a group.
    Descriptive windows are read verbatim, without prefix or pluralizing.
    """
    window = record.hitbox_active
    frames = active_frames(window)
    if frames is None:
        return f"{move} is active {window}."
    sentence = spoken_ranges(f"{move} is active {frames}.")
    if is_multi_hit(move):
        sentence = _pluralize(sentence)
    if verbose:
        sentence = f"{character}'s {sentence}"
    return sentence


def defensive_sentence(character: str, move: str, record: MoveRecord, verbose: bool = True) -> str:
    sentence = f"{move} is intangible frames {record.intangibility}."
    return f"{character}'s {sentence}" if verbose else sentence


def throw_sentence(character: str, move: str, record: MoveRecord, verbose: bool = True) -> str:
    # " not " keeps the historical double space: "is  not weight dependent"
    not_ = "" if record.weight_dependent else " not "
    sentence = f"{move} is {not_}weight dependent."
    return f"{character}'s {sentence}" if verbose else sentence


def _describe(character: str, move: str, record: MoveRecord, verbose: bool) -> str:
    if record.kind in HITBOX_KINDS and record.hitbox_active:
        return attack_sentence(character, move, record, verbose)
    if record.kind == "defensive" and record.intangibility:
        return defensive_sentence(character, move, record, verbose)
    if record.kind == "throw":
        return throw_sentence(character, move, record, verbose)
    raise UnrecognizedMoveError(f"Unrecognized move data for {character}'s {move}: {record!r}")


def _missing_hitbox(record: MoveRecord) -> bool:
    return record.kind in HITBOX_KINDS and not record.hitbox_active


def first_faf(records: list[MoveRecord]) -> str:
    """FAF of the first record that has one, or ""."""
    for record in records:
        if record.kind in FAF_KINDS and record.faf.strip() not in ("", "-"):
            return record.faf
    return ""


# ---------------------------------------------------------------------------
# Move groups
# ---------------------------------------------------------------------------

def narrate(
    character: str,
    move: str,
    records: MoveRecord | list[MoveRecord] | tuple,
) -> str:
    """Describe a move group's frame data in spoken English.

    Args:
        character: Display name used in the text ("Mario").
        move: Move name used in the text ("forward tilt").
        records: One record, or the group's parts in row order.

    Returns:
        The description. When some part has an FAF, the text ends with
        "<character> can act on frame <faf>."

    Raises:
        UnrecognizedMoveError: If no part is left to narrate, or a single
            record has none of the fields narration needs.
    """
    parts = list(records) if isinstance(records, (list, tuple)) else [records]

    # Parts of multi-part groups with no hitbox data are incomplete sub-entries
    if len(parts) > 1:
        parts = [r for r in parts if not _missing_hitbox(r)]
    if not parts:
        raise UnrecognizedMoveError(f"No valid parts for {character}'s {move}")

    if len(parts) == 1:
        body = _describe(character, move, parts[0], verbose=True)
    else:
        sentences = [f"{character}'s {move} has {len(parts)} parts."]
        for i, record in enumerate(parts):
            name = record.modifier or ("the first one" if i == 0 else "the next one")
            sentences.append(_describe(character, name, record, verbose=False))
        body = " ".join(sentences)

    faf = first_faf(parts)
    faf_sentence = f"{character} can act on frame {faf}." if faf else ""
    return f"{body} {faf_sentence}"
