"""Answer "tell me about <character>'s <move>" from persisted movesets.

answer() never raises for a missing or corrupt character document, a missing
move or data that can't be narrated; each turns into a fallback sentence meant to be spoken
back to the user.

Typical usage:
    from smash_aid.query import answer

    a = answer("mario", "up smash", "gen")
    a.title   # -> "Mario's Up Smash"
    a.speech  # -> "Mario's up smash is active frames 9 to 13. Mario can act on frame 45. ..."
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from smash_aid.errors import MoveNotFoundError, UnrecognizedMoveError
from smash_aid.moves import MoveRecord
from smash_aid.moveset import CharacterMoveset
from smash_aid.narrate import narrate
from smash_aid.storage import load_moveset

logger = logging.getLogger(__name__)

RETRY_TITLE = "Please try again"


@dataclass(frozen=True)
class Answer:
    title: str
    speech: str


def capitalize(text: str) -> str:
    """Uppercase the first letter of every word.

    >>> capitalize("mario's up smash")
    "Mario's Up Smash"
    """
    return " ".join(w[:1].upper() + w[1:] for w in text.split(" "))


def find_move(moveset: CharacterMoveset, move: str) -> tuple[str, MoveRecord | list[MoveRecord]]:
    """Look up a move group, returning the spoken move name and its record(s).

    Moves naming a special ("up special") resolve to that special slot, and
    the spoken name picks up the slot's group label: "up special, Super
    Jump Punch,".

    Raises:
        MoveNotFoundError: If the moveset has no such move, or the special
            slot has no parts.
    """
    if "special" in move:
        slot = moveset.special(move)
        if slot is None or not slot.parts:
            raise MoveNotFoundError(move)
        spoken = f"{move}, {capitalize(slot.label)}," if slot.label else move
        return spoken, list(slot.parts)

    records = moveset.get(move)
    if records is None:
        raise MoveNotFoundError(move)
    return move, records


def describe_move(character: str, move: str, moveset: CharacterMoveset) -> Answer:
    """Narrate one move from an already-loaded moveset.

    Raises:
        MoveNotFoundError: If the move isn't in the moveset.
        UnrecognizedMoveError: If the move's records can't be narrated.
    """
    display = capitalize(character)
    spoken, records = find_move(moveset, move)
    speech = narrate(display, spoken, records)
    speech += (
        f" You can ask about another one of {display}'s moves,"
        " or name another character and move."
    )
    return Answer(title=capitalize(f"{character}'s {spoken}"), speech=speech)


def answer(
    character: str,
    move: str,
    source: str | Path | CharacterMoveset,
) -> Answer:
    """Answer a character/move question with speech text and a display title.

    Args:
        character: Character name as spoken ("doctor mario").
        move: Move group or special slot name ("forward tilt", "up special").
        source: A loaded CharacterMoveset, or the directory of JSON documents.

    Returns:
        Answer with the narration, or a fallback sentence when the data
        isn't there.
    """
    if isinstance(source, CharacterMoveset):
        moveset = source
    else:
        try:
            moveset = load_moveset(character, source)
        except (OSError, ValueError, KeyError, TypeError) as e:
            # missing, unreadable or malformed document
            logger.warning(f"No usable moveset for {character}: {e}")
            speech = f"My B. I can't find any information about {character}."
            return Answer(title=RETRY_TITLE, speech=speech)

    try:
        return describe_move(character, move, moveset)
    except (MoveNotFoundError, UnrecognizedMoveError) as e:
        logger.info(f"Can't describe {character}'s {move}: {e}")
        speech = (
            f"Sorry, I don't have any information about the {move} for {capitalize(character)}."
            " Please name another character and move."
        )
        return Answer(title=RETRY_TITLE, speech=speech)
