"""Read and write per-character moveset JSON documents."""

import json
import logging
from pathlib import Path

from smash_aid.aliases import resolve_character
from smash_aid.enums import character_filename
from smash_aid.moveset import CharacterMoveset

logger = logging.getLogger(__name__)


def moveset_path(character: str, directory: str | Path) -> Path:
    """Path of a character's JSON document inside directory."""
    return Path(directory) / character_filename(character)


def save_moveset(moveset: CharacterMoveset, directory: str | Path) -> Path:
    """Write a moveset as indented JSON, creating directory if needed.

    Returns:
        Path to the written file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = moveset_path(moveset.character, directory)
    path.write_text(json.dumps(moveset.to_dict(), indent=2))
    logger.info(f"Wrote {path}")
    return path


def load_moveset(character: str, directory: str | Path) -> CharacterMoveset:
    """Load a character's moveset.

    The name may be spoken-style ("doctor mario", "bowser junior"); it is
    normalized before the file name is built.

    Raises:
        FileNotFoundError: If no document exists for the character.
        ValueError: If the document isn't valid JSON.
        KeyError: If a stored record has no "kind".
    """
    path = moveset_path(resolve_character(character), directory)
    data = json.loads(path.read_text())
    return CharacterMoveset.from_dict(data)
