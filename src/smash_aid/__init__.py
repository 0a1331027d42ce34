"""Smash frame-data extraction and spoken narration."""

from smash_aid.aliases import (
    MOVE_ABBREVIATIONS,
    MoveName,
    classify_move_name,
    resolve_character,
    standardize_move_name,
)
from smash_aid.config import DEFAULT_CONFIG, ExtractionConfig
from smash_aid.enums import CHARACTERS, SPECIAL_SLOTS, character_filename
from smash_aid.errors import (
    FetchError,
    GroupingOverflowError,
    MoveNotFoundError,
    RecordShapeError,
    SmashAidError,
    UnrecognizedMoveError,
)
from smash_aid.frames import moveset_frame
from smash_aid.moves import (
    Aerial,
    Attack,
    Defensive,
    Grab,
    MoveRecord,
    Special,
    Throw,
    build_record,
)
from smash_aid.moveset import CharacterMoveset, SpecialSlot, add_move
from smash_aid.narrate import narrate
from smash_aid.parse import extra_table_offset, parse_character, parse_characters
from smash_aid.query import Answer, answer
from smash_aid.scrape import RawRow, fetch_tables, parse_tables
from smash_aid.specials import group_specials
from smash_aid.storage import load_moveset, save_moveset
