"""Build character movesets from raw frame-data tables.

A character page yields four tables in fixed order: attributes, ground
moves, aerials, specials. parse_character() turns those into a
CharacterMoveset; parse_characters() does it for a whole roster, writing
one JSON file per character and skipping characters that fail.
"""

import logging
from pathlib import Path
from typing import Callable

import pandas as pd

from smash_aid.aliases import MoveName, classify_move_name
from smash_aid.config import DEFAULT_CONFIG, ExtractionConfig
from smash_aid.errors import RecordShapeError
from smash_aid.moves import Special, build_record, move_kind
from smash_aid.moveset import CharacterMoveset, add_move
from smash_aid.scrape import RawTable, fetch_tables
from smash_aid.specials import fix_special_label, group_specials
from smash_aid.storage import save_moveset

logger = logging.getLogger(__name__)

# attributes, ground, aerials, specials
BASE_TABLE_COUNT = 4


# ---------------------------------------------------------------------------
# Table layout policy
# ---------------------------------------------------------------------------

def extra_table_offset(
    table_count: int,
    character: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> int:
    """How far the move tables are shifted past their usual positions.

    Pages with more than four tables are assumed to have one extra table
    between the attributes table and the ground table. Characters in
    config.no_extra_table have more tables but no such extra, and
    config.table_offsets pins the offset outright.
    """
    if character in config.table_offsets:
        return config.table_offsets[character]
    if table_count > BASE_TABLE_COUNT and character not in config.no_extra_table:
        return 1
    return 0


# ---------------------------------------------------------------------------
# Row iteration
# ---------------------------------------------------------------------------

def _data_rows(table: RawTable):
    """Yield (MoveName, cells) for each row that carries move data.

    Rows with several header cells are column headings; rows without a
    header label have nothing to key a move on.
    """
    for row in table:
        if len(row.headers) != 1 or not row.headers[0].strip():
            continue
        yield classify_move_name(row.headers[0]), row.cells


def _add_ground_moves(moveset: dict, table: RawTable) -> None:
    for name, cells in _data_rows(table):
        record = build_record(move_kind(name.group, "ground"), cells, name.modifier)
        add_move(moveset, name.group, record)


def _add_aerials(moveset: dict, table: RawTable) -> None:
    for name, cells in _data_rows(table):
        record = build_record(move_kind(name.group, "aerial"), cells, name.modifier)
        add_move(moveset, name.group, record)


def _special_entries(
    table: RawTable,
    character: str,
    config: ExtractionConfig,
) -> list[tuple[MoveName, Special]]:
    entries = []
    for name, cells in _data_rows(table):
        name = fix_special_label(name, character, config)
        if name.group in config.skipped_specials:
            continue
        entries.append((name, build_record("special", cells, name.modifier)))
    return entries


# ---------------------------------------------------------------------------
# Character moveset
# ---------------------------------------------------------------------------

def parse_character(
    tables: list[RawTable],
    character: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> CharacterMoveset:
    """Build a character's moveset from the tables on their page.

    Args:
        tables: Every table on the page, in order, as raw rows.
        character: Character identifier (e.g. "Mario", "Dr. Mario").
        config: Per-character exception tables.

    Returns:
        CharacterMoveset with ground moves, aerials and specials keyed by
        group, and the four special slots.

    Raises:
        RecordShapeError: If a row doesn't fit its move kind, or the page has
            too few tables.
        GroupingOverflowError: If the specials table yields more than four slots.
    """
    offset = extra_table_offset(len(tables), character, config)
    needed = BASE_TABLE_COUNT + offset
    if len(tables) < needed:
        raise RecordShapeError(
            f"{character}: expected at least {needed} tables but found {len(tables)}"
        )

    # tables[0] holds character attributes; no moves come from it
    ground_table = tables[1 + offset]
    aerials_table = tables[2 + offset]
    specials_table = tables[3 + offset]

    moveset: dict = {}
    _add_ground_moves(moveset, ground_table)
    _add_aerials(moveset, aerials_table)

    entries = _special_entries(specials_table, character, config)
    for name, record in entries:
        add_move(moveset, name.group, record)
    specials = group_specials(entries, character, config)

    return CharacterMoveset(character=character, moveset=moveset, specials=specials)


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------

def parse_characters(
    characters: list[str],
    output_dir: str | Path,
    fetch: Callable[[str], list[RawTable]] = fetch_tables,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """Fetch, build and save movesets for each character, one at a time.

    A character whose page can't be fetched or whose tables can't be built
    is logged and skipped; the rest of the roster still runs.

    Args:
        characters: Character identifiers, e.g. enums.CHARACTERS.
        output_dir: Directory for the per-character JSON files.
        fetch: Returns a character's raw tables. Defaults to scraping the site.
        config: Per-character exception tables.

    Returns:
        DataFrame with one row per character: character, path, num_moves, error.
    """
    output_dir = Path(output_dir)
    rows = []
    for character in characters:
        try:
            tables = fetch(character)
        except Exception as e:
            logger.warning(f"Failed to fetch {character}: {e}")
            rows.append({"character": character, "path": None, "num_moves": 0, "error": str(e)})
            continue

        try:
            result = parse_character(tables, character, config)
        except Exception as e:
            logger.warning(f"Failed to parse {character}: {e}")
            rows.append({"character": character, "path": None, "num_moves": 0, "error": str(e)})
            continue

        path = save_moveset(result, output_dir)
        rows.append({
            "character": character,
            "path": str(path),
            "num_moves": len(result.moveset),
            "error": None,
        })

    if not rows:
        return pd.DataFrame(columns=["character", "path", "num_moves", "error"])

    df = pd.DataFrame(rows)
    failed = df["error"].notna().sum()
    if failed:
        logger.warning(f"{failed} of {len(df)} character(s) skipped")
    return df
