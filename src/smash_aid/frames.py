"""Flatten movesets into DataFrames for analysis.

Records keep frame data as page text. This is where it gets numbers: the
startup column is the leading integer of hitbox_active ("5-7" -> 5), NaN
for descriptive windows ("Max Charge: Frame 98") and records without one.

Typical usage:
    from smash_aid.frames import moveset_frame
    from smash_aid.storage import load_moveset

    df = moveset_frame(load_moveset("mario", "gen"))
    df.sort_values("startup").head()
"""

import pandas as pd

from smash_aid.moves import record_to_dict
from smash_aid.moveset import CharacterMoveset

BASE_COLUMNS = ["character", "group", "part", "kind", "modifier"]


def _record_rows(character: str, group: str, value, slot: str | None = None) -> list[dict]:
    records = value if isinstance(value, (list, tuple)) else [value]
    rows = []
    for part, record in enumerate(records, start=1):
        row = record_to_dict(record)
        row.update({"character": character, "group": group, "part": part})
        if slot is not None:
            row["slot"] = slot
        rows.append(row)
    return rows


def moveset_frame(moveset: CharacterMoveset, include_specials: bool = False) -> pd.DataFrame:
    """One row per move record.

    Args:
        moveset: A character's moveset.
        include_specials: Also emit one row per special slot part, with a
            ``slot`` column naming the slot. Those parts already appear under
            their group, so this duplicates them.

    Returns:
        DataFrame with character, group, part, kind, modifier, every record
        field (empty where a kind lacks it) and a float startup column.
    """
    rows = []
    for group, value in moveset.moveset.items():
        rows.extend(_record_rows(moveset.character, group, value))
    if include_specials:
        for slot in moveset.specials:
            rows.extend(_record_rows(moveset.character, slot.label, slot.parts, slot=slot.name))

    if not rows:
        return pd.DataFrame(columns=BASE_COLUMNS + ["startup"])

    df = pd.DataFrame(rows)
    other = [c for c in df.columns if c not in BASE_COLUMNS]
    df = df[BASE_COLUMNS + other]

    if "hitbox_active" in df.columns:
        leading = df["hitbox_active"].fillna("").str.extract(r"^\s*(\d+)")[0]
        df["startup"] = pd.to_numeric(leading, errors="coerce")
    else:
        df["startup"] = float("nan")
    return df
