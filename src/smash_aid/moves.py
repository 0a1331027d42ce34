"""Typed move records and the builders that make them from table rows.

A MoveRecord is one of six frozen dataclasses. They share no base class;
each carries a ``kind`` discriminant that consumers branch on:

    attack     ground attacks (jab, tilts, smashes, dash attack)
    aerial     aerials, adds landing lag and autocancel window
    special    special moves, same shape as attack
    throw      throws, weight dependence plus knockback values
    grab       grabs, active window and FAF
    defensive  dodges and rolls, intangibility window and FAF

Window fields ("5-7", "4,9,14", "Max Charge: Frame 98") are kept as the raw
strings from the page. Numeric parsing happens downstream (frames.py), never
here.
"""

from dataclasses import dataclass, field, fields, replace

from smash_aid.errors import RecordShapeError


# ---------------------------------------------------------------------------
# Record variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Attack:
    hitbox_active: str
    faf: str
    base_dmg: str
    angle: str
    bkb_wbkb: str
    kbg: str
    modifier: str = ""
    kind: str = field(default="attack", init=False)


@dataclass(frozen=True)
class Aerial:
    hitbox_active: str
    faf: str
    base_dmg: str
    angle: str
    bkb_wbkb: str
    kbg: str
    landing_lag: str
    autocancel: str
    modifier: str = ""
    kind: str = field(default="aerial", init=False)


@dataclass(frozen=True)
class Special:
    hitbox_active: str
    faf: str
    base_dmg: str
    angle: str
    bkb_wbkb: str
    kbg: str
    modifier: str = ""
    kind: str = field(default="special", init=False)


@dataclass(frozen=True)
class Throw:
    weight_dependent: bool
    base_dmg: str
    angle: str
    bkb_wbkb: str
    kbg: str
    modifier: str = ""
    kind: str = field(default="throw", init=False)


@dataclass(frozen=True)
class Grab:
    hitbox_active: str
    faf: str
    modifier: str = ""
    kind: str = field(default="grab", init=False)


@dataclass(frozen=True)
class Defensive:
    intangibility: str
    faf: str
    modifier: str = ""
    kind: str = field(default="defensive", init=False)


MoveRecord = Attack | Aerial | Special | Throw | Grab | Defensive

RECORD_TYPES: dict[str, type] = {
    "attack": Attack,
    "aerial": Aerial,
    "special": Special,
    "throw": Throw,
    "grab": Grab,
    "defensive": Defensive,
}

# Kinds whose records describe a hitbox (and so carry hitbox_active)
HITBOX_KINDS = frozenset({"attack", "aerial", "special", "grab"})

# Data cells per row for each kind. Ground and special tables are six
# columns wide, the aerial table eight; short records read the leading cells.
ROW_WIDTHS = {
    "attack": 6,
    "aerial": 8,
    "special": 6,
    "throw": 6,
    "grab": 6,
    "defensive": 6,
}


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def _expect_width(kind: str, cells: list[str]) -> None:
    expected = ROW_WIDTHS[kind]
    if len(cells) != expected:
        raise RecordShapeError(
            f"Expected {expected} cells for a {kind} row but found {len(cells)}: {cells!r}"
        )


def _weight_dependent(value: str) -> bool:
    if value == "Yes":
        return True
    if "No" in value:
        return False
    raise RecordShapeError(f"Unexpected value for weight dependent: {value!r}")


def build_attack(cells: list[str], modifier: str = "") -> Attack:
    _expect_width("attack", cells)
    return Attack(*cells[:6], modifier=modifier)


def build_aerial(cells: list[str], modifier: str = "") -> Aerial:
    _expect_width("aerial", cells)
    return Aerial(*cells[:8], modifier=modifier)


def build_special(cells: list[str], modifier: str = "") -> Special:
    _expect_width("special", cells)
    return Special(*cells[:6], modifier=modifier)


def build_throw(cells: list[str], modifier: str = "") -> Throw:
    _expect_width("throw", cells)
    return Throw(_weight_dependent(cells[0]), *cells[1:5], modifier=modifier)


def build_grab(cells: list[str], modifier: str = "") -> Grab:
    _expect_width("grab", cells)
    return Grab(cells[0], cells[1], modifier=modifier)


def build_defensive(cells: list[str], modifier: str = "") -> Defensive:
    _expect_width("defensive", cells)
    return Defensive(cells[0], cells[1], modifier=modifier)


_BUILDERS = {
    "attack": build_attack,
    "aerial": build_aerial,
    "special": build_special,
    "throw": build_throw,
    "grab": build_grab,
    "defensive": build_defensive,
}


def build_record(kind: str, cells: list[str], modifier: str = "") -> MoveRecord:
    """Build a move record of the given kind from a row's data cells.

    Args:
        kind: One of the MoveRecord discriminants.
        cells: Normalized data cells, in table column order.
        modifier: Variant modifier from the classified row label.

    Raises:
        RecordShapeError: If the cell count doesn't match the kind's row width,
            or a throw's weight-dependent cell is neither "Yes" nor "No...".
        KeyError: If kind is not a known discriminant.
    """
    return _BUILDERS[kind](cells, modifier)


def move_kind(group: str, table: str) -> str:
    """Choose a record kind for a classified group from the table it came from.

    "throw", "grab", "dodge" and "roll" in the group win over the table
    default, which is "attack" for the ground table and "aerial" for the
    aerial table.
    """
    if "throw" in group:
        return "throw"
    if "grab" in group:
        return "grab"
    if "dodge" in group or "roll" in group:
        return "defensive"
    return "aerial" if table == "aerial" else "attack"


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def record_to_dict(record: MoveRecord) -> dict:
    """Flat dict of a record's fields, including kind and modifier."""
    return {f.name: getattr(record, f.name) for f in fields(record)}


def record_from_dict(data: dict) -> MoveRecord:
    """Rebuild a record from record_to_dict() output."""
    cls = RECORD_TYPES[data["kind"]]
    values = {f.name: data.get(f.name, "") for f in fields(cls) if f.init}
    return cls(**values)


def with_modifier(record: MoveRecord, modifier: str) -> MoveRecord:
    """Copy of a record with a different modifier."""
    return replace(record, modifier=modifier)
