"""Per-character exception tables for extraction and special grouping.

Character pages mostly follow one layout, but a handful don't. Rather than
branching on character names inside the extractor, every exception lives
here as data and is handed to parse_character() / group_specials() through
an ExtractionConfig.

Keys are character identifiers as they appear in enums.CHARACTERS.
"""

from dataclasses import dataclass, field


# Pages with more than four tables normally carry an extra table right after
# the attributes table. These pages have more tables but no such extra.
NO_EXTRA_TABLE = frozenset({"Shulk", "Bayonetta"})

# Explicit table offsets that override the table-count rule entirely.
TABLE_OFFSETS: dict[str, int] = {}

# Intensity / charge words that read like part of a special's name but are
# really variants of one special. "Light Hadoken" -> group "hadoken",
# modifier "light".
SPECIAL_PREFIXES: dict[str, tuple[str, ...]] = {
    "Ryu": ("light", "medium", "heavy"),
    "Cloud": ("limit",),
    "Wario": ("fully charged", "half charged"),
}

# Groups that are distinct rows on the page but belong to one special slot.
# Rows in a set share an empty group label, so consecutive rows from the
# same set stay in one slot.
SPECIAL_LABEL_SETS: dict[str, tuple[frozenset[str], ...]] = {
    "Samus": (frozenset({"homing missile", "super missile"}),),
    "Robin": (frozenset({"thunder", "elthunder", "arcthunder", "thoron"}),),
    "Pac-Man": (
        frozenset({
            "cherry", "strawberry", "orange", "apple",
            "melon", "galaxian", "bell", "key",
        }),
    ),
}

# Rows never placed in a special slot: joke rows and auxiliary mechanics.
SKIPPED_SPECIALS = frozenset({
    "shovel knight deconfirmed",
    "final smash",
    "taunt",
})


@dataclass(frozen=True)
class ExtractionConfig:
    """Bundle of the per-character exception tables."""
    no_extra_table: frozenset[str] = NO_EXTRA_TABLE
    table_offsets: dict[str, int] = field(default_factory=lambda: dict(TABLE_OFFSETS))
    special_prefixes: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(SPECIAL_PREFIXES)
    )
    special_label_sets: dict[str, tuple[frozenset[str], ...]] = field(
        default_factory=lambda: dict(SPECIAL_LABEL_SETS)
    )
    skipped_specials: frozenset[str] = SKIPPED_SPECIALS


DEFAULT_CONFIG = ExtractionConfig()
