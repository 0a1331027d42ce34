"""Group a character's special-move rows into the four canonical slots.

Special tables list every row of every special in page order: neutral
special first, then side, up and down. A slot boundary is wherever the
group label changes. Per-character tables in config.py fix the rows where
the label alone would split a slot (charge levels, item variants) or where
a row is not part of any slot.

Typical usage:
    from smash_aid.specials import group_specials

    slots = group_specials(entries, "Samus")
    [s.name for s in slots]  # -> ["neutral special", "side special", ...]
"""

from smash_aid.aliases import MoveName
from smash_aid.config import DEFAULT_CONFIG, ExtractionConfig
from smash_aid.enums import SPECIAL_SLOTS
from smash_aid.errors import GroupingOverflowError
from smash_aid.moves import Special, with_modifier
from smash_aid.moveset import SpecialSlot


def fix_special_label(
    name: MoveName,
    character: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> MoveName:
    """Move a known intensity/charge prefix from the group into the modifier.

    >>> fix_special_label(MoveName("light hadoken", ""), "Ryu")
    MoveName(group='hadoken', modifier='light')
    """
    for prefix in config.special_prefixes.get(character, ()):
        if name.group.startswith(prefix + " "):
            group = name.group[len(prefix) + 1:].strip()
            modifier = f"{prefix} {name.modifier}".strip()
            return MoveName(group=group, modifier=modifier)
    return name


def special_label(
    group: str,
    character: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> str:
    """Slot label for a group: the group itself, or "" if it's in a label set."""
    for label_set in config.special_label_sets.get(character, ()):
        if group in label_set:
            return ""
    return group


def group_specials(
    entries: list[tuple[MoveName, Special]],
    character: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> tuple[SpecialSlot, ...]:
    """Partition ordered special rows into exactly four slots.

    Args:
        entries: (classified name, record) pairs in table row order. Names
            should already have gone through fix_special_label().
        character: Character identifier, used to look up exception tables.
        config: Exception tables.

    Returns:
        Four SpecialSlots in SPECIAL_SLOTS order. Slots the table never
        reached have no parts.

    Raises:
        GroupingOverflowError: If the rows describe more than four slots.
    """
    labels: list[str] = []
    parts: list[list[Special]] = []

    for name, record in entries:
        if name.group in config.skipped_specials:
            continue
        label = special_label(name.group, character, config)
        if not labels or label != labels[-1]:
            if len(labels) == len(SPECIAL_SLOTS):
                raise GroupingOverflowError(
                    f"{character}: special group {name.group!r} would open slot "
                    f"{len(labels) + 1} of {len(SPECIAL_SLOTS)} (labels so far: {labels!r})"
                )
            labels.append(label)
            parts.append([])

        if label:
            modifier = name.modifier
        else:
            modifier = f"{name.group} {name.modifier}".strip()
        parts[-1].append(with_modifier(record, modifier))

    slots = []
    for i, slot_name in enumerate(SPECIAL_SLOTS):
        if i < len(labels):
            slots.append(SpecialSlot(slot_name, labels[i], tuple(parts[i])))
        else:
            slots.append(SpecialSlot(slot_name))
    return tuple(slots)
