"""Per-character moveset container and its JSON form.

A moveset maps a move group ("forward tilt") to either one record (throws,
grabs, dodges) or a list of records in table row order (jab 1, jab 2, ...).
The four special slots sit beside it in CharacterMoveset.specials and are
written under the reserved "specials" key in JSON.
"""

from dataclasses import dataclass, field

from smash_aid.enums import SINGLE_RECORD_KINDS, SPECIAL_SLOTS, SPECIALS_KEY
from smash_aid.moves import MoveRecord, record_from_dict, record_to_dict


@dataclass(frozen=True)
class SpecialSlot:
    """One of the four canonical specials, with its parts in row order."""
    name: str                       # "neutral special", "side special", ...
    label: str = ""                 # group name on the page, e.g. "fireball"
    parts: tuple = ()

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "otherName": self.label,
            "value": [record_to_dict(r) for r in self.parts],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SpecialSlot":
        return cls(
            name=data["name"],
            label=data.get("otherName", ""),
            parts=tuple(record_from_dict(r) for r in data.get("value", [])),
        )


def empty_slots() -> tuple[SpecialSlot, ...]:
    return tuple(SpecialSlot(name) for name in SPECIAL_SLOTS)


@dataclass(frozen=True)
class CharacterMoveset:
    character: str
    moveset: dict = field(default_factory=dict)
    specials: tuple[SpecialSlot, ...] = field(default_factory=empty_slots)

    def get(self, group: str) -> MoveRecord | list[MoveRecord] | None:
        return self.moveset.get(group)

    def special(self, name: str) -> SpecialSlot | None:
        """Look up a special slot by canonical name ("up special")."""
        for slot in self.specials:
            if slot.name == name:
                return slot
        return None

    def to_dict(self) -> dict:
        moveset = {}
        for group, value in self.moveset.items():
            if isinstance(value, list):
                moveset[group] = [record_to_dict(r) for r in value]
            else:
                moveset[group] = record_to_dict(value)
        moveset[SPECIALS_KEY] = [slot.to_dict() for slot in self.specials]
        return {"character": self.character, "moveset": moveset}

    @classmethod
    def from_dict(cls, data: dict) -> "CharacterMoveset":
        moveset = {}
        specials = empty_slots()
        for group, value in data.get("moveset", {}).items():
            if group == SPECIALS_KEY:
                specials = tuple(SpecialSlot.from_dict(s) for s in value)
            elif isinstance(value, list):
                moveset[group] = [record_from_dict(r) for r in value]
            else:
                moveset[group] = record_from_dict(value)
        return cls(character=data.get("character", ""), moveset=moveset, specials=specials)


def add_move(moveset: dict, group: str, record: MoveRecord) -> None:
    """Insert a record under its group, accumulating repeats in row order.

    Single-record kinds (throw, grab, defensive) are stored bare the first
    time; any other kind starts a list. A second record for the same group
    always turns the entry into a list.
    """
    existing = moveset.get(group)
    if existing is None:
        moveset[group] = record if record.kind in SINGLE_RECORD_KINDS else [record]
    elif isinstance(existing, list):
        existing.append(record)
    else:
        moveset[group] = [existing, record]
