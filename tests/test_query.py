"""Tests for smash_aid.query."""

import json

import pytest

from smash_aid.errors import MoveNotFoundError
from smash_aid.query import RETRY_TITLE, answer, capitalize, find_move
from smash_aid.storage import save_moveset

FOLLOW_UP = " You can ask about another one of Mario's moves, or name another character and move."


def test_capitalize():
    assert capitalize("mario's up smash") == "Mario's Up Smash"
    assert capitalize("a  b") == "A  B"


def test_answer_ground_move(mario):
    """A group key narrates its records with a capitalized title."""
    a = answer("mario", "forward tilt", mario)
    assert a.title == "Mario's Forward Tilt"
    assert a.speech == (
        "Mario's forward tilt has 2 parts."
        " up angled is active frames 5 to 7."
        " the next one is active frames 5 to 7."
        " Mario can act on frame 30." + FOLLOW_UP
    )


def test_answer_special_slot(mario):
    """'up special' resolves through the slots and names the special."""
    a = answer("mario", "up special", mario)
    assert a.title == "Mario's Up Special, Super Jump Punch,"
    assert a.speech.startswith(
        "Mario's up special, Super Jump Punch, has 3 parts."
        " hit 1 is active frame 3."
        " hits 2 to 6 are active frames 4 to 8."
    )


def test_find_move_special_by_group(mario):
    """Specials are also reachable by their group name."""
    spoken, records = find_move(mario, "fireball")
    assert spoken == "fireball"
    assert records[0].hitbox_active == "17"


def test_find_move_missing(mario):
    with pytest.raises(MoveNotFoundError):
        find_move(mario, "final cutter")


def test_answer_missing_move(mario):
    """Unknown moves get the fallback sentence, not an exception."""
    a = answer("mario", "final cutter", mario)
    assert a.title == RETRY_TITLE
    assert a.speech == (
        "Sorry, I don't have any information about the final cutter for Mario."
        " Please name another character and move."
    )


def test_answer_from_directory(tmp_path, mario):
    """Movesets are loaded from JSON by spoken character name."""
    save_moveset(mario, tmp_path)
    a = answer("mario", "back throw", tmp_path)
    assert a.speech.startswith("Mario's back throw is weight dependent.")


def test_answer_missing_character(tmp_path):
    """No document for the character: fallback sentence."""
    a = answer("waluigi", "up smash", tmp_path)
    assert a.title == RETRY_TITLE
    assert a.speech == "My B. I can't find any information about waluigi."


def test_answer_corrupt_document(tmp_path):
    """A truncated JSON document gets the same fallback as a missing one."""
    (tmp_path / "mario.json").write_text("{not json")
    a = answer("mario", "up smash", tmp_path)
    assert a.title == RETRY_TITLE
    assert a.speech == "My B. I can't find any information about mario."


def test_answer_record_without_kind(tmp_path):
    """Records that can't be rebuilt don't escape answer()."""
    (tmp_path / "mario.json").write_text(json.dumps({"moveset": {"jab": [{"hitbox_active": "2"}]}}))
    a = answer("mario", "jab", tmp_path)
    assert a.title == RETRY_TITLE
    assert a.speech == "My B. I can't find any information about mario."
