"""Tests for smash_aid.narrate."""

import pytest

from smash_aid.errors import UnrecognizedMoveError
from smash_aid.moves import Attack, Defensive, Grab, Special, Throw
from smash_aid.narrate import active_frames, is_multi_hit, narrate


def attack(window, faf="", modifier=""):
    return Attack(window, faf, "7", "361", "0/8", "100", modifier=modifier)


def test_single_attack_range():
    """Hyphen ranges are read as 'frames x to y', with the FAF sentence after."""
    text = narrate("Mario", "forward tilt", attack("5-7", "30"))
    assert text == "Mario's forward tilt is active frames 5 to 7. Mario can act on frame 30."


def test_comma_list_without_faf():
    """Comma lists join with 'and'; no FAF sentence when FAF is empty."""
    text = narrate("Mario", "dash attack", attack("4,9,14", ""))
    assert text == "Mario's dash attack is active frames 4,9 and 14. "


def test_placeholder_faf_is_ignored():
    """A '-' FAF counts as missing."""
    text = narrate("Mario", "dash attack", attack("4,9,14", "-"))
    assert text.endswith("frames 4,9 and 14. ")


def test_comma_list_with_ranges():
    """Ranges inside a comma list are spelled out too."""
    text = narrate("Mario", "dash attack", attack("6-9,10-25", "38"))
    assert text.startswith("Mario's dash attack is active frames 6 to 9 and 10 to 25.")


def test_single_frame():
    """A lone number is 'frame n'."""
    assert narrate("Mario", "fireball", attack("17")) == "Mario's fireball is active frame 17. "


def test_free_text_window():
    """Descriptive windows are read verbatim, without the character prefix."""
    text = narrate("Mario", "fludd", Special("Max Charge: Frame 98", "", "", "", "", ""))
    assert text == "fludd is active Max Charge: Frame 98. "


def test_free_text_window_not_pluralized():
    """A multi-hit name with a descriptive window is left as written."""
    parts = [attack("3", "", "hit 1"), attack("Until landing", "", "hit 2-5")]
    text = narrate("Mario", "down air", parts)
    assert " hit 2-5 is active Until landing." in text


def test_multi_part_group():
    """Parts are named by modifier, and multi-hit names pluralize."""
    parts = [
        attack("3", "", "hit 1"),
        attack("4-8", "", "hits 2-6"),
        attack("9", "51", "hit 7"),
    ]
    text = narrate("Mario", "super jump punch", parts)
    assert text == (
        "Mario's super jump punch has 3 parts."
        " hit 1 is active frame 3."
        " hits 2 to 6 are active frames 4 to 8."
        " hit 7 is active frame 9."
        " Mario can act on frame 51."
    )


def test_multi_hit_singular_word_pluralizes():
    """'hit 2-4' becomes 'hits 2 to 4 are'."""
    text = narrate("Fox", "forward air", [attack("6", "", "hit 1"), attack("8-14", "", "hit 2-4")])
    assert "hits 2 to 4 are active frames 8 to 14." in text


def test_unnamed_parts():
    """Parts without modifiers are 'the first one' and 'the next one'."""
    text = narrate("Mario", "jab", [attack("2-3", "17"), attack("2-3", "17"), attack("3", "")])
    assert "has 3 parts. the first one is active frames 2 to 3." in text
    assert text.count("the next one") == 2


def test_first_faf_wins():
    """The FAF sentence uses the first part that has an FAF."""
    text = narrate("Mario", "jab", [attack("2-3", ""), attack("2-3", "20"), attack("3", "33")])
    assert text.endswith("Mario can act on frame 20.")


def test_parts_without_hitbox_are_dropped():
    """A 2-part group with one empty window narrates as one move."""
    text = narrate("Captain Falcon", "falcon dive", [attack("14-15", "36", "latch"), attack("", "", "throw")])
    assert text == "Captain Falcon's falcon dive is active frames 14 to 15. Captain Falcon can act on frame 36."


def test_all_parts_dropped():
    """Filtering every part away is an error."""
    with pytest.raises(UnrecognizedMoveError):
        narrate("Mario", "jab", [attack(""), attack("")])


def test_single_empty_attack_unrecognized():
    """A lone record with nothing to say is an error."""
    with pytest.raises(UnrecognizedMoveError):
        narrate("Mario", "jab", attack(""))


def test_defensive():
    """Dodges read their intangibility window."""
    text = narrate("Mario", "spot dodge", Defensive("2-17", "27"))
    assert text == "Mario's spot dodge is intangible frames 2-17. Mario can act on frame 27."


def test_throw_weight_dependent():
    assert narrate("Mario", "back throw", Throw(True, "11", "45", "60/0", "65")) == (
        "Mario's back throw is weight dependent. "
    )


def test_throw_not_weight_dependent():
    """Keeps the double space before 'not'."""
    assert narrate("Mario", "forward throw", Throw(False, "8", "45", "70/0", "50")) == (
        "Mario's forward throw is  not weight dependent. "
    )


def test_grab():
    text = narrate("Mario", "grab", Grab("6-7", "30"))
    assert text == "Mario's grab is active frames 6 to 7. Mario can act on frame 30."


def test_narrate_does_not_mutate():
    """Records and the part list are unchanged afterwards; output is stable."""
    parts = [attack("5-7", "30", "1"), attack("", "", "2")]
    snapshot = list(parts)
    first = narrate("Mario", "jab", parts)
    second = narrate("Mario", "jab", parts)
    assert first == second
    assert parts == snapshot
    assert parts[0].hitbox_active == "5-7"


def test_active_frames_helper():
    assert active_frames("5-7") == "frames 5 to 7"
    assert active_frames("4,9,14") == "frames 4,9 and 14"
    assert active_frames("12") == "frame 12"
    assert active_frames("Max Charge: Frame 98") is None
    assert active_frames("") is None


def test_is_multi_hit():
    assert is_multi_hit("hits 2-6")
    assert not is_multi_hit("hit 1")
    assert not is_multi_hit("up-angled")
