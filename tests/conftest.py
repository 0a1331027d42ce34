"""Shared pytest fixtures for smash-aid tests."""

import pytest

from smash_aid.parse import parse_character
from smash_aid.scrape import RawRow


def row(label: str, *cells: str) -> RawRow:
    """A data row with a single header cell."""
    return RawRow(headers=[label], cells=list(cells))


def heading(*labels: str) -> RawRow:
    """A column-heading row (several header cells, no data)."""
    return RawRow(headers=list(labels), cells=[])


ATTRIBUTES_TABLE = [
    heading("Attribute", "Value"),
    RawRow(headers=[], cells=["Weight", "98"]),
]

GROUND_TABLE = [
    heading("Move", "Hitbox Active", "FAF", "Base Dmg", "Angle", "BKB/WBKB", "KBG"),
    row("Jab 1", "2-3", "17", "2.2", "361", "0/25", "25"),
    row("Jab 2", "2-3", "17", "1.7", "361", "0/25", "25"),
    row("Ftilt (up angled)", "5-7", "30", "7", "361", "0/8", "100"),
    row("Ftilt", "5-7", "30", "7", "361", "0/8", "100"),
    row("Utilt", "5-11", "30", "5.5", "96", "0/20", "136"),
    row("Dash Attack", "6-9,10-25", "38", "8", "65", "0/30", "50"),
    row("Grab", "6-7", "30", "", "", "", ""),
    row("Fthrow", "No", "8", "45", "70/0", "50", ""),
    row("Bthrow", "Yes", "11", "45", "60/0", "65", ""),
    row("Spotdodge", "2-17", "27", "", "", "", ""),
    row("Forward Roll", "4-15", "31", "", "", "", ""),
]

AERIALS_TABLE = [
    heading("Move", "Hitbox Active", "FAF", "Base Dmg", "Angle", "BKB/WBKB", "KBG", "LL", "AC"),
    row("Nair", "3-27", "45", "8", "361", "10/0", "100", "6", "1-2, 38+"),
    row("Fair", "16-20", "60", "14", "361", "30/0", "80", "22", "1-2, 52+"),
]

SPECIALS_TABLE = [
    heading("Move", "Hitbox Active", "FAF", "Base Dmg", "Angle", "BKB/WBKB", "KBG"),
    row("Fireball", "17", "52", "5", "361", "25/0", "20"),
    row("Cape", "12-15", "35", "7", "110", "80/0", "10"),
    row("Super Jump Punch (hit 1)", "3", "", "5", "80", "30/0", "20"),
    row("Super Jump Punch (hits 2-6)", "4-8", "", "0.6", "90", "25/0", "100"),
    row("Super Jump Punch (hit 7)", "9", "", "3", "60", "70/0", "160"),
    row("F.L.U.D.D.", "Max Charge: Frame 98", "", "", "", "", ""),
]


@pytest.fixture
def mario_tables():
    """The four tables of a typical character page."""
    return [ATTRIBUTES_TABLE, GROUND_TABLE, AERIALS_TABLE, SPECIALS_TABLE]


@pytest.fixture
def mario(mario_tables):
    """Mario's moveset built from the sample tables."""
    return parse_character(mario_tables, "Mario")


@pytest.fixture
def mario_html():
    """A minimal character page with the sample tables' first rows."""
    return """
    <html><body>
      <table>
        <tr><th>Attribute</th><th>Value</th></tr>
        <tr><td>Weight</td><td>98</td></tr>
      </table>
      <table>
        <tr><th>Move</th><th>Hitbox Active</th><th>FAF</th><th>Base Dmg</th>
            <th>Angle</th><th>BKB/WBKB</th><th>KBG</th></tr>
        <tr><th>Ftilt (up angled)</th><td> 5-7 </td><td>30</td><td>7</td>
            <td>361</td><td>0/8</td><td>100</td></tr>
        <tr><th>Grab</th><td>6-7</td><td>30</td><td>-</td><td>-</td><td></td><td>-</td></tr>
      </table>
      <table>
        <tr><th>Move</th><th>Hitbox Active</th><th>FAF</th><th>Base Dmg</th>
            <th>Angle</th><th>BKB/WBKB</th><th>KBG</th><th>LL</th><th>AC</th></tr>
        <tr><th>Nair</th><td>3-27</td><td>45</td><td>8</td><td>361</td>
            <td>10/0</td><td>100</td><td>6</td><td>1-2, 38+</td></tr>
      </table>
      <table>
        <tr><th>Move</th><th>Hitbox Active</th><th>FAF</th><th>Base Dmg</th>
            <th>Angle</th><th>BKB/WBKB</th><th>KBG</th></tr>
        <tr><th>Fireball</th><td>17</td><td>52</td><td>5</td><td>361</td><td>25/0</td><td>20</td></tr>
      </table>
    </body></html>
    """
