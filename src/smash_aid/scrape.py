"""Fetch character frame-data pages and split their tables into raw rows.

Each <table> on a character page becomes a RawTable: a list of RawRow, one
per <tr>, holding the text of its <th> cells and of its <td> cells. Cell
text is stripped, and "-" placeholders become "".

Source: http://kuroganehammer.com/Smash4/{character}
"""

import logging
from dataclasses import dataclass, field

import requests
from bs4 import BeautifulSoup, Tag

from smash_aid.errors import FetchError

logger = logging.getLogger(__name__)

BASE_URL = "http://kuroganehammer.com/Smash4"
REQUEST_TIMEOUT = 15

# Cell text that means "no value"
PLACEHOLDERS = frozenset({"", "-"})


@dataclass
class RawRow:
    """One table row: header cell texts and data cell texts."""
    headers: list[str] = field(default_factory=list)
    cells: list[str] = field(default_factory=list)


RawTable = list[RawRow]


def row_cells(texts: list[str]) -> list[str]:
    """Normalize cell texts: strip whitespace, placeholders become "".

    >>> row_cells([" 5-7 ", "-", "", "30"])
    ['5-7', '', '', '30']
    """
    cells = []
    for text in texts:
        text = text.strip()
        cells.append("" if text in PLACEHOLDERS else text)
    return cells


def extract_row(tr: Tag) -> RawRow:
    """Split a <tr> into its header texts and normalized data cells."""
    headers = [th.get_text(" ", strip=True) for th in tr.find_all("th")]
    cells = row_cells([td.get_text(" ", strip=True) for td in tr.find_all("td")])
    return RawRow(headers=headers, cells=cells)


def parse_tables(html: str) -> list[RawTable]:
    """Every <table> in a page, in document order, as raw rows."""
    soup = BeautifulSoup(html, "html.parser")
    return [[extract_row(tr) for tr in table.find_all("tr")] for table in soup.find_all("table")]


def character_url(character: str) -> str:
    return f"{BASE_URL}/{character}"


def fetch_tables(character: str, session: requests.Session | None = None) -> list[RawTable]:
    """Download a character page and return its tables.

    Raises:
        FetchError: If the page can't be retrieved.
    """
    url = character_url(character)
    getter = session or requests
    try:
        resp = getter.get(url, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    tables = parse_tables(resp.text)
    logger.info(f"Fetched {len(tables)} tables for {character}")
    return tables
