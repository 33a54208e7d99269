"""
Scrape the WWII casualties-by-country table.

Fetches the source page (or reads a saved copy) and returns the first
data table as raw text cells. No cleaning happens here: footnote markers
and range expressions are left in place for the normalizer.
"""

import logging
from typing import Optional

import pandas as pd
import requests
from bs4 import BeautifulSoup

from .constants import COLUMNS
from .settings import load_settings

logger = logging.getLogger("casualty_charts")


def fetch_page(url: str, timeout: int = 30, user_agent: Optional[str] = None) -> str:
    """Download a page and return its HTML text. HTTP errors are raised."""
    headers = {'User-Agent': user_agent} if user_agent else {}
    logger.info(f"Fetching {url}")
    response = requests.get(url, headers=headers, timeout=timeout)
    response.raise_for_status()
    logger.info(f"Received {len(response.text):,} characters")
    return response.text


def read_html_file(file_path) -> Optional[str]:
    """Read a saved HTML file with encoding fallback."""
    encodings = ['utf-8', 'latin-1', 'windows-1252']
    for encoding in encodings:
        try:
            with open(file_path, 'r', encoding=encoding) as f:
                return f.read()
        except UnicodeDecodeError:
            continue
        except FileNotFoundError:
            logger.error(f"HTML file not found: {file_path}")
            return None
    return None


def find_casualty_table(html: str):
    """
    Locate the casualty table: the first wikitable, else the first table.

    Raises:
        ValueError: if the page contains no table at all
    """
    soup = BeautifulSoup(html, 'html.parser')
    table = soup.find('table', class_='wikitable')
    if table is None:
        table = soup.find('table')
    if table is None:
        raise ValueError("No table found in page")
    return table


def cell_text(cell) -> str:
    """Cell text with whitespace collapsed; footnote text is kept."""
    return " ".join(cell.get_text().split())


def parse_casualty_table(html: str) -> pd.DataFrame:
    """
    Extract raw rows from the casualty table.

    Header rows (no <td> cells) are skipped, as are rows whose cell count
    doesn't match the known column layout.

    Returns:
        DataFrame of str cells with the standard column names
    """
    table = find_casualty_table(html)

    rows = []
    skipped = 0
    for tr in table.find_all('tr'):
        if not tr.find('td'):
            continue
        cells = [cell_text(c) for c in tr.find_all(['th', 'td'])]
        if len(cells) != len(COLUMNS):
            skipped += 1
            logger.warning(f"Skipping row with {len(cells)} cells: {cells[:1]}")
            continue
        rows.append(cells)

    logger.info(f"Parsed {len(rows)} rows ({skipped} skipped)")
    return pd.DataFrame(rows, columns=COLUMNS, dtype=object)


def scrape_casualties(url=None, html_file=None, settings=None) -> pd.DataFrame:
    """
    Get the raw casualty table from a saved file or the live page.

    Args:
        url: Page to fetch (default: settings["source_url"])
        html_file: Saved copy of the page; takes priority over url
        settings: Settings dict (default: load_settings())

    Returns:
        Raw DataFrame of text cells
    """
    settings = settings or load_settings()

    if html_file:
        logger.info(f"Reading saved page {html_file}")
        html = read_html_file(html_file)
        if html is None:
            raise ValueError(f"Could not read HTML file: {html_file}")
    else:
        html = fetch_page(
            url or settings["source_url"],
            timeout=settings["request_timeout"],
            user_agent=settings["user_agent"],
        )

    return parse_casualty_table(html)
