"""
casualty_charts package - WWII casualties by country, scraped, cleaned and charted.

This package provides:
- Field normalization for scraped table cells (normalizer.py)
- Page fetching and table extraction (scraper.py)
- Column-wise cleaning of raw rows (cleaning.py)
- CSV / parquet persistence (storage.py)
- Static charts (charts.py)
- Settings, paths and logging (settings.py, paths.py, logging_setup.py)
- Command line entry point (cli.py)
"""

from .constants import (
    SOURCE_URL,
    COLUMNS,
    COUNTRY_COLUMN,
    NUMERIC_COLUMNS,
)

from .normalizer import (
    normalize_label,
    normalize_numeric_field,
    normalize_numeric_cell,
)

from .cleaning import (
    clean_casualties,
    summarize_cleaning,
)

__all__ = [
    # Constants
    'SOURCE_URL',
    'COLUMNS',
    'COUNTRY_COLUMN',
    'NUMERIC_COLUMNS',

    # Normalization
    'normalize_label',
    'normalize_numeric_field',
    'normalize_numeric_cell',

    # Cleaning
    'clean_casualties',
    'summarize_cleaning',
]
