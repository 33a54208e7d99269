"""
Turn raw scraped rows into clean, numeric casualty records.

One normalization function per column, applied uniformly to every row.
"""

import logging

import pandas as pd

from .constants import COLUMNS, COUNTRY_COLUMN, NUMERIC_COLUMNS
from .normalizer import normalize_label, normalize_numeric_cell

logger = logging.getLogger("casualty_charts")


def clean_country(value) -> str:
    """Country name with trailing footnote letters removed."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return normalize_label(str(value).strip()).strip()


def fill_death_percentages(df: pd.DataFrame) -> pd.DataFrame:
    """
    Fill absent percentage columns from the other fields.

    DeathPctOf1939Pop = TotalDeaths / TotalPop1939 * 100 where both exist,
    AverageDeathPctOf1939Pop falls back to DeathPctOf1939Pop.
    """
    df = df.copy()

    population = df["TotalPop1939"].where(df["TotalPop1939"] > 0)
    computed = df["TotalDeaths"] / population * 100
    df["DeathPctOf1939Pop"] = df["DeathPctOf1939Pop"].fillna(computed)
    df["AverageDeathPctOf1939Pop"] = df["AverageDeathPctOf1939Pop"].fillna(
        df["DeathPctOf1939Pop"]
    )
    return df


def clean_casualties(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize every column of the raw table.

    Args:
        raw: DataFrame of text cells with the standard column names

    Returns:
        New DataFrame: Country as str, all other columns float64 (NaN = absent)
    """
    missing = [c for c in COLUMNS if c not in raw.columns]
    if missing:
        raise ValueError(f"Raw table is missing columns: {missing}")

    clean = pd.DataFrame(index=raw.index)
    clean[COUNTRY_COLUMN] = raw[COUNTRY_COLUMN].map(clean_country)

    for col in NUMERIC_COLUMNS:
        values = raw[col].map(normalize_numeric_cell)
        clean[col] = pd.to_numeric(values, errors='coerce').astype('float64')

    clean = fill_death_percentages(clean)

    summary = summarize_cleaning(raw, clean)
    for col, count in summary.items():
        if count:
            logger.warning(f"{col}: {count} value(s) could not be parsed")
    logger.info(f"Cleaned {len(clean)} rows")

    return clean.reset_index(drop=True)


def summarize_cleaning(raw: pd.DataFrame, clean: pd.DataFrame) -> dict:
    """
    Count, per numeric column, the non-empty raw cells that ended up absent.

    Percentage columns filled in from other fields don't count as lost.
    """
    summary = {}
    for col in NUMERIC_COLUMNS:
        raw_values = raw[col].reset_index(drop=True)
        clean_values = clean[col].reset_index(drop=True)
        has_text = raw_values.map(lambda v: isinstance(v, str) and v.strip() != "")
        summary[col] = int((has_text & clean_values.isna()).sum())
    return summary
