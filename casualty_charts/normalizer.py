"""
Field normalization for scraped casualty table cells.

Cells from the source table mix several encodings of the same value:
plain numbers, comma-grouped numbers, bracketed footnote references
("1,234[12]"), footnote letters fused onto the value ("250,000A"),
a leading "+", and ranges ("2,400,000 to 4,000,000").

Every function here is a pure function of its input cell.
"""

import math
import re
from typing import Optional

import pandas as pd

RANGE_SEPARATOR = " to "

# sign? digits ("." digits?)?  - ASCII digits only
NUMERIC_PREFIX = re.compile(r'[+-]?\d+(?:\.\d*)?', re.ASCII)


def normalize_label(text: str) -> str:
    """
    Strip trailing footnote letters from a label.

    "PolandB" -> "Poland". Only trailing uppercase letters are removed,
    so a label made entirely of capitals reduces to "".
    """
    end = len(text)
    while end > 0 and text[end - 1].isupper():
        end -= 1
    return text[:end]


def _parse_single(text: str) -> Optional[float]:
    """Parse one side of a (possible) range expression."""
    bracket = text.find('[')
    if bracket != -1:
        text = text[:bracket]

    text = text.replace(',', '').replace('+', '').strip()

    # Footnote letter fused onto the number, e.g. "250000A"
    if text and text[-1].isupper():
        match = NUMERIC_PREFIX.match(text)
        if not match:
            return None
        text = match.group()

    # float() alone would also take "1_000", "1e5", "nan" and non-ASCII digits
    if not NUMERIC_PREFIX.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def normalize_numeric_field(text: str) -> Optional[float]:
    """
    Parse a raw casualty cell into a float.

    Handles thousands separators, bracketed footnotes, trailing footnote
    letters, a leading "+" and "A to B" ranges (returned as the mean of
    both ends).

    Returns:
        The parsed value, or None when no valid number could be read.
        A range with more than two parts, or with an unparseable side,
        is None as a whole.
    """
    if RANGE_SEPARATOR in text:
        parts = text.split(RANGE_SEPARATOR)
        if len(parts) != 2:
            return None
        low = _parse_single(parts[0])
        high = _parse_single(parts[1])
        if low is None or high is None:
            return None
        # halve first so two huge endpoints can't overflow to inf
        mean = low / 2 + high / 2
        if not math.isfinite(mean):
            return None
        return mean

    return _parse_single(text)


def normalize_numeric_cell(value) -> Optional[float]:
    """
    Normalize a DataFrame cell that may already be missing or numeric.

    Missing cells (None/NaN) and booleans are absent, numbers pass through as floats,
    text goes through normalize_numeric_field.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return normalize_numeric_field(value)
    if pd.isna(value):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return normalize_numeric_field(str(value))
