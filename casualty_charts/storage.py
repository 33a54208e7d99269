"""
Persist the cleaned casualty table.

Includes:
- CSV write/read (the file the chart step consumes)
- Optional parquet copy with a fixed schema
"""
import logging
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .constants import COLUMNS, COUNTRY_COLUMN, NUMERIC_COLUMNS

logger = logging.getLogger("casualty_charts")


# =============================================================================
# CSV
# =============================================================================

def save_csv(df, output_path):
    """Write the standard columns, in order, to CSV. Returns the path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df[COLUMNS].to_csv(output_path, index=False)
    logger.info(f"Saved {len(df):,} rows to {output_path}")
    return output_path


def load_csv(path) -> pd.DataFrame:
    """Read a cleaned casualty CSV; empty numeric cells come back as NaN."""
    dtypes = {col: 'float64' for col in NUMERIC_COLUMNS}
    dtypes[COUNTRY_COLUMN] = 'str'
    df = pd.read_csv(path, dtype=dtypes, keep_default_na=False,
                     na_values={col: [''] for col in NUMERIC_COLUMNS})
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {missing}")
    return df[COLUMNS]


# =============================================================================
# Parquet
# =============================================================================

def casualties_schema():
    """pyarrow schema for the cleaned table."""
    fields = [(COUNTRY_COLUMN, pa.string())]
    fields.extend((col, pa.float64()) for col in NUMERIC_COLUMNS)
    return pa.schema(fields)


def save_parquet(df, output_path, compression='snappy'):
    """Save the cleaned table to parquet. Returns file size in MB."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    table = pa.Table.from_pandas(df[COLUMNS], schema=casualties_schema(),
                                 preserve_index=False)
    pq.write_table(table, output_path, compression=compression)

    size_mb = output_path.stat().st_size / 1024 / 1024
    logger.info(f"Saved {output_path} ({size_mb:.2f} MB, {len(df):,} rows)")
    return size_mb
