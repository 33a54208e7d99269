"""
Centralized path configuration for casualty_charts.

Folder Structure (under the configured output_dir):
    output/
        ww2_casualties.csv       - Cleaned table
        ww2_casualties.parquet   - Optional parquet copy
        charts/                  - PNG charts
        logs/pipeline.log        - Run log
"""

from pathlib import Path

from .constants import CSV_FILENAME, PARQUET_FILENAME, LOG_FILENAME


def _get_project_root() -> Path:
    """Parent of this file's directory (casualty_charts/ lives in the project root)."""
    return Path(__file__).resolve().parent.parent


PROJECT_ROOT = _get_project_root()


def get_output_dir(output_dir) -> Path:
    """Resolve the output folder; relative paths are taken from the project root."""
    path = Path(output_dir)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def get_output_paths(output_dir) -> dict:
    """All file paths a pipeline run writes, keyed by purpose."""
    base = get_output_dir(output_dir)
    return {
        "base": base,
        "csv": base / CSV_FILENAME,
        "parquet": base / PARQUET_FILENAME,
        "charts": base / "charts",
        "logs": base / "logs",
        "log_file": base / "logs" / LOG_FILENAME,
    }
