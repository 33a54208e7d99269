"""
Static charts summarizing WWII casualties by country.

All charts are written as PNG files using the non-interactive Agg backend.
Absent values never pass a threshold comparison, and aggregate rows
("Approx. totals") are left out of every chart.
"""

import logging
from pathlib import Path
from typing import List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
import numpy as np
import pandas as pd

from .constants import AGGREGATE_LABELS, CHART_FILES, COLUMN_LABELS, COUNTRY_COLUMN

logger = logging.getLogger("casualty_charts")

CIVILIAN_COLUMNS = ["CivilianDeathsDueToMilitary", "CivilianDeathsDueToDiseaseFamine"]


def drop_aggregate_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Remove summary rows and rows without a country name."""
    names = df[COUNTRY_COLUMN].fillna("").str.strip()
    keep = (names != "") & ~names.str.lower().isin(AGGREGATE_LABELS)
    return df[keep]


def countries_above_threshold(df: pd.DataFrame, column: str = "TotalDeaths",
                              threshold: float = 250000) -> pd.DataFrame:
    """
    Countries whose value in `column` is >= threshold, largest first.

    NaN compares False, so absent values are always excluded.
    """
    df = drop_aggregate_rows(df)
    selected = df[df[column] >= threshold]
    return selected.sort_values(column, ascending=False)


def _save(fig, output_path: Path, dpi: int) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Saved chart {output_path.name}")
    return output_path


def plot_total_deaths(df, output_path, threshold=250000, dpi=150) -> Path:
    """Horizontal bar chart of total deaths for countries over the threshold."""
    data = countries_above_threshold(df, "TotalDeaths", threshold)
    # barh draws bottom-up; reverse so the largest is on top
    data = data.iloc[::-1]

    fig, ax = plt.subplots(figsize=(10, max(4, 0.35 * len(data))))
    ax.barh(data[COUNTRY_COLUMN], data["TotalDeaths"], color='firebrick')
    ax.set_xlabel(COLUMN_LABELS["TotalDeaths"])
    ax.set_title(f"WWII total deaths (countries with at least {threshold:,.0f})")
    ax.xaxis.set_major_formatter(FuncFormatter(lambda x, _: f"{x:,.0f}"))

    return _save(fig, Path(output_path), dpi)


def plot_military_vs_civilian(df, output_path, threshold=250000, dpi=150) -> Path:
    """Stacked bars: military deaths and the two civilian causes."""
    data = countries_above_threshold(df, "TotalDeaths", threshold)
    positions = np.arange(len(data))

    fig, ax = plt.subplots(figsize=(max(8, 0.6 * len(data)), 6))
    bottom = np.zeros(len(data))
    for col, color in zip(["MilitaryDeaths"] + CIVILIAN_COLUMNS,
                          ['steelblue', 'darkorange', 'gray']):
        values = data[col].fillna(0).to_numpy()
        ax.bar(positions, values, bottom=bottom, label=COLUMN_LABELS[col], color=color)
        bottom += values

    ax.set_xticks(positions)
    ax.set_xticklabels(data[COUNTRY_COLUMN], rotation=60, ha='right')
    ax.set_ylabel("Deaths")
    ax.set_title("WWII military vs civilian deaths")
    ax.yaxis.set_major_formatter(FuncFormatter(lambda y, _: f"{y:,.0f}"))
    ax.legend()

    return _save(fig, Path(output_path), dpi)


def plot_death_percentage(df, output_path, threshold=250000, dpi=150) -> Path:
    """Deaths as a share of 1939 population, same countries as the other charts."""
    data = countries_above_threshold(df, "TotalDeaths", threshold)
    data = data.dropna(subset=["AverageDeathPctOf1939Pop"])
    data = data.sort_values("AverageDeathPctOf1939Pop", ascending=False)

    fig, ax = plt.subplots(figsize=(max(8, 0.6 * len(data)), 6))
    ax.bar(data[COUNTRY_COLUMN], data["AverageDeathPctOf1939Pop"], color='darkslateblue')
    ax.set_ylabel(COLUMN_LABELS["AverageDeathPctOf1939Pop"])
    ax.set_title("WWII deaths as % of 1939 population")
    ax.tick_params(axis='x', labelrotation=60)

    return _save(fig, Path(output_path), dpi)


def plot_deaths_share(df, output_path, top_n=10, dpi=150) -> Path:
    """Pie chart of each country's share of total deaths, top_n plus "Other"."""
    data = drop_aggregate_rows(df).dropna(subset=["TotalDeaths"])
    data = data.sort_values("TotalDeaths", ascending=False)

    top = data.head(top_n)
    labels = list(top[COUNTRY_COLUMN])
    values = list(top["TotalDeaths"])
    other = data["TotalDeaths"].iloc[top_n:].sum()
    if other > 0:
        labels.append("Other")
        values.append(other)

    fig, ax = plt.subplots(figsize=(9, 9))
    if sum(values) > 0:
        ax.pie(values, labels=labels, autopct='%1.1f%%', startangle=90, counterclock=False)
        ax.axis('equal')
    else:
        logger.warning("No total deaths to plot in share chart")
        ax.text(0.5, 0.5, "No data", ha='center', va='center')
        ax.axis('off')
    ax.set_title(f"Share of WWII deaths (top {top_n} countries)")

    return _save(fig, Path(output_path), dpi)


def render_all(df, output_dir, settings) -> List[Path]:
    """Render the full chart set into output_dir. Returns the written paths."""
    output_dir = Path(output_dir)
    # settings.json may hold these as strings
    threshold = float(settings["death_threshold"])
    dpi = int(settings["chart_dpi"])
    top_n = int(settings["top_n"])

    written = [
        plot_total_deaths(df, output_dir / CHART_FILES["total_deaths"], threshold, dpi),
        plot_military_vs_civilian(df, output_dir / CHART_FILES["military_vs_civilian"],
                                  threshold, dpi),
        plot_death_percentage(df, output_dir / CHART_FILES["death_percentage"], threshold, dpi),
        plot_deaths_share(df, output_dir / CHART_FILES["deaths_share"], top_n, dpi),
    ]
    logger.info(f"Rendered {len(written)} charts to {output_dir}")
    return written
