"""Tests for chart rendering."""

import pandas as pd

from casualty_charts.charts import (
    countries_above_threshold,
    drop_aggregate_rows,
    plot_deaths_share,
    render_all,
)
from casualty_charts.cleaning import clean_casualties
from casualty_charts.constants import CHART_FILES, COLUMNS
from casualty_charts.settings import DEFAULT_SETTINGS


class TestCountrySelection:
    def test_threshold_excludes_absent_and_aggregates(self, raw_table):
        clean = clean_casualties(raw_table)
        selected = countries_above_threshold(clean, "TotalDeaths", 250000)
        assert list(selected["Country"]) == ["China", "Poland"]

    def test_threshold_is_inclusive(self, raw_table):
        clean = clean_casualties(raw_table)
        selected = countries_above_threshold(clean, "TotalDeaths", 30000)
        assert "Albania" in list(selected["Country"])

    def test_drop_aggregate_rows_case_insensitive(self):
        df = pd.DataFrame({"Country": ["France", "TOTAL", "", "Approx. totals"]})
        assert list(drop_aggregate_rows(df)["Country"]) == ["France"]


class TestRenderAll:
    def test_writes_every_chart(self, raw_table, tmp_path):
        written = render_all(clean_casualties(raw_table), tmp_path / "charts",
                             DEFAULT_SETTINGS.copy())

        assert sorted(p.name for p in written) == sorted(CHART_FILES.values())
        for path in written:
            assert path.exists()
            assert path.stat().st_size > 0

    def test_nothing_above_threshold(self, raw_table, tmp_path):
        settings = DEFAULT_SETTINGS.copy()
        settings["death_threshold"] = 10 ** 12
        written = render_all(clean_casualties(raw_table), tmp_path, settings)
        assert all(p.exists() for p in written)

    def test_string_settings_from_json(self, raw_table, tmp_path):
        settings = DEFAULT_SETTINGS.copy()
        settings.update(death_threshold="250000", top_n="5", chart_dpi="50")
        written = render_all(clean_casualties(raw_table), tmp_path, settings)
        assert len(written) == 4


def test_share_chart_without_data(tmp_path):
    empty = pd.DataFrame(columns=COLUMNS).astype({"TotalDeaths": "float64"})
    path = plot_deaths_share(empty, tmp_path / "share.png", top_n=5, dpi=50)
    assert path.exists()
