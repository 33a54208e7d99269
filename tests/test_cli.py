"""End-to-end tests for the command line pipeline (no network)."""

import requests

from casualty_charts import scraper
from casualty_charts.cli import build_settings, parse_args, run
from casualty_charts.constants import CHART_FILES
from casualty_charts.storage import load_csv


def test_pipeline_from_saved_page(casualty_html_file, tmp_path):
    out = tmp_path / "out"
    args = parse_args(["--html-file", str(casualty_html_file), "--output-dir", str(out),
                       "--parquet"])

    assert run(args) == 0

    df = load_csv(out / "ww2_casualties.csv")
    assert len(df) == 6
    assert (out / "ww2_casualties.parquet").exists()
    for name in CHART_FILES.values():
        assert (out / "charts" / name).exists()
    assert (out / "logs" / "pipeline.log").exists()


def test_no_charts(casualty_html_file, tmp_path):
    out = tmp_path / "out"
    args = parse_args(["--html-file", str(casualty_html_file), "--output-dir", str(out),
                       "--no-charts"])

    assert run(args) == 0
    assert (out / "ww2_casualties.csv").exists()
    assert not (out / "charts").exists()
    assert not (out / "ww2_casualties.parquet").exists()


def test_missing_html_file_fails(tmp_path):
    args = parse_args(["--html-file", str(tmp_path / "missing.html"),
                       "--output-dir", str(tmp_path / "out")])
    assert run(args) == 1


def test_network_error_fails(tmp_path, monkeypatch):
    def fail(url, headers=None, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(scraper.requests, "get", fail)
    args = parse_args(["--url", "https://example.org/ww2", "--output-dir", str(tmp_path)])

    assert run(args) == 1


def test_page_without_rows_fails(tmp_path):
    page = tmp_path / "empty.html"
    page.write_text("<table class='wikitable'><tr><th>Country</th></tr></table>",
                    encoding="utf-8")
    args = parse_args(["--html-file", str(page), "--output-dir", str(tmp_path / "out")])

    assert run(args) == 1


def test_flags_override_settings(tmp_path):
    args = parse_args(["--settings", str(tmp_path / "none.json"), "--url", "https://example.org",
                       "--output-dir", "elsewhere", "--threshold", "1000", "--top-n", "3"])
    settings = build_settings(args)

    assert settings["source_url"] == "https://example.org"
    assert settings["output_dir"] == "elsewhere"
    assert settings["death_threshold"] == 1000
    assert settings["top_n"] == 3
