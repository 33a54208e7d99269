"""
Scrape, clean, save and chart WWII casualties by country.

Usage:
    casualty-charts
    casualty-charts --html-file saved_page.html --output-dir out --parquet
    python -m casualty_charts --threshold 1000000 --no-charts
"""

import argparse
import logging
import sys
from datetime import datetime

import requests

from .charts import render_all
from .cleaning import clean_casualties
from .logging_setup import setup_logging
from .paths import get_output_paths
from .scraper import scrape_casualties
from .settings import load_settings
from .storage import load_csv, save_csv, save_parquet


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Scrape and chart WWII casualties by country')

    source = parser.add_mutually_exclusive_group()
    source.add_argument('--url',
                        help='Page to scrape (default: source_url setting)')
    source.add_argument('--html-file',
                        help='Read a saved copy of the page instead of fetching it')

    parser.add_argument('--output-dir',
                        help='Output folder (default: output_dir setting)')
    parser.add_argument('--threshold', type=float,
                        help='Minimum total deaths for a country to be charted (default: 250000)')
    parser.add_argument('--top-n', type=int,
                        help='Countries shown individually in the share chart (default: 10)')
    parser.add_argument('--settings',
                        help='Path to a settings.json file')
    parser.add_argument('--parquet', action='store_true',
                        help='Also write a parquet copy of the cleaned table')
    parser.add_argument('--no-charts', action='store_true',
                        help='Stop after writing the cleaned table')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Debug logging')

    return parser.parse_args(argv)


def build_settings(args) -> dict:
    """Settings from file/environment with command line flags on top."""
    settings = load_settings(args.settings)
    if args.url:
        settings["source_url"] = args.url
    if args.output_dir:
        settings["output_dir"] = args.output_dir
    if args.threshold is not None:
        settings["death_threshold"] = args.threshold
    if args.top_n is not None:
        settings["top_n"] = args.top_n
    return settings


def run(args) -> int:
    """Run the pipeline. Returns the process exit code."""
    settings = build_settings(args)
    paths = get_output_paths(settings["output_dir"])

    logger = setup_logging(paths["log_file"],
                           level=logging.DEBUG if args.verbose else logging.INFO)
    logger.info(f"Started: {datetime.now().isoformat()}")
    logger.info(f"Output directory: {paths['base']}")

    try:
        raw = scrape_casualties(html_file=args.html_file, settings=settings)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Could not get casualty table: {e}")
        return 1

    if raw.empty:
        logger.error("Casualty table has no data rows")
        return 1

    clean = clean_casualties(raw)
    save_csv(clean, paths["csv"])
    if args.parquet:
        save_parquet(clean, paths["parquet"])

    if not args.no_charts:
        # Charts read back the persisted table, not the in-memory frame
        render_all(load_csv(paths["csv"]), paths["charts"], settings)

    logger.info("Done")
    return 0


def main(argv=None):
    """Console script entry point."""
    sys.exit(run(parse_args(argv)))


if __name__ == '__main__':
    main()
