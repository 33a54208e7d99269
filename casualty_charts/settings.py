"""
Settings Management for casualty_charts

Loads pipeline settings: the source page,
the output folder and chart parameters.

Priority (highest first):
    command line flags (applied by cli.py)
    environment variables (CASUALTY_CHARTS_URL, CASUALTY_CHARTS_OUTPUT_DIR)
    settings.json
    DEFAULT_SETTINGS
"""

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import SOURCE_URL, DEFAULT_USER_AGENT

logger = logging.getLogger("casualty_charts")

load_dotenv()

# Settings file location (in project root)
SETTINGS_FILE = Path(__file__).parent.parent / "settings.json"

# Default settings
DEFAULT_SETTINGS = {
    "source_url": SOURCE_URL,
    "output_dir": "output",
    "request_timeout": 30,
    "user_agent": DEFAULT_USER_AGENT,
    "death_threshold": 250000,
    "top_n": 10,
    "chart_dpi": 150,
}

# Environment variable -> settings key
ENV_OVERRIDES = {
    "CASUALTY_CHARTS_URL": "source_url",
    "CASUALTY_CHARTS_OUTPUT_DIR": "output_dir",
}


def get_settings_file() -> Path:
    """Settings file path, overridable with CASUALTY_CHARTS_SETTINGS."""
    env_path = os.environ.get("CASUALTY_CHARTS_SETTINGS")
    if env_path:
        return Path(env_path)
    return SETTINGS_FILE


def load_settings(settings_file=None) -> dict:
    """
    Load settings from settings.json, then apply environment overrides.
    Returns default settings if the file doesn't exist or can't be read.
    """
    settings = DEFAULT_SETTINGS.copy()
    path = Path(settings_file) if settings_file else get_settings_file()

    try:
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                # Merge with defaults to ensure all keys exist
                settings.update(json.load(f))
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")

    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            settings[key] = value

    return settings
