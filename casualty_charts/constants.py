"""
Constants and static data used across the casualty_charts package.
"""

# Source page - the first wikitable is the "Casualties by country" table
SOURCE_URL = "https://en.wikipedia.org/wiki/World_War_II_casualties"

DEFAULT_USER_AGENT = "casualty-charts/1.0 (WWII casualty statistics; educational use)"

# Output columns, in table order
COUNTRY_COLUMN = "Country"

NUMERIC_COLUMNS = [
    "TotalPop1939",
    "MilitaryDeaths",
    "CivilianDeathsDueToMilitary",
    "CivilianDeathsDueToDiseaseFamine",
    "TotalDeaths",
    "DeathPctOf1939Pop",
    "AverageDeathPctOf1939Pop",
]

COLUMNS = [COUNTRY_COLUMN] + NUMERIC_COLUMNS

# Human-readable labels for chart axes and legends
COLUMN_LABELS = {
    "Country": "Country",
    "TotalPop1939": "Total population (1939)",
    "MilitaryDeaths": "Military deaths",
    "CivilianDeathsDueToMilitary": "Civilian deaths (military activity)",
    "CivilianDeathsDueToDiseaseFamine": "Civilian deaths (disease and famine)",
    "TotalDeaths": "Total deaths",
    "DeathPctOf1939Pop": "Deaths as % of 1939 population",
    "AverageDeathPctOf1939Pop": "Average deaths as % of 1939 population",
}

# Summary rows at the bottom of the table, not countries
AGGREGATE_LABELS = {
    "approx. totals",
    "approximate totals",
    "total",
    "totals",
}

# Chart file names
CHART_FILES = {
    "total_deaths": "total_deaths.png",
    "military_vs_civilian": "military_vs_civilian.png",
    "death_percentage": "death_percentage.png",
    "deaths_share": "deaths_share.png",
}

CSV_FILENAME = "ww2_casualties.csv"
PARQUET_FILENAME = "ww2_casualties.parquet"
LOG_FILENAME = "pipeline.log"
