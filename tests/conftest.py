import pytest

from casualty_charts.scraper import parse_casualty_table


CASUALTY_PAGE = """
<html><body>
<p>World War II casualties</p>
<table class="wikitable sortable">
<tr>
  <th>Country</th>
  <th>Total population 1/1/1939</th>
  <th>Military deaths from all causes</th>
  <th>Civilian deaths due to military activity and crimes against humanity</th>
  <th>Civilian deaths due to war-related famine and disease</th>
  <th>Total deaths</th>
  <th>Deaths as % of 1939 population</th>
  <th>Average Deaths as % of 1939 population</th>
</tr>
<tr><td><a href="/wiki/Albania">Albania</a>A</td><td>1,073,000</td><td>30,000</td><td></td><td></td><td>30,000</td><td>2.80</td><td>2.80</td></tr>
<tr><td><a href="/wiki/China">China</a>B</td><td>517,568,000<sup>[12]</sup></td><td>3,000,000 to 3,750,000</td><td>7,000,000 to 8,000,000</td><td>5,000,000 to 10,000,000</td><td>15,000,000 to 20,000,000</td><td>2.90 to 3.86</td><td>3.38</td></tr>
<tr><td>Poland</td><td>34,849,000</td><td>+240,000C</td><td>5,620,000 to 5,820,000</td><td></td><td>5,900,000 to 6,000,000</td><td>16.93 to 17.22</td><td></td></tr>
<tr><th scope="row">Luxembourg</th><td>295,000</td><td></td><td>2,000</td><td></td><td>2,000</td><td></td><td></td></tr>
<tr><td colspan="8">Figures for colonies are included with the parent country</td></tr>
<tr><td>Mystery</td><td>unknown</td><td>n/a</td><td></td><td></td><td>unknown</td><td></td><td></td></tr>
<tr><td>Approx. totals</td><td>1,986,600,000</td><td>21,000,000 to 25,500,000</td><td></td><td></td><td>70,000,000 to 85,000,000</td><td>3.5 to 4.3</td><td></td></tr>
</table>
<table class="wikitable"><tr><th>Other</th></tr><tr><td>ignored</td></tr></table>
</body></html>
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings tests independent of the caller's environment."""
    for var in ("CASUALTY_CHARTS_URL", "CASUALTY_CHARTS_OUTPUT_DIR", "CASUALTY_CHARTS_SETTINGS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def casualty_html():
    return CASUALTY_PAGE


@pytest.fixture
def casualty_html_file(tmp_path):
    path = tmp_path / "ww2_casualties.html"
    path.write_text(CASUALTY_PAGE, encoding="utf-8")
    return path


@pytest.fixture
def raw_table():
    return parse_casualty_table(CASUALTY_PAGE)
