"""Tests for the current-week point spread scraper."""

import requests

from wpsignal.data.scrapers.point_spreads import PointSpreadScraper, UpcomingLine


SPREADS_HTML = """
<html><body>
<table class="other"><tr><td>ignore</td><td>me</td><td>please</td></tr></table>
<div id="StatsGrid">
  <table>
    <thead><tr><th>Favorite</th><th>Line</th><th>Underdog</th><th>O/U</th></tr></thead>
    <tbody>
      <tr><td>at Packers</td><td>-7.5</td><td>Bears</td><td>47.5</td></tr>
      <tr><td>Seahawks</td><td>-3</td><td>at Rams</td><td>44</td></tr>
      <tr><td>at Jets</td><td>Off</td><td>Dolphins</td><td>41</td></tr>
      <tr><td>at Wildcats</td><td>-2</td><td>Bears</td><td>41</td></tr>
      <tr><td>bye</td></tr>
    </tbody>
  </table>
</div>
</body></html>
"""


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_parse_lines_reads_grid():
    lines = PointSpreadScraper().parse_lines(SPREADS_HTML)
    assert lines == [
        UpcomingLine("GNB", "CHI", -7.5, True),
        UpcomingLine("SEA", "RAM", -3.0, False),
    ]


def test_home_perspective():
    home_favorite = UpcomingLine("GNB", "CHI", -7.5, True)
    assert (home_favorite.home, home_favorite.away, home_favorite.home_spread) == ("GNB", "CHI", -7.5)

    road_favorite = UpcomingLine("SEA", "RAM", -3.0, False)
    assert (road_favorite.home, road_favorite.away, road_favorite.home_spread) == ("RAM", "SEA", 3.0)


def test_falls_back_to_first_table():
    html = "<table><tr><td>at Chiefs</td><td>-1</td><td>Broncos</td></tr></table>"
    lines = PointSpreadScraper().parse_lines(html)
    assert len(lines) == 1
    assert lines[0].home == "KAN"


def test_no_table():
    assert PointSpreadScraper().parse_lines("<html><body>nothing</body></html>") == []


def test_fetch_failure_returns_empty(monkeypatch):
    scraper = PointSpreadScraper(url="https://example.invalid/spreads")
    monkeypatch.setattr(scraper.session, "get", lambda url, timeout=None: _FakeResponse("", 503))
    assert scraper.fetch_upcoming_lines() == []


def test_fetch_parses_page(monkeypatch):
    scraper = PointSpreadScraper()
    monkeypatch.setattr(scraper.session, "get", lambda url, timeout=None: _FakeResponse(SPREADS_HTML))
    assert len(scraper.fetch_upcoming_lines()) == 2
