"""Current-week NFL point spreads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from ..team_registry import abbreviation_for

logger = logging.getLogger(__name__)


@dataclass
class UpcomingLine:
    """One upcoming game as listed by the odds page."""

    favorite: str
    underdog: str
    spread: float  # favorite's line, normally negative
    favorite_is_home: bool

    @property
    def home(self) -> str:
        return self.favorite if self.favorite_is_home else self.underdog

    @property
    def away(self) -> str:
        return self.underdog if self.favorite_is_home else self.favorite

    @property
    def home_spread(self) -> float:
        return self.spread if self.favorite_is_home else -self.spread


class PointSpreadScraper:
    """
    Scrapes the fantasydata point spread grid.

    Each grid row reads ``favorite | line | underdog | ...``; the home team
    is prefixed with ``at``.
    """

    URL = "https://fantasydata.com/nfl-stats/nfl-point-spreads-and-odds.aspx"

    def __init__(self, url: Optional[str] = None):
        self.url = url or self.URL
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)",
            }
        )

    def fetch_upcoming_lines(self) -> List[UpcomingLine]:
        """Lines for this week's games; empty when the page is unavailable."""
        try:
            response = self.session.get(self.url, timeout=30)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Could not fetch point spreads: %s", exc)
            return []
        return self.parse_lines(response.text)

    def parse_lines(self, html: str) -> List[UpcomingLine]:
        soup = BeautifulSoup(html, "lxml")
        grid = soup.find(id="StatsGrid") or soup.find(class_="StatsGrid")
        table = grid.find("table") if grid is not None and grid.name != "table" else grid
        if table is None:
            table = soup.find("table")
        if table is None:
            logger.warning("Could not find point spread table")
            return []

        body = table.find("tbody") or table
        lines: List[UpcomingLine] = []
        for row in body.find_all("tr"):
            cells = [td.get_text(" ", strip=True) for td in row.find_all("td")]
            if len(cells) < 3:
                continue
            line = self._parse_row(cells[0], cells[1], cells[2])
            if line is not None:
                lines.append(line)
        return lines

    @staticmethod
    def _parse_row(favorite_text: str, spread_text: str, underdog_text: str) -> Optional[UpcomingLine]:
        favorite_is_home = favorite_text.lower().startswith("at ")
        favorite = abbreviation_for(PointSpreadScraper._strip_home_marker(favorite_text))
        underdog = abbreviation_for(PointSpreadScraper._strip_home_marker(underdog_text))
        if favorite is None or underdog is None:
            logger.warning("Unknown team in line %r vs %r", favorite_text, underdog_text)
            return None
        try:
            spread = float(spread_text)
        except ValueError:
            logger.info(
                "The line for the %s vs %s game is not available (got %r)",
                favorite,
                underdog,
                spread_text,
            )
            return None
        return UpcomingLine(favorite, underdog, spread, favorite_is_home)

    @staticmethod
    def _strip_home_marker(text: str) -> str:
        text = text.strip()
        if text.lower().startswith("at "):
            return text[3:]
        return text
