"""
Pro Football Reference week and boxscore scraper.

Week pages list a ``gamelink`` cell per game. Each boxscore page embeds the
home win probability chart as a JavaScript literal::

    var chartData = [[1,0.61,"Q1 15:00 GNB 0-CHI 0 61.00%"],[2,0.6,"..."]]

The chart's axis block names the visiting team first and the home team last,
and the game info table carries the closing "Vegas Line".
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

import requests
from bs4 import BeautifulSoup

from ...models.game import GameRecord, PlaySample
from ..team_registry import abbreviation_for

logger = logging.getLogger(__name__)


class ProFootballReferenceScraper:
    """Fetch NFL week schedules and boxscore win probability traces."""

    BASE_URL = "https://www.pro-football-reference.com"

    _GAME_LINK_RE = re.compile(r"/boxscores/\d{9}[a-z]{3}\.htm")
    _CHART_DATA_RE = re.compile(r"var chartData = (.*)")
    _AXIS_RE = re.compile(r"vAxis(.*?)hAxis", re.DOTALL)
    _QUOTED_RE = re.compile(r'"([^"]*)"')
    _VEGAS_LINE_RE = re.compile(
        r"Vegas Line\s*</t[hd]>\s*<td[^>]*>\s*([^<]*?)\s*</td>", re.IGNORECASE
    )

    def __init__(self, cache_dir: Optional[str] = None):
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)",
            }
        )
        self.cache_dir = Path(cache_dir) if cache_dir else None
        if self.cache_dir:
            self.cache_dir.mkdir(parents=True, exist_ok=True)

    def fetch_week_links(self, year: int, week: int) -> List[str]:
        """
        Boxscore links for every game of a week.

        Args:
            year: Season year
            week: Week number (1-based)

        Returns:
            Links such as ``/boxscores/201509100nwe.htm``; empty on failure
        """
        url = f"{self.BASE_URL}/years/{year}/week_{week}.htm"
        html = self._fetch_page(f"pfr_{year}_week_{week}.html", url)
        if html is None:
            return []
        links = self.parse_week_links(html)
        if not links:
            logger.warning("No game links found for %s week %s", year, week)
        return links

    def fetch_game(self, link: str) -> Optional[GameRecord]:
        """Teams, closing line and win probability trace for a boxscore link."""
        html = self._fetch_boxscore(link)
        if html is None:
            return None
        return self.parse_game(html, link)

    def fetch_game_line(self, link: str) -> Optional[GameRecord]:
        """Teams and closing line only; the trace is not parsed."""
        html = self._fetch_boxscore(link)
        if html is None:
            return None
        teams = self.parse_team_names(html)
        if teams is None:
            logger.warning("Could not resolve teams for %s", link)
            return None
        away, home = teams
        return GameRecord(link=link, home=home, away=away, spread=self.parse_vegas_line(html, away, home))

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_week_links(self, html: str) -> List[str]:
        soup = BeautifulSoup(html, "lxml")
        links: List[str] = []
        for anchor in soup.select("td.gamelink a[href]"):
            match = self._GAME_LINK_RE.search(anchor["href"])
            if match and match.group(0) not in links:
                links.append(match.group(0))
        if links:
            return links
        # Some seasons render the schedule inside an HTML comment.
        for match in self._GAME_LINK_RE.findall(html):
            if match not in links:
                links.append(match)
        return links

    def parse_game(self, html: str, link: str) -> Optional[GameRecord]:
        teams = self.parse_team_names(html)
        if teams is None:
            logger.warning("Could not resolve teams for %s", link)
            return None
        samples = self.parse_chart_data(html)
        if not samples:
            logger.warning("No win probability data found for %s", link)
            return None
        away, home = teams
        return GameRecord(
            link=link,
            home=home,
            away=away,
            spread=self.parse_vegas_line(html, away, home),
            samples=samples,
        )

    def parse_team_names(self, html: str) -> Optional[Tuple[str, str]]:
        """(away, home) franchise codes from the chart axis block."""
        match = self._AXIS_RE.search(html)
        if not match:
            return None
        quoted = self._QUOTED_RE.findall(match.group(1))
        if not quoted:
            return None
        away = abbreviation_for(quoted[0])
        home = abbreviation_for(quoted[-1])
        if away is None or home is None or away == home:
            return None
        return away, home

    def parse_chart_data(self, html: str) -> List[PlaySample]:
        match = self._CHART_DATA_RE.search(html)
        if not match:
            return []
        data = match.group(1).strip().rstrip(";").strip()
        if not (data.startswith("[[") and data.endswith("]]")):
            return []

        samples: List[PlaySample] = []
        for row in data[2:-2].split("],["):
            parts = row.split(",", 2)
            if len(parts) < 2:
                logger.warning("Malformed chart row %r", row)
                return []
            try:
                probability = float(parts[1])
            except ValueError:
                logger.warning("Unreadable win probability %r", parts[1])
                return []
            marker = parts[2].strip() if len(parts) > 2 else "null"
            samples.append(PlaySample(probability=probability, clock_marker=marker))
        return samples

    def parse_vegas_line(self, html: str, away: str, home: str) -> Optional[float]:
        """
        Closing line from the home team's point of view.

        The page names the favorite ("Green Bay Packers -7.0"); a favored
        visitor flips the sign. "Pick" is a zero line.
        """
        match = self._VEGAS_LINE_RE.search(html)
        if not match:
            return None
        text = match.group(1).strip()
        if not text:
            return None
        favorite, _, value = text.rpartition(" ")
        if value.lower() in ("pick", "pk"):
            return 0.0
        try:
            line = float(value)
        except ValueError:
            logger.warning("Error getting the line for %s at %s: %r", away, home, text)
            return None
        favorite_code = abbreviation_for(favorite) if favorite else None
        if favorite_code == away:
            return -line
        if favorite_code != home:
            logger.info("Line %r does not name %s or %s; using it as the home line", text, away, home)
        return line

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def _fetch_boxscore(self, link: str) -> Optional[str]:
        cache_name = "pfr" + link.replace("/", "_").replace(".htm", ".html")
        return self._fetch_page(cache_name, self.BASE_URL + link)

    def _fetch_page(self, cache_name: str, url: str) -> Optional[str]:
        cached = self._load_cache(cache_name)
        if cached is not None:
            return cached
        try:
            response = self.session.get(url, timeout=30)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Could not fetch %s: %s", url, exc)
            return None
        self._save_cache(cache_name, response.text)
        return response.text

    def _load_cache(self, filename: str) -> Optional[str]:
        if not self.cache_dir:
            return None
        p = self.cache_dir / filename
        if not p.exists():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not read cached page %s: %s", p, exc)
            return None

    def _save_cache(self, filename: str, text: str) -> None:
        if not self.cache_dir:
            return
        p = self.cache_dir / filename
        try:
            p.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not cache page %s: %s", p, exc)
