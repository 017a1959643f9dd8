"""Reader for saved historical odds-and-scores files.

One file per season, ``{year}FootballOddsAndScores.txt``, one line per game
date::

    20150910,451 51 21 PATRIOTS -7 28 F,453 ...,

The first field is the date, the last (usually empty) field is ignored, and
each game in between is a space-separated record whose second to sixth
tokens are the visitor line, visitor score, home nickname, home line and
home score. The favorite's line is the spread; the other column holds the
total.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..team_registry import abbreviation_for

logger = logging.getLogger(__name__)

# Lines beyond this are totals, not spreads.
MAX_SPREAD = 30.0

AWAY_COVERS = 0
HOME_COVERS = 1
PUSH = 2


def cover_outcome(home_score: float, away_score: float, spread: float) -> int:
    """0 when the visitor covers the home line, 1 when the home team covers, 2 for a push."""
    margin = home_score - away_score + spread
    if margin > 0:
        return HOME_COVERS
    if margin < 0:
        return AWAY_COVERS
    return PUSH


@dataclass
class HistoricalLine:
    """A played game with its closing home line and final score."""

    date: str
    home: str
    spread: float
    away_score: float
    home_score: float

    @property
    def boxscore_link(self) -> str:
        return f"/boxscores/{self.date}0{self.home.lower()}.htm"

    @property
    def outcome(self) -> int:
        return cover_outcome(self.home_score, self.away_score, self.spread)


class OddsAndScoresReader:
    """Loads historical lines from the local odds-and-scores archive."""

    def __init__(self, data_dir: str = "data/raw/odds", sport: str = "Football"):
        self.data_dir = Path(data_dir)
        self.sport = sport

    def season_path(self, year: int) -> Path:
        return self.data_dir / f"{year}{self.sport}OddsAndScores.txt"

    def read_season(self, year: int) -> List[HistoricalLine]:
        """
        All games of a season in file order.

        Args:
            year: Season year

        Returns:
            Parsed games; empty when the file is missing
        """
        path = self.season_path(year)
        try:
            with open(path, "r") as f:
                text = f.read()
        except OSError as exc:
            logger.warning("Error reading odds file for year %s: %s", year, exc)
            return []
        games: List[HistoricalLine] = []
        for raw in text.splitlines():
            games.extend(self.parse_line(raw))
        return games

    def parse_line(self, raw: str) -> List[HistoricalLine]:
        fields = raw.strip().split(",")
        if len(fields) < 3:
            return []
        date = fields[0].strip()
        games: List[HistoricalLine] = []
        for record in fields[1:-1]:
            game = self._parse_game(date, record.split())
            if game is not None:
                games.append(game)
        return games

    @staticmethod
    def _parse_game(date: str, tokens: List[str]) -> Optional[HistoricalLine]:
        if len(tokens) < 7:
            return None
        home = abbreviation_for(tokens[3])
        if home is None:
            logger.warning("Unknown home team %r on %s", tokens[3], date)
            return None
        try:
            away_score = float(tokens[2])
            home_score = float(tokens[5])
        except ValueError:
            logger.warning("Unreadable score for %s on %s", home, date)
            return None

        spread = _home_spread(tokens[1], tokens[4])
        if spread is None:
            logger.warning("No spread for %s on %s", home, date)
            return None
        return HistoricalLine(date=date, home=home, spread=spread, away_score=away_score, home_score=home_score)


def _parse_line_value(text: str) -> Optional[float]:
    if text.lower() in ("pk", "pick"):
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return None
    if abs(value) > MAX_SPREAD:
        return None
    return abs(value)


def _home_spread(visitor_text: str, home_text: str) -> Optional[float]:
    # A line in the visitor column means the visitor is favored.
    visitor = _parse_line_value(visitor_text)
    if visitor is not None:
        return visitor
    home = _parse_line_value(home_text)
    if home is not None:
        return -home
    return None
