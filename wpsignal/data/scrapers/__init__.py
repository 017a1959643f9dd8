"""Scraper exports."""

from .odds_and_scores import HistoricalLine, OddsAndScoresReader, cover_outcome
from .point_spreads import PointSpreadScraper, UpcomingLine
from .pro_football_reference import ProFootballReferenceScraper

__all__ = [
    "HistoricalLine",
    "OddsAndScoresReader",
    "PointSpreadScraper",
    "ProFootballReferenceScraper",
    "UpcomingLine",
    "cover_outcome",
]
