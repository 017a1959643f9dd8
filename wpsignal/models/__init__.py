"""Data models for team statistics and games."""

from .game import GameRecord, PlaySample
from .season import TeamStatTable
from .team import SPREAD_UNKNOWN, TeamStatVector

__all__ = [
    "GameRecord",
    "PlaySample",
    "SPREAD_UNKNOWN",
    "TeamStatTable",
    "TeamStatVector",
]
