"""Matchup features, rankings and training tables."""

from .matchup import MatchupFeatures, matchup_features
from .ranking import rank_teams
from .training_data import TRAINING_COLUMNS, TrainingDataBuilder, TrainingDataConfig

__all__ = [
    "MatchupFeatures",
    "TRAINING_COLUMNS",
    "TrainingDataBuilder",
    "TrainingDataConfig",
    "matchup_features",
    "rank_teams",
]
