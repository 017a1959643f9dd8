"""Spread estimates for a matchup from season-to-date team statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..models.season import TeamStatTable
from ..models.team import TeamStatVector
from ..predictors.base import SpreadSolver
from ..predictors.probability import DEFAULT_STDDEV, win_probability
from ..predictors.spread_solver import FixedStepSpreadSolver

# Teams need this many games before their averages are used.
MIN_GAMES_PLAYED = 3


@dataclass
class MatchupFeatures:
    """Independently solved home-line estimates for one matchup."""

    home: str
    away: str
    guess_spread: float  # from straight win probability gaps
    guess_wp: float  # adds the time-adjusted gap
    guess_op: float  # adds opponent strength
    guess_both: float  # blend of the two above
    est_spread: float  # market line nudged by the adjusted gap

    @property
    def estimates(self) -> List[float]:
        return [self.guess_spread, self.guess_wp, self.guess_op, self.guess_both, self.est_spread]

    @property
    def mean_estimate(self) -> float:
        return float(np.mean(self.estimates))

    def to_dict(self) -> dict:
        return {
            "home": self.home,
            "away": self.away,
            "guess_spread": self.guess_spread,
            "guess_wp": self.guess_wp,
            "guess_op": self.guess_op,
            "guess_both": self.guess_both,
            "est_spread": self.est_spread,
            "mean_estimate": self.mean_estimate,
        }


def is_eligible(vec: Optional[TeamStatVector], min_games: int = MIN_GAMES_PLAYED) -> bool:
    return vec is not None and vec.games_played >= max(min_games, 2)


def matchup_features(
    season: TeamStatTable,
    home: str,
    away: str,
    solver: Optional[SpreadSolver] = None,
    stdev: float = DEFAULT_STDDEV,
    min_games: int = MIN_GAMES_PLAYED,
) -> Optional[MatchupFeatures]:
    """
    Estimate the home line of a matchup five ways.

    Probability gaps between the teams are added to a pick'em and solved back
    into spreads. ``est_spread`` starts from the home team's assigned line
    instead; without one it starts from a pick'em.

    Args:
        season: Season-to-date table, before the game
        home: Home franchise code
        away: Away franchise code
        solver: Spread solver (fixed-step by default)
        stdev: Standard deviation of the margin
        min_games: Games both teams need before estimates are made

    Returns:
        MatchupFeatures, or None when either team has too few games
    """
    h = season.get(home)
    v = season.get(away)
    if not (is_eligible(h, min_games) and is_eligible(v, min_games)):
        return None
    solver = solver or FixedStepSpreadSolver()

    straight_gap = h.average_straight_wp_adjust - v.average_straight_wp_adjust
    # The first game of a season has no opponent credit, hence games_played - 1.
    op_gap = (-h.opp_wp_adjust / (h.games_played - 1) + v.opp_wp_adjust / (v.games_played - 1)) / 2.0
    wp_gap = (h.average_wp_adjust - v.average_wp_adjust) / 2.0
    both_gap = (wp_gap + op_gap) / 2.0

    anchor = h.spread if h.has_line else 0.0
    market_prob = win_probability(0, anchor, stdev) + wp_gap

    return MatchupFeatures(
        home=home,
        away=away,
        guess_spread=solver.solve_from_spread(0.5 + straight_gap, 0.0, stdev),
        guess_wp=solver.solve_from_spread(0.5 + wp_gap + straight_gap, 0.0, stdev),
        guess_op=solver.solve_from_spread(0.5 + op_gap + straight_gap, 0.0, stdev),
        guess_both=solver.solve_from_spread(0.5 + both_gap + straight_gap, 0.0, stdev),
        est_spread=solver.solve_from_spread(market_prob, anchor, stdev),
    )
