"""Per-game team deltas and opponent strength."""

import logging
from typing import Optional

from ..models.game import GameRecord
from ..models.season import TeamStatTable
from ..predictors.probability import DEFAULT_STDDEV, win_probability
from ..predictors.time_adjusted import adjusted_probability

logger = logging.getLogger(__name__)


def build_game_delta(game: GameRecord, stdev: float = DEFAULT_STDDEV) -> Optional[TeamStatTable]:
    """
    Turn one game's win probability trace into a two-team delta table.

    For every sample the realized home probability is compared with the
    probability the closing line implies at that point of the clock, and
    with a flat 50%. Both gaps are averaged over the samples; the home team
    gets them as-is and the away team gets their negation.

    Args:
        game: Played game with a known closing line
        stdev: Pregame standard deviation of the margin

    Returns:
        Delta table, or None when the game has no samples or no line
    """
    if not game.samples:
        logger.warning("No play samples for %s", game.link)
        return None
    if game.spread is None:
        logger.warning("No closing line for %s", game.link)
        return None

    delta = TeamStatTable()
    home = delta.vector(game.home)
    away = delta.vector(game.away)

    # Kickoff expectation stands in until the first readable clock marker.
    expected = win_probability(0, game.spread, stdev)
    for sample in game.samples:
        expected = adjusted_probability(game.spread, sample.clock_marker, expected, stdev)
        home.wp_adjust += sample.probability - expected
        away.wp_adjust += expected - sample.probability
        home.straight_wp_adjust += sample.probability - 0.5
        away.straight_wp_adjust += 0.5 - sample.probability

    count = float(len(game.samples))
    for vec in (home, away):
        vec.wp_adjust /= count
        vec.straight_wp_adjust /= count
        vec.games_played = 1.0

    if game.home_won:
        home.games_won += 1.0
    else:
        away.games_won += 1.0
    return delta


def apply_opponent_strength(delta: TeamStatTable, season: TeamStatTable, home: str, away: str) -> None:
    """
    Credit each side of a game with its opponent's average ``wp_adjust``.

    The opponent's season-to-date value is read now, before this game is
    accumulated, so later changes to the opponent do not flow back.

    Args:
        delta: Game delta to update in place
        season: Season table before this game
        home: Home franchise code
        away: Away franchise code
    """
    for team, opponent in ((home, away), (away, home)):
        opp = season.get(opponent)
        if opp is None or opp.games_played <= 0:
            continue
        delta.vector(team).opp_wp_adjust += opp.wp_adjust / opp.games_played
