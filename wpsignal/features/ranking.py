"""Team rankings from a season table."""

import pandas as pd

from ..data.team_registry import BYE, name_for
from ..models.season import TeamStatTable

RANKING_COLUMNS = [
    "team",
    "games_played",
    "games_won",
    "avg_wp_adjust",
    "avg_straight_wp_adjust",
    "avg_opp_wp_adjust",
    "spread",
    "opponent",
]


def rank_teams(table: TeamStatTable) -> pd.DataFrame:
    """
    Per-game averages for every team that has played, best first.

    Teams are ordered by average ``wp_adjust``: how far above the closing
    line's expectation they ran, on average, over the course of their games.

    ``spread`` and ``opponent`` are missing (NaN) for teams without an
    assigned line, and are written as empty CSV cells.
    """
    rows = []
    for team, vec in table.items():
        if team == BYE or vec.games_played <= 0:
            continue
        try:
            opponent = name_for(vec.playing_this_week)
        except KeyError:
            opponent = BYE
        rows.append(
            {
                "team": team,
                "games_played": int(vec.games_played),
                "games_won": int(vec.games_won),
                "avg_wp_adjust": vec.average_wp_adjust,
                "avg_straight_wp_adjust": vec.average_straight_wp_adjust,
                "avg_opp_wp_adjust": vec.opp_wp_adjust / vec.games_played,
                "spread": vec.spread if vec.has_line else None,
                "opponent": opponent if vec.has_line else None,
            }
        )
    if not rows:
        return pd.DataFrame(columns=RANKING_COLUMNS)
    df = pd.DataFrame(rows, columns=RANKING_COLUMNS)
    df = df.sort_values("avg_wp_adjust", ascending=False).reset_index(drop=True)
    df.index = df.index + 1
    return df
