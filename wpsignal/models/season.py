"""Table of team statistic vectors for one aggregation scope."""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..data.team_registry import BYE, code_for
from .team import TeamStatVector

logger = logging.getLogger(__name__)


class TeamStatTable:
    """
    Team code -> TeamStatVector for a game, a week or a season.

    Tables only grow. Unknown teams are materialized with a zero vector the
    first time they are written.
    """

    def __init__(self, vectors: Optional[Dict[str, TeamStatVector]] = None):
        self._vectors: Dict[str, TeamStatVector] = dict(vectors or {})

    @classmethod
    def for_season(cls) -> "TeamStatTable":
        """Empty season table with the BYE sentinel already present."""
        table = cls()
        table.vector(BYE)
        return table

    def vector(self, team: str) -> TeamStatVector:
        """Vector for ``team``, created if missing."""
        if team not in self._vectors:
            self._vectors[team] = TeamStatVector()
        return self._vectors[team]

    def get(self, team: str) -> Optional[TeamStatVector]:
        return self._vectors.get(team)

    def __getitem__(self, team: str) -> TeamStatVector:
        return self._vectors[team]

    def __contains__(self, team: str) -> bool:
        return team in self._vectors

    def __iter__(self) -> Iterator[str]:
        return iter(self._vectors)

    def __len__(self) -> int:
        return len(self._vectors)

    def items(self) -> List[Tuple[str, TeamStatVector]]:
        return list(self._vectors.items())

    def accumulate(self, delta: "TeamStatTable") -> None:
        """
        Add every vector of ``delta`` into this table.

        Only the additive fields are summed, so the result does not depend
        on the order in which deltas arrive.

        Args:
            delta: Table produced for a game or a week
        """
        for team, values in delta.items():
            self.vector(team).add(values)

    def assign_line(self, team: str, spread: float, opponent: str) -> None:
        """
        Overwrite a team's upcoming line and opponent.

        Args:
            team: Franchise code
            spread: Line from this team's point of view
            opponent: Franchise code of this week's opponent
        """
        vec = self.vector(team)
        vec.spread = spread
        vec.playing_this_week = float(code_for(opponent))

    def assign_matchup_line(self, home: str, away: str, spread: float) -> None:
        """Record a home line for both teams of a matchup."""
        self.assign_line(home, spread, away)
        self.assign_line(away, -spread, home)
        logger.debug("Assigned line %s %+.1f vs %s", home, spread, away)

    def to_dict(self) -> dict:
        """Convert table to dictionary."""
        return {team: vec.to_dict() for team, vec in self._vectors.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "TeamStatTable":
        """Create table from dictionary."""
        return cls({team: TeamStatVector.from_dict(values) for team, values in data.items()})
