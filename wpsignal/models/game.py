"""Game model for win probability traces."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PlaySample:
    """One point of an in-game win probability trace."""

    probability: float
    clock_marker: str


@dataclass
class GameRecord:
    """A played game: teams, closing line and the home win probability trace."""

    link: str
    home: str
    away: str
    spread: Optional[float] = None
    samples: List[PlaySample] = field(default_factory=list)

    @property
    def final_probability(self) -> Optional[float]:
        if not self.samples:
            return None
        return self.samples[-1].probability

    @property
    def home_won(self) -> bool:
        """The trace ends at exactly 1.0 when the home team won."""
        return self.final_probability == 1.0
