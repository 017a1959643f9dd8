"""Per-team statistic vector."""

from dataclasses import dataclass

# Implausible line that marks an unknown spread or a bye week.
SPREAD_UNKNOWN = 1234.0

ADDITIVE_FIELDS = (
    "wp_adjust",
    "straight_wp_adjust",
    "games_played",
    "games_won",
    "opp_wp_adjust",
)


@dataclass
class TeamStatVector:
    """Accumulated win-probability statistics for one team in one scope."""

    wp_adjust: float = 0.0
    straight_wp_adjust: float = 0.0
    games_played: float = 0.0
    games_won: float = 0.0
    opp_wp_adjust: float = 0.0
    spread: float = SPREAD_UNKNOWN
    playing_this_week: float = 0.0

    def add(self, other: "TeamStatVector") -> None:
        """
        Add another vector's additive fields into this one.

        ``spread`` and ``playing_this_week`` are left untouched; they only
        change through line assignment.

        Args:
            other: Vector to add
        """
        for name in ADDITIVE_FIELDS:
            setattr(self, name, getattr(self, name) + getattr(other, name))

    @property
    def has_line(self) -> bool:
        return self.spread != SPREAD_UNKNOWN

    @property
    def average_wp_adjust(self) -> float:
        """Per-game ``wp_adjust``; 0 before the first game."""
        if self.games_played <= 0:
            return 0.0
        return self.wp_adjust / self.games_played

    @property
    def average_straight_wp_adjust(self) -> float:
        if self.games_played <= 0:
            return 0.0
        return self.straight_wp_adjust / self.games_played

    def to_dict(self) -> dict:
        """Convert vector to dictionary."""
        return {
            "wp_adjust": self.wp_adjust,
            "straight_wp_adjust": self.straight_wp_adjust,
            "games_played": self.games_played,
            "games_won": self.games_won,
            "opp_wp_adjust": self.opp_wp_adjust,
            "spread": self.spread,
            "playing_this_week": self.playing_this_week,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TeamStatVector":
        """Create vector from dictionary."""
        return cls(
            wp_adjust=data.get("wp_adjust", 0.0),
            straight_wp_adjust=data.get("straight_wp_adjust", 0.0),
            games_played=data.get("games_played", 0.0),
            games_won=data.get("games_won", 0.0),
            opp_wp_adjust=data.get("opp_wp_adjust", 0.0),
            spread=data.get("spread", SPREAD_UNKNOWN),
            playing_this_week=data.get("playing_this_week", 0.0),
        )
