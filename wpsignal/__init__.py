"""NFL team ratings from in-game win probability traces and point spreads."""

__version__ = "0.1.0"
