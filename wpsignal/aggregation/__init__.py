"""Folding game traces into team statistics."""

from .game_delta import apply_opponent_strength, build_game_delta

__all__ = ["apply_opponent_strength", "build_game_delta"]
