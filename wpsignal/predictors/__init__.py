"""Win probability model, spread solvers and clock adjustment."""

from .base import SpreadSolver
from .probability import DEFAULT_STDDEV, erfc, normal_cdf, win_probability
from .spread_solver import (
    BrentSpreadSolver,
    FixedStepSpreadSolver,
    create_solver,
    solve_from_spread,
    solve_from_zero,
)
from .time_adjusted import ClockMarker, adjusted_probability, parse_clock_marker

__all__ = [
    "BrentSpreadSolver",
    "ClockMarker",
    "DEFAULT_STDDEV",
    "FixedStepSpreadSolver",
    "SpreadSolver",
    "adjusted_probability",
    "create_solver",
    "erfc",
    "normal_cdf",
    "parse_clock_marker",
    "solve_from_spread",
    "solve_from_zero",
    "win_probability",
]
