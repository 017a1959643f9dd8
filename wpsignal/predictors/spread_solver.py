"""Solvers that turn a win probability back into a point spread."""

from scipy.optimize import brentq

from .base import SpreadSolver
from .probability import DEFAULT_STDDEV, win_probability

TOLERANCE = 0.001
MAX_ITERATIONS = 1000


class FixedStepSpreadSolver(SpreadSolver):
    """
    Walks the spread in fixed steps until the model matches the target.

    The model is monotone in the spread, so the walk always heads the right
    way, but it can stop up to one step away from the exact root. When the
    iteration cap is reached the last estimate is returned as-is.
    """

    def __init__(self, anchored_step: float = 0.1, unanchored_step: float = 0.5,
                 tolerance: float = TOLERANCE, max_iterations: int = MAX_ITERATIONS):
        """
        Initialize fixed-step solver.

        Args:
            anchored_step: Step used when refining around a known line
            unanchored_step: Coarser step used when starting from a pick'em
            tolerance: Allowed gap between model and target probability
            max_iterations: Iteration cap
        """
        super().__init__("fixed_step")
        self.anchored_step = anchored_step
        self.unanchored_step = unanchored_step
        self.tolerance = tolerance
        self.max_iterations = max_iterations

    def solve_from_spread(self, target_prob: float, known_spread: float,
                          stdev: float = DEFAULT_STDDEV) -> float:
        start_prob = win_probability(0, known_spread, stdev)
        return self._walk(target_prob, known_spread, start_prob, self.anchored_step, stdev)

    def solve_from_zero(self, target_prob: float, stdev: float = DEFAULT_STDDEV) -> float:
        return self._walk(target_prob, 0.0, 0.5, self.unanchored_step, stdev)

    def _walk(self, target_prob: float, estimate: float, computed: float,
              step: float, stdev: float) -> float:
        count = 0
        while abs(computed - target_prob) > self.tolerance and count < self.max_iterations:
            # A lower (more negative) home line means a likelier home win.
            if target_prob > computed:
                estimate -= step
            else:
                estimate += step
            computed = win_probability(0, estimate, stdev)
            count += 1
        return estimate


class BrentSpreadSolver(SpreadSolver):
    """Bracketing solver built on scipy's Brent root finder."""

    def __init__(self, half_width: float = 100.0, xtol: float = 1e-6):
        """
        Initialize Brent solver.

        Args:
            half_width: Half the width of the search bracket around the start
            xtol: Absolute tolerance on the returned spread
        """
        super().__init__("brent")
        self.half_width = half_width
        self.xtol = xtol

    def solve_from_spread(self, target_prob: float, known_spread: float,
                          stdev: float = DEFAULT_STDDEV) -> float:
        return self._solve(target_prob, known_spread, stdev)

    def solve_from_zero(self, target_prob: float, stdev: float = DEFAULT_STDDEV) -> float:
        return self._solve(target_prob, 0.0, stdev)

    def _solve(self, target_prob: float, center: float, stdev: float) -> float:
        def gap(spread: float) -> float:
            return win_probability(0, spread, stdev) - target_prob

        lo = center - self.half_width
        hi = center + self.half_width
        # gap() decreases with the spread; clamp targets outside the bracket.
        if gap(lo) < 0:
            return lo
        if gap(hi) > 0:
            return hi
        return float(brentq(gap, lo, hi, xtol=self.xtol))


_DEFAULT_SOLVER = FixedStepSpreadSolver()


def create_solver(solver_type: str = "fixed") -> SpreadSolver:
    """
    Create a spread solver by name.

    Args:
        solver_type: 'fixed' or 'brent'

    Returns:
        SpreadSolver instance
    """
    if solver_type == "fixed":
        return FixedStepSpreadSolver()
    elif solver_type == "brent":
        return BrentSpreadSolver()
    else:
        raise ValueError(f"Unknown solver type: {solver_type}")


def solve_from_spread(target_prob: float, known_spread: float, stdev: float = DEFAULT_STDDEV) -> float:
    """Refine ``known_spread`` until it implies ``target_prob`` (0.1-point steps)."""
    return _DEFAULT_SOLVER.solve_from_spread(target_prob, known_spread, stdev)


def solve_from_zero(target_prob: float, stdev: float = DEFAULT_STDDEV) -> float:
    """Coarse spread guess for ``target_prob`` starting from a pick'em (0.5-point steps)."""
    return _DEFAULT_SOLVER.solve_from_zero(target_prob, stdev)
