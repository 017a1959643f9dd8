"""Base interface for probability-to-spread solvers."""

from abc import ABC, abstractmethod

from .probability import DEFAULT_STDDEV


class SpreadSolver(ABC):
    """Abstract base class for inverting the win probability model."""

    def __init__(self, name: str):
        """
        Initialize solver.

        Args:
            name: Name of the solver
        """
        self.name = name

    @abstractmethod
    def solve_from_spread(self, target_prob: float, known_spread: float,
                          stdev: float = DEFAULT_STDDEV) -> float:
        """
        Find the spread implied by a probability, searching near a known line.

        Args:
            target_prob: Home win probability to match
            known_spread: Line to start the search from
            stdev: Standard deviation of the margin

        Returns:
            Estimated home line
        """
        pass

    @abstractmethod
    def solve_from_zero(self, target_prob: float, stdev: float = DEFAULT_STDDEV) -> float:
        """
        Find the spread implied by a probability with no prior line.

        Args:
            target_prob: Home win probability to match
            stdev: Standard deviation of the margin

        Returns:
            Estimated home line
        """
        pass
