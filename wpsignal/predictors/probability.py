"""Normal-distribution win probability model.

The model treats the final home margin as a normal variable centred on the
negated home line and applies a continuity correction, because NFL margins are
integers. Half of the tie mass is credited to each side.
"""

import math

# Standard deviation of the final margin around the closing line.
DEFAULT_STDDEV = 13.45


def erfc(x: float) -> float:
    """
    Complementary error function.

    Chebyshev fit from Numerical Recipes; absolute error below 1.2e-7
    everywhere.
    """
    z = abs(x)
    t = 1.0 / (1.0 + z / 2.0)
    r = t * math.exp(
        -z * z
        - 1.26551223
        + t * (1.00002368
        + t * (0.37409196
        + t * (0.09678418
        + t * (-0.18628806
        + t * (0.27886807
        + t * (-1.13520398
        + t * (1.48851587
        + t * (-0.82215223
        + t * 0.17087277))))))))
    )
    if x >= 0:
        return r
    return 2.0 - r


def normal_cdf(x: float, mean: float = 0.0, stdev: float = 1.0) -> float:
    """
    Cumulative distribution function of a normal distribution.

    Args:
        x: Point to evaluate
        mean: Distribution mean
        stdev: Distribution standard deviation (must be positive; ``inf`` gives 0.5)

    Returns:
        P(X <= x)
    """
    return 0.5 * erfc(-(x - mean) / (stdev * math.sqrt(2.0)))


def win_probability(score_diff: float, spread: float, stdev: float = DEFAULT_STDDEV) -> float:
    """
    Probability that the home team wins.

    Args:
        score_diff: Margin the home team must beat; positive values raise the bar
        spread: Home line (negative when the home team is favored)
        stdev: Standard deviation of the remaining margin

    Returns:
        Win probability between 0 and 1
    """
    upper = normal_cdf(score_diff + 0.5, -spread, stdev)
    lower = normal_cdf(score_diff - 0.5, -spread, stdev)
    return 1.0 - upper + 0.5 * (upper - lower)
