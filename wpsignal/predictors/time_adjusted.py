"""
Win probability recalibrated for the time left on the game clock.

Play-by-play tooltips carry a clock marker such as ``"Q3 10:00 GNB 0-CHI 0
32.20%"`` or ``"OT 5:00 ..."``. The marker is tokenized into a quarter (or
overtime) token and an ``m:ss`` token. The pregame line is then re-evaluated
with its standard deviation scaled by the share of the game still to play.

Parsing degrades instead of failing:

1. unreadable quarter  -> the previous adjusted probability is reused
2. unreadable minutes  -> only quarter granularity is used
3. unreadable seconds  -> whole minutes are used
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

from .probability import DEFAULT_STDDEV, win_probability

logger = logging.getLogger(__name__)

NO_DATA_MARKER = "null"
QUARTER_MINUTES = 15.0
REGULATION_MINUTES = 60.0
OVERTIME_MINUTES = 15.0

_QUARTER_RE = re.compile(r"Q([1-4])", re.IGNORECASE)
_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?")


@dataclass
class ClockMarker:
    """Tokenized clock marker. Fields that could not be read are None."""

    raw: str
    quarter: Optional[float] = None
    total_minutes: float = REGULATION_MINUTES
    minutes: Optional[float] = None
    seconds: Optional[float] = None


def _to_number(text: str) -> Optional[float]:
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def parse_clock_marker(marker: Optional[str]) -> ClockMarker:
    """
    Split a clock marker into quarter, minutes and seconds.

    Args:
        marker: Raw marker text, optionally wrapped in double quotes

    Returns:
        ClockMarker with whatever could be read
    """
    raw = (marker or "").strip()
    tokens = raw.strip('"').split()
    clock = ClockMarker(raw=raw)
    if not tokens:
        return clock

    period = tokens[0]
    if period[:1].upper() == "O":
        clock.quarter = 4.0
        clock.total_minutes = REGULATION_MINUTES + OVERTIME_MINUTES
    else:
        match = _QUARTER_RE.match(period)
        if not match:
            return clock
        clock.quarter = float(match.group(1))

    time_token = tokens[1] if len(tokens) > 1 else ""
    minutes_text, sep, rest = time_token.partition(":")
    if not sep:
        return clock
    clock.minutes = _to_number(minutes_text)
    if clock.minutes is None:
        return clock
    clock.seconds = _to_number(rest[:2])
    return clock


def effective_stdev(stdev: float, total_minutes: float, remaining_minutes: float) -> float:
    """Scale the pregame deviation by the square root of total over remaining game time."""
    if remaining_minutes <= 0:
        return math.inf
    return stdev * math.sqrt(total_minutes / remaining_minutes)


def adjusted_probability(
    spread: float,
    clock_marker: Optional[str],
    previous_adjustment: float,
    stdev: float = DEFAULT_STDDEV,
) -> float:
    """
    Home win probability the pregame line implies at a point in the game.

    Never raises; see the module docstring for the fallback order.

    Args:
        spread: Closing home line
        clock_marker: Clock marker text from the play-by-play record
        previous_adjustment: Value returned for the previous play
        stdev: Pregame standard deviation of the margin

    Returns:
        Time-adjusted win probability
    """
    clock = parse_clock_marker(clock_marker)
    if clock.quarter is None:
        if clock.raw != NO_DATA_MARKER:
            logger.warning("Could not read quarter from clock marker %r", clock_marker)
        return previous_adjustment

    quarters_after = 4.0 - clock.quarter
    if clock.minutes is None:
        logger.warning("Could not read minutes from clock marker %r", clock_marker)
        remaining = (quarters_after + 1.0) * QUARTER_MINUTES
    elif clock.seconds is None:
        logger.warning("Could not read seconds from clock marker %r", clock_marker)
        remaining = quarters_after * QUARTER_MINUTES + clock.minutes
    else:
        remaining = quarters_after * QUARTER_MINUTES + clock.minutes + clock.seconds / 60.0

    return win_probability(0, spread, effective_stdev(stdev, clock.total_minutes, remaining))
