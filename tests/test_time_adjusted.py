"""Tests for clock marker parsing and time-adjusted win probability."""

import math

import pytest

from wpsignal.predictors.probability import win_probability
from wpsignal.predictors.time_adjusted import (
    adjusted_probability,
    effective_stdev,
    parse_clock_marker,
)


@pytest.mark.parametrize(
    "spread, marker, expected",
    [
        (-7.0, '"Q1 5:00 GNB 0-CHI 0 32.20%"', 0.6830),
        (3.0, '"Q2 12:00 GNB 0-CHI 0 32.20%"', 0.4260),
        (-5.0, '"Q3 10:00 GNB 0-CHI 0 32.20%"', 0.5950),
        (0.0, '"Q4 2:00 GNB 0-CHI 0 32.20%"', 0.5),
        (10.0, '"Q3(OT) 2:00 GNB 0-CHI 0 32.20%"', 0.3460),
    ],
)
def test_adjusted_probability_reference_values(spread, marker, expected):
    assert adjusted_probability(spread, marker, 9.0) == pytest.approx(expected, abs=5e-4)


def test_unquoted_marker_reads_the_same():
    quoted = adjusted_probability(-7.0, '"Q1 5:00 GNB 0-CHI 0"', 9.0)
    assert adjusted_probability(-7.0, "Q1 5:00 GNB 0-CHI 0", 9.0) == quoted


@pytest.mark.parametrize("marker", ["   ", "", None, "garbage", '"Q9 5:00"', "null"])
def test_unreadable_quarter_returns_previous(marker):
    assert adjusted_probability(-7.0, marker, 9.0) == 9.0


def test_no_data_marker_is_silent(caplog):
    with caplog.at_level("WARNING"):
        adjusted_probability(-3.0, "null", 0.4)
    assert caplog.records == []


def test_unreadable_minutes_use_quarter_granularity(caplog):
    with caplog.at_level("WARNING"):
        result = adjusted_probability(-7.0, '"Q2 ab:00 GNB 0-CHI 0"', 9.0)
    # Whole of Q2 through Q4 remains.
    expected = win_probability(0, -7.0, effective_stdev(13.45, 60.0, 45.0))
    assert result == pytest.approx(expected)
    assert "minutes" in caplog.text


def test_missing_time_token_uses_quarter_granularity():
    expected = win_probability(0, 3.0, effective_stdev(13.45, 60.0, 15.0))
    assert adjusted_probability(3.0, "Q4", 9.0) == pytest.approx(expected)


def test_unreadable_seconds_use_whole_minutes(caplog):
    with caplog.at_level("WARNING"):
        result = adjusted_probability(-7.0, '"Q3 10:xx GNB 0-CHI 0"', 9.0)
    expected = win_probability(0, -7.0, effective_stdev(13.45, 60.0, 25.0))
    assert result == pytest.approx(expected)
    assert "seconds" in caplog.text


def test_seconds_add_fractional_minutes():
    expected = win_probability(0, -7.0, effective_stdev(13.45, 60.0, 25.5))
    assert adjusted_probability(-7.0, "Q3 10:30", 9.0) == pytest.approx(expected)


def test_overtime_marker():
    clock = parse_clock_marker('"OT 5:00 GNB 20-CHI 20"')
    assert clock.quarter == 4.0
    assert clock.total_minutes == 75.0
    expected = win_probability(0, -3.0, effective_stdev(13.45, 75.0, 5.0))
    assert adjusted_probability(-3.0, '"OT 5:00 GNB 20-CHI 20"', 9.0) == pytest.approx(expected)


def test_parse_clock_marker_fields():
    clock = parse_clock_marker('"Q2 7:45 GNB 7-CHI 3 61.00%"')
    assert clock.quarter == 2.0
    assert clock.minutes == 7.0
    assert clock.seconds == 45.0


def test_end_of_game_is_a_coin_flip():
    assert effective_stdev(13.45, 60.0, 0.0) == math.inf
    assert adjusted_probability(-14.0, "Q4 0:00", 9.0) == pytest.approx(0.5, abs=1e-6)


def test_stdev_widens_as_time_runs_out():
    early = effective_stdev(13.45, 60.0, 55.0)
    late = effective_stdev(13.45, 60.0, 5.0)
    assert effective_stdev(13.45, 60.0, 60.0) == pytest.approx(13.45)
    assert late > early > 13.45
