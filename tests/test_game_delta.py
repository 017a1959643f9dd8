"""Tests for per-game deltas and opponent strength."""

import pytest

from wpsignal.aggregation.game_delta import apply_opponent_strength, build_game_delta
from wpsignal.models.game import GameRecord, PlaySample
from wpsignal.models.season import TeamStatTable
from wpsignal.models.team import TeamStatVector
from wpsignal.predictors.time_adjusted import adjusted_probability


def _game(spread, samples):
    return GameRecord(
        link="/boxscores/201509100nwe.htm",
        home="NWE",
        away="PIT",
        spread=spread,
        samples=[PlaySample(p, m) for p, m in samples],
    )


def test_pickem_game_without_clock_markers():
    game = _game(0.0, [(0.6, "null"), (0.7, "null"), (1.0, "null")])
    delta = build_game_delta(game)

    home, away = delta["NWE"], delta["PIT"]
    assert home.wp_adjust == pytest.approx(0.8 / 3)
    assert away.wp_adjust == pytest.approx(-0.8 / 3)
    assert home.straight_wp_adjust == pytest.approx(0.8 / 3)
    assert home.games_played == 1.0
    assert away.games_played == 1.0
    assert home.games_won == 1.0
    assert away.games_won == 0.0


def test_deltas_are_zero_sum():
    game = _game(-7.0, [(0.66, '"Q1 15:00 PIT 0-NWE 0"'), (0.55, '"Q2 3:10 PIT 10-NWE 7"'),
                        (0.21, '"Q4 4:00 PIT 24-NWE 17"'), (0.0, '"Q4 0:00 PIT 24-NWE 17"')])
    delta = build_game_delta(game)
    home, away = delta["NWE"], delta["PIT"]
    assert home.wp_adjust + away.wp_adjust == pytest.approx(0.0)
    assert home.straight_wp_adjust + away.straight_wp_adjust == pytest.approx(0.0)
    assert away.games_won == 1.0
    assert home.games_won == 0.0


def test_wp_adjust_uses_time_adjusted_expectation():
    markers = ['"Q1 10:00 PIT 0-NWE 7"', '"Q3 5:00 PIT 3-NWE 21"']
    game = _game(-7.0, [(0.75, markers[0]), (0.9, markers[1])])
    delta = build_game_delta(game)

    first = adjusted_probability(-7.0, markers[0], 0.0)
    second = adjusted_probability(-7.0, markers[1], first)
    expected = ((0.75 - first) + (0.9 - second)) / 2
    assert delta["NWE"].wp_adjust == pytest.approx(expected)
    assert delta["NWE"].straight_wp_adjust == pytest.approx((0.25 + 0.4) / 2)


def test_game_without_samples_is_skipped():
    assert build_game_delta(_game(-3.0, [])) is None


def test_game_without_line_is_skipped():
    assert build_game_delta(_game(None, [(0.5, "null")])) is None


def test_opponent_strength_reads_season_to_date():
    season = TeamStatTable.for_season()
    season.accumulate(TeamStatTable({
        "PIT": TeamStatVector(wp_adjust=0.3, games_played=2),
        "NWE": TeamStatVector(wp_adjust=-0.1, games_played=1),
    }))
    delta = build_game_delta(_game(0.0, [(0.5, "null")]))
    apply_opponent_strength(delta, season, "NWE", "PIT")

    assert delta["NWE"].opp_wp_adjust == pytest.approx(0.15)
    assert delta["PIT"].opp_wp_adjust == pytest.approx(-0.1)


def test_opponent_strength_skips_unplayed_opponent():
    season = TeamStatTable.for_season()
    season.accumulate(TeamStatTable({"PIT": TeamStatVector(wp_adjust=0.3, games_played=2)}))
    delta = build_game_delta(_game(0.0, [(0.5, "null")]))
    apply_opponent_strength(delta, season, "NWE", "PIT")

    assert delta["NWE"].opp_wp_adjust == pytest.approx(0.15)
    assert delta["PIT"].opp_wp_adjust == 0.0
