"""Tests for the historical odds-and-scores reader."""

import pytest

from wpsignal.data.scrapers.odds_and_scores import (
    AWAY_COVERS,
    HOME_COVERS,
    PUSH,
    HistoricalLine,
    OddsAndScoresReader,
    cover_outcome,
)


SEASON_TEXT = (
    "20150910,451 51 21 PATRIOTS -7 28 F,\n"
    "20150913,453 -3 31 BEARS 47.5 23 F,455 44 20 JETS PK 31 F,457 41 10 WILDCATS -3 14 F,\n"
    "20150914,459 44 x VIKINGS -2.5 20 F,461 too short,\n"
)


def test_cover_outcome():
    assert cover_outcome(28, 21, -7.0) == PUSH
    assert cover_outcome(28, 20, -7.0) == HOME_COVERS
    assert cover_outcome(23, 31, 3.0) == AWAY_COVERS


def test_parse_line_home_favorite():
    games = OddsAndScoresReader().parse_line("20150910,451 51 21 PATRIOTS -7 28 F,")
    assert len(games) == 1
    game = games[0]
    assert game.home == "NWE"
    assert game.spread == -7.0
    assert (game.away_score, game.home_score) == (21.0, 28.0)
    assert game.boxscore_link == "/boxscores/201509100nwe.htm"
    assert game.outcome == PUSH


def test_parse_line_visitor_favorite():
    game = OddsAndScoresReader().parse_line("20150913,453 -3 31 BEARS 47.5 23 F,")[0]
    assert game.home == "CHI"
    assert game.spread == 3.0
    assert game.outcome == AWAY_COVERS


def test_pick_em_line():
    game = OddsAndScoresReader().parse_line("20150913,455 44 20 JETS PK 31 F,")[0]
    assert game.spread == 0.0
    assert game.outcome == HOME_COVERS


def test_read_season_skips_bad_records(tmp_path):
    (tmp_path / "2015FootballOddsAndScores.txt").write_text(SEASON_TEXT)
    games = OddsAndScoresReader(data_dir=str(tmp_path)).read_season(2015)
    assert [g.home for g in games] == ["NWE", "CHI", "NYJ"]


def test_read_missing_season(tmp_path):
    assert OddsAndScoresReader(data_dir=str(tmp_path)).read_season(1999) == []


def test_season_path_uses_sport(tmp_path):
    reader = OddsAndScoresReader(data_dir=str(tmp_path), sport="Football")
    assert reader.season_path(2016).name == "2016FootballOddsAndScores.txt"


@pytest.mark.parametrize("line", ["", "20150910", "20150910,"])
def test_lines_without_games(line):
    assert OddsAndScoresReader().parse_line(line) == []


def test_historical_line_outcome_uses_home_spread():
    line = HistoricalLine(date="20151011", home="GNB", spread=-10.0, away_score=10, home_score=24)
    assert line.outcome == HOME_COVERS
