"""Replays historical seasons into a spread-estimate training table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from ..aggregation.game_delta import apply_opponent_strength, build_game_delta
from ..data.scrapers import OddsAndScoresReader, ProFootballReferenceScraper
from ..models.season import TeamStatTable
from ..predictors.probability import DEFAULT_STDDEV
from ..predictors.spread_solver import create_solver
from .matchup import MIN_GAMES_PLAYED, matchup_features

logger = logging.getLogger(__name__)

TRAINING_COLUMNS = [
    "guess_spread",
    "guess_wp",
    "guess_op",
    "guess_both",
    "est_spread",
    "mean_estimate",
    "actual_spread",
    "outcome",
]


@dataclass
class TrainingDataConfig:
    """Configuration for training table generation."""

    start_season: int = 2015
    end_season: int = 2015
    odds_dir: str = "data/raw/odds"
    cache_dir: str = "data/raw/cache"
    output_path: str = "data/processed/FootballWPData.txt"
    stdev: float = DEFAULT_STDDEV
    min_games_played: int = MIN_GAMES_PLAYED
    solver: str = "fixed"


class TrainingDataBuilder:
    """
    Builds one row per historical game from season-to-date statistics.

    Seasons are replayed in file order. Each game is scored with the
    statistics gathered before it, then folded into the season table, so no
    row sees its own result.
    """

    def __init__(
        self,
        config: TrainingDataConfig,
        scraper: Optional[ProFootballReferenceScraper] = None,
        reader: Optional[OddsAndScoresReader] = None,
    ):
        if config.end_season < config.start_season:
            raise ValueError(
                f"end_season {config.end_season} is before start_season {config.start_season}"
            )
        self.config = config
        self.scraper = scraper or ProFootballReferenceScraper(config.cache_dir)
        self.reader = reader or OddsAndScoresReader(config.odds_dir)
        self.solver = create_solver(config.solver)

    def run(self) -> Dict:
        rows: List[Dict] = []
        for year in range(self.config.start_season, self.config.end_season + 1):
            logger.info("Now compiling stats for %s...", year)
            rows.extend(self.build_season(year))

        frame = pd.DataFrame(rows, columns=TRAINING_COLUMNS)
        output_path = Path(self.config.output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(output_path, header=False, index=False)
        return {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "start_season": self.config.start_season,
            "end_season": self.config.end_season,
            "rows": len(frame),
            "output_path": str(output_path),
        }

    def build_season(self, year: int) -> List[Dict]:
        season = TeamStatTable.for_season()
        rows: List[Dict] = []
        for line in self.reader.read_season(year):
            game = self.scraper.fetch_game(line.boxscore_link)
            if game is None:
                logger.warning("Error getting game data for link %s", line.boxscore_link)
                continue
            if game.home != line.home:
                logger.warning("Boxscore %s is for %s, not %s", line.boxscore_link, game.home, line.home)
                continue

            season.assign_matchup_line(game.home, game.away, line.spread)
            features = matchup_features(
                season,
                game.home,
                game.away,
                solver=self.solver,
                stdev=self.config.stdev,
                min_games=self.config.min_games_played,
            )
            if features is not None:
                row = features.to_dict()
                row["actual_spread"] = line.spread
                row["outcome"] = line.outcome
                rows.append(row)

            delta = build_game_delta(game, self.config.stdev)
            if delta is None:
                continue
            apply_opponent_strength(delta, season, game.home, game.away)
            season.accumulate(delta)
        return rows
