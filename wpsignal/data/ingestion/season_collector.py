"""Season-long win probability gathering."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from ...aggregation.game_delta import apply_opponent_strength, build_game_delta
from ...features.ranking import rank_teams
from ...models.season import TeamStatTable
from ...predictors.probability import DEFAULT_STDDEV
from ..loader import SeasonDataLoader
from ..scrapers import ProFootballReferenceScraper

logger = logging.getLogger(__name__)


@dataclass
class SeasonConfig:
    year: int
    stop_at_week: Optional[int] = None
    max_week: int = 17
    peek_ahead: bool = True
    cache_dir: str = "data/raw/cache"
    output_dir: str = "data/processed"
    stdev: float = DEFAULT_STDDEV


class SeasonDataCollector:
    """Folds every game of a season into one team statistic table."""

    def __init__(self, config: SeasonConfig, scraper: Optional[ProFootballReferenceScraper] = None):
        if config.stop_at_week is not None and config.stop_at_week < 1:
            raise ValueError(f"stop_at_week must be at least 1, got {config.stop_at_week}")
        self.config = config
        self.scraper = scraper or ProFootballReferenceScraper(config.cache_dir)
        self.rankings = None

    @property
    def last_week(self) -> int:
        if self.config.stop_at_week is not None:
            return min(self.config.stop_at_week, self.config.max_week)
        return self.config.max_week

    def run(self) -> Dict:
        """Gather the season, then write the table and its ranking."""
        season = self.gather_season()
        if self.config.peek_ahead and self.last_week < self.config.max_week:
            self.peek_ahead_lines(season, self.last_week + 1)

        output_dir = Path(self.config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        season_path = output_dir / f"season_{self.config.year}.json"
        SeasonDataLoader.save_season(season, str(season_path), self.config.year, self.last_week)
        rankings = rank_teams(season)
        self.rankings = rankings
        rankings_path = output_dir / f"rankings_{self.config.year}.csv"
        rankings.to_csv(rankings_path, index_label="rank")

        return {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "year": self.config.year,
            "through_week": self.last_week,
            "teams": len(rankings),
            "season_path": str(season_path),
            "rankings_path": str(rankings_path),
        }

    def gather_season(self) -> TeamStatTable:
        season = TeamStatTable.for_season()
        for week in range(1, self.last_week + 1):
            games = self.gather_week(season, week)
            logger.info("Week %s: %d games gathered", week, games)
        return season

    def gather_week(self, season: TeamStatTable, week: int) -> int:
        """
        Accumulate one week's games into ``season``.

        Games that cannot be fetched or parsed are logged and skipped.

        Returns:
            Number of games accumulated
        """
        gathered = 0
        for link in self.scraper.fetch_week_links(self.config.year, week):
            game = self.scraper.fetch_game(link)
            if game is None:
                logger.warning("Error getting game data for link %s", link)
                continue
            delta = build_game_delta(game, self.config.stdev)
            if delta is None:
                logger.warning("Skipping game %s", link)
                continue
            apply_opponent_strength(delta, season, game.home, game.away)
            season.accumulate(delta)
            gathered += 1
        return gathered

    def peek_ahead_lines(self, season: TeamStatTable, week: int) -> int:
        """
        Assign lines from a later week's boxscore pages.

        Boxscore pages show the closing line once a game has kicked off.
        Games without a readable line keep their previous values.

        Returns:
            Number of matchups assigned
        """
        assigned = 0
        for link in self.scraper.fetch_week_links(self.config.year, week):
            game = self.scraper.fetch_game_line(link)
            if game is None:
                continue
            if game.spread is None:
                logger.warning("No line yet for %s at %s", game.away, game.home)
                continue
            season.assign_matchup_line(game.home, game.away, game.spread)
            assigned += 1
        return assigned
