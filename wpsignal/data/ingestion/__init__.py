"""Season gathering workflows."""

from .season_collector import SeasonConfig, SeasonDataCollector

__all__ = ["SeasonConfig", "SeasonDataCollector"]
