"""Loads and saves season tables as JSON."""

import json
from typing import Optional, Tuple

from ..models.season import TeamStatTable


class SeasonDataLoader:
    """Reads and writes season statistic tables."""

    @staticmethod
    def save_season(table: TeamStatTable, file_path: str, year: int,
                    through_week: Optional[int] = None) -> None:
        """
        Save a season table to a JSON file.

        Args:
            table: Season table
            file_path: Output file path
            year: Season year
            through_week: Last week gathered into the table
        """
        payload = {
            "year": year,
            "through_week": through_week,
            "teams": table.to_dict(),
        }
        with open(file_path, 'w') as f:
            json.dump(payload, f, indent=2)

    @staticmethod
    def load_season(file_path: str) -> Tuple[int, Optional[int], TeamStatTable]:
        """
        Load a season table from a JSON file.

        Args:
            file_path: Path to JSON file

        Returns:
            (year, through_week, table)
        """
        with open(file_path, 'r') as f:
            data = json.load(f)

        if not isinstance(data.get("teams"), dict):
            raise ValueError(f"{file_path} has no 'teams' object")
        through_week = data.get("through_week")
        if through_week is not None:
            through_week = int(through_week)
        return int(data.get("year", 0)), through_week, TeamStatTable.from_dict(data["teams"])
