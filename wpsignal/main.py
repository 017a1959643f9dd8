"""Main CLI interface for the win probability signal."""

import argparse
import logging
import sys
from pathlib import Path

from .data.ingestion.season_collector import SeasonConfig, SeasonDataCollector
from .data.loader import SeasonDataLoader
from .data.scrapers import PointSpreadScraper
from .features.matchup import matchup_features
from .features.training_data import TrainingDataBuilder, TrainingDataConfig
from .predictors.probability import DEFAULT_STDDEV, win_probability
from .predictors.spread_solver import create_solver


def gather_season(args):
    """Gather a season of win probability data and rank the teams."""
    config = SeasonConfig(
        year=args.year,
        stop_at_week=args.stop_at_week,
        max_week=args.max_week,
        peek_ahead=not args.no_peek,
        cache_dir=args.cache_dir,
        output_dir=args.output_dir,
        stdev=args.stdev,
    )
    try:
        collector = SeasonDataCollector(config)
        manifest = collector.run()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"✓ Season {manifest['year']} gathered through week {manifest['through_week']}")
    print(f"  Season table: {manifest['season_path']}")
    print(f"  Rankings:     {manifest['rankings_path']}")

    rankings = collector.rankings
    if not rankings.empty:
        print(f"\n{'='*60}")
        print(f"TOP {min(args.top, len(rankings))} TEAMS BY WIN PROBABILITY ADJUSTMENT")
        print(f"{'='*60}\n")
        print(rankings.head(args.top).to_string(
            columns=["team", "games_played", "games_won", "avg_wp_adjust", "avg_opp_wp_adjust"]
        ))
    return 0


def project_lines(args):
    """Assign this week's lines to a season table and project each game."""
    try:
        year, through_week, table = SeasonDataLoader.load_season(args.season_file)
    except (OSError, ValueError) as e:
        print(f"Error loading season table: {e}")
        return 1

    lines = PointSpreadScraper().fetch_upcoming_lines()
    if not lines:
        print("No lines available.")
        return 1

    solver = create_solver(args.solver)
    print(f"\n{'='*60}")
    print(f"PROJECTIONS - {year} SEASON ({solver.name} solver)")
    print(f"{'='*60}\n")
    for line in lines:
        table.assign_matchup_line(line.home, line.away, line.home_spread)
        features = matchup_features(table, line.home, line.away, solver=solver, stdev=args.stdev)
        market = win_probability(0, line.home_spread, args.stdev)
        header = f"{line.away} at {line.home}: line {line.home_spread:+.1f} ({market:.1%} home)"
        if features is None:
            print(f"{header} - not enough games for a projection")
            continue
        print(f"{header} -> projected {features.mean_estimate:+.1f} (line-anchored {features.est_spread:+.1f})")

    output = args.output or args.season_file
    SeasonDataLoader.save_season(table, output, year, through_week)
    print(f"\n✓ Lines saved to {output}")
    return 0


def build_training_data(args):
    """Replay historical seasons into the spread-estimate training file."""
    config = TrainingDataConfig(
        start_season=args.start_season,
        end_season=args.end_season,
        odds_dir=args.odds_dir,
        cache_dir=args.cache_dir,
        output_path=args.output,
        stdev=args.stdev,
        solver=args.solver,
    )
    if not Path(config.odds_dir).is_dir():
        print(f"Error: odds directory not found: {config.odds_dir}")
        return 1
    try:
        manifest = TrainingDataBuilder(config).run()
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(f"✓ Wrote {manifest['rows']} rows to {manifest['output_path']}")
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="NFL win probability signal - team ratings from in-game win probability traces"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--stdev",
        type=float,
        default=DEFAULT_STDDEV,
        help=f"Standard deviation of the final margin (default: {DEFAULT_STDDEV})"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    season_parser = subparsers.add_parser("season", help="Gather a season and rank teams")
    season_parser.add_argument("--year", type=int, required=True, help="Season year")
    season_parser.add_argument("--stop-at-week", type=int, default=None, help="Last week to gather")
    season_parser.add_argument("--max-week", type=int, default=17, help="Regular season length (default: 17)")
    season_parser.add_argument("--no-peek", action="store_true", help="Do not read next week's lines")
    season_parser.add_argument("--cache-dir", default="data/raw/cache", help="Cache directory for fetched pages")
    season_parser.add_argument("--output-dir", default="data/processed", help="Destination for season artifacts")
    season_parser.add_argument("--top", type=int, default=10, help="Teams to print (default: 10)")

    lines_parser = subparsers.add_parser("lines", help="Project this week's games from a season table")
    lines_parser.add_argument("--season-file", required=True, help="Season JSON written by 'season'")
    lines_parser.add_argument("--output", "-o", default=None, help="Where to save the updated table")
    lines_parser.add_argument("--solver", choices=["fixed", "brent"], default="fixed")

    training_parser = subparsers.add_parser("training-data", help="Build the spread-estimate training file")
    training_parser.add_argument("--start-season", type=int, default=2015, help="Starting season (inclusive)")
    training_parser.add_argument("--end-season", type=int, default=2015, help="Ending season (inclusive)")
    training_parser.add_argument("--odds-dir", default="data/raw/odds", help="Directory with odds-and-scores files")
    training_parser.add_argument("--cache-dir", default="data/raw/cache", help="Cache directory for fetched pages")
    training_parser.add_argument(
        "--output", "-o",
        default="data/processed/FootballWPData.txt",
        help="Output CSV (no header)"
    )
    training_parser.add_argument("--solver", choices=["fixed", "brent"], default="fixed")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "season":
        return gather_season(args)
    elif args.command == "lines":
        return project_lines(args)
    elif args.command == "training-data":
        return build_training_data(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
