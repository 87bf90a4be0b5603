#!/usr/bin/env python3
"""
Compare streaming packages for a set of teams from the command line.

Usage:
    python scripts/compare_packages.py --team "Bayern München" --team "Real Madrid"
    python scripts/compare_packages.py --team "FC Barcelona" --max-size 2 --json
    python scripts/compare_packages.py --list-teams

Datasets are read from PLANNER_DATA_DIR (or --data-dir), or fetched from
--data-url / PLANNER_DATA_URL when given.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Project root for config.* and planner.* imports when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import planner_config as cfg
from config.logging_config import get_logger, set_level, set_stream
from planner.indexer import build_indexes
from planner.loader import DatasetLoadError, load_datasets, load_games
from planner.ranking import calculate_package_rankings

log = get_logger(__name__)


def _price(value: float) -> str:
    return f"{cfg.CURRENCY_SYMBOL}{value:.2f}"


def format_report(result) -> str:
    """Plain-text report of a RankingResult."""
    lines = [f"Total matches for selected teams: {result.total_games}", ""]

    lines.append(f"{'Package':<30} {'Monthly':>9} {'Yearly':>9} {'Coverage':>9} "
                 f"{'Live':>5} {'OnDem':>5} {'Games/' + cfg.CURRENCY_SYMBOL:>8}")
    for pkg in result.packages:
        lines.append(
            f"{pkg.name[:30]:<30} {_price(pkg.monthly_price):>9} {_price(pkg.yearly_price):>9} "
            f"{pkg.coverage:>8.1f}% {pkg.live_games:>5} {pkg.on_demand_games:>5} "
            f"{pkg.games_per_euro:>8.2f}"
        )

    lines.append("")
    if not result.combinations:
        lines.append("No package combination covers any selected match.")
    for combo in result.combinations:
        names = ' + '.join(p.name for p in combo.packages)
        lines.append(
            f"{combo.size} package(s): {names} - {combo.coverage:.1f}% "
            f"({combo.covered_games} matches) for {_price(combo.total_price)}/month"
        )
    return '\n'.join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Rank streaming packages by match coverage')
    parser.add_argument('--team', '-t', action='append', default=[], help='Team name (repeatable)')
    parser.add_argument('--data-dir', help=f'Directory with the CSV datasets (default: {cfg.DATA_DIR})')
    parser.add_argument('--data-url', help='Base URL to fetch the CSV datasets from')
    parser.add_argument('--max-size', type=int, default=cfg.MAX_COMBINATION_SIZE,
                        help=f'Largest package combination to search (default: {cfg.MAX_COMBINATION_SIZE})')
    parser.add_argument('--list-teams', action='store_true', help='List team names and exit')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--verbose', '-v', action='store_true')
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)
    if args.json:
        # stdout carries the JSON document only
        set_stream(sys.stderr)

    try:
        if args.list_teams:
            games = load_games(data_dir=args.data_dir, base_url=args.data_url)
        else:
            datasets = load_datasets(data_dir=args.data_dir, base_url=args.data_url)
    except DatasetLoadError as e:
        log.error(str(e))
        return 1

    if args.list_teams:
        for name in build_indexes(games, [], []).team_names():
            print(name)
        return 0

    if not args.team:
        log.warning("No teams selected, every package will show 0% coverage")

    result = calculate_package_rankings(
        datasets.games, datasets.packages, datasets.offers, args.team,
        max_combination_size=args.max_size,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_report(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
