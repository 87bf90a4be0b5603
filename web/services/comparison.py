"""Data assembly for the package comparison API."""

from typing import List, Optional

from config.logging_config import get_logger
from planner.indexer import build_indexes
from planner.loader import load_datasets, load_games
from planner.ranking import calculate_package_rankings
from planner.schedule import build_match_schedule

log = get_logger(__name__)


def get_team_list() -> List[dict]:
    """Every team in the games dataset as {"name": ...}, sorted by name."""
    index = build_indexes(load_games(), [], [])
    return [{'name': name} for name in index.team_names()]


def build_rankings(teams: list, max_combination_size: Optional[int] = None) -> dict:
    """Ranked packages and combinations for the selected teams."""
    datasets = load_datasets()
    result = calculate_package_rankings(
        datasets.games, datasets.packages, datasets.offers, teams,
        max_combination_size=max_combination_size,
    )
    log.info(
        f"Ranked {len(result.packages)} packages for {len(teams)} teams "
        f"({result.total_games} games)"
    )
    return result.to_dict()


def build_schedule(teams: list) -> dict:
    """Matches of the selected teams with the packages offering them."""
    datasets = load_datasets()
    index = build_indexes(datasets.games, datasets.packages, datasets.offers)
    return {'matches': build_match_schedule(index, teams)}
