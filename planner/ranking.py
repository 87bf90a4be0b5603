"""
Package ranking: indexes -> per-package coverage -> combination search.

calculate_package_rankings() is the entry point used by the web API and
the CLI. It is synchronous and keeps no state between calls.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

from config.logging_config import get_logger
from config.planner_config import MAX_COMBINATION_SIZE
from planner.combinations import Combination, find_best_combinations
from planner.coverage import PackageStats, compute_all_package_stats, target_game_ids
from planner.indexer import build_indexes

log = get_logger(__name__)


@dataclass
class RankingResult:
    packages: List[PackageStats] = field(default_factory=list)
    combinations: List[Combination] = field(default_factory=list)
    total_games: int = 0

    def to_dict(self) -> dict:
        return {
            'packages': [p.to_dict() for p in self.packages],
            'combinations': [c.to_dict() for c in self.combinations],
            'totalGames': self.total_games,
        }


def rank_packages(stats: Iterable[PackageStats]) -> List[PackageStats]:
    """Highest coverage first, cheaper yearly price first on equal coverage."""
    return sorted(stats, key=lambda s: (-s.coverage, s.yearly_price))


def calculate_package_rankings(games: Iterable[Mapping[str, str]],
                               packages: Iterable[Mapping[str, str]],
                               offers: Iterable[Mapping[str, str]],
                               selected_teams: Iterable,
                               max_combination_size: Optional[int] = None) -> RankingResult:
    """
    Rank packages and package combinations for the selected teams.

    Args:
        games, packages, offers: raw dataset rows (field name -> string)
        selected_teams: team names, or objects/mappings with a name
        max_combination_size: largest combination to search, defaults to
            MAX_COMBINATION_SIZE

    Returns:
        RankingResult with ranked packages, best combination per size and
        the number of target games.
    """
    if max_combination_size is None:
        max_combination_size = MAX_COMBINATION_SIZE

    index = build_indexes(games, packages, offers)
    target_ids = target_game_ids(index.games_by_team, selected_teams)

    stats = compute_all_package_stats(index, target_ids)
    ranked = rank_packages(stats)
    combos = find_best_combinations(ranked, index.offers_by_package, target_ids,
                                    max_size=max_combination_size)

    log.debug(
        f"Ranked {len(ranked)} packages for {len(target_ids)} games, "
        f"{len(combos)} combinations"
    )
    return RankingResult(packages=ranked, combinations=combos, total_games=len(target_ids))
