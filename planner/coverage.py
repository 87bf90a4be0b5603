"""
Per-package coverage of the selected teams' games.

The target game set is the union of every selected team's home and away
games. A package covers a target game when it has a live or on-demand
offer for it; live and on-demand counts overlap when an offer is both.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set

from config.logging_config import get_logger
from planner.indexer import DatasetIndex
from planner.records import Offer, Package

log = get_logger(__name__)


@dataclass(frozen=True)
class PackageStats:
    id: int
    name: str
    monthly_price: float
    yearly_price: float
    coverage: float              # percent of target games, 0-100
    covered_games: int
    live_games: int
    on_demand_games: int
    games_per_euro: float

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'monthlyPrice': self.monthly_price,
            'yearlyPrice': self.yearly_price,
            'coverage': self.coverage,
            'totalGames': self.covered_games,
            'liveGames': self.live_games,
            'onDemandGames': self.on_demand_games,
            'gamesPerEuro': self.games_per_euro,
        }


def team_name(team) -> str:
    """Selected teams may be names, mappings with "name", or objects with .name."""
    if isinstance(team, str):
        return team
    if isinstance(team, Mapping):
        return team.get('name') or ''
    return getattr(team, 'name', '') or ''


def target_game_ids(games_by_team: Dict[str, Set[int]], selected_teams: Iterable) -> Set[int]:
    """Union of the game ids of every selected team. Unknown or unnamed teams add nothing."""
    target = set()
    for team in selected_teams or ():
        name = team_name(team)
        if name:
            target |= games_by_team.get(name, set())
    return target


def coverage_percent(covered: int, total: int) -> float:
    return covered / total * 100 if total > 0 else 0.0


def covered_game_ids(offers: Iterable[Offer], target_ids: Set[int]) -> Set[int]:
    """Target games that at least one of the offers shows live or on demand."""
    return {o.game_id for o in offers if o.covers and o.game_id in target_ids}


def compute_package_stats(package: Package, offers: Iterable[Offer],
                          target_ids: Set[int]) -> PackageStats:
    covered, live, on_demand = set(), set(), set()
    for offer in offers:
        if offer.game_id not in target_ids:
            continue
        if offer.covers:
            covered.add(offer.game_id)
        if offer.live:
            live.add(offer.game_id)
        if offer.highlights:
            on_demand.add(offer.game_id)

    if package.yearly_price > 0:
        games_per_euro = len(covered) / package.yearly_price
    else:
        # Free packages: report the raw count instead of dividing by zero
        games_per_euro = float(len(covered))

    return PackageStats(
        id=package.id,
        name=package.name,
        monthly_price=package.monthly_price,
        yearly_price=package.yearly_price,
        coverage=coverage_percent(len(covered), len(target_ids)),
        covered_games=len(covered),
        live_games=len(live),
        on_demand_games=len(on_demand),
        games_per_euro=games_per_euro,
    )


def compute_all_package_stats(index: DatasetIndex, target_ids: Set[int]) -> List[PackageStats]:
    """One PackageStats per package in dataset order, not yet ranked."""
    stats = [
        compute_package_stats(package, index.offers_for_package(package.id), target_ids)
        for package in index.packages_by_id.values()
    ]
    log.debug(f"Computed coverage for {len(stats)} packages over {len(target_ids)} target games")
    return stats
