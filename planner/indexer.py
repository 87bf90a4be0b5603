"""
Lookup structures over the games, packages and offers datasets.

build_indexes() is a pure function of its inputs: it turns the raw row
lists into id maps plus the two inverted indexes the ranking needs
(team -> game ids, package -> offers). Every call builds fresh maps, so
nothing computed here outlives a ranking request.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Set

from config.logging_config import get_logger
from planner.records import Game, Offer, Package

log = get_logger(__name__)

Row = Mapping[str, str]


@dataclass
class DatasetIndex:
    games_by_id: Dict[int, Game] = field(default_factory=dict)
    packages_by_id: Dict[int, Package] = field(default_factory=dict)
    games_by_team: Dict[str, Set[int]] = field(default_factory=dict)
    offers_by_package: Dict[int, Set[Offer]] = field(default_factory=dict)
    offers_by_game: Dict[int, Set[Offer]] = field(default_factory=dict)

    def team_names(self) -> List[str]:
        """All team names appearing in the games dataset, sorted."""
        return sorted(self.games_by_team)

    def offers_for_package(self, package_id: int) -> Set[Offer]:
        return self.offers_by_package.get(package_id, set())

    def offers_for_game(self, game_id: int) -> Set[Offer]:
        return self.offers_by_game.get(game_id, set())


def build_indexes(games: Iterable[Row], packages: Iterable[Row],
                  offers: Iterable[Row]) -> DatasetIndex:
    """
    Index the three datasets.

    Args:
        games: rows with id, team_home, team_away
        packages: rows with id, name, monthly_price_cents,
            monthly_price_yearly_subscription_in_cents
        offers: rows with game_id, streaming_package_id, live, highlights

    Returns:
        DatasetIndex. Malformed ids and prices are indexed as 0 rather
        than rejected; a later row with an already seen id replaces the
        earlier one.
    """
    games_by_id = {}
    games_by_team = defaultdict(set)
    for row in games:
        game = Game.from_row(row)
        if game.id in games_by_id:
            log.warning(f"Duplicate game id {game.id}, keeping the later row")
        games_by_id[game.id] = game
        for team in (game.team_home, game.team_away):
            if team:
                games_by_team[team].add(game.id)

    packages_by_id = {}
    for row in packages:
        package = Package.from_row(row)
        if package.id in packages_by_id:
            log.warning(f"Duplicate package id {package.id}, keeping the later row")
        packages_by_id[package.id] = package

    offers_by_package = defaultdict(set)
    offers_by_game = defaultdict(set)
    for row in offers:
        offer = Offer.from_row(row)
        offers_by_package[offer.package_id].add(offer)
        offers_by_game[offer.game_id].add(offer)

    log.debug(
        f"Indexed {len(games_by_id)} games, {len(packages_by_id)} packages, "
        f"{sum(len(s) for s in offers_by_package.values())} offers, "
        f"{len(games_by_team)} teams"
    )

    return DatasetIndex(
        games_by_id=games_by_id,
        packages_by_id=packages_by_id,
        games_by_team=dict(games_by_team),
        offers_by_package=dict(offers_by_package),
        offers_by_game=dict(offers_by_game),
    )
