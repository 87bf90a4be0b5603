"""Match schedule for the selected teams with the packages offering each match."""

from typing import Iterable, List

from planner.coverage import target_game_ids
from planner.indexer import DatasetIndex


def _offer_type(offer) -> str:
    return 'live' if offer.live else 'on-demand'


def build_match_schedule(index: DatasetIndex, selected_teams: Iterable) -> List[dict]:
    """
    List the target games ordered by game id.

    Each match carries availableOn: one entry per package with a live or
    on-demand offer, typed "live" when the offer is live.
    """
    matches = []
    for game_id in sorted(target_game_ids(index.games_by_team, selected_teams)):
        game = index.games_by_id.get(game_id)
        if game is None:
            continue

        available = []
        for offer in sorted(index.offers_for_game(game_id), key=lambda o: o.package_id):
            if not offer.covers:
                continue
            package = index.packages_by_id.get(offer.package_id)
            available.append({
                'packageId': offer.package_id,
                'name': package.name if package else '',
                'type': _offer_type(offer),
            })

        matches.append({
            'id': game.id,
            'homeTeam': game.team_home,
            'awayTeam': game.team_away,
            'availableOn': available,
        })
    return matches
