"""
Best package combinations by size.

For every size k from 1 to the configured maximum, all k-subsets of the
packages with non-zero coverage are evaluated and the one covering the
most target games wins, ties going to the lower summed yearly price.

Cost is C(n, k) subset evaluations for n packages with coverage, each a
union over the members' offers. That is why the size is capped: with the
default cap of 3 a few dozen packages stay fast, but the search is a
bounded approximation and larger combinations are never considered.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple, TypeVar

from config.logging_config import get_logger
from config.planner_config import MAX_COMBINATION_SIZE
from planner.coverage import PackageStats, coverage_percent, covered_game_ids
from planner.records import Offer

log = get_logger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class Combination:
    packages: Tuple[PackageStats, ...]
    coverage: float
    total_price: float           # sum of members' yearly prices
    covered_games: int

    @property
    def size(self) -> int:
        return len(self.packages)

    def to_dict(self) -> dict:
        return {
            'packages': [p.to_dict() for p in self.packages],
            'coverage': self.coverage,
            'totalPrice': self.total_price,
            'coveredGames': self.covered_games,
        }


def choose(items: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """Lazily yield every k-subset of items, in index order, without repeats."""
    if k < 1 or k > len(items):
        return iter(())
    return combinations(items, k)


def _is_better(candidate: Combination, best: Optional[Combination]) -> bool:
    if best is None:
        return True
    if candidate.covered_games != best.covered_games:
        return candidate.covered_games > best.covered_games
    return candidate.total_price < best.total_price


def find_best_combination_of_size(stats: Sequence[PackageStats],
                                  offers_by_package: Dict[int, Set[Offer]],
                                  target_ids: Set[int],
                                  size: int) -> Optional[Combination]:
    """
    Best combination of exactly `size` packages.

    Packages without coverage are pruned first since they cannot add a
    game to any union. Returns None when fewer than `size` packages are
    left.
    """
    candidates = [s for s in stats if s.coverage > 0]
    covered_by_package = {
        s.id: covered_game_ids(offers_by_package.get(s.id, ()), target_ids)
        for s in candidates
    }

    best = None
    evaluated = 0
    for subset in choose(candidates, size):
        evaluated += 1
        covered = set()
        for pkg in subset:
            covered |= covered_by_package[pkg.id]
        combo = Combination(
            packages=subset,
            coverage=coverage_percent(len(covered), len(target_ids)),
            total_price=sum(pkg.yearly_price for pkg in subset),
            covered_games=len(covered),
        )
        if _is_better(combo, best):
            best = combo

    log.debug(f"Size {size}: evaluated {evaluated} subsets of {len(candidates)} packages")
    return best


def find_best_combinations(stats: Sequence[PackageStats],
                           offers_by_package: Dict[int, Set[Offer]],
                           target_ids: Set[int],
                           max_size: int = MAX_COMBINATION_SIZE) -> List[Combination]:
    """
    Best combination for each size 1..max_size that produced one.

    Sorted by coverage descending; equal coverage prefers fewer packages,
    then the lower total price.
    """
    found = []
    for size in range(1, max_size + 1):
        combo = find_best_combination_of_size(stats, offers_by_package, target_ids, size)
        if combo is not None:
            found.append(combo)

    return sorted(found, key=lambda c: (-c.coverage, c.size, c.total_price))
