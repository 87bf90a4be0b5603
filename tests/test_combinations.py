"""Tests for the bounded package combination search."""

from math import comb

import pytest

from planner.combinations import (
    choose,
    find_best_combination_of_size,
    find_best_combinations,
)
from planner.coverage import PackageStats, compute_all_package_stats, target_game_ids
from planner.indexer import build_indexes
from planner.records import Offer


def _setup(data, teams):
    index = build_indexes(*data)
    target = target_game_ids(index.games_by_team, teams)
    stats = compute_all_package_stats(index, target)
    return index, target, stats


def _names(combo):
    return [p.name for p in combo.packages]


class TestChoose:

    def test_counts(self):
        items = list(range(6))
        for k in range(1, 4):
            subsets = list(choose(items, k))
            assert len(subsets) == comb(6, k)
            assert len(set(subsets)) == len(subsets)

    def test_index_order_without_repeats(self):
        assert list(choose(['a', 'b', 'c'], 2)) == [('a', 'b'), ('a', 'c'), ('b', 'c')]

    def test_out_of_range_sizes(self):
        assert list(choose([1, 2], 3)) == []
        assert list(choose([1, 2], 0)) == []
        assert list(choose([], 1)) == []

    def test_is_lazy(self):
        gen = choose(range(100), 3)
        assert next(iter(gen)) == (0, 1, 2)


class TestBestOfSize:

    def test_single_package_prefers_cheaper_on_tie(self, league_data):
        index, target, stats = _setup(league_data, ['Real Madrid'])
        combo = find_best_combination_of_size(stats, index.offers_by_package, target, 1)
        assert _names(combo) == ['Magenta']
        assert combo.total_price == pytest.approx(9.99)

    def test_pair_full_coverage_cheapest(self, league_data):
        index, target, stats = _setup(league_data, ['Real Madrid'])
        combo = find_best_combination_of_size(stats, index.offers_by_package, target, 2)
        assert _names(combo) == ['DAZN', 'Magenta']
        assert combo.coverage == pytest.approx(100.0)
        assert combo.covered_games == 3
        assert combo.total_price == pytest.approx(14.99 + 9.99)

    def test_union_counts_games_once(self, league_data):
        index, target, stats = _setup(league_data, ['Bayern München', 'Juventus'])
        combo = find_best_combination_of_size(stats, index.offers_by_package, target, 2)
        # Sky {1,3,4} and DAZN {1,4,5,6} overlap on games 1 and 4
        assert _names(combo) == ['Sky', 'DAZN']
        assert combo.covered_games == 5
        assert combo.coverage == pytest.approx(100.0)

    def test_zero_coverage_packages_pruned(self, league_data):
        index, target, stats = _setup(league_data, ['Bayern München', 'Juventus'])
        combo = find_best_combination_of_size(stats, index.offers_by_package, target, 3)
        assert 'Empty' not in _names(combo)

    def test_not_enough_packages(self, league_data):
        index, target, stats = _setup(league_data, ['Real Madrid'])
        # Only three packages have coverage
        assert find_best_combination_of_size(stats, index.offers_by_package, target, 4) is None

    def test_no_target_games(self, league_data):
        index, target, stats = _setup(league_data, [])
        assert find_best_combination_of_size(stats, index.offers_by_package, target, 1) is None

    def test_strictly_better_coverage_replaces_cheaper(self):
        """Higher coverage wins even at a higher price."""
        stats = [
            PackageStats(1, 'Cheap', 1.0, 1.0, 50.0, 1, 1, 0, 1.0),
            PackageStats(2, 'Pricey', 9.0, 9.0, 100.0, 2, 2, 0, 0.22),
        ]
        offers = {
            1: {Offer(1, 1, True, False)},
            2: {Offer(1, 2, True, False), Offer(2, 2, True, False)},
        }
        combo = find_best_combination_of_size(stats, offers, {1, 2}, 1)
        assert _names(combo) == ['Pricey']

    def test_equal_coverage_and_price_keeps_first(self, halves_data):
        index, target, stats = _setup(halves_data, ['A'])
        combo = find_best_combination_of_size(stats, index.offers_by_package, target, 1)
        assert _names(combo) == ['First Half']


class TestFindBestCombinations:

    def test_ordering_across_sizes(self, league_data):
        index, target, stats = _setup(league_data, ['Real Madrid'])
        combos = find_best_combinations(stats, index.offers_by_package, target)
        assert [c.size for c in combos] == [2, 3, 1]
        assert [c.coverage for c in combos] == pytest.approx([100.0, 100.0, 100 * 2 / 3])

    def test_disjoint_halves(self, halves_data):
        """Two packages each covering half: pair reaches 100%, single 50%."""
        index, target, stats = _setup(halves_data, ['A'])
        combos = find_best_combinations(stats, index.offers_by_package, target)
        by_size = {c.size: c for c in combos}
        assert set(by_size) == {1, 2}
        assert by_size[2].coverage == pytest.approx(100.0)
        assert by_size[2].total_price == pytest.approx(20.0)
        assert by_size[1].coverage == pytest.approx(50.0)
        assert combos[0].size == 2

    def test_max_size_parameter(self, league_data):
        index, target, stats = _setup(league_data, ['Real Madrid'])
        combos = find_best_combinations(stats, index.offers_by_package, target, max_size=1)
        assert [c.size for c in combos] == [1]
        assert find_best_combinations(stats, index.offers_by_package, target, max_size=0) == []

    def test_no_teams_no_combinations(self, league_data):
        index, target, stats = _setup(league_data, [])
        assert find_best_combinations(stats, index.offers_by_package, target) == []

    @pytest.mark.parametrize("teams", [
        ['Real Madrid'],
        ['Bayern München', 'Juventus'],
        ['FC Barcelona'],
        ['Bayern München', 'Real Madrid', 'FC Barcelona', 'Juventus'],
    ])
    def test_union_and_price_properties(self, league_data, teams):
        index, target, stats = _setup(league_data, teams)
        for combo in find_best_combinations(stats, index.offers_by_package, target):
            assert combo.coverage >= max(p.coverage for p in combo.packages)
            assert combo.total_price == pytest.approx(sum(p.yearly_price for p in combo.packages))
            assert len({p.id for p in combo.packages}) == combo.size
            assert 0 < combo.coverage <= 100

    def test_to_dict(self, halves_data):
        index, target, stats = _setup(halves_data, ['A'])
        combo = find_best_combinations(stats, index.offers_by_package, target)[0]
        data = combo.to_dict()
        assert set(data) == {'packages', 'coverage', 'totalPrice', 'coveredGames'}
        assert [p['name'] for p in data['packages']] == ['First Half', 'Second Half']
        assert data['coveredGames'] == 10
