#!/usr/bin/env python3
"""
Shared pytest fixtures for package planner tests.

Provides small in-memory datasets in the raw row format the loader
produces (every field a string).
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def game_row(game_id, home, away):
    return {'id': str(game_id), 'team_home': home, 'team_away': away}


def package_row(package_id, name, monthly_cents, yearly_cents):
    return {
        'id': str(package_id),
        'name': name,
        'monthly_price_cents': str(monthly_cents),
        'monthly_price_yearly_subscription_in_cents': str(yearly_cents),
    }


def offer_row(game_id, package_id, live, highlights):
    return {
        'game_id': str(game_id),
        'streaming_package_id': str(package_id),
        'live': '1' if live else '0',
        'highlights': '1' if highlights else '0',
    }


@pytest.fixture
def single_game_data():
    """One game, one package showing it live only."""
    games = [game_row(1, 'A', 'B')]
    packages = [package_row(1, 'Sky', 1000, 800)]
    offers = [offer_row(1, 1, True, False)]
    return games, packages, offers


@pytest.fixture
def league_data():
    """
    Six games between four teams and four packages:

    - Sky (id 1, 29.99 / 24.99): live for games 1-4
    - DAZN (id 2, 19.99 / 14.99): live for games 4-6, on demand for game 1
    - Magenta (id 3, 9.99 / 9.99): on demand for games 2 and 5
    - Empty (id 4, 4.99 / 4.99): offers for nothing selected
    """
    games = [
        game_row(1, 'Bayern München', 'Real Madrid'),
        game_row(2, 'Real Madrid', 'FC Barcelona'),
        game_row(3, 'FC Barcelona', 'Bayern München'),
        game_row(4, 'Bayern München', 'Juventus'),
        game_row(5, 'Juventus', 'Real Madrid'),
        game_row(6, 'FC Barcelona', 'Juventus'),
    ]
    packages = [
        package_row(1, 'Sky', 2999, 2499),
        package_row(2, 'DAZN', 1999, 1499),
        package_row(3, 'Magenta', 999, 999),
        package_row(4, 'Empty', 499, 499),
    ]
    offers = [
        offer_row(1, 1, True, False),
        offer_row(2, 1, True, False),
        offer_row(3, 1, True, False),
        offer_row(4, 1, True, False),
        offer_row(4, 2, True, True),
        offer_row(5, 2, True, False),
        offer_row(6, 2, True, False),
        offer_row(1, 2, False, True),
        offer_row(2, 3, False, True),
        offer_row(5, 3, False, True),
        offer_row(6, 4, False, False),
    ]
    return games, packages, offers


@pytest.fixture
def halves_data():
    """Ten games of team A, two equally priced packages covering disjoint halves."""
    games = [game_row(i, 'A', f'Opponent {i}') for i in range(1, 11)]
    packages = [
        package_row(1, 'First Half', 1000, 1000),
        package_row(2, 'Second Half', 1000, 1000),
    ]
    offers = [offer_row(i, 1 if i <= 5 else 2, True, False) for i in range(1, 11)]
    return games, packages, offers
