"""
Streaming package planner.

Ranks streaming packages, and small combinations of them, by how many
matches of a set of selected teams they can show.
"""

from planner.ranking import calculate_package_rankings, RankingResult

__all__ = ['calculate_package_rankings', 'RankingResult']
