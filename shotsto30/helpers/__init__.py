"""Helpers - Pure utility functions with no side effects."""

from .season import get_current_season, get_previous_season, format_season
from .names import name_matches, split_last_comma_first
from .shots import shots_to_reach, points_per_shot, calculate, TARGET_POINTS

__all__ = [
    'get_current_season',
    'get_previous_season',
    'format_season',
    'name_matches',
    'split_last_comma_first',
    'shots_to_reach',
    'points_per_shot',
    'calculate',
    'TARGET_POINTS',
]
