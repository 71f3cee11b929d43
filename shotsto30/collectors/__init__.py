"""Collectors - Business logic for fetching and shaping stats."""

from .base import BaseCollector, Result, ResultStatus
from .search import PlayerSearchCollector, search_error_message, MAX_RESULTS
from .player import SeasonAveragesCollector

__all__ = [
    # Base
    'BaseCollector',
    'Result',
    'ResultStatus',

    # Search
    'PlayerSearchCollector',
    'search_error_message',
    'MAX_RESULTS',

    # Season averages
    'SeasonAveragesCollector',
]
