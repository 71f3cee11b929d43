"""Data models - Dataclass definitions for all entities."""

from .player import Player, PlayerStats
from .search import SearchMeta, SearchOutcome, SearchEnvelope, PER_PAGE
from .calculation import ShotCalculation

__all__ = [
    'Player',
    'PlayerStats',
    'SearchMeta',
    'SearchOutcome',
    'SearchEnvelope',
    'PER_PAGE',
    'ShotCalculation',
]
