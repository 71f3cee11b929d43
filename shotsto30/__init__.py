"""Shots to 30 - Main package.

This package answers one question: how many shots would an NBA player need,
at their current season's efficiency, to score 30 points?

Modules:
    models - Data models (dataclasses)
    api - stats.nba.com transport and clients
    collectors - Player search and season-average lookups
    helpers - Pure utility functions
    config - Configuration
    stats_client - Facade used by the HTTP endpoints
    web - HTTP API (FastAPI)
    proxy - Forwarding proxy for stats.nba.com (FastAPI)
    ui - Streamlit page and its session state
"""

from .config import Config, APIConfig
from .stats_client import StatsClient

__all__ = [
    'Config',
    'APIConfig',
    'StatsClient',
]

__version__ = '1.0.0'
