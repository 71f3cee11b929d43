"""Web - HTTP endpoints for player search and season averages."""

from .app import create_app, parse_player_id

__all__ = [
    'create_app',
    'parse_player_id',
]
