"""Proxy - Stateless pass-through server for stats.nba.com."""

from .server import create_app, fetch_upstream, is_allowed_target

__all__ = [
    'create_app',
    'fetch_upstream',
    'is_allowed_target',
]
