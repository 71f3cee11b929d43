"""
Monitoring for the Shots to 30 services

Provides:
- Sentry error tracking with request context
- Error capture and slow-call decorators
"""

from .config import MonitoringConfig
from .decorators import (
    capture_errors,
    track_performance,
)
from .sentry import (
    init_sentry,
    set_request_context,
    add_breadcrumb,
    capture_exception,
)

__all__ = [
    # Config
    'MonitoringConfig',
    # Decorators
    'capture_errors',
    'track_performance',
    # Sentry
    'init_sentry',
    'set_request_context',
    'add_breadcrumb',
    'capture_exception',
]
