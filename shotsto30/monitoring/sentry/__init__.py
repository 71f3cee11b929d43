"""
Sentry Error Tracking Module

Provides exception capture with request context for debugging.
"""

from .setup import (
    init_sentry,
    set_request_context,
    add_breadcrumb,
    capture_exception,
)

__all__ = [
    'init_sentry',
    'set_request_context',
    'add_breadcrumb',
    'capture_exception',
]
