"""
Sentry Setup

Sentry is optional: with no SENTRY_DSN every helper here is a no-op, so the
API and proxy call them unconditionally.
"""

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import MonitoringConfig

logger = logging.getLogger(__name__)

_sentry_initialized = False


def init_sentry(config: Optional[MonitoringConfig] = None) -> bool:
    """
    Initialize the Sentry SDK once per process.

    Returns:
        True if Sentry is (now) active
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    config = config or MonitoringConfig.from_env()
    if not config.sentry_enabled:
        logger.debug("SENTRY_DSN not set; error tracking disabled")
        return False

    try:
        sentry_sdk.init(
            dsn=config.sentry_dsn,
            environment=config.sentry_environment,
            traces_sample_rate=config.sentry_traces_sample_rate,
            # Log records become breadcrumbs; ERROR records become events
            integrations=[LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)],
            send_default_pii=False,
        )
        sentry_sdk.set_tag("service", config.service_name)
    except Exception as e:
        logger.error("Failed to initialize Sentry: %s", e)
        return False

    _sentry_initialized = True
    logger.info("Sentry error tracking enabled (%s)", config.sentry_environment)
    return True


def set_request_context(
    route: str,
    params: Optional[Dict[str, Any]] = None,
    proxy_mode: Optional[bool] = None,
) -> None:
    """
    Attach the endpoint being served to later events.

    Args:
        route: Route template, e.g. "/api/players/{id}/stats"
        params: Request inputs (search query, player ID)
        proxy_mode: Whether stats.nba.com calls go through the proxy
    """
    if not _sentry_initialized:
        return

    sentry_sdk.set_tag("route", route)
    sentry_sdk.set_context("request_inputs", {
        "route": route,
        "params": params or {},
        "proxy_mode": proxy_mode,
    })


def add_breadcrumb(
    message: str,
    category: str = "stats",
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Record a breadcrumb (categories used: stats, proxy, performance)."""
    if _sentry_initialized:
        sentry_sdk.add_breadcrumb(message=message, category=category, level=level, data=data)


def capture_exception(
    exception: Exception,
    level: str = "error",
    tags: Optional[Dict[str, str]] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Report an exception in its own scope.

    Returns:
        Sentry event ID, or None when Sentry is disabled
    """
    if not _sentry_initialized:
        return None

    with sentry_sdk.new_scope() as scope:
        scope.set_level(level)
        for key, value in (tags or {}).items():
            scope.set_tag(key, value)
        for key, value in (extra or {}).items():
            scope.set_extra(key, value)
        return sentry_sdk.capture_exception(exception)
