"""
Monitoring Decorators

capture_errors reports exceptions from upstream calls to Sentry;
track_performance leaves a timing breadcrumb and warns about slow calls.
"""

import functools
import logging
import time
from typing import Any, Callable, Dict, Optional, TypeVar, cast

from .config import MonitoringConfig
from .sentry.setup import add_breadcrumb, capture_exception

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _target_of(args: tuple) -> Optional[str]:
    """First string positional argument (a URL or query), if any."""
    for arg in args:
        if isinstance(arg, str):
            return arg
    return None


def capture_errors(
    step_name: Optional[str] = None,
    reraise: bool = True,
    tags: Optional[Dict[str, str]] = None,
) -> Callable[[F], F]:
    """
    Report exceptions raised by the wrapped call to Sentry.

    Args:
        step_name: Tag value for the "step" tag (defaults to the function name)
        reraise: Re-raise after reporting; otherwise the call returns None
        tags: Extra tags for the event

    Usage:
        @capture_errors(step_name="proxy_upstream")
        def fetch_upstream(url):
            ...
    """

    def decorator(func: F) -> F:
        error_tags = {"step": step_name or func.__name__}
        error_tags.update(tags or {})

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                capture_exception(
                    exception=e,
                    tags=error_tags,
                    extra={"function": func.__qualname__, "target": _target_of(args)},
                )
                if reraise:
                    raise
                logger.warning("%s failed: %s", error_tags["step"], e)
                return None

        return cast(F, wrapper)

    return decorator


def track_performance(
    operation_name: Optional[str] = None,
    warn_threshold_seconds: Optional[float] = None,
) -> Callable[[F], F]:
    """
    Time the wrapped call.

    Args:
        operation_name: Name used in the breadcrumb and warning
        warn_threshold_seconds: Warn above this duration; defaults to
            SLOW_CALL_WARNING_SECONDS, read when the call finishes

    Usage:
        @track_performance(operation_name="search_players")
        def search_players(self, query):
            ...
    """

    def decorator(func: F) -> F:
        name = operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start
                add_breadcrumb(
                    message=f"{name} completed in {duration:.2f}s",
                    category="performance",
                    data={"duration_seconds": duration},
                )

                threshold = warn_threshold_seconds
                if threshold is None:
                    threshold = MonitoringConfig.from_env().slow_call_warning_seconds
                if duration > threshold:
                    logger.warning("%s took %.2f seconds (threshold: %.2f)", name, duration, threshold)

        return cast(F, wrapper)

    return decorator
