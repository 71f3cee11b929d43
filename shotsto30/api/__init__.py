"""API - External stats.nba.com clients."""

from .client import (
    StatsApiClient,
    ProductionStatsApiClient,
    MockStatsApiClient,
    StatsApiError,
    OVERALL_DASHBOARD,
)
from .transport import (
    StatsTransport,
    NBA_HEADERS,
    NBA_STATS_BASE,
    NBA_STATS_ORIGIN,
    normalize_proxy_url,
)
from .resultsets import result_set_frame, result_set_names

__all__ = [
    'StatsApiClient',
    'ProductionStatsApiClient',
    'MockStatsApiClient',
    'StatsApiError',
    'OVERALL_DASHBOARD',
    'StatsTransport',
    'NBA_HEADERS',
    'NBA_STATS_BASE',
    'NBA_STATS_ORIGIN',
    'normalize_proxy_url',
    'result_set_frame',
    'result_set_names',
]
