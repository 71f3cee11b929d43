"""
Stats Client

Thin orchestration layer in front of the search and season-averages
collectors. Upstream failures never escape as exceptions: search returns an
empty list plus an optional message, stats lookups return None.
"""

import logging
from datetime import date
from typing import Optional

from .config import Config
from .api.client import StatsApiClient, ProductionStatsApiClient
from .api.transport import StatsTransport
from .collectors import PlayerSearchCollector, SeasonAveragesCollector
from .helpers.season import get_current_season, get_previous_season
from .models.player import PlayerStats
from .models.search import SearchOutcome
from .monitoring import track_performance

logger = logging.getLogger(__name__)


class StatsClient:
    """
    Facade that coordinates the collectors.

    Seasons are resolved per call, so a long-running server rolls over to the
    new season in October without a restart.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        api_client: Optional[StatsApiClient] = None,
        today: Optional[date] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Configuration object (defaults to Config.from_env())
            api_client: API client override (tests pass a MockStatsApiClient)
            today: Fixed reference date for season resolution (None = today)
        """
        if config is None:
            config = Config.from_env()

        self.config = config
        self._today = today
        self._api_client = api_client or ProductionStatsApiClient(
            StatsTransport(proxy_url=config.api.proxy_url, timeout=config.api.timeout)
        )

    @property
    def api_client(self) -> StatsApiClient:
        return self._api_client

    @property
    def season(self) -> str:
        return get_current_season(self._today)

    @property
    def previous_season(self) -> str:
        return get_previous_season(self._today)

    @track_performance(operation_name="search_players")
    def search_players(self, query: str) -> SearchOutcome:
        """Search active players by name; at most 25 matches."""
        collector = PlayerSearchCollector(self._api_client, self.season)
        result = collector.collect(query)

        if result.is_success:
            return SearchOutcome(players=result.data)
        if result.is_error:
            return SearchOutcome(players=[], error=result.message)

        logger.debug("Search for %r returned no data: %s", query, result.message)
        return SearchOutcome(players=[])

    @track_performance(operation_name="fetch_player_season_averages")
    def fetch_player_season_averages(self, player_id: int) -> Optional[PlayerStats]:
        """Return PPG and FGA for the current (or previous) season, or None."""
        collector = SeasonAveragesCollector(
            self._api_client,
            season=self.season,
            previous_season=self.previous_season,
        )
        result = collector.collect(player_id)

        if not result.is_success:
            logger.info("No season averages for player %d: %s", player_id, result.message)
            return None
        return result.data
