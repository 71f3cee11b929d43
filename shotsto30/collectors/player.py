"""Season Averages Collector - Collects a player's per-game points and shot attempts."""

import logging
import math
from typing import Optional, Tuple

from .base import BaseCollector, Result
from ..api.client import StatsApiClient
from ..api.resultsets import cell_text
from ..models.player import Player, PlayerStats

logger = logging.getLogger(__name__)


def _number(value) -> Optional[float]:
    """Coerce a cell to a finite float, or None."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


class SeasonAveragesCollector(BaseCollector[int, PlayerStats]):
    """Collects PTS and FGA per game, falling back to the previous season."""

    def __init__(
        self,
        api_client: StatsApiClient,
        season: str,
        previous_season: str,
    ):
        """
        Initialize collector.

        Args:
            api_client: API client for fetching stats
            season: Current season string (e.g., "2025-26")
            previous_season: Season to fall back to (e.g., "2024-25")
        """
        self.api_client = api_client
        self.season = season
        self.previous_season = previous_season

    def collect(self, player_id: int) -> Result[PlayerStats]:
        """Collect season averages for a player."""
        logger.info("Fetching stats for player %d for season %s", player_id, self.season)

        result = self._fetch_averages(player_id, self.season)
        if result.is_empty:
            logger.info("Trying previous season %s for player %d", self.previous_season, player_id)
            result = self._fetch_averages(player_id, self.previous_season)
            if result.is_success:
                logger.info("Found stats for player %d from previous season %s", player_id, self.previous_season)

        if not result.is_success:
            return result

        pts, fga = (round(value, 1) for value in result.data)
        if fga == 0:
            logger.warning("No field goal attempts for player %d: pts=%s, fga=%s", player_id, pts, fga)
            return Result.empty(f"Player {player_id} has no field goal attempts")

        stats = PlayerStats(
            player=self._fetch_player(player_id),
            pts=pts,
            fga=fga,
        )
        return Result.success(stats, f"{stats.pts} PPG, {stats.fga} FGA")

    def _fetch_averages(self, player_id: int, season: str) -> Result[Tuple[float, float]]:
        """
        Fetch (pts, fga) for one season.

        Returns an empty result when the season has no dashboard or the
        stats are missing, and an error result when the request itself failed.
        """
        try:
            dashboard = self.api_client.get_player_dashboard(player_id, season)
        except Exception as e:
            logger.error("Error fetching %s stats for player %d: %s", season, player_id, e)
            return Result.error(f"API error fetching {season} stats: {e}")

        if dashboard is None or dashboard.empty:
            logger.warning("No OverallPlayerDashboard for player %d for season %s", player_id, season)
            return Result.empty(f"No {season} dashboard for player {player_id}")

        if 'PTS' not in dashboard.columns or 'FGA' not in dashboard.columns:
            logger.warning("Missing PTS or FGA in stats for player %d", player_id)
            return Result.empty(f"Missing PTS or FGA for player {player_id}")

        row = dashboard.iloc[0]
        pts = _number(row['PTS'])
        fga = _number(row['FGA'])
        if pts is None or fga is None:
            logger.warning("Non-numeric stats for player %d: pts=%r, fga=%r", player_id, row['PTS'], row['FGA'])
            return Result.empty(f"Non-numeric PTS or FGA for player {player_id}")

        return Result.success((pts, fga))

    def _fetch_player(self, player_id: int) -> Player:
        """Look up the player's name; an incomplete lookup leaves names blank."""
        player = Player(id=player_id, first_name="", last_name="")
        try:
            info = self.api_client.get_player_info(player_id)
        except Exception as e:
            logger.debug("Error fetching player info for %d: %s", player_id, e)
            return player

        if info is None or info.empty:
            return player
        if 'FIRST_NAME' not in info.columns or 'LAST_NAME' not in info.columns:
            return player

        row = info.iloc[0]
        return Player(
            id=player_id,
            first_name=cell_text(row['FIRST_NAME']),
            last_name=cell_text(row['LAST_NAME']),
        )
