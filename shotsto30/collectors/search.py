"""Player Search Collector - Finds active players by name."""

import logging
from typing import List, Optional

import pandas as pd

from .base import BaseCollector, Result
from ..api.client import StatsApiClient, StatsApiError
from ..api.resultsets import cell_text
from ..helpers.names import name_matches, split_last_comma_first
from ..models.player import Player

logger = logging.getLogger(__name__)

MAX_RESULTS = 25

# Columns of the commonallplayers result set we rely on
REQUIRED_COLUMNS = (
    'PERSON_ID',
    'DISPLAY_LAST_COMMA_FIRST',
    'DISPLAY_FIRST_LAST',
    'ROSTERSTATUS',
    'GAMES_PLAYED_FLAG',
)


def search_error_message(status_code: int) -> str:
    """Human-readable message for a failed search, by upstream HTTP status."""
    if status_code == 403:
        return "NBA API blocked this request (proxy or origin may be blocked). Try Render or another host for the proxy."
    if status_code == 502:
        return "Proxy could not reach NBA API. Check proxy logs."
    return f"Search failed: {status_code}"


def is_active(roster_status, games_played_flag) -> bool:
    """On a roster, or has games recorded this season."""
    try:
        on_roster = int(roster_status) == 1
    except (TypeError, ValueError):
        on_roster = False
    return on_roster or games_played_flag == "Y"


def player_from_row(row: pd.Series) -> Optional[Player]:
    """Build a Player from a commonallplayers row, or None if the ID is unusable."""
    try:
        player_id = int(row['PERSON_ID'])
    except (TypeError, ValueError):
        return None

    last_comma_first = cell_text(row['DISPLAY_LAST_COMMA_FIRST'])
    first_last = cell_text(row['DISPLAY_FIRST_LAST'])
    first_name, last_name = split_last_comma_first(last_comma_first)

    return Player(
        id=player_id,
        first_name=first_name,
        last_name=last_name,
        display_name=first_last or last_comma_first,
    )


class PlayerSearchCollector(BaseCollector[str, List[Player]]):
    """Searches the season's player list for active players matching a query."""

    def __init__(self, api_client: StatsApiClient, season: str, limit: int = MAX_RESULTS):
        """
        Initialize collector.

        Args:
            api_client: API client for fetching the player list
            season: Season string (e.g., "2025-26")
            limit: Maximum number of matches returned
        """
        self.api_client = api_client
        self.season = season
        self.limit = limit

    def collect(self, query: str) -> Result[List[Player]]:
        """Search for players whose name matches ``query``."""
        if not (query or "").strip():
            return Result.success([])

        try:
            players_df = self.api_client.get_all_players(self.season)
        except StatsApiError as e:
            return Result.error(search_error_message(e.status_code))
        except Exception as e:
            logger.error("NBA Stats search error: %s", e)
            return Result.empty(f"Search request failed: {e}")

        if players_df is None or players_df.empty:
            logger.warning("No player rows in first resultSet")
            return Result.empty("No player rows returned")

        missing = [col for col in REQUIRED_COLUMNS if col not in players_df.columns]
        if missing:
            logger.error("Player list is missing columns: %s", ", ".join(missing))
            return Result.empty(f"Missing columns: {', '.join(missing)}")

        logger.info("Processing %d total players from API", len(players_df))
        matches = self._filter(players_df, query)

        logger.info("Filtered to %d matching players for query %r", len(matches), query)
        if matches:
            logger.debug("Sample matches: %s", [p.full_name for p in matches[:3]])
        return Result.success(matches, f"Found {len(matches)} players")

    def _filter(self, players_df: pd.DataFrame, query: str) -> List[Player]:
        matches: List[Player] = []
        for _, row in players_df.iterrows():
            if not is_active(row['ROSTERSTATUS'], row['GAMES_PLAYED_FLAG']):
                continue
            if not name_matches(query, cell_text(row['DISPLAY_FIRST_LAST']), cell_text(row['DISPLAY_LAST_COMMA_FIRST'])):
                continue
            player = player_from_row(row)
            if player is None:
                continue
            matches.append(player)
            if len(matches) >= self.limit:
                break
        return matches
