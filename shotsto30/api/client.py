"""NBA Stats API Client - Interface and implementations for stats.nba.com calls."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import pandas as pd

from .resultsets import result_set_frame
from .transport import NBA_STATS_BASE, StatsTransport

logger = logging.getLogger(__name__)

OVERALL_DASHBOARD = "OverallPlayerDashboard"


class StatsApiError(Exception):
    """Raised when stats.nba.com (or the proxy in front of it) answers non-2xx."""

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"NBA Stats API error: {status_code}")
        self.status_code = status_code


class StatsApiClient(ABC):
    """Abstract interface for NBA Stats API calls."""

    @abstractmethod
    def get_all_players(self, season: str) -> pd.DataFrame:
        """Get every player known for a season (commonallplayers)."""
        pass

    @abstractmethod
    def get_player_dashboard(self, player_id: int, season: str) -> pd.DataFrame:
        """Get player per-game dashboard stats (OverallPlayerDashboard)."""
        pass

    @abstractmethod
    def get_player_info(self, player_id: int) -> pd.DataFrame:
        """Get player identity info (commonplayerinfo)."""
        pass


def dashboard_params(player_id: int, season: str) -> Dict[str, str]:
    """Query parameters for playerdashboardbygeneralsplits, per-game regular season."""
    return {
        "MeasureType": "Base",
        "PerMode": "PerGame",
        "PlusMinus": "N",
        "PaceAdjust": "N",
        "Rank": "N",
        "LeagueID": "00",
        "Season": season,
        "SeasonType": "Regular Season",
        "PlayerID": str(player_id),
        "Outcome": "",
        "Location": "",
        "Month": "0",
        "SeasonSegment": "",
        "DateFrom": "",
        "DateTo": "",
        "OpponentTeamID": "0",
        "VsConference": "",
        "VsDivision": "",
        "GameSegment": "",
        "Period": "0",
        "ShotClockRange": "",
        "LastNGames": "0",
    }


class ProductionStatsApiClient(StatsApiClient):
    """Real client that talks to stats.nba.com through a StatsTransport."""

    def __init__(self, transport: Optional[StatsTransport] = None):
        self.transport = transport or StatsTransport()

    def _get_json(self, endpoint: str, params: Dict[str, str]) -> Optional[dict]:
        url = f"{NBA_STATS_BASE}/{endpoint}"
        response = self.transport.get(url, params)
        logger.info("NBA Stats API response status: %s %s", response.status_code, response.reason)

        if not response.ok:
            logger.error(
                "NBA Stats API error: %s %s %s",
                response.status_code, response.reason, response.text[:500],
            )
            raise StatsApiError(response.status_code)

        try:
            return response.json()
        except ValueError:
            logger.error("NBA Stats API returned non-JSON body for %s", endpoint)
            return None

    def get_all_players(self, season: str) -> pd.DataFrame:
        payload = self._get_json("commonallplayers", {
            "LeagueID": "00",
            "Season": season,
            "IsOnlyCurrentSeason": "0",
        })
        return result_set_frame(payload)

    def get_player_dashboard(self, player_id: int, season: str) -> pd.DataFrame:
        payload = self._get_json("playerdashboardbygeneralsplits", dashboard_params(player_id, season))
        return result_set_frame(payload, OVERALL_DASHBOARD)

    def get_player_info(self, player_id: int) -> pd.DataFrame:
        payload = self._get_json("commonplayerinfo", {"PlayerID": str(player_id)})
        return result_set_frame(payload)


class MockStatsApiClient(StatsApiClient):
    """Mock client for testing."""

    def __init__(self):
        self.responses: Dict[str, pd.DataFrame] = {}
        self.errors: Dict[str, Exception] = {}
        self.calls: List[Tuple[str, ...]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def _get_response(self, key: str) -> pd.DataFrame:
        self.calls.append((key,))
        if key in self.errors:
            raise self.errors[key]
        return self.responses.get(key, pd.DataFrame())

    def get_all_players(self, season: str) -> pd.DataFrame:
        return self._get_response(f"players_{season}")

    def get_player_dashboard(self, player_id: int, season: str) -> pd.DataFrame:
        return self._get_response(f"dashboard_{player_id}_{season}")

    def get_player_info(self, player_id: int) -> pd.DataFrame:
        return self._get_response(f"info_{player_id}")

    def set_response(self, key: str, data: pd.DataFrame) -> None:
        """Test helper to set mock responses."""
        self.responses[key] = data

    def set_error(self, key: str, error: Exception) -> None:
        """Test helper to make a call raise."""
        self.errors[key] = error

    def reset(self) -> None:
        """Reset calls, responses and errors."""
        self.calls = []
        self.responses = {}
        self.errors = {}
