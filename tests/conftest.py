"""Shared pytest fixtures for Shots to 30 tests."""

from datetime import date

import pytest
import pandas as pd

# Mid-season reference date: current season 2024-25, previous 2023-24
SEASON_DATE = date(2025, 1, 15)
CURRENT_SEASON = "2024-25"
PREVIOUS_SEASON = "2023-24"

ALL_PLAYERS_HEADERS = [
    "PERSON_ID", "DISPLAY_LAST_COMMA_FIRST", "DISPLAY_FIRST_LAST", "ROSTERSTATUS",
    "FROM_YEAR", "TO_YEAR", "PLAYERCODE", "PLAYER_SLUG", "TEAM_ID", "TEAM_CITY",
    "TEAM_NAME", "TEAM_ABBREVIATION", "TEAM_CODE", "TEAM_SLUG", "GAMES_PLAYED_FLAG",
    "OTHERLEAGUE_EXPERIENCE_CH",
]


def _player_row(person_id, last_first, first_last, roster_status, games_flag):
    return [
        person_id, last_first, first_last, roster_status,
        "2003", "2025", "code", "slug", 1610612747, "Los Angeles",
        "Lakers", "LAL", "lakers", "lakers", games_flag, "00",
    ]


ALL_PLAYERS_ROWS = [
    _player_row(2544, "James, LeBron", "LeBron James", 1, "Y"),
    _player_row(1642355, "James, Bronny", "Bronny James", 1, "Y"),
    _player_row(201939, "Curry, Stephen", "Stephen Curry", 1, "Y"),
    _player_row(77777, "Brony, Old", "Old Brony", 0, "N"),  # retired
    _player_row(203967, "Saric, Dario", "Dario Saric", 0, "Y"),  # off roster, has games
    _player_row(2403, "Nene", "Nene", 1, "Y"),
]


@pytest.fixture
def mock_api():
    """Create a mock stats API client."""
    from shotsto30.api.client import MockStatsApiClient
    return MockStatsApiClient()


@pytest.fixture
def stats_client(mock_api):
    """StatsClient wired to the mock API with a fixed season."""
    from shotsto30.config import Config
    from shotsto30.stats_client import StatsClient
    return StatsClient(config=Config(), api_client=mock_api, today=SEASON_DATE)


@pytest.fixture
def all_players_payload():
    """Raw commonallplayers response."""
    return {
        "resource": "commonallplayers",
        "parameters": {"LeagueID": "00", "Season": CURRENT_SEASON, "IsOnlyCurrentSeason": 0},
        "resultSets": [{
            "name": "CommonAllPlayers",
            "headers": ALL_PLAYERS_HEADERS,
            "rowSet": ALL_PLAYERS_ROWS,
        }],
    }


@pytest.fixture
def sample_players_data():
    """commonallplayers result set as a DataFrame."""
    return pd.DataFrame(ALL_PLAYERS_ROWS, columns=ALL_PLAYERS_HEADERS)


@pytest.fixture
def dashboard_payload():
    """Raw playerdashboardbygeneralsplits response."""
    return {
        "resource": "playerdashboardbygeneralsplits",
        "resultSets": [
            {
                "name": "OverallPlayerDashboard",
                "headers": ["GROUP_SET", "GROUP_VALUE", "GP", "FGM", "FGA", "PTS"],
                "rowSet": [["Overall", CURRENT_SEASON, 50, 10.1, 20.0, 27.5]],
            },
            {
                "name": "LocationPlayerDashboard",
                "headers": ["GROUP_SET", "GROUP_VALUE", "GP", "FGA", "PTS"],
                "rowSet": [["Location", "Home", 25, 19.0, 26.0]],
            },
        ],
    }


@pytest.fixture
def sample_dashboard_data():
    """OverallPlayerDashboard as a DataFrame."""
    return pd.DataFrame([{
        'GROUP_SET': 'Overall',
        'GP': 50,
        'FGA': 20.0,
        'PTS': 27.5,
    }])


@pytest.fixture
def sample_player_info_data():
    """commonplayerinfo as a DataFrame."""
    return pd.DataFrame([{
        'PERSON_ID': 2544,
        'FIRST_NAME': 'LeBron',
        'LAST_NAME': 'James',
        'DISPLAY_FIRST_LAST': 'LeBron James',
    }])
