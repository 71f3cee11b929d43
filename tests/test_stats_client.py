"""Tests for the StatsClient facade."""

from datetime import date

from shotsto30.api.client import StatsApiError
from shotsto30.config import APIConfig, Config
from shotsto30.stats_client import StatsClient

CURRENT_SEASON = "2024-25"
PREVIOUS_SEASON = "2023-24"


class TestStatsClient:
    def test_seasons_follow_reference_date(self, stats_client):
        assert stats_client.season == CURRENT_SEASON
        assert stats_client.previous_season == PREVIOUS_SEASON

    def test_october_rollover(self, mock_api):
        client = StatsClient(config=Config(), api_client=mock_api, today=date(2025, 10, 2))
        assert client.season == "2025-26"

    def test_search_players(self, stats_client, mock_api, sample_players_data):
        mock_api.set_response(f"players_{CURRENT_SEASON}", sample_players_data)

        outcome = stats_client.search_players("curry")

        assert [p.id for p in outcome.players] == [201939]
        assert outcome.error is None

    def test_search_soft_error(self, stats_client, mock_api):
        mock_api.set_error(f"players_{CURRENT_SEASON}", StatsApiError(502))

        outcome = stats_client.search_players("curry")

        assert outcome.players == []
        assert outcome.error == "Proxy could not reach NBA API. Check proxy logs."

    def test_search_network_failure_has_no_message(self, stats_client, mock_api):
        mock_api.set_error(f"players_{CURRENT_SEASON}", OSError("unreachable"))

        outcome = stats_client.search_players("curry")

        assert outcome.players == []
        assert outcome.error is None

    def test_season_averages(self, stats_client, mock_api, sample_dashboard_data, sample_player_info_data):
        mock_api.set_response(f"dashboard_2544_{CURRENT_SEASON}", sample_dashboard_data)
        mock_api.set_response("info_2544", sample_player_info_data)

        stats = stats_client.fetch_player_season_averages(2544)

        assert stats.pts == 27.5
        assert stats.fga == 20.0
        assert stats.player.full_name == "LeBron James"

    def test_season_averages_missing(self, stats_client):
        assert stats_client.fetch_player_season_averages(2544) is None

    def test_builds_production_client_from_config(self):
        client = StatsClient(config=Config(api=APIConfig(proxy_url="proxy.example.com", timeout=3)))

        transport = client.api_client.transport
        assert transport.proxy_url == "https://proxy.example.com"
        assert transport.timeout == 3
