"""Tests for the click command line."""

import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from shotsto30.cli.main import cli
from shotsto30.config import Config
from shotsto30.models.player import Player, PlayerStats
from shotsto30.models.search import SearchOutcome


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_client():
    with patch("shotsto30.stats_client.StatsClient") as client_cls:
        yield client_cls.return_value


class TestPlayerSearch:
    def test_lists_matches(self, runner, fake_client):
        fake_client.search_players.return_value = SearchOutcome(players=[
            Player(2544, "LeBron", "James", "LeBron James"),
            Player(1642355, "Bronny", "James"),
        ])

        result = runner.invoke(cli, ["player", "search", "bron"])

        assert result.exit_code == 0
        assert "2544  LeBron James" in result.output
        assert "Bronny James" in result.output
        fake_client.search_players.assert_called_once_with("bron")

    def test_no_matches(self, runner, fake_client):
        fake_client.search_players.return_value = SearchOutcome(players=[])

        result = runner.invoke(cli, ["player", "search", "zzzz"])

        assert result.exit_code == 0
        assert "No players found." in result.output

    def test_soft_error_is_shown(self, runner, fake_client):
        fake_client.search_players.return_value = SearchOutcome(players=[], error="Search failed: 500")

        result = runner.invoke(cli, ["player", "search", "bron"])

        assert "Search failed: 500" in result.output


class TestPlayerShots:
    def test_prints_calculation(self, runner, fake_client):
        fake_client.fetch_player_season_averages.return_value = PlayerStats(
            player=Player(2544, "LeBron", "James"), pts=27.5, fga=20.0,
        )

        result = runner.invoke(cli, ["player", "shots", "2544"])

        assert result.exit_code == 0
        assert "LeBron James needs 21.8 shots to score 30" in result.output
        fake_client.fetch_player_season_averages.assert_called_once_with(2544)

    def test_no_season_data(self, runner, fake_client):
        fake_client.fetch_player_season_averages.return_value = None

        result = runner.invoke(cli, ["player", "shots", "2544"])

        assert result.exit_code == 1
        assert "No season data" in result.output

    def test_zero_attempts(self, runner, fake_client):
        fake_client.fetch_player_season_averages.return_value = PlayerStats(
            player=Player(2544, "LeBron", "James"), pts=0.0, fga=0.0,
        )

        result = runner.invoke(cli, ["player", "shots", "2544"])

        assert result.exit_code == 1
        assert "no field goal attempts" in result.output

    def test_id_must_be_integer(self, runner, fake_client):
        result = runner.invoke(cli, ["player", "shots", "abc"])

        assert result.exit_code == 2


class TestServe:
    def test_serve_runs_uvicorn(self, runner, monkeypatch):
        monkeypatch.delenv("NBA_STATS_PROXY_URL", raising=False)
        with patch("uvicorn.run") as run:
            result = runner.invoke(cli, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        assert "direct" in result.output
        run.assert_called_once_with("shotsto30.web.app:app", host="127.0.0.1", port=9000, reload=False)

    def test_blank_proxy_url_serves_direct(self, runner, monkeypatch):
        monkeypatch.setenv("NBA_STATS_PROXY_URL", "https://env-proxy.example.com")
        with patch("uvicorn.run"):
            result = runner.invoke(cli, ["--proxy-url", "", "serve"])

        assert result.exit_code == 0
        assert "direct" in result.output
        assert "NBA_STATS_PROXY_URL" not in os.environ
        assert not Config.from_env().uses_proxy

    def test_proxy_url_reaches_app_environment(self, runner, monkeypatch):
        monkeypatch.delenv("NBA_STATS_PROXY_URL", raising=False)
        with patch("uvicorn.run"):
            result = runner.invoke(cli, ["--proxy-url", "https://cli-proxy.example.com", "serve"])

        assert result.exit_code == 0
        assert Config.from_env().api.proxy_url == "https://cli-proxy.example.com"

    def test_proxy_uses_port_env(self, runner, monkeypatch):
        monkeypatch.setenv("PORT", "9090")
        with patch("uvicorn.run") as run:
            result = runner.invoke(cli, ["proxy"])

        assert result.exit_code == 0
        run.assert_called_once_with("shotsto30.proxy.server:app", host="0.0.0.0", port=9090)


class TestProxyOption:
    def test_overrides_environment(self, runner, monkeypatch):
        monkeypatch.setenv("NBA_STATS_PROXY_URL", "https://env-proxy.example.com")
        with patch("shotsto30.stats_client.StatsClient") as client_cls:
            client_cls.return_value.search_players.return_value = SearchOutcome(players=[])
            runner.invoke(cli, ["--proxy-url", "https://cli-proxy.example.com", "player", "search", "bron"])

        config = client_cls.call_args.kwargs["config"]
        assert config.api.proxy_url == "https://cli-proxy.example.com"

    def test_blank_forces_direct(self, runner, monkeypatch):
        monkeypatch.setenv("NBA_STATS_PROXY_URL", "https://env-proxy.example.com")
        with patch("shotsto30.stats_client.StatsClient") as client_cls:
            client_cls.return_value.search_players.return_value = SearchOutcome(players=[])
            runner.invoke(cli, ["--proxy-url", "", "player", "search", "bron"])

        assert not client_cls.call_args.kwargs["config"].uses_proxy
