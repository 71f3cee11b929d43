"""Tests for the shots-to-30 calculator (shots.py)."""

import pytest

from shotsto30.helpers.shots import calculate, points_per_shot, shots_to_reach
from shotsto30.models.player import Player, PlayerStats


class TestShotsToReach:
    def test_reference_example(self):
        # 27.5 / 20 = 1.375 points per shot -> 30 / 1.375 = 21.82
        assert points_per_shot(27.5, 20) == pytest.approx(1.375)
        assert shots_to_reach(27.5, 20) == 21.8

    def test_one_point_per_shot(self):
        assert shots_to_reach(15.0, 15.0) == 30.0

    def test_custom_target(self):
        assert shots_to_reach(20.0, 10.0, target=40) == 20.0

    def test_zero_fga_rejected(self):
        with pytest.raises(ValueError):
            shots_to_reach(10.0, 0)

    def test_zero_pts_rejected(self):
        with pytest.raises(ValueError):
            shots_to_reach(0, 10.0)


class TestCalculate:
    def test_builds_calculation(self):
        stats = PlayerStats(Player(2544, "LeBron", "James"), pts=27.5, fga=20.0)
        result = calculate(stats)

        assert result.shots == 21.8
        assert result.player_name == "LeBron James"
        assert result.pts == 27.5
        assert result.fga == 20.0

    def test_zero_points_gives_none(self):
        stats = PlayerStats(Player(1, "Bench", "Warmer"), pts=0.0, fga=1.2)
        assert calculate(stats) is None
