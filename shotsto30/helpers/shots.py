"""Shots Calculator - Pure functions for the shots-to-30 calculation."""

from typing import Optional

from ..models.calculation import ShotCalculation
from ..models.player import PlayerStats

TARGET_POINTS = 30


def points_per_shot(pts: float, fga: float) -> float:
    """Points per game divided by field goal attempts per game."""
    return pts / fga


def shots_to_reach(pts: float, fga: float, target: float = TARGET_POINTS) -> float:
    """
    Calculate shots needed to reach ``target`` points at a given efficiency.

    This is a PURE FUNCTION:
    - Same input always gives same output
    - No side effects

    Args:
        pts: Points per game
        fga: Field goal attempts per game (must be nonzero)
        target: Point total to reach

    Returns:
        Shot attempts, rounded to one decimal

    Raises:
        ValueError: if pts or fga is zero
    """
    if not pts or not fga:
        raise ValueError("pts and fga must both be nonzero")
    return round(target / points_per_shot(pts, fga), 1)


def calculate(stats: PlayerStats) -> Optional[ShotCalculation]:
    """Build a ShotCalculation, or None when the stats cannot support one."""
    if not stats.pts or not stats.fga:
        return None
    return ShotCalculation(
        shots=shots_to_reach(stats.pts, stats.fga),
        player_name=stats.player.full_name,
        pts=stats.pts,
        fga=stats.fga,
    )
