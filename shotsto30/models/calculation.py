from dataclasses import dataclass


@dataclass(frozen=True)
class ShotCalculation:
    """Shots a player needs to score 30, derived from their season averages."""
    shots: float
    player_name: str
    pts: float
    fga: float
