from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Player:
    """Basic player identity."""
    id: int
    first_name: str
    last_name: str
    display_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        """Convert to the JSON shape served by the API."""
        data = {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
        }
        if self.display_name is not None:
            data['display_name'] = self.display_name
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Player':
        return cls(
            id=int(data['id']),
            first_name=data.get('first_name') or '',
            last_name=data.get('last_name') or '',
            display_name=data.get('display_name'),
        )


@dataclass(frozen=True)
class PlayerStats:
    """Season per-game averages for a player."""
    player: Player
    pts: float  # Points per game
    fga: float  # Field goal attempts per game

    def to_dict(self) -> dict:
        return {
            'player': self.player.to_dict(),
            'pts': self.pts,
            'fga': self.fga,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'PlayerStats':
        return cls(
            player=Player.from_dict(data['player']),
            pts=float(data['pts']),
            fga=float(data['fga']),
        )
