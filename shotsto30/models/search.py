from dataclasses import dataclass, field
from typing import List, Optional

from .player import Player

PER_PAGE = 25


@dataclass(frozen=True)
class SearchMeta:
    """Pagination metadata for a search response."""
    total_pages: int
    current_page: int
    next_page: Optional[int]
    per_page: int
    total_count: int

    @classmethod
    def empty(cls) -> 'SearchMeta':
        return cls(total_pages=0, current_page=1, next_page=None, per_page=PER_PAGE, total_count=0)

    @classmethod
    def single_page(cls, count: int) -> 'SearchMeta':
        return cls(total_pages=1, current_page=1, next_page=None, per_page=PER_PAGE, total_count=count)

    def to_dict(self) -> dict:
        return {
            'total_pages': self.total_pages,
            'current_page': self.current_page,
            'next_page': self.next_page,
            'per_page': self.per_page,
            'total_count': self.total_count,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'SearchMeta':
        if not data:
            return cls.empty()
        return cls(
            total_pages=int(data.get('total_pages', 0)),
            current_page=int(data.get('current_page', 1)),
            next_page=data.get('next_page'),
            per_page=int(data.get('per_page', PER_PAGE)),
            total_count=int(data.get('total_count', 0)),
        )


@dataclass(frozen=True)
class SearchOutcome:
    """What the stats client returns for a search: matches plus an optional soft error."""
    players: List[Player] = field(default_factory=list)
    error: Optional[str] = None


@dataclass(frozen=True)
class SearchEnvelope:
    """Paginated search response served by /api/players/search."""
    data: List[Player]
    meta: SearchMeta
    error: Optional[str] = None

    @classmethod
    def empty(cls) -> 'SearchEnvelope':
        return cls(data=[], meta=SearchMeta.empty())

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> 'SearchEnvelope':
        return cls(
            data=list(outcome.players),
            meta=SearchMeta.single_page(len(outcome.players)),
            error=outcome.error,
        )

    def to_dict(self) -> dict:
        body = {
            'data': [player.to_dict() for player in self.data],
            'meta': self.meta.to_dict(),
        }
        if self.error:
            body['error'] = self.error
        return body

    @classmethod
    def from_dict(cls, body: dict) -> 'SearchEnvelope':
        return cls(
            data=[Player.from_dict(item) for item in body.get('data') or []],
            meta=SearchMeta.from_dict(body.get('meta')),
            error=body.get('error'),
        )
