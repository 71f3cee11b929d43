"""HTTP client the UI uses to call the Shots to 30 API."""

import logging
from typing import Optional

import requests

from ..models.player import PlayerStats
from ..models.search import PER_PAGE, SearchEnvelope

logger = logging.getLogger(__name__)


class ShotsApiError(Exception):
    """Raised when the Shots to 30 API answers with an unexpected status."""

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"Shots API error: {status_code}")
        self.status_code = status_code


class ShotsApi:
    """Client for /api/players/search and /api/players/{id}/stats."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def search(self, query: str, page: Optional[int] = None, per_page: int = PER_PAGE) -> SearchEnvelope:
        """
        Search players.

        A 503 still carries a well-formed envelope with an ``error`` message,
        so it is returned rather than raised.
        """
        params = {'q': query, 'per_page': per_page}
        if page is not None:
            params['page'] = page

        response = self.session.get(f"{self.base_url}/api/players/search", params=params)
        if response.ok or response.status_code == 503:
            try:
                return SearchEnvelope.from_dict(response.json())
            except (ValueError, KeyError, TypeError) as e:
                raise ShotsApiError(response.status_code, f"Malformed search response: {e}") from e

        logger.error("Search API error: %s %s", response.status_code, response.reason)
        raise ShotsApiError(response.status_code)

    def stats(self, player_id: int) -> Optional[PlayerStats]:
        """Fetch season averages; None when the body has no data."""
        response = self.session.get(f"{self.base_url}/api/players/{player_id}/stats")
        if not response.ok:
            raise ShotsApiError(response.status_code, "Failed to fetch stats")

        try:
            data = response.json().get('data')
            return PlayerStats.from_dict(data) if data else None
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise ShotsApiError(response.status_code, f"Malformed stats response: {e}") from e
