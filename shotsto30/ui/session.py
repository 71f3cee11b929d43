"""
Calculator Session

UI state for one browser session, kept free of Streamlit so it can be
tested directly.

States:
    IDLE             no query, no results, no selection
    TYPING           query shorter than MIN_QUERY_LENGTH, nothing is searched
    SEARCHING        a debounced search is pending or in flight
    RESULTS          matches are listed
    NO_MATCHES       search finished with zero matches
    PLAYER_SELECTED  a player is picked; stats/calculation/error apply

Every query change bumps a sequence number. A search only updates visible
state if its sequence number is still the latest when it completes, so
superseded requests are ignored rather than aborted.
"""

import logging
from enum import Enum
from typing import List, Optional

import requests

from .api import ShotsApi, ShotsApiError
from ..helpers.shots import calculate
from ..models.calculation import ShotCalculation
from ..models.player import Player
from ..models.search import SearchEnvelope, SearchMeta

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3
DEBOUNCE_MS = 800

NO_SEASON_DATA = "No season data available for this player."
NO_ATTEMPTS = "Player has no field goal attempts or points this season."
STATS_FAILED = "Failed to load player data. Please try again."
NO_PLAYERS_FOUND = "No players found. Try a different search."
SEARCH_FAILED = "Failed to search for players. Please try again."
RATE_LIMITED = "Rate limit reached. Please wait a moment."

REQUEST_ERRORS = (ShotsApiError, requests.RequestException)


class UiState(Enum):
    IDLE = "idle"
    TYPING = "typing"
    SEARCHING = "searching"
    RESULTS = "results"
    NO_MATCHES = "no_matches"
    PLAYER_SELECTED = "player_selected"


class CalculatorSession:
    """Search, select and calculate, with stale-response protection."""

    def __init__(self, api: ShotsApi):
        self.api = api
        self.query: str = ""
        self.results: List[Player] = []
        self.meta: Optional[SearchMeta] = None
        self.notice: Optional[str] = None  # soft error surfaced by the search endpoint
        self.searching = False
        self.search_completed = False
        self.selected: Optional[Player] = None
        self.calculation: Optional[ShotCalculation] = None
        self.error: Optional[str] = None
        self._sequence = 0

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def state(self) -> UiState:
        if self.selected is not None:
            return UiState.PLAYER_SELECTED
        trimmed = self.query.strip()
        if not trimmed:
            return UiState.IDLE
        if len(trimmed) < MIN_QUERY_LENGTH:
            return UiState.TYPING
        if self.searching:
            return UiState.SEARCHING
        if self.results:
            return UiState.RESULTS
        if self.search_completed:
            return UiState.NO_MATCHES
        return UiState.SEARCHING

    @property
    def remaining(self) -> int:
        """Matches beyond those already listed, per the last search's metadata."""
        if self.meta is None:
            return 0
        return max(self.meta.total_count - len(self.results), 0)

    def _clear_results(self) -> None:
        self.results = []
        self.meta = None
        self.notice = None

    def set_query(self, text: str) -> Optional[int]:
        """
        Record new query text.

        Returns:
            Sequence number to pass to run_search once the debounce period
            passes, or None when the query is too short to search
        """
        self.query = text or ""
        self.search_completed = False
        self._sequence += 1

        if len(self.query.strip()) < MIN_QUERY_LENGTH:
            self._clear_results()
            self.searching = False
            return None

        self.searching = True
        return self._sequence

    def run_search(self, sequence: int) -> bool:
        """
        Issue the debounced search for ``sequence``.

        Returns:
            True if the response was applied, False if it was superseded
        """
        if sequence != self._sequence:
            return False

        envelope: Optional[SearchEnvelope] = None
        rate_limited = False
        try:
            envelope = self.api.search(self.query)
        except REQUEST_ERRORS as e:
            logger.error("Error searching players: %s", e)
            rate_limited = isinstance(e, ShotsApiError) and e.status_code == 429

        if sequence != self._sequence:
            logger.debug("Dropping stale search response (seq %d, latest %d)", sequence, self._sequence)
            return False

        self.searching = False
        self.search_completed = True
        if envelope is None:
            self._clear_results()
            if rate_limited:
                self.error = RATE_LIMITED
            return True

        self.results = list(envelope.data)
        self.meta = envelope.meta
        self.notice = envelope.error
        return True

    def load_more(self) -> bool:
        """Append the next page of matches to the visible list."""
        if self.meta is None or not self.meta.next_page or not self.query.strip():
            return False

        sequence = self._sequence
        try:
            envelope = self.api.search(self.query, page=self.meta.next_page)
        except REQUEST_ERRORS as e:
            logger.debug("Load more failed: %s", e)
            return False

        if sequence != self._sequence:
            return False
        self.results = self.results + list(envelope.data)
        self.meta = envelope.meta
        return True

    def select(self, player: Player) -> Optional[ShotCalculation]:
        """Pick a player, fetch their stats and compute the shot count."""
        self._sequence += 1
        self.selected = player
        self.query = player.full_name
        self.results = []
        self.searching = False
        self.calculation = None
        self.error = None

        try:
            stats = self.api.stats(player.id)
        except REQUEST_ERRORS as e:
            logger.error("Error fetching player stats: %s", e)
            self.error = STATS_FAILED
            stats = None

        if self.error:
            return None
        if stats is None:
            self.error = NO_SEASON_DATA
            return None

        self.calculation = calculate(stats)
        if self.calculation is None:
            self.error = NO_ATTEMPTS
        return self.calculation

    def press_enter(self) -> Optional[ShotCalculation]:
        """
        Enter key: pick the first listed match, or search right away
        (no debounce) and pick the first match of that response.
        """
        if self.results:
            return self.select(self.results[0])

        if not self.query.strip():
            return None

        self._sequence += 1
        self.searching = True
        try:
            envelope = self.api.search(self.query)
        except REQUEST_ERRORS as e:
            logger.error("Error searching: %s", e)
            self.error = SEARCH_FAILED
            return None
        finally:
            self.searching = False

        self.search_completed = True
        if not envelope.data:
            self.error = NO_PLAYERS_FOUND
            return None

        self.results = list(envelope.data)
        self.meta = envelope.meta
        return self.select(self.results[0])

    def reset(self) -> None:
        """Try another player: clear selection, error and query."""
        self._sequence += 1
        self.query = ""
        self._clear_results()
        self.searching = False
        self.search_completed = False
        self.selected = None
        self.calculation = None
        self.error = None
