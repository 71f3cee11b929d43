"""UI - Browser front end and its session state.

The Streamlit page lives in ``app.py`` and is launched with ``streamlit run``;
it is not imported here so the session logic can be used without Streamlit.
"""

from .api import ShotsApi, ShotsApiError
from .session import CalculatorSession, UiState, MIN_QUERY_LENGTH, DEBOUNCE_MS

__all__ = [
    'ShotsApi',
    'ShotsApiError',
    'CalculatorSession',
    'UiState',
    'MIN_QUERY_LENGTH',
    'DEBOUNCE_MS',
]
