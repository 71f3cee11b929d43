"""
How Many Shots to Score 30: Streamlit page.
Run with: shotsto30 ui  (or streamlit run shotsto30/ui/app.py)
"""
from typing import List, Tuple

import streamlit as st
from streamlit_searchbox import st_searchbox

from shotsto30.config import Config
from shotsto30.models.player import Player
from shotsto30.ui.api import ShotsApi
from shotsto30.ui.session import DEBOUNCE_MS, CalculatorSession, UiState

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="How Many Shots to Score 30",
    page_icon="🏀",
    layout="centered",
)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
def get_session() -> CalculatorSession:
    if "calculator" not in st.session_state:
        api = ShotsApi(Config.from_env().shots_api_url)
        st.session_state.calculator = CalculatorSession(api)
        st.session_state.searchbox_generation = 0
    return st.session_state.calculator


def search_players(term: str) -> List[Tuple[str, Player]]:
    """Searchbox callback; the component already waits out the debounce."""
    session = get_session()
    sequence = session.set_query(term)
    if sequence is None:
        return []
    session.run_search(sequence)
    return [(p.display_name or p.full_name, p) for p in session.results]


def reset() -> None:
    get_session().reset()
    st.session_state.searchbox_generation += 1


session = get_session()

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
st.markdown(
    "<h1 style='text-align:center;'>How Many Shots to Score 30</h1>",
    unsafe_allow_html=True,
)
st.caption("Based on current season efficiency")

# ---------------------------------------------------------------------------
# Player selector
# ---------------------------------------------------------------------------
picked = st_searchbox(
    search_players,
    placeholder="Search for a player...",
    key=f"player_search_{st.session_state.searchbox_generation}",
    clear_on_submit=False,
    debounce=DEBOUNCE_MS,
)

col_go, col_more = st.columns([1, 2])
with col_go:
    if st.button("Go", type="primary", help="Pick the first match (same as Enter)"):
        session.press_enter()
with col_more:
    if session.meta is not None and session.meta.next_page:
        if st.button(f"Load more players ({session.remaining} remaining)"):
            session.load_more()

if isinstance(picked, Player) and (session.selected is None or session.selected.id != picked.id):
    with st.spinner("Loading player stats..."):
        session.select(picked)

if session.notice:
    st.caption(session.notice)

if session.state == UiState.NO_MATCHES and not session.error:
    st.info("No players found. Try a different search.")

# ---------------------------------------------------------------------------
# Result card
# ---------------------------------------------------------------------------
if session.error:
    st.error(session.error)
    if session.selected is not None:
        st.button("Try another player", on_click=reset)

elif session.calculation is not None:
    calc = session.calculation
    with st.container(border=True):
        st.markdown(f"<p style='text-align:center;'>{calc.player_name} needs</p>", unsafe_allow_html=True)
        st.markdown(
            f"<p style='text-align:center;font-size:3.5rem;font-weight:700;margin:0;'>{calc.shots}</p>",
            unsafe_allow_html=True,
        )
        st.markdown("<p style='text-align:center;'>shots to score 30</p>", unsafe_allow_html=True)
        st.caption(f"Based on current season efficiency ({calc.pts} PPG, {calc.fga} FGA)")
        st.caption("Assumes similar shot quality and usage")

elif session.selected is None:
    with st.container(border=True):
        st.markdown("**Search for a player above**")
        st.caption("Type a player's name to see how many shots they need to score 30 points")
