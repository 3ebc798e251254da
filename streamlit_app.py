from __future__ import annotations

import streamlit as st
from dotenv import load_dotenv

from voting_system.chart import chart_slices, pie_figure
from voting_system.config import load_settings
from voting_system.log import configure_logging
from voting_system.session import SessionEvent, SessionSnapshot, VotingSession
from voting_system.tally import tally_frame

st.set_page_config(page_title="Voting System", page_icon="🗳️", layout="centered")

_SESSION_KEY = "voting_session"
_CELEBRATE_KEY = "_celebrate"


def _mark_celebration(event: SessionEvent) -> None:
    if event.kind == "winner":
        st.session_state[_CELEBRATE_KEY] = True


def _get_session(threshold: int) -> VotingSession:
    """Return this browser session's VotingSession, creating it on first run."""
    if _SESSION_KEY not in st.session_state:
        session = VotingSession(threshold=threshold)
        session.subscribe(_mark_celebration)
        st.session_state[_SESSION_KEY] = session
    return st.session_state[_SESSION_KEY]


def _candidate_rows(session: VotingSession, snap: SessionSnapshot) -> None:
    for i, cand in enumerate(snap.candidates):
        with st.container(border=True):
            c_name, c_btn = st.columns([4, 1], vertical_alignment="center")
            with c_name:
                st.markdown(
                    f"<span style='color: {cand.color};'>●</span> <b>{cand.name}</b>",
                    unsafe_allow_html=True,
                )
                st.caption(f"Votes: {cand.votes}")
            with c_btn:
                st.button("Vote", key=f"vote_{i}", on_click=session.cast_vote, args=(cand.id,))


def _winner_banner(snap: SessionSnapshot) -> None:
    st.markdown(
        "<h2 style='text-align: center;'>🎉 Congratulations! 🎉</h2>",
        unsafe_allow_html=True,
    )
    st.success(f"{snap.winner_name} is the winner!")
    if st.session_state.pop(_CELEBRATE_KEY, False):
        st.balloons()


def main() -> None:

    load_dotenv()

    settings = load_settings()
    configure_logging(settings.log_level, settings.log_json)

    session = _get_session(settings.win_threshold)
    snap = session.snapshot()

    st.title("Voting System")
    st.metric("Total Votes", snap.total_votes)

    if snap.winner_declared:
        _winner_banner(snap)

    # Chart needs a non-zero total
    if snap.total_votes > 0:
        st.plotly_chart(pie_figure(chart_slices(snap.candidates)))

    _candidate_rows(session, snap)

    st.button("Reset Votes", key="reset", type="primary", on_click=session.reset)

    with st.sidebar.expander("Tally", expanded=True):
        st.dataframe(tally_frame(snap.candidates), hide_index=True)
        st.caption(f"Winner is declared once total votes reach {snap.threshold}.")


if __name__ == "__main__":
    main()
