"""Match schedule: upcoming fixtures and past results."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

import pandas as pd
import streamlit as st

from app.state import get_settings, get_store
from app.time_utils import split_schedule, to_tz


def _result_label(match: Dict[str, Any]) -> str:
    result = match.get("result")
    if not result:
        return "—"
    ours, theirs = result.get("our_score"), result.get("opponent_score")
    if not isinstance(ours, int) or not isinstance(theirs, int):
        return "—"
    outcome = "W" if ours > theirs else "L"
    return f"{outcome} {ours}-{theirs}"


def _schedule_frame(matches: List[Dict[str, Any]], tz_name: str) -> pd.DataFrame:
    rows = []
    for m in matches:
        try:
            when = to_tz(m.get("date"), tz_name).strftime("%Y-%m-%d %H:%M")
        except ValueError:
            when = ""
        rows.append(
            {
                "Date": when,
                "Category": m.get("category", ""),
                "Opponent": m.get("opponent", ""),
                "Venue": "Home" if m.get("is_home") else "Away",
                "Location": m.get("location", ""),
                "Result": _result_label(m),
            }
        )
    return pd.DataFrame(rows, columns=["Date", "Category", "Opponent", "Venue", "Location", "Result"])


def show_schedule_page() -> None:
    st.markdown("## 📅 Schedule")
    store = get_store()
    tz_name = get_settings().timezone

    categories = sorted({m.get("category", "") for m in store.matches if m.get("category")})
    picked = st.selectbox("Category", ["All", *categories], key="schedule__category")
    matches = store.matches if picked == "All" else [m for m in store.matches if m.get("category") == picked]

    upcoming, past = split_schedule(matches, datetime.now(timezone.utc))
    tab_up, tab_past = st.tabs([f"Upcoming ({len(upcoming)})", f"Results ({len(past)})"])
    with tab_up:
        if upcoming:
            st.dataframe(_schedule_frame(upcoming, tz_name).drop(columns=["Result"]), hide_index=True, use_container_width=True)
        else:
            st.caption("No upcoming matches.")
    with tab_past:
        if past:
            st.dataframe(_schedule_frame(past, tz_name), hide_index=True, use_container_width=True)
        else:
            st.caption("No results yet.")


__all__ = ["show_schedule_page"]
