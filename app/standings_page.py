"""Standings page: one tab per tracked category with a points chart."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import streamlit as st

from app.standings import standings_frame
from app.state import get_store

_CLUB_COLOR = "#16a34a"
_OTHER_COLOR = "#64748b"


def _highlight_club(row: pd.Series) -> list[str]:
    style = "font-weight: 700; background-color: rgba(22,163,74,0.18)" if row["is_club"] else ""
    return [style] * len(row)


def points_chart(df: pd.DataFrame):
    fig = px.bar(
        df,
        x="points",
        y="team",
        orientation="h",
        color="is_club",
        color_discrete_map={True: _CLUB_COLOR, False: _OTHER_COLOR},
        text="points",
    )
    fig.update_layout(
        showlegend=False,
        yaxis=dict(autorange="reversed", title=None),
        xaxis=dict(title="Points", dtick=1),
        height=max(220, 48 * len(df)),
        margin=dict(l=10, r=10, t=10, b=10),
    )
    return fig


def show_standings_page() -> None:
    st.markdown("## 🏆 Standings")
    store = get_store()
    tables = store.standings()

    if not tables:
        st.info("No categories are being tracked yet.")
        return

    tabs = st.tabs(list(tables.keys()))
    for tab, (category, rows) in zip(tabs, tables.items()):
        with tab:
            df = standings_frame(rows, store.club_name)
            if df.empty:
                st.caption("No completed matches in this category yet.")
                continue
            styled = df.style.apply(_highlight_club, axis=1)
            st.dataframe(
                styled,
                hide_index=True,
                use_container_width=True,
                column_config={"is_club": None},
            )
            st.plotly_chart(points_chart(df), use_container_width=True, key=f"standings__chart_{category}")


__all__ = ["show_standings_page", "points_chart"]
