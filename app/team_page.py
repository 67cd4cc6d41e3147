"""Roster by team, plus the technical staff."""

from __future__ import annotations

from typing import Any, Dict, List

import streamlit as st

from app.state import get_store
from app.ui.sidebar import compute_initials


def _roster(players: List[Dict[str, Any]], team: str) -> List[Dict[str, Any]]:
    rows = [p for p in players if p.get("team") == team and p.get("status") == "assigned"]
    return sorted(rows, key=lambda p: (p.get("number") or 0, p.get("name", "")))


def _player_card(player: Dict[str, Any]) -> None:
    with st.container(border=True):
        if player.get("image_url"):
            st.image(player["image_url"], width=96)
        else:
            st.markdown(f"### {compute_initials(player.get('name', '')) or '?'}")
        st.markdown(f"**#{player.get('number', '')} {player.get('name', '')}**")
        st.caption(player.get("position", ""))
        stats = player.get("stats") or {}
        if stats.get("matches_played"):
            st.caption(
                f"{stats.get('matches_played', 0)} MP · {stats.get('points', 0)} pts · "
                f"{stats.get('blocks', 0)} blk · {stats.get('aces', 0)} aces"
            )


def show_team_page() -> None:
    st.markdown("## 🏐 Our teams")
    store = get_store()

    categories = store.known_categories()
    team_names = sorted({p.get("team") for p in store.players if p.get("team")} | set(categories))
    if not team_names:
        st.caption("No teams yet.")
    else:
        picked = st.selectbox("Team", team_names, key="team__pick")
        roster = _roster(store.players, picked)
        if not roster:
            st.caption("No players assigned to this team yet.")
        cols = st.columns(4)
        for idx, player in enumerate(roster):
            with cols[idx % 4]:
                _player_card(player)

    st.markdown("---")
    st.subheader("Staff")
    if not store.staff:
        st.caption("No staff listed.")
    for member in store.staff:
        with st.container(border=True):
            st.markdown(f"**{member.get('name', '')}** · {member.get('position', '')}")
            if member.get("bio"):
                st.caption(member["bio"])


__all__ = ["show_team_page"]
