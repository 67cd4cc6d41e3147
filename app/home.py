# app/home.py: landing page: hero, next match, latest news, club story
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import streamlit as st

from app.state import get_settings, get_store
from app.time_utils import parse_dt, split_schedule, to_tz
from app.ui.nav import go


def _fmt_local(value: Any, tz_name: str) -> str:
    try:
        return to_tz(value, tz_name).strftime("%a %d %b %Y · %H:%M")
    except ValueError:
        return "—"


def _latest_news(news: List[Dict[str, Any]], limit: int = 3) -> List[Dict[str, Any]]:
    far_past = datetime.min.replace(tzinfo=timezone.utc)
    return sorted(news, key=lambda n: parse_dt(n.get("date")) or far_past, reverse=True)[:limit]


def _next_match(matches: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    upcoming, _ = split_schedule(matches, datetime.now(timezone.utc))
    return upcoming[0] if upcoming else None


def _render_live_banner(match: Dict[str, Any], club_name: str) -> None:
    score = match.get("live_score") or {}
    ours = score.get("our_sets", 0)
    theirs = score.get("opponent_sets", 0)
    st.error(
        f"🔴 LIVE · {club_name} {ours} – {theirs} {match.get('opponent', '')} "
        f"({match.get('category', '')})"
    )


def show_home_page() -> None:
    store = get_store()
    settings = get_settings()
    content = store.home_page_content

    hero = content.get("hero_image_url")
    if hero:
        st.image(hero, use_container_width=True)
    st.markdown(f"# {content.get('title') or store.club_name}")
    if content.get("subtitle"):
        st.markdown(f"### {content['subtitle']}")

    c1, c2 = st.columns(2)
    if c1.button(content.get("cta_team") or "Meet the Team", key="home__team", use_container_width=True):
        go("Team")
    if c2.button(content.get("cta_schedule") or "View Schedule", key="home__schedule", use_container_width=True):
        go("Schedule")

    if store.live_match_id is not None:
        live = store.get("matches", store.live_match_id)
        if live:
            _render_live_banner(live, store.club_name)

    st.markdown("---")
    left, right = st.columns([2, 1])

    with left:
        st.subheader("Latest news")
        latest = _latest_news(store.news)
        if not latest:
            st.caption("No news yet.")
        for item in latest:
            with st.container(border=True):
                st.markdown(f"**{item.get('title', '')}**")
                st.caption(_fmt_local(item.get("date"), settings.timezone))
                st.write(item.get("summary", ""))
                if st.button("Read more", key=f"home__news_{item['id']}"):
                    go("News", article=str(item["id"]))

    with right:
        st.subheader("Next match")
        nxt = _next_match(store.matches)
        if nxt is None:
            st.caption("No upcoming matches.")
        else:
            venue = "Home" if nxt.get("is_home") else "Away"
            st.metric(nxt.get("category", ""), f"vs {nxt.get('opponent', '')}")
            st.caption(f"{_fmt_local(nxt.get('date'), settings.timezone)} · {venue}")
            st.caption(nxt.get("location", ""))

    info = store.club_info
    if info.get("history") or info.get("mission"):
        st.markdown("---")
        h, m = st.columns(2)
        h.subheader("Our history")
        h.write(info.get("history", ""))
        m.subheader("Our mission")
        m.write(info.get("mission", ""))


__all__ = ["show_home_page"]
