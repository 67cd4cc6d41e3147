"""News list and article detail."""

from __future__ import annotations

from datetime import datetime, timezone

import streamlit as st

from app.state import get_settings, get_store
from app.time_utils import parse_dt, to_tz
from app.ui.nav import go, page_param


def _fmt_date(value, tz_name: str) -> str:
    try:
        return to_tz(value, tz_name).strftime("%d %B %Y")
    except ValueError:
        return ""


def _show_article(article_id: int) -> None:
    store = get_store()
    item = store.get("news", article_id)
    if item is None:
        st.warning("Article not found.")
        if st.button("Back to news", key="news__back_missing"):
            go("News")
        return
    if st.button("← All news", key="news__back"):
        go("News")
    st.markdown(f"## {item.get('title', '')}")
    st.caption(_fmt_date(item.get("date"), get_settings().timezone))
    if item.get("image_url"):
        st.image(item["image_url"], use_container_width=True)
    st.write(item.get("content") or item.get("summary", ""))


def show_news_page() -> None:
    raw = page_param("article")
    if raw:
        try:
            _show_article(int(raw))
            return
        except ValueError:
            st.warning("Invalid article id.")

    st.markdown("## 📰 News")
    store = get_store()
    tz_name = get_settings().timezone
    far_past = datetime.min.replace(tzinfo=timezone.utc)
    items = sorted(store.news, key=lambda n: parse_dt(n.get("date")) or far_past, reverse=True)
    if not items:
        st.caption("No news yet.")
        return

    for item in items:
        with st.container(border=True):
            img, body = st.columns([1, 3])
            if item.get("image_url"):
                img.image(item["image_url"], use_container_width=True)
            body.markdown(f"### {item.get('title', '')}")
            body.caption(_fmt_date(item.get("date"), tz_name))
            body.write(item.get("summary", ""))
            if body.button("Read more", key=f"news__open_{item['id']}"):
                go("News", article=str(item["id"]))


__all__ = ["show_news_page"]
