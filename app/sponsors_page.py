"""Sponsors grouped by tier."""

from __future__ import annotations

import streamlit as st

from app.club_store import SPONSOR_TIERS
from app.state import get_store


def show_sponsors_page() -> None:
    st.markdown("## 🤝 Our sponsors")
    sponsors = get_store().sponsors
    if not sponsors:
        st.caption("No sponsors yet.")
        return

    for tier in SPONSOR_TIERS:
        group = [s for s in sponsors if s.get("tier") == tier]
        if not group:
            continue
        st.subheader(tier)
        cols = st.columns(3)
        for idx, sponsor in enumerate(group):
            with cols[idx % 3], st.container(border=True):
                if sponsor.get("image_url"):
                    st.image(sponsor["image_url"], use_container_width=True)
                name = sponsor.get("name", "")
                url = sponsor.get("website_url")
                st.markdown(f"[{name}]({url})" if url and url != "#" else f"**{name}**")


__all__ = ["show_sponsors_page"]
