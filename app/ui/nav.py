"""Tiny navigation helper for the club pages."""

import streamlit as st


def go(page: str, rerun: bool = True, **params: str) -> None:
    """Switch to ``page`` and store optional page parameters (e.g. ``article``).

    The sidebar radio follows ``current_page`` on the next run.
    """
    st.session_state["current_page"] = page
    st.session_state["page_params"] = dict(params)
    if rerun:
        st.rerun()


def page_param(name: str, default=None):
    return st.session_state.get("page_params", {}).get(name, default)


__all__ = ["go", "page_param"]
