# path: app/ui/sidebar.py
from __future__ import annotations

import re
from contextlib import contextmanager
from html import escape
from typing import Callable, Dict, Iterable, List, Optional

import streamlit as st


# ----------------------------- Public API --------------------------------- #

def build_sidebar(
    *,
    current: str,
    nav_keys: Iterable[str],
    nav_labels: Dict[str, str],
    nav_icons: Dict[str, str],
    app_title: str,
    app_tagline: str,
    app_version: str,
    go: Callable[..., None],
    logout: Callable[[], None],
    cart_count: int = 0,
    user: Optional[Dict[str, object]] = None,
) -> None:
    """Render the sidebar: club header, page radio, cart badge and profile card."""
    with _sidebar_owner():
        nav_options: List[str] = list(nav_keys)
        display = {
            k: f"{nav_icons.get(k, '')} {nav_labels.get(k, k)}".strip() for k in nav_options
        }

        with st.sidebar:
            st.markdown(_build_header_html(app_title, app_tagline), unsafe_allow_html=True)
            if nav_options:
                _build_nav(current, nav_options, display, go)

            if cart_count:
                st.caption(f"🛒 {cart_count} item(s) in cart")

            if user:
                st.markdown(_build_profile_html(user), unsafe_allow_html=True)
                st.button(
                    "Sign out",
                    on_click=logout,
                    type="secondary",
                    key="sidebar-signout",
                    use_container_width=True,
                )

            st.caption(f"{app_title} · v{app_version}")


__all__ = ["build_sidebar"]


# --------------------------- Internal helpers ------------------------------ #

@contextmanager
def _sidebar_owner():
    """Mark the sidebar as owned for the duration of the block."""
    prev = bool(st.session_state.get("_sidebar_owner_active"))
    st.session_state["_sidebar_owner_active"] = True
    try:
        yield
    finally:
        st.session_state["_sidebar_owner_active"] = prev


def _build_header_html(title: str, tagline: str) -> str:
    tagline_html = f"<p class='sb-tagline'>{escape(tagline)}</p>" if tagline else ""
    return (
        f"""
        <div class='sb-header-card' role='banner'>
          <h1 class='sb-title'>{escape(title or "")}</h1>
          {tagline_html}
        </div>
        """.strip()
    )


def _build_nav(current: str, options: List[str], display_map: Dict[str, str], go: Callable[..., None]) -> None:
    key = "sidebar_nav"

    # current_page is the source of truth; sync the radio before it is created.
    target = current if current in options else options[0]
    if st.session_state.get(key) != target:
        st.session_state[key] = target

    def _handle_change() -> None:
        target = st.session_state.get(key)
        if target in options:
            go(target, rerun=False)

    st.radio(
        "Navigate",
        options=options,
        format_func=lambda k: display_map.get(k, k),
        key=key,
        label_visibility="collapsed",
        on_change=_handle_change,
    )


def _build_profile_html(user: Dict[str, object]) -> str:
    name = str(user.get("name") or "") or str(user.get("email") or "") or "Member"
    role = str(user.get("role") or "")
    initials = compute_initials(name) or "MT"
    role_line = f"<div class='sb-profile-role'>{escape(role)}</div>" if role else ""
    return (
        f"""
        <div class='sb-profile-card'>
          <div class='sb-profile-avatar' data-initials='{escape(initials)}'>{escape(initials)}</div>
          <div class='sb-profile-meta'>
            <div class='sb-profile-name'>{escape(name)}</div>
            {role_line}
          </div>
        </div>
        """.strip()
    )


_INITIALS_RE = re.compile(r"\w", re.UNICODE)


def compute_initials(name: str, max_len: int = 2) -> str:
    """Extract up to max_len initials from name."""
    chars: List[str] = []
    for part in name.split():
        m = _INITIALS_RE.search(part)
        if m:
            chars.append(m.group(0).upper())
        if len(chars) >= max_len:
            break
    return "".join(chars)
