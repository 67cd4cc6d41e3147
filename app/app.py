# -*- coding: utf-8 -*-
# file: app/app.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# ``streamlit run app/app.py`` puts ``app/`` on sys.path, not the project root.
# Drop any module cached as ``app`` that is not this package so the
# ``from app.…`` imports below resolve to the local sources.
local_app_dir = Path(__file__).resolve().parent
_existing_app_mod = sys.modules.get("app")
if _existing_app_mod is not None and not getattr(_existing_app_mod, "__path__", None):
    del sys.modules["app"]


def _bootstrap_local_package() -> Path:
    """Ensure the project root is importable before package imports."""

    project_root = local_app_dir.parent
    root_str = str(project_root)
    if root_str in sys.path:
        sys.path.remove(root_str)
    sys.path.insert(0, root_str)
    return project_root


PROJECT_ROOT = _bootstrap_local_package()

from app.log import configure_logging  # noqa: E402
from app.admin_page import show_admin_page  # noqa: E402
from app.checkout_page import show_cart_page  # noqa: E402
from app.home import show_home_page  # noqa: E402
from app.login import logout, show_login_page  # noqa: E402
from app.news_page import show_news_page  # noqa: E402
from app.player_dashboard import show_player_dashboard  # noqa: E402
from app.register_page import show_register_page  # noqa: E402
from app.schedule_page import show_schedule_page  # noqa: E402
from app.sponsors_page import show_sponsors_page  # noqa: E402
from app.standings_page import show_standings_page  # noqa: E402
from app.state import current_user, get_cart, get_store, is_admin  # noqa: E402
from app.store_page import show_store_page  # noqa: E402
from app.team_page import show_team_page  # noqa: E402
from app.ui.nav import go  # noqa: E402
from app.ui.sidebar import build_sidebar  # noqa: E402

configure_logging()
logger = logging.getLogger("app.main")

st.set_page_config(page_title="Mouloudia Tiznit", page_icon="🏐", layout="wide", initial_sidebar_state="expanded")

APP_TAGLINE = "Volleyball club"
APP_VERSION = "1.0.0"


# --------- Nav
NAV_KEYS = [
    "Home",
    "News",
    "Schedule",
    "Team",
    "Standings",
    "Sponsors",
    "Store",
    "Cart",
    "Register",
    "Login",
    "My Space",
    "Admin",
]
NAV_LABELS = {
    "Home": "Home",
    "News": "News",
    "Schedule": "Schedule",
    "Team": "Team",
    "Standings": "Standings",
    "Sponsors": "Sponsors",
    "Store": "Store",
    "Cart": "Cart & Checkout",
    "Register": "Join the club",
    "Login": "Sign in",
    "My Space": "My Space",
    "Admin": "Admin",
}
NAV_ICONS = {
    "Home": "🏠",
    "News": "📰",
    "Schedule": "📅",
    "Team": "🏐",
    "Standings": "🏆",
    "Sponsors": "🤝",
    "Store": "🛍️",
    "Cart": "🛒",
    "Register": "✍️",
    "Login": "🔐",
    "My Space": "👤",
    "Admin": "🛠️",
}
LEGACY_REMAP = {
    "classement": "Standings",
    "calendar": "Schedule",
    "shop": "Store",
    "checkout": "Cart",
    "dashboard": "My Space",
}
PAGE_FUNCS = {
    "Home": show_home_page,
    "News": show_news_page,
    "Schedule": show_schedule_page,
    "Team": show_team_page,
    "Standings": show_standings_page,
    "Sponsors": show_sponsors_page,
    "Store": show_store_page,
    "Cart": show_cart_page,
    "Register": show_register_page,
    "Login": show_login_page,
    "My Space": show_player_dashboard,
    "Admin": show_admin_page,
}


def visible_nav_keys(user: dict | None) -> list[str]:
    """Hide pages that do not apply to the current visitor."""
    role = (user or {}).get("role")
    hidden = {"Admin", "My Space"}
    if role == "admin":
        hidden = {"My Space", "Register"}
    elif role == "player":
        hidden = {"Admin", "Register"}
    return [k for k in NAV_KEYS if k not in hidden]


def _render_maintenance() -> None:
    st.title("🚧 Under maintenance")
    st.write("The site is being updated. Please check back soon.")
    if st.button("Admin sign in", key="maintenance__login"):
        go("Login")


def main() -> None:
    user = current_user()
    nav_keys = visible_nav_keys(user)

    if "current_page" not in st.session_state:
        p = st.query_params.get("p", None)
        p = LEGACY_REMAP.get(p, p)
        st.session_state["current_page"] = p if p in NAV_KEYS else NAV_KEYS[0]

    current = st.session_state.get("current_page", NAV_KEYS[0])
    if current not in nav_keys:
        current = "Login" if current in ("Admin", "My Space") else NAV_KEYS[0]
        st.session_state["current_page"] = current

    store = get_store()
    build_sidebar(
        current=current,
        nav_keys=nav_keys,
        nav_labels=NAV_LABELS,
        nav_icons=NAV_ICONS,
        app_title=store.club_name,
        app_tagline=APP_TAGLINE,
        app_version=APP_VERSION,
        go=go,
        logout=logout,
        cart_count=get_cart().item_count,
        user=user,
    )

    if store.general_settings.get("is_maintenance_mode") and not is_admin() and current != "Login":
        _render_maintenance()
        return

    page_func = PAGE_FUNCS.get(current, lambda: st.error("Page not found."))
    logger.debug("Rendering page %s", current)
    page_func()


if __name__ == "__main__":
    main()
