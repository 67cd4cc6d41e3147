"""Streamlit session glue: the per-session store, cart and auth state."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import streamlit as st

from app import storage
from app.cart import Cart
from app.club_store import ClubStore
from app.config import Settings, load_settings

logger = logging.getLogger(__name__)

_STORE_KEY = "club_store"
_CART_KEY = "cart_items"
_AUTH_KEY = "auth"
_SETTINGS_KEY = "club_settings"

__all__ = [
    "get_settings",
    "get_store",
    "persist_store",
    "get_cart",
    "save_cart",
    "ensure_auth_state",
    "current_user",
    "is_admin",
    "sign_in_user",
    "sign_out_user",
    "notify_error",
]


def notify_error(msg: str) -> None:
    logger.error(msg)
    st.error(msg)


def get_settings() -> Settings:
    settings = st.session_state.get(_SETTINGS_KEY)
    if settings is None:
        settings = load_settings()
        st.session_state[_SETTINGS_KEY] = settings
    return settings


def _initial_store(settings: Settings) -> ClubStore:
    snapshot = storage.load_snapshot(notify=notify_error) if storage.persistence_enabled() else {}
    store = ClubStore.from_snapshot(snapshot) if snapshot else ClubStore()
    if not snapshot and settings.club_name:
        store.general_settings["club_name"] = settings.club_name
    return store


def get_store() -> ClubStore:
    store = st.session_state.get(_STORE_KEY)
    if store is None:
        store = _initial_store(get_settings())
        st.session_state[_STORE_KEY] = store
    return store


def persist_store(store: ClubStore) -> None:
    """Write the store to Supabase when persistence is configured."""
    if not storage.persistence_enabled():
        return
    if storage.save_snapshot(store.snapshot(), notify=notify_error):
        logger.debug("Store snapshot saved")


def get_cart() -> Cart:
    return Cart.from_rows(st.session_state.get(_CART_KEY, []))


def save_cart(cart: Cart) -> None:
    st.session_state[_CART_KEY] = cart.to_rows()


def ensure_auth_state() -> Dict[str, Any]:
    auth = st.session_state.setdefault(_AUTH_KEY, {})
    auth.setdefault("authenticated", False)
    auth.setdefault("user", None)
    auth.setdefault("role", None)
    return auth


def current_user() -> Optional[Dict[str, Any]]:
    auth = ensure_auth_state()
    return auth["user"] if auth["authenticated"] else None


def is_admin() -> bool:
    user = current_user()
    return bool(user and user.get("role") == "admin")


def sign_in_user(user: Dict[str, Any]) -> None:
    auth = ensure_auth_state()
    auth.update(authenticated=True, user=user, role=user.get("role"))
    auth.pop("last_error", None)


def sign_out_user() -> None:
    auth = ensure_auth_state()
    auth.update(authenticated=False, user=None, role=None)
