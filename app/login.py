"""Sign-in page for the admin back-office and the player space."""

from __future__ import annotations

import logging

import streamlit as st

from app.auth import AuthenticationError, authenticate, login_with_google
from app.state import (
    ensure_auth_state,
    get_settings,
    get_store,
    persist_store,
    sign_in_user,
    sign_out_user,
)
from app.ui.nav import go

logger = logging.getLogger(__name__)

_LAST_EMAIL_KEY = "login__last_email"
_FORM_KEY = "login_form"


def logout() -> None:
    """Clear the session user and return to the home page."""
    sign_out_user()
    st.session_state["current_page"] = "Home"


def _landing_for(user: dict) -> str:
    return "Admin" if user.get("role") == "admin" else "My Space"


def _google_form() -> None:
    with st.expander("Sign in with a Google credential"):
        with st.form("login_google_form"):
            credential = st.text_input("Google ID token", type="password")
            submitted = st.form_submit_button("Continue with Google")
        if not submitted:
            return
        store = get_store()
        try:
            user = login_with_google(store, credential.strip())
        except AuthenticationError as exc:
            st.error(str(exc))
            return
        persist_store(store)
        sign_in_user(user)
        go(_landing_for(user))


def show_login_page() -> None:
    auth_state = ensure_auth_state()
    if auth_state["authenticated"]:
        user = auth_state["user"] or {}
        st.info(f"Signed in as {user.get('email', '')}.")
        if st.button("Sign out", key="login__signout"):
            logout()
            st.rerun()
        return

    st.markdown("## 🔐 Sign in")
    last_error = auth_state.pop("last_error", None)

    with st.form(_FORM_KEY, clear_on_submit=False):
        st.caption("Admins sign in with 'admin' or the club email. Players use their registration email.")
        email = st.text_input(
            "Email",
            value=st.session_state.get(_LAST_EMAIL_KEY, ""),
            autocomplete="email",
            placeholder="you@example.com",
        )
        password = st.text_input(
            "Password",
            type="password",
            autocomplete="current-password",
            placeholder="Enter your password",
        )
        submitted = st.form_submit_button("Sign in", type="primary")

    if last_error:
        st.warning(last_error)

    if submitted:
        email = email.strip()
        st.session_state[_LAST_EMAIL_KEY] = email
        if not email:
            st.warning("Email is required.")
            st.stop()
        try:
            user = authenticate(get_store(), get_settings(), email, password)
        except AuthenticationError as exc:
            logger.info("Rejected sign-in for %s", email)
            st.error(str(exc))
            st.stop()
        sign_in_user(user)
        go(_landing_for(user))

    _google_form()

    st.markdown("---")
    if st.button("No account yet? Register", key="login__register"):
        go("Register")


__all__ = ["show_login_page", "logout"]
