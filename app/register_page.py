"""Player self-registration form."""

from __future__ import annotations

from datetime import date

import streamlit as st

from app.state import get_store, persist_store
from app.ui.nav import go

_DONE_KEY = "register__done"


def show_register_page() -> None:
    st.markdown("## ✍️ Join the club")

    done = st.session_state.get(_DONE_KEY)
    if done:
        st.success(
            f"Thanks {done}! Your registration is under review. "
            "You can sign in once an admin approves it."
        )
        if st.button("Go to login", key="register__to_login"):
            st.session_state.pop(_DONE_KEY, None)
            go("Login")
        return

    with st.form("register_form"):
        name = st.text_input("Full name")
        email = st.text_input("Email", autocomplete="email")
        phone = st.text_input("Phone")
        dob = st.date_input(
            "Date of birth",
            value=date(2008, 1, 1),
            min_value=date(1940, 1, 1),
            max_value=date.today(),
        )
        sex = st.radio("Sex", ["Male", "Female"], horizontal=True)
        password = st.text_input("Password", type="password")
        confirm = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Register", type="primary")

    if not submitted:
        return

    name, email, phone = name.strip(), email.strip(), phone.strip()
    if not name or not email or not phone:
        st.warning("Name, email and phone are required.")
        return
    if not password or password != confirm:
        st.warning("Passwords do not match.")
        return

    store = get_store()
    try:
        player = store.register_player(
            name=name, email=email, dob=dob.isoformat(), phone=phone, sex=sex, password=password
        )
    except ValueError as exc:
        st.error(str(exc))
        return
    persist_store(store)
    st.session_state[_DONE_KEY] = player["name"]
    st.rerun()


__all__ = ["show_register_page"]
