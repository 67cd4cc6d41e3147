"""My Space: the signed-in player's status, documents and contact details."""

from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from app.club_store import DOCUMENT_KEYS
from app.state import current_user, get_store, persist_store, sign_in_user

_DOC_LABELS = {
    "id_card": "ID card",
    "parental_auth": "Parental authorisation",
    "medical_cert": "Medical certificate",
}

_STATUS_HINTS = {
    "pending": "Your registration is under review.",
    "approved": "Approved. Upload your documents to continue.",
    "rejected": "Your registration was rejected. Contact the club for details.",
    "validated": "Documents submitted. Waiting for verification.",
    "verified": "Documents verified. A coach will assign you to a team.",
    "assigned": "You are on a team. See you at practice!",
}


def _status_panel(player: Dict[str, Any]) -> None:
    status = player.get("status", "pending")
    c1, c2, c3 = st.columns(3)
    c1.metric("Status", status.capitalize())
    c2.metric("Category", player.get("category") or "—")
    c3.metric("Team", player.get("team") or "—")
    st.caption(_STATUS_HINTS.get(status, ""))
    if not player.get("is_verified"):
        st.warning("Your email address is not verified yet.")
        if st.button("Verify my email", key="me__verify"):
            store = get_store()
            store.verify_player_email(player["id"])
            persist_store(store)
            st.rerun()


def _notifications(player: Dict[str, Any]) -> None:
    notes = player.get("notifications") or []
    st.subheader(f"Notifications ({len(notes)})")
    if not notes:
        st.caption("Nothing new.")
    for note in reversed(notes):
        st.info(note)


def _documents(player: Dict[str, Any]) -> None:
    st.subheader("Documents")
    current = player.get("documents") or {}
    for key in DOCUMENT_KEYS:
        st.caption(f"{_DOC_LABELS[key]}: {current.get(key) or 'missing'}")

    if player.get("status") not in ("approved", "validated", "verified"):
        return
    with st.form("me__documents"):
        uploads = {key: st.file_uploader(_DOC_LABELS[key], key=f"me__doc_{key}") for key in DOCUMENT_KEYS}
        submitted = st.form_submit_button("Submit documents")
    if submitted:
        names = {key: (f.name if f is not None else current.get(key)) for key, f in uploads.items()}
        if not all(names.values()):
            st.warning("Please provide every document.")
            return
        store = get_store()
        store.add_player_documents(player["id"], names)
        persist_store(store)
        st.success("Documents submitted for validation.")
        st.rerun()


def _contact(player: Dict[str, Any]) -> None:
    st.subheader("Contact details")
    with st.form("me__contact"):
        name = st.text_input("Name", value=player.get("name", ""))
        email = st.text_input("Email", value=player.get("email", ""))
        phone = st.text_input("Phone", value=player.get("phone", ""))
        submitted = st.form_submit_button("Save")
    if not submitted:
        return
    store = get_store()
    try:
        updated = store.update_player_contact(player["id"], name=name.strip(), email=email.strip(), phone=phone.strip())
    except ValueError as exc:
        st.error(str(exc))
        return
    persist_store(store)
    sign_in_user({"id": updated["id"], "role": "player", "email": updated["email"], "name": updated["name"]})
    st.toast("Contact details saved")


def show_player_dashboard() -> None:
    user = current_user()
    if not user or user.get("role") != "player":
        st.warning("Sign in as a player to see your space.")
        return
    player = get_store().get("players", user["id"])
    if player is None:
        st.error("Your player record could not be found.")
        return

    st.markdown(f"## 👋 Welcome, {player.get('name', '')}")
    _status_panel(player)
    tab_notes, tab_docs, tab_contact = st.tabs(["Notifications", "Documents", "Settings"])
    with tab_notes:
        _notifications(player)
    with tab_docs:
        _documents(player)
    with tab_contact:
        _contact(player)


__all__ = ["show_player_dashboard"]
