"""Admin back-office."""

from __future__ import annotations

import logging
from datetime import time
from typing import Any, Dict, List

import pandas as pd
import streamlit as st

from app.admin_content import show_content_editor
from app.club_store import ORDER_STATUSES, PLAYER_STATUSES, ClubStore
from app.standings import standings_frame
from app.state import get_settings, get_store, is_admin, persist_store
from app.time_utils import to_utc, utc_iso

logger = logging.getLogger(__name__)


def _save(store: ClubStore, message: str) -> None:
    persist_store(store)
    st.toast(message)


# ---------------------------------------------------------------- overview
def _overview(store: ClubStore) -> None:
    stats = store.dashboard_stats()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Players", stats["players_total"])
    c2.metric("Pending registrations", stats["pending_registrations"])
    c3.metric("Upcoming matches", stats["upcoming_matches"])
    c4.metric("Revenue", f"{stats['revenue']} {get_settings().currency}")

    if stats["players_by_status"]:
        st.bar_chart(pd.Series(stats["players_by_status"], name="players"))

    st.subheader("Recent activity")
    if not store.admin_activity:
        st.caption("No activity yet.")
    for entry in store.admin_activity[:15]:
        st.caption(f"{entry.get('timestamp', '')[:16]} · {entry.get('message', '')}")


# ---------------------------------------------------------------- players
def _player_actions(store: ClubStore, player: Dict[str, Any], team_options: List[str]) -> None:
    pid = player["id"]
    status = player.get("status")
    cols = st.columns(4)
    if status == "pending":
        if cols[0].button("Approve", key=f"admin__approve_{pid}"):
            store.update_player_status(pid, "approved")
            _save(store, f"{player['name']} approved")
        if cols[1].button("Reject", key=f"admin__reject_{pid}"):
            store.update_player_status(pid, "rejected")
            _save(store, f"{player['name']} rejected")
    elif status == "validated":
        if cols[0].button("Verify documents", key=f"admin__docs_ok_{pid}"):
            store.verify_player_documents(pid, True)
            _save(store, "Documents verified")
        if cols[1].button("Reject documents", key=f"admin__docs_ko_{pid}"):
            store.verify_player_documents(pid, False)
            _save(store, "Documents rejected")
    if status in ("verified", "assigned"):
        current = player.get("team") or ""
        options = ["", *team_options]
        team = cols[2].selectbox(
            "Team",
            options,
            index=options.index(current) if current in options else 0,
            key=f"admin__team_{pid}",
        )
        if cols[3].button("Assign", key=f"admin__assign_{pid}") and team != current:
            store.assign_player_team(pid, team or None)
            _save(store, "Team updated")


def _players(store: ClubStore) -> None:
    status_filter = st.multiselect("Status", PLAYER_STATUSES, default=["pending", "validated"], key="admin__pstatus")
    rows = [p for p in store.players if not status_filter or p.get("status") in status_filter]
    st.dataframe(
        pd.DataFrame(rows, columns=["id", "name", "email", "dob", "category", "status", "team"]),
        hide_index=True,
        use_container_width=True,
    )
    team_options = store.known_categories()
    for player in rows:
        with st.expander(f"{player['name']} · {player.get('status')}"):
            docs = player.get("documents") or {}
            st.caption(" · ".join(f"{k}: {v or 'missing'}" for k, v in docs.items()))
            _player_actions(store, player, team_options)


# ---------------------------------------------------------------- matches
def _matches(store: ClubStore) -> None:
    settings = get_settings()
    with st.form("admin__add_match", clear_on_submit=True):
        st.subheader("Add match")
        c1, c2 = st.columns(2)
        opponent = c1.text_input("Opponent")
        category = c2.selectbox("Category", store.known_categories())
        day = c1.date_input("Date")
        kickoff = c2.time_input("Kick-off", value=time(18, 0))
        location = c1.text_input("Location")
        is_home = c2.checkbox("Home match", value=True)
        submitted = st.form_submit_button("Add match")
    if submitted:
        if not opponent.strip():
            st.warning("Opponent is required.")
        else:
            when = to_utc(day, kickoff, settings.timezone)
            store.add_record(
                "matches",
                {
                    "opponent": opponent.strip(),
                    "category": category,
                    "date": utc_iso(when),
                    "location": location.strip(),
                    "is_home": is_home,
                },
            )
            store.log_activity(f"Match vs '{opponent.strip()}' scheduled.")
            _save(store, "Match added")

    st.subheader("Results")
    for match in sorted(store.matches, key=lambda m: m.get("date") or ""):
        mid = match["id"]
        result = match.get("result") or {}
        label = f"{match.get('date', '')[:10]} · {match.get('category')} vs {match.get('opponent')}"
        with st.expander(label + (f" · {result.get('our_score')}-{result.get('opponent_score')}" if result else "")):
            c1, c2, c3, c4 = st.columns(4)
            ours = c1.number_input("Our sets", 0, 3, int(result.get("our_score") or 0), key=f"admin__our_{mid}")
            theirs = c2.number_input("Their sets", 0, 3, int(result.get("opponent_score") or 0), key=f"admin__opp_{mid}")
            if c3.button("Save result", key=f"admin__res_{mid}"):
                store.record_result(mid, int(ours), int(theirs))
                _save(store, "Result saved")
            if result and c4.button("Clear result", key=f"admin__clr_{mid}"):
                store.clear_result(mid)
                _save(store, "Result cleared")
            if not result:
                live = store.live_match_id == mid
                if st.toggle("Live now", value=live, key=f"admin__live_{mid}") != live:
                    store.set_live_match(None if live else mid)
                    _save(store, "Live match updated")
                if live:
                    score = match.get("live_score") or {}
                    l1, l2, l3 = st.columns(3)
                    our_sets = l1.number_input("Live: our sets", 0, 3, int(score.get("our_sets", 0)), key=f"admin__lo_{mid}")
                    opp_sets = l2.number_input("Live: their sets", 0, 3, int(score.get("opponent_sets", 0)), key=f"admin__lt_{mid}")
                    if l3.button("Push score", key=f"admin__push_{mid}"):
                        store.update_live_score(mid, {"our_sets": int(our_sets), "opponent_sets": int(opp_sets)})
                        _save(store, "Live score updated")


# ---------------------------------------------------------------- standings
def _standings_manager(store: ClubStore) -> None:
    st.caption("Choose which categories get a public standings table.")
    available = [c for c in store.known_categories() if c not in store.tracked_categories]
    c1, c2 = st.columns([3, 1])
    new_cat = c1.selectbox("Track category", available, key="admin__track_pick") if available else None
    if new_cat and c2.button("Track", key="admin__track_add"):
        store.add_tracked_category(new_cat)
        _save(store, f"Tracking {new_cat}")

    for category, rows in store.standings().items():
        with st.expander(category):
            st.dataframe(standings_frame(rows, store.club_name).drop(columns=["is_club"]), hide_index=True)
            if st.button("Stop tracking", key=f"admin__untrack_{category}"):
                store.remove_tracked_category(category)
                _save(store, f"Stopped tracking {category}")


# ---------------------------------------------------------------- categories
def _categories(store: ClubStore) -> None:
    st.caption("Players are categorised by birth year; the first matching rule wins.")
    df = pd.DataFrame(store.category_rules, columns=["name", "start_year", "end_year"])
    edited = st.data_editor(df, key="admin__rules", num_rows="dynamic", use_container_width=True, hide_index=True)
    if st.button("Save rules", key="admin__rules_save", type="primary"):
        rules = [r for r in edited.to_dict(orient="records") if r.get("name")]
        try:
            store.update_category_rules(
                {"name": r["name"], "start_year": int(r["start_year"]), "end_year": int(r["end_year"])} for r in rules
            )
        except (TypeError, ValueError) as exc:
            st.error(f"Invalid rule: {exc}")
            return
        store.log_activity("Category rules updated.")
        _save(store, "Category rules saved")


# ---------------------------------------------------------------- orders
def _orders(store: ClubStore) -> None:
    if not store.orders:
        st.caption("No orders yet.")
        return
    df = pd.DataFrame(
        [
            {
                "id": o["id"],
                "date": o.get("date", ""),
                "customer": (o.get("customer") or {}).get("name", ""),
                "email": (o.get("customer") or {}).get("email", ""),
                "items": sum(i.get("quantity", 0) for i in o.get("items", [])),
                "total": o.get("total", 0),
                "status": o.get("status", ""),
            }
            for o in store.orders
        ]
    )
    st.dataframe(df, hide_index=True, use_container_width=True)
    st.download_button(
        "Download CSV",
        df.to_csv(index=False).encode("utf-8"),
        file_name="orders.csv",
        mime="text/csv",
        key="admin__orders_csv",
    )
    for order in store.orders:
        oid = order["id"]
        c1, c2, c3 = st.columns([3, 2, 1])
        c1.markdown(f"**#{oid}** · {(order.get('customer') or {}).get('name', '')}")
        status = c2.selectbox(
            "Status",
            ORDER_STATUSES,
            index=ORDER_STATUSES.index(order["status"]) if order.get("status") in ORDER_STATUSES else 0,
            key=f"admin__ostatus_{oid}",
            label_visibility="collapsed",
        )
        if c3.button("Update", key=f"admin__oupd_{oid}") and status != order.get("status"):
            store.update_order_status(oid, status)
            _save(store, f"Order #{oid} updated")


# ---------------------------------------------------------------- settings
def _settings(store: ClubStore) -> None:
    general = store.general_settings
    with st.form("admin__general"):
        st.subheader("General")
        club_name = st.text_input("Club name", value=general.get("club_name", ""))
        logo_url = st.text_input("Logo URL", value=general.get("logo_url", ""))
        maintenance = st.checkbox("Maintenance mode", value=bool(general.get("is_maintenance_mode")))
        links = dict(general.get("social_links") or {})
        for network in ("facebook", "twitter", "instagram"):
            links[network] = st.text_input(network.capitalize(), value=links.get(network, ""))
        if st.form_submit_button("Save general settings"):
            store.update_section(
                "general_settings",
                {"club_name": club_name.strip(), "logo_url": logo_url.strip(),
                 "is_maintenance_mode": maintenance, "social_links": links},
            )
            store.log_activity("General settings updated.")
            _save(store, "Settings saved")

    home = store.home_page_content
    with st.form("admin__home"):
        st.subheader("Home page")
        values = {
            key: st.text_input(key.replace("_", " ").capitalize(), value=home.get(key, ""))
            for key in ("title", "subtitle", "cta_team", "cta_schedule", "hero_image_url")
        }
        if st.form_submit_button("Save home page"):
            store.update_section("home_page_content", values)
            _save(store, "Home page saved")

    info = store.club_info
    with st.form("admin__club_info"):
        st.subheader("Club info")
        history = st.text_area("History", value=info.get("history", ""))
        mission = st.text_area("Mission", value=info.get("mission", ""))
        if st.form_submit_button("Save club info"):
            store.update_section("club_info", {"history": history, "mission": mission})
            _save(store, "Club info saved")


_TABS = (
    ("Overview", _overview),
    ("Registrations", _players),
    ("Matches", _matches),
    ("Standings", _standings_manager),
    ("Categories", _categories),
    ("Orders", _orders),
    ("News", lambda s: show_content_editor("news", "News")),
    ("Teams", lambda s: show_content_editor("teams", "Teams")),
    ("Products", lambda s: show_content_editor("products", "Products")),
    ("Sponsors", lambda s: show_content_editor("sponsors", "Sponsors")),
    ("Staff", lambda s: show_content_editor("staff", "Staff")),
    ("Settings", _settings),
)


def show_admin_page() -> None:
    if not is_admin():
        st.warning("Admin access only. Please sign in.")
        return
    st.markdown("## 🛠️ Admin")
    store = get_store()
    tabs = st.tabs([label for label, _ in _TABS])
    for tab, (_, render) in zip(tabs, _TABS):
        with tab:
            render(store)


__all__ = ["show_admin_page"]
