from datetime import datetime, timedelta, timezone

import pytest

from app import club_store
from app.club_store import ClubStore


@pytest.fixture
def store():
    return ClubStore()


def test_seed_store_is_populated(store):
    assert store.club_name == "Mouloudia Tiznit"
    assert len(store.players) == 6
    assert store.tracked_categories == ["Dames", "U18 Garçons", "U18 Filles", "U16 Garçons", "U16 Filles"]


def test_stores_do_not_share_state():
    a, b = ClubStore(), ClubStore()
    a.players.clear()
    assert len(b.players) == 6


def test_record_crud(store):
    rec = store.add_record("news", {"title": "Cup final", "summary": "", "date": "2024-05-01"})
    assert rec["id"] == 3
    store.update_record("news", {**rec, "title": "Cup final!"})
    assert store.get("news", 3)["title"] == "Cup final!"
    assert store.delete_record("news", 3) is True
    assert store.delete_record("news", 3) is False
    with pytest.raises(KeyError):
        store.update_record("news", {"id": 99, "title": "x"})
    with pytest.raises(ValueError):
        store.add_record("bogus", {})


def test_register_player_is_pending_and_categorised(store):
    player = store.register_player(
        name="Nora Idrissi", email="nora@example.com", dob="2010-04-02", phone="0600", sex="Female"
    )
    assert player["id"] == 7
    assert player["status"] == "pending"
    assert player["category"] == "U16 Garçons"
    assert player["notifications"]
    assert store.admin_activity[0]["message"].startswith("New player 'Nora Idrissi'")


def test_register_duplicate_email_rejected(store):
    with pytest.raises(ValueError):
        store.register_player(
            name="Copy", email="yasmine.elghazi@example.com", dob="2004-01-01", phone="1", sex="Female"
        )


def test_player_lifecycle(store):
    pid = store.register_player(
        name="Omar Tazi", email="omar@example.com", dob="2008-02-02", phone="1", sex="Male"
    )["id"]
    store.update_player_status(pid, "approved")
    store.add_player_documents(pid, {"id_card": "id.pdf", "parental_auth": "auth.pdf", "medical_cert": "med.pdf"})
    assert store.get("players", pid)["status"] == "validated"
    store.verify_player_documents(pid, False)
    assert store.get("players", pid)["status"] == "approved"
    store.verify_player_documents(pid, True)
    assert store.get("players", pid)["status"] == "verified"
    store.assign_player_team(pid, "U18 Garçons")
    player = store.get("players", pid)
    assert player["status"] == "assigned"
    assert player["team"] == "U18 Garçons"
    store.assign_player_team(pid, None)
    assert store.get("players", pid)["status"] == "verified"
    assert len(player["notifications"]) >= 5


def test_unknown_status_rejected(store):
    with pytest.raises(ValueError):
        store.update_player_status(1, "retired")
    with pytest.raises(KeyError):
        store.update_player_status(999, "approved")


def test_update_contact_rejects_taken_email(store):
    with pytest.raises(ValueError):
        store.update_player_contact(1, name="Karim", email="yasmine.elghazi@example.com", phone="1")
    store.update_player_contact(1, name="Karim A.", email="karim@example.com", phone="2")
    assert store.find_player_by_email("karim@example.com")["name"] == "Karim A."


def test_google_player_created_once(store):
    first = store.find_or_create_google_player(email="g@example.com", name="G User")
    again = store.find_or_create_google_player(email="g@example.com", name="Other")
    assert first is again
    assert first["status"] == "approved"
    assert first["auth_provider"] == "google"


def test_category_rules_recategorise_players(store):
    store.update_category_rules([{"name": "Everyone", "start_year": 1900, "end_year": 2100}])
    assert {p["category"] for p in store.players} == {"Everyone"}
    store.delete_category_rule("Everyone")
    assert {p["category"] for p in store.players} == {"Uncategorized"}
    store.add_category_rule({"name": "Old", "start_year": 1900, "end_year": 2005})
    with pytest.raises(ValueError):
        store.add_category_rule({"name": "Old", "start_year": 1900, "end_year": 2005})
    assert store.get("players", 1)["category"] == "Old"


def test_seed_standings(store):
    tables = store.standings()
    assert set(tables) == set(store.tracked_categories)
    dames = {r.team_name: r for r in tables["Dames"]}
    assert dames["Mouloudia Tiznit"].points == 4
    assert dames["OCS"].points == 2
    assert dames["AS FAR"].points == 0
    assert tables["U16 Filles"] == []


def test_standings_cached_until_inputs_change(store, monkeypatch):
    calls = []
    real = club_store.compute_standings
    monkeypatch.setattr(club_store, "compute_standings", lambda *a: calls.append(a) or real(*a))
    first = store.standings()
    assert store.standings() == first
    assert len(calls) == 1
    store.record_result(5, 3, 1)
    store.add_tracked_category("U20")
    second = store.standings()
    assert len(calls) == 2
    assert second != first
    u20 = {r.team_name: r for r in second["U20"]}
    assert u20["Mouloudia Tiznit"].points == 3
    store.remove_tracked_category("U20")
    assert "U20" not in store.standings()


def test_renaming_club_changes_standings(store):
    store.update_section("general_settings", {"club_name": "MT"})
    names = {r.team_name for r in store.standings()["Dames"]}
    assert "MT" in names


def test_clear_result(store):
    store.clear_result(4)
    dames = {r.team_name: r for r in store.standings()["Dames"]}
    assert "OCS" not in dames


def test_live_match(store):
    store.set_live_match(5)
    store.update_live_score(5, {"our_sets": 1, "opponent_sets": 0})
    assert store.get("matches", 5)["live_score"] == {"our_sets": 1, "opponent_sets": 0}
    with pytest.raises(KeyError):
        store.set_live_match(404)
    store.set_live_match(None)
    assert store.live_match_id is None


def test_orders(store):
    oid = store.add_order({"customer": {}, "items": [], "total": 100, "status": "Pending", "date": ""})
    assert oid == 2
    assert store.admin_activity[0]["link"] == {"page": "orders", "id": 2}
    store.update_order_status(oid, "Cancelled")
    with pytest.raises(ValueError):
        store.update_order_status(oid, "Lost")
    assert store.dashboard_stats()["revenue"] == 750


def test_dashboard_stats(store):
    stats = store.dashboard_stats()
    assert stats["players_total"] == 6
    assert stats["pending_registrations"] == 1
    assert stats["upcoming_matches"] == 4
    assert stats["orders_by_status"] == {"Pending": 1}
    later = datetime.now(timezone.utc) + timedelta(days=60)
    assert store.dashboard_stats(now=later)["upcoming_matches"] == 0


def test_update_section_rejects_unknown(store):
    with pytest.raises(ValueError):
        store.update_section("secrets", {})


def test_snapshot_round_trip_is_detached(store):
    snap = store.snapshot()
    snap["players"].clear()
    assert len(store.players) == 6
    restored = ClubStore.from_snapshot({"news": [], "unknown": [1], "live_match_id": None})
    assert restored.news == []
    assert len(restored.players) == 6
    assert not hasattr(restored, "unknown")


def test_verify_player_email(store):
    player = store.verify_player_email(6)
    assert player["is_verified"] is True
    assert player["notifications"][-1] == "Your email has been verified."


def test_mutating_returned_standings_leaves_cache_intact(store):
    tables = store.standings()
    tables["Dames"][0].points = 99
    tables["Dames"].clear()
    tables.pop("U18 Garçons")
    again = store.standings()
    assert "U18 Garçons" in again
    assert {r.team_name: r.points for r in again["Dames"]}["Mouloudia Tiznit"] == 4
