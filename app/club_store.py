"""In-memory club data store.

``ClubStore`` owns every collection the site shows (players, matches, news,
products, orders, ...). Pages receive it explicitly through
:func:`app.state.get_store`; nothing here touches Streamlit.
"""

from __future__ import annotations

import copy
import logging
from collections import Counter
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from app.categories import category_for_dob, clean_rule, known_categories
from app.fixtures import seed_data
from app.standings import StandingRow, compute_standings
from app.time_utils import parse_dt

logger = logging.getLogger(__name__)

PLAYER_STATUSES = ("pending", "approved", "rejected", "validated", "verified", "assigned")
ORDER_STATUSES = ("Pending", "Shipped", "Delivered", "Cancelled")
SPONSOR_TIERS = ("Platinum", "Gold", "Silver")
DOCUMENT_KEYS = ("id_card", "parental_auth", "medical_cert")

# Collections with integer ids and plain add/update/delete semantics.
RECORD_COLLECTIONS = ("players", "news", "matches", "sponsors", "teams", "staff", "products", "orders")
SETTINGS_SECTIONS = ("general_settings", "home_page_content", "club_info")

__all__ = [
    "ClubStore",
    "PLAYER_STATUSES",
    "ORDER_STATUSES",
    "SPONSOR_TIERS",
    "DOCUMENT_KEYS",
]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _avatar_url(name: str) -> str:
    return f"https://api.dicebear.com/8.x/initials/svg?seed={name}"


class ClubStore:
    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        base = seed_data() if data is None else copy.deepcopy(dict(data))
        self.players: List[Dict[str, Any]] = base.get("players", [])
        self.news: List[Dict[str, Any]] = base.get("news", [])
        self.matches: List[Dict[str, Any]] = base.get("matches", [])
        self.sponsors: List[Dict[str, Any]] = base.get("sponsors", [])
        self.teams: List[Dict[str, Any]] = base.get("teams", [])
        self.staff: List[Dict[str, Any]] = base.get("staff", [])
        self.products: List[Dict[str, Any]] = base.get("products", [])
        self.orders: List[Dict[str, Any]] = base.get("orders", [])
        self.category_rules: List[Dict[str, Any]] = base.get("category_rules", [])
        self.general_settings: Dict[str, Any] = base.get("general_settings", {})
        self.home_page_content: Dict[str, Any] = base.get("home_page_content", {})
        self.club_info: Dict[str, Any] = base.get("club_info", {})
        self.admin_activity: List[Dict[str, Any]] = base.get("admin_activity", [])
        self.tracked_categories: List[str] = list(base.get("tracked_categories", []))
        self.live_match_id: Optional[int] = base.get("live_match_id")
        self._standings_cache: Optional[Tuple[Any, Dict[str, List[StandingRow]]]] = None

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------
    @classmethod
    def from_snapshot(cls, snapshot: Mapping[str, Any]) -> "ClubStore":
        """Seed a store and overlay whatever collections ``snapshot`` carries."""
        data = seed_data()
        for key, value in snapshot.items():
            if key in data and value is not None:
                data[key] = value
        return cls(data)

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(
            {
                **{name: getattr(self, name) for name in RECORD_COLLECTIONS},
                **{name: getattr(self, name) for name in SETTINGS_SECTIONS},
                "category_rules": self.category_rules,
                "admin_activity": self.admin_activity,
                "tracked_categories": self.tracked_categories,
                "live_match_id": self.live_match_id,
            }
        )

    # ------------------------------------------------------------------
    # Generic record helpers
    # ------------------------------------------------------------------
    def _collection(self, name: str) -> List[Dict[str, Any]]:
        if name not in RECORD_COLLECTIONS:
            raise ValueError(f"Unknown collection: {name}")
        return getattr(self, name)

    @staticmethod
    def _next_id(rows: Iterable[Mapping[str, Any]]) -> int:
        return max((int(r.get("id") or 0) for r in rows), default=0) + 1

    def get(self, collection: str, record_id: Any) -> Optional[Dict[str, Any]]:
        for row in self._collection(collection):
            if row.get("id") == record_id:
                return row
        return None

    def _require(self, collection: str, record_id: Any) -> Dict[str, Any]:
        row = self.get(collection, record_id)
        if row is None:
            raise KeyError(f"{collection} record {record_id!r} not found")
        return row

    def add_record(self, collection: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        rows = self._collection(collection)
        record = dict(payload)
        record["id"] = self._next_id(rows)
        rows.append(record)
        logger.info("Added %s #%s", collection, record["id"])
        return record

    def update_record(self, collection: str, record: Mapping[str, Any]) -> Dict[str, Any]:
        rows = self._collection(collection)
        record_id = record.get("id")
        for idx, row in enumerate(rows):
            if row.get("id") == record_id:
                rows[idx] = dict(record)
                logger.info("Updated %s #%s", collection, record_id)
                return rows[idx]
        raise KeyError(f"{collection} record {record_id!r} not found")

    def delete_record(self, collection: str, record_id: Any) -> bool:
        rows = self._collection(collection)
        kept = [r for r in rows if r.get("id") != record_id]
        removed = len(kept) != len(rows)
        rows[:] = kept
        if removed:
            logger.info("Deleted %s #%s", collection, record_id)
        return removed

    def log_activity(self, message: str, link: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "id": self._next_id(self.admin_activity),
            "timestamp": _now_iso(),
            "message": message,
        }
        if link:
            entry["link"] = link
        self.admin_activity.insert(0, entry)
        logger.info("Admin activity: %s", message)
        return entry

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------
    def find_player_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        for player in self.players:
            if player.get("email") == email:
                return player
        return None

    def _new_player(self, *, name: str, email: str, dob: str, phone: str, sex: str) -> Dict[str, Any]:
        return {
            "name": name,
            "email": email,
            "sex": sex,
            "dob": dob,
            "phone": phone,
            "status": "pending",
            "category": category_for_dob(dob, self.category_rules),
            "team": None,
            "documents": {key: None for key in DOCUMENT_KEYS},
            "notifications": [],
            "is_verified": False,
            "auth_provider": "email",
            "position": "Outside Hitter",
            "number": 0,
            "image_url": _avatar_url(name),
            "height": "",
            "bio": "",
            "stats": {"matches_played": 0, "points": 0, "blocks": 0, "aces": 0},
        }

    def register_player(
        self,
        *,
        name: str,
        email: str,
        dob: str,
        phone: str,
        sex: str,
        password: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a pending player from the public registration form.

        Raises ``ValueError`` when ``email`` is already registered.
        """
        if self.find_player_by_email(email) is not None:
            raise ValueError(f"An account with email {email} already exists")
        player = self._new_player(name=name, email=email, dob=dob, phone=phone, sex=sex)
        player["notifications"].append(
            "Welcome! Your registration is under review. Please verify your email address."
        )
        record = self.add_record("players", player)
        self.log_activity(f"New player '{name}' registered and is pending approval.")
        return record

    def find_or_create_google_player(self, *, email: str, name: str) -> Dict[str, Any]:
        existing = self.find_player_by_email(email)
        if existing is not None:
            return existing
        player = self._new_player(name=name, email=email, dob=_now_iso(), phone="", sex="Male")
        player.update(status="approved", is_verified=True, auth_provider="google")
        player["notifications"].append(
            "Welcome! Your account was created with Google. Please upload your documents to continue."
        )
        record = self.add_record("players", player)
        self.log_activity(f"New player '{name}' registered via Google.")
        return record

    def _notify_player(self, player: Dict[str, Any], message: str) -> None:
        player.setdefault("notifications", []).append(message)

    def verify_player_email(self, player_id: int) -> Dict[str, Any]:
        player = self._require("players", player_id)
        player["is_verified"] = True
        self._notify_player(player, "Your email has been verified.")
        return player

    def update_player_status(self, player_id: int, status: str) -> Dict[str, Any]:
        if status not in PLAYER_STATUSES:
            raise ValueError(f"Unknown player status: {status}")
        player = self._require("players", player_id)
        player["status"] = status
        self._notify_player(player, f"Your status has been updated to {status}.")
        self.log_activity(f"Player status for {player['name']} updated to {status}.")
        return player

    def verify_player_documents(self, player_id: int, approved: bool) -> Dict[str, Any]:
        player = self._require("players", player_id)
        player["status"] = "verified" if approved else "approved"
        self._notify_player(
            player,
            "Your documents have been verified."
            if approved
            else "Your documents were rejected. Please review and re-upload.",
        )
        self.log_activity(f"Player {player['name']}'s docs {'verified' if approved else 'rejected'}.")
        return player

    def assign_player_team(self, player_id: int, team: Optional[str]) -> Dict[str, Any]:
        player = self._require("players", player_id)
        player["team"] = team or None
        player["status"] = "assigned" if team else "verified"
        self._notify_player(
            player,
            f"You have been assigned to team {team}." if team else "You have been unassigned from your team.",
        )
        self.log_activity(f"Player {player['name']} assigned to {team}.")
        return player

    def add_player_documents(self, player_id: int, documents: Mapping[str, Optional[str]]) -> Dict[str, Any]:
        player = self._require("players", player_id)
        player["documents"] = {key: documents.get(key) for key in DOCUMENT_KEYS}
        player["status"] = "validated"
        self._notify_player(player, "Your documents have been submitted for validation.")
        self.log_activity(f"Player {player['name']} submitted documents.")
        return player

    def update_player_contact(self, player_id: int, *, name: str, email: str, phone: str) -> Dict[str, Any]:
        player = self._require("players", player_id)
        other = self.find_player_by_email(email)
        if other is not None and other is not player:
            raise ValueError(f"An account with email {email} already exists")
        player.update(name=name, email=email, phone=phone)
        return player

    # ------------------------------------------------------------------
    # Category rules
    # ------------------------------------------------------------------
    def _apply_rules(self, rules: List[Dict[str, Any]]) -> None:
        self.category_rules = rules
        for player in self.players:
            player["category"] = category_for_dob(player.get("dob"), rules)

    def add_category_rule(self, rule: Mapping[str, Any]) -> None:
        clean = clean_rule(rule)
        if any(r["name"] == clean["name"] for r in self.category_rules):
            raise ValueError(f"Category '{clean['name']}' already exists")
        self._apply_rules([*self.category_rules, clean])

    def update_category_rules(self, rules: Iterable[Mapping[str, Any]]) -> None:
        self._apply_rules([clean_rule(r) for r in rules])

    def delete_category_rule(self, name: str) -> None:
        self._apply_rules([r for r in self.category_rules if r["name"] != name])

    def known_categories(self) -> List[str]:
        return known_categories(self.teams, self.category_rules)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------
    def add_order(self, payload: Mapping[str, Any]) -> int:
        order = self.add_record("orders", payload)
        self.log_activity(f"New order #{order['id']} placed.", link={"page": "orders", "id": order["id"]})
        return order["id"]

    def update_order_status(self, order_id: int, status: str) -> Dict[str, Any]:
        if status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status}")
        order = self._require("orders", order_id)
        order["status"] = status
        self.log_activity(f"Order #{order_id} status updated to {status}.")
        return order

    # ------------------------------------------------------------------
    # Standings
    # ------------------------------------------------------------------
    @property
    def club_name(self) -> str:
        return self.general_settings.get("club_name", "")

    def add_tracked_category(self, category: str) -> None:
        if category not in self.tracked_categories:
            self.tracked_categories.append(category)
        self.log_activity(f"Started tracking standings for category '{category}'.")

    def remove_tracked_category(self, category: str) -> None:
        self.tracked_categories = [c for c in self.tracked_categories if c != category]
        self.log_activity(f"Stopped tracking standings for category '{category}'.")

    def _standings_fingerprint(self) -> Tuple[Any, ...]:
        completed = tuple(
            (m.get("category"), m.get("opponent"), m["result"].get("our_score"), m["result"].get("opponent_score"))
            for m in self.matches
            if m.get("result")
        )
        return (self.club_name, tuple(self.tracked_categories), completed)

    def standings(self) -> Dict[str, List[StandingRow]]:
        """Tables for the tracked categories, recomputed only when inputs change.

        Callers get fresh row objects; the cached tables are never handed out.
        """
        key = self._standings_fingerprint()
        if self._standings_cache is None or self._standings_cache[0] != key:
            tables = compute_standings(self.matches, self.tracked_categories, self.club_name)
            self._standings_cache = (key, tables)
        return {cat: [replace(row) for row in rows] for cat, rows in self._standings_cache[1].items()}

    # ------------------------------------------------------------------
    # Matches / live score
    # ------------------------------------------------------------------
    def record_result(self, match_id: int, our_score: int, opponent_score: int) -> Dict[str, Any]:
        match = self._require("matches", match_id)
        match["result"] = {"our_score": int(our_score), "opponent_score": int(opponent_score)}
        self.log_activity(f"Result recorded vs '{match.get('opponent')}': {our_score}-{opponent_score}.")
        return match

    def clear_result(self, match_id: int) -> Dict[str, Any]:
        match = self._require("matches", match_id)
        match.pop("result", None)
        return match

    def set_live_match(self, match_id: Optional[int]) -> None:
        if match_id is not None:
            self._require("matches", match_id)
        self.live_match_id = match_id

    def update_live_score(self, match_id: int, score: Mapping[str, Any]) -> Dict[str, Any]:
        match = self._require("matches", match_id)
        match["live_score"] = dict(score)
        return match

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def update_section(self, section: str, values: Mapping[str, Any]) -> Dict[str, Any]:
        if section not in SETTINGS_SECTIONS:
            raise ValueError(f"Unknown settings section: {section}")
        target: Dict[str, Any] = getattr(self, section)
        target.update(values)
        return target

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------
    def dashboard_stats(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        by_status = Counter(p.get("status") for p in self.players)
        orders_by_status = Counter(o.get("status") for o in self.orders)
        upcoming = 0
        for m in self.matches:
            when = parse_dt(m.get("date"))
            if when is not None and when >= now and not m.get("result"):
                upcoming += 1
        revenue = sum(o.get("total", 0) for o in self.orders if o.get("status") != "Cancelled")
        return {
            "players_total": len(self.players),
            "players_by_status": dict(by_status),
            "pending_registrations": by_status.get("pending", 0),
            "upcoming_matches": upcoming,
            "orders_by_status": dict(orders_by_status),
            "revenue": revenue,
        }

