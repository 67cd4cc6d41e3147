"""Login rules for the admin back-office and the player space."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, Dict, Optional

from app.club_store import ClubStore
from app.config import Settings

logger = logging.getLogger(__name__)

ADMIN_ALIAS = "admin"
BLOCKED_PLAYER_STATUSES = ("pending", "rejected")

__all__ = [
    "AuthenticationError",
    "authenticate",
    "decode_jwt_payload",
    "login_with_google",
]


class AuthenticationError(Exception):
    """Raised when credentials are rejected."""


def _admin_user(settings: Settings) -> Dict[str, Any]:
    return {"id": "admin-user", "role": "admin", "email": settings.admin_email}


def _player_user(player: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": player["id"], "role": "player", "email": player["email"], "name": player.get("name")}


def authenticate(store: ClubStore, settings: Settings, email: str, password: str) -> Dict[str, Any]:
    """Return the session user for ``email``/``password``.

    ``admin`` (any case) or the configured admin email with the admin password
    logs in as admin. Players log in by email once their registration is past
    the ``pending``/``rejected`` states; player passwords are not checked.
    """
    login = (email or "").strip()
    is_admin_login = login.lower() == ADMIN_ALIAS or login == settings.admin_email
    if is_admin_login:
        if password == settings.admin_password:
            logger.info("Admin signed in")
            return _admin_user(settings)
        raise AuthenticationError("Invalid credentials or registration not approved.")

    player = store.find_player_by_email(login)
    if player and player.get("status") not in BLOCKED_PLAYER_STATUSES:
        logger.info("Player %s signed in", player["id"])
        return _player_user(player)
    raise AuthenticationError("Invalid credentials or registration not approved.")


def decode_jwt_payload(token: str) -> Optional[Dict[str, Any]]:
    """Decode the (unverified) payload segment of a JWT."""
    try:
        segment = token.split(".")[1]
    except (AttributeError, IndexError):
        return None
    padded = segment + "=" * (-len(segment) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        logger.warning("Could not decode Google credential: %s", exc)
        return None
    return data if isinstance(data, dict) else None


def login_with_google(store: ClubStore, credential: str) -> Dict[str, Any]:
    payload = decode_jwt_payload(credential)
    if not payload or not payload.get("email") or not payload.get("name"):
        raise AuthenticationError("Invalid Google credential.")
    player = store.find_or_create_google_player(email=payload["email"], name=payload["name"])
    return _player_user(player)
