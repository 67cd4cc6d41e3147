"""Site configuration read from Streamlit secrets, then environment, then defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

try:
    import streamlit as st
except Exception:  # pragma: no cover - allow headless usage (tests / CLI)
    st = None

from app.time_utils import DEFAULT_TZ


@dataclass(frozen=True)
class Settings:
    club_name: str = "Mouloudia Tiznit"
    admin_email: str = "admin@mouloudiatiznit.com"
    admin_password: str = "password"
    currency: str = "MAD"
    timezone: str = DEFAULT_TZ


def _secret(section: str, key: str) -> Optional[Any]:
    if st is None:
        return None
    try:
        return st.secrets[section][key]
    except Exception:
        return None


def _lookup(section: str, key: str, env: str, default: str) -> str:
    value = _secret(section, key)
    return str(value or os.getenv(env) or default)


def load_settings() -> Settings:
    """
    Prefer Streamlit secrets:
      st.secrets["club"]["name"], st.secrets["admin"]["password"], ...

    Fallback to env:
      CLUB_NAME, CLUB_ADMIN_EMAIL, CLUB_ADMIN_PASSWORD, CLUB_CURRENCY, CLUB_TZ
    """
    defaults = Settings()
    return Settings(
        club_name=_lookup("club", "name", "CLUB_NAME", defaults.club_name),
        admin_email=_lookup("admin", "email", "CLUB_ADMIN_EMAIL", defaults.admin_email),
        admin_password=_lookup("admin", "password", "CLUB_ADMIN_PASSWORD", defaults.admin_password),
        currency=_lookup("store", "currency", "CLUB_CURRENCY", defaults.currency),
        timezone=_lookup("club", "timezone", "CLUB_TZ", defaults.timezone),
    )


__all__ = ["Settings", "load_settings"]
