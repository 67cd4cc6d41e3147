"""Supabase client construction for optional snapshot persistence.

Persistence is opt-in: without credentials :func:`get_client` returns ``None``
and the site keeps running on its in-memory store.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Dict, Optional

import httpx
from supabase import Client, ClientOptions, SupabaseException, create_client

try:
    import streamlit as st
except Exception:  # pragma: no cover - allow headless usage (tests / CLI)
    st = None

logger = logging.getLogger(__name__)


class SupabaseConfigError(RuntimeError):
    """Raised when Supabase credentials are missing or rejected."""


class SupabaseConnectionError(RuntimeError):
    """Raised when the client cannot reach Supabase within the timeout window."""


_MISSING_CONFIG_MSG = (
    "Supabase secrets missing. Add `[supabase].url` and `[supabase].anon_key` to "
    "`.streamlit/secrets.toml` or set SUPABASE_URL and SUPABASE_ANON_KEY."
)


def read_supabase_config() -> Optional[Dict[str, str]]:
    """Return ``{"url", "anon_key"}`` from secrets or env, ``None`` when absent."""
    url = key = None
    if st is not None:
        try:
            url = st.secrets["supabase"]["url"]
            key = st.secrets["supabase"]["anon_key"]
        except Exception:
            pass
    url = url or os.getenv("SUPABASE_URL")
    key = key or os.getenv("SUPABASE_ANON_KEY")
    if not url or not key:
        return None
    return {"url": url, "anon_key": key}


def is_configured() -> bool:
    return read_supabase_config() is not None


def _client_options() -> ClientOptions:
    timeout = httpx.Timeout(10.0, connect=5.0)
    return ClientOptions(
        httpx_client=httpx.Client(timeout=timeout),
        postgrest_client_timeout=timeout,
        storage_client_timeout=timeout,
        function_client_timeout=timeout,
    )


def _close(options: ClientOptions) -> None:
    http = getattr(options, "httpx_client", None)
    if http is not None:
        http.close()


def create_supabase_client(cfg: Dict[str, str]) -> Client:
    """Build a client, translating transport failures into config/connection errors."""
    options = _client_options()
    try:
        return create_client(cfg["url"], cfg["anon_key"], options=options)
    except SupabaseException as exc:
        _close(options)
        raise SupabaseConfigError(str(exc) or _MISSING_CONFIG_MSG) from exc
    except httpx.HTTPStatusError as exc:
        _close(options)
        status = exc.response.status_code if exc.response is not None else "unknown"
        logger.error("Supabase answered HTTP %s: %s", status, exc)
        raise SupabaseConfigError(
            f"Supabase responded with HTTP {status}. Check the URL and anon key."
        ) from exc
    except httpx.HTTPError as exc:
        _close(options)
        logger.error("Supabase connection failed: %s", exc)
        raise SupabaseConnectionError("Unable to reach Supabase right now.") from exc


@lru_cache(maxsize=1)
def _cached_client(url: str, anon_key: str) -> Client:
    return create_supabase_client({"url": url, "anon_key": anon_key})


def get_client() -> Optional[Client]:
    """Return the shared client, or ``None`` when persistence is not configured."""
    cfg = read_supabase_config()
    if cfg is None:
        return None
    return _cached_client(cfg["url"], cfg["anon_key"])


__all__ = [
    "get_client",
    "is_configured",
    "read_supabase_config",
    "create_supabase_client",
    "SupabaseConfigError",
    "SupabaseConnectionError",
]
