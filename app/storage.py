# app/storage.py: optional Supabase snapshot of the in-memory club store
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from postgrest.exceptions import APIError

from app.data_sanitize import assert_jsonable, clean_jsonable
from app.db_tables import KV, KV_KEYS, RECORD_TABLES
from app.utils import supa

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def _log_notifier(msg: str) -> None:
    logger.error(msg)


def _api_message(err: APIError) -> str:
    return getattr(err, "message", None) or str(err)


def _client():
    try:
        return supa.get_client()
    except (supa.SupabaseConfigError, supa.SupabaseConnectionError) as exc:
        logger.warning("Supabase unavailable, staying in memory: %s", exc)
        return None


def persistence_enabled() -> bool:
    return supa.is_configured()


def load_snapshot(notify: Notifier = _log_notifier) -> Dict[str, Any]:
    """Read every table back into snapshot form; ``{}`` when no client is available."""
    client = _client()
    if not client:
        return {}

    snapshot: Dict[str, Any] = {}
    for collection, table in RECORD_TABLES.items():
        try:
            res = client.table(table).select("*").execute()
        except APIError as err:
            notify(f"Failed to load {table}: {_api_message(err)}")
            continue
        rows = res.data or []
        if rows:
            snapshot[collection] = [dict(r) for r in rows]

    try:
        res = client.table(KV).select("key,value").execute()
    except APIError as err:
        notify(f"Failed to load {KV}: {_api_message(err)}")
    else:
        for row in res.data or []:
            if row.get("key") in KV_KEYS:
                snapshot[row["key"]] = row.get("value")

    logger.info("Loaded %d snapshot sections from Supabase", len(snapshot))
    return snapshot


def _rows_for(value: Any) -> List[Dict[str, Any]]:
    return [r for r in clean_jsonable(value or []) if isinstance(r, dict)]


def save_snapshot(snapshot: Mapping[str, Any], notify: Notifier = _log_notifier) -> bool:
    """Upsert the snapshot; returns ``True`` when every table was written."""
    client = _client()
    if not client:
        return False

    ok = True
    for collection, table in RECORD_TABLES.items():
        rows = _rows_for(snapshot.get(collection))
        if not rows:
            continue
        try:
            client.table(table).upsert(rows, on_conflict="id").execute()
        except APIError as err:
            notify(f"Failed to save {table}: {_api_message(err)}")
            ok = False

    kv_rows = [
        {"key": key, "value": clean_jsonable(snapshot.get(key))}
        for key in KV_KEYS
        if key in snapshot
    ]
    if kv_rows:
        assert_jsonable(kv_rows)
        try:
            client.table(KV).upsert(kv_rows, on_conflict="key").execute()
        except APIError as err:
            notify(f"Failed to save {KV}: {_api_message(err)}")
            ok = False
    return ok


def delete_rows(collection: str, ids: List[Any], notify: Notifier = _log_notifier) -> int:
    """Remove rows deleted in memory so the next load does not resurrect them."""
    table: Optional[str] = RECORD_TABLES.get(collection)
    ids_clean = [i for i in ids if i is not None]
    if not table or not ids_clean:
        return 0
    client = _client()
    if not client:
        return 0
    try:
        client.table(table).delete().in_("id", ids_clean).execute()
    except APIError as err:
        notify(f"Failed to delete from {table}: {_api_message(err)}")
        return 0
    return len(ids_clean)


__all__ = ["load_snapshot", "save_snapshot", "delete_rows", "persistence_enabled"]
