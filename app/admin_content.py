"""Grid editors for the admin content collections (news, teams, staff, ...).

Each collection is shown as a ``st.data_editor`` with dynamic rows. On save the
edited grid is diffed against the store: rows keep their id and are merged
onto the existing record (so nested fields such as product variants survive),
rows without an id are added, and rows missing from the grid are deleted.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd
import streamlit as st

from app import storage
from app.club_store import ClubStore
from app.data_sanitize import clean_jsonable
from app.state import get_store, notify_error, persist_store

logger = logging.getLogger(__name__)

EDITOR_COLUMNS: Dict[str, List[str]] = {
    "news": ["id", "title", "date", "summary", "content", "image_url"],
    "teams": ["id", "name", "category", "logo", "photo_url"],
    "staff": ["id", "name", "position", "bio", "image_url"],
    "sponsors": ["id", "name", "tier", "website_url", "image_url"],
    "products": ["id", "name", "category", "price", "stock", "description"],
}


def editor_frame(rows: Sequence[Mapping[str, Any]], columns: Sequence[str]) -> pd.DataFrame:
    return pd.DataFrame([{c: r.get(c) for c in columns} for r in rows], columns=list(columns))


def _blank(row: Mapping[str, Any], columns: Sequence[str]) -> bool:
    return all(row.get(c) in (None, "") for c in columns if c != "id")


def apply_editor_rows(store: ClubStore, collection: str, rows: Sequence[Mapping[str, Any]]) -> List[Any]:
    """Sync ``collection`` with edited grid rows; return the ids that were removed."""
    columns = EDITOR_COLUMNS[collection]
    cleaned = [clean_jsonable(dict(r)) for r in rows]
    kept_ids = set()
    for row in cleaned:
        if _blank(row, columns):
            continue
        record_id = row.get("id")
        if record_id is not None:
            record_id = int(record_id)
        existing = store.get(collection, record_id) if record_id is not None else None
        if existing is None:
            payload = {k: v for k, v in row.items() if k != "id"}
            kept_ids.add(store.add_record(collection, payload)["id"])
        else:
            store.update_record(collection, {**existing, **row, "id": record_id})
            kept_ids.add(record_id)

    removed = [r["id"] for r in list(getattr(store, collection)) if r["id"] not in kept_ids]
    for record_id in removed:
        store.delete_record(collection, record_id)
    return removed


def show_content_editor(collection: str, title: str) -> None:
    store = get_store()
    columns = EDITOR_COLUMNS[collection]
    st.subheader(title)
    st.caption("Add rows at the bottom, delete rows with the checkbox column, then save.")
    df = editor_frame(getattr(store, collection), columns)
    edited = st.data_editor(
        df,
        key=f"admin__editor_{collection}",
        num_rows="dynamic",
        use_container_width=True,
        disabled=["id"],
        hide_index=True,
    )
    if st.button("Save changes", key=f"admin__save_{collection}", type="primary"):
        try:
            removed = apply_editor_rows(store, collection, edited.to_dict(orient="records"))
        except (KeyError, ValueError) as exc:
            st.error(f"Could not save {collection}: {exc}")
            return
        store.log_activity(f"{title} updated.")
        persist_store(store)
        if removed:
            storage.delete_rows(collection, removed, notify=notify_error)
        logger.info("Saved %s (%d removed)", collection, len(removed))
        st.success(f"{title} saved.")


__all__ = ["EDITOR_COLUMNS", "editor_frame", "apply_editor_rows", "show_content_editor"]
