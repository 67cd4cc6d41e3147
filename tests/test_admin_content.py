import math

from app.admin_content import EDITOR_COLUMNS, apply_editor_rows, editor_frame
from app.club_store import ClubStore


def _grid(store, collection):
    return editor_frame(getattr(store, collection), EDITOR_COLUMNS[collection]).to_dict(orient="records")


def test_unchanged_grid_is_a_no_op():
    store = ClubStore()
    before = store.snapshot()["staff"]
    assert apply_editor_rows(store, "staff", _grid(store, "staff")) == []
    assert store.staff == before


def test_edit_add_and_delete_rows():
    store = ClubStore()
    rows = _grid(store, "staff")
    rows[0]["position"] = "Director"
    rows = [r for r in rows if r["id"] != 3]
    rows.append({"id": math.nan, "name": "Leila Amrani", "position": "Physio", "bio": None, "image_url": None})
    rows.append({"id": None, "name": None, "position": "", "bio": None, "image_url": None})

    removed = apply_editor_rows(store, "staff", rows)

    assert removed == [3]
    assert store.get("staff", 1)["position"] == "Director"
    assert store.get("staff", 4)["name"] == "Leila Amrani"
    assert [s["id"] for s in store.staff] == [1, 2, 4]


def test_products_keep_nested_fields():
    store = ClubStore()
    rows = _grid(store, "products")
    rows[0]["price"] = 500
    apply_editor_rows(store, "products", rows)
    jersey = store.get("products", 1)
    assert jersey["price"] == 500
    assert jersey["variants"][0]["name"] == "Size"
    assert jersey["images"]
