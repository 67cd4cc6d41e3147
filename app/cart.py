"""Shopping cart with variant-keyed line items."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

__all__ = ["Cart", "cart_item_id", "build_order", "CUSTOMER_FIELDS"]

CUSTOMER_FIELDS = ("name", "email", "phone", "address", "city", "postal_code")


def cart_item_id(product_id: Any, selected_variants: Optional[Mapping[str, str]]) -> str:
    """Line identity: product id plus the variant choices sorted by name.

    ``cart_item_id(3, {"Size": "L", "Color": "Red"}) == "3-Color-Red_Size-L"``
    """
    variants = selected_variants or {}
    variant_part = "_".join(f"{key}-{variants[key]}" for key in sorted(variants))
    return f"{product_id}-{variant_part}"


class Cart:
    """Ordered list of line items; serialisable to plain dict rows."""

    def __init__(self, items: Optional[List[Dict[str, Any]]] = None):
        self.items: List[Dict[str, Any]] = list(items or [])

    # ----------------------------------------------------- persistence
    @classmethod
    def from_rows(cls, rows: Any) -> "Cart":
        if not isinstance(rows, list):
            return cls()
        items = []
        for row in rows:
            if not isinstance(row, dict) or "cart_id" not in row:
                logger.warning("Dropping malformed cart row: %r", row)
                continue
            items.append(dict(row))
        return cls(items)

    def to_rows(self) -> List[Dict[str, Any]]:
        return [dict(item) for item in self.items]

    # ----------------------------------------------------- mutations
    def _find(self, cart_id: str) -> Optional[Dict[str, Any]]:
        for item in self.items:
            if item["cart_id"] == cart_id:
                return item
        return None

    def add(
        self,
        product: Mapping[str, Any],
        selected_variants: Optional[Mapping[str, str]] = None,
        quantity: int = 1,
    ) -> str:
        variants = dict(selected_variants or {})
        cid = cart_item_id(product["id"], variants)
        existing = self._find(cid)
        if existing is not None:
            existing["quantity"] += quantity
        else:
            self.items.append(
                {
                    "cart_id": cid,
                    "product_id": product["id"],
                    "name": product.get("name", ""),
                    "price": product.get("price", 0),
                    "image": (product.get("images") or [None])[0],
                    "quantity": quantity,
                    "selected_variants": variants,
                }
            )
        return cid

    def remove(self, cart_id: str) -> None:
        self.items = [item for item in self.items if item["cart_id"] != cart_id]

    def update_quantity(self, cart_id: str, quantity: int) -> None:
        if quantity < 1:
            self.remove(cart_id)
            return
        item = self._find(cart_id)
        if item is not None:
            item["quantity"] = quantity

    def clear(self) -> None:
        self.items = []

    # ----------------------------------------------------- aggregates
    @property
    def item_count(self) -> int:
        return sum(item["quantity"] for item in self.items)

    @property
    def total(self) -> float:
        return sum(item["price"] * item["quantity"] for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


def build_order(cart: Cart, customer: Mapping[str, Any]) -> Dict[str, Any]:
    """Compose an order payload from the cart contents.

    Raises ``ValueError`` when the cart is empty or a customer field is blank.
    """
    if not cart:
        raise ValueError("Cannot check out an empty cart")
    clean_customer: Dict[str, str] = {}
    missing = []
    for field in CUSTOMER_FIELDS:
        value = str(customer.get(field) or "").strip()
        if not value:
            missing.append(field)
        clean_customer[field] = value
    if missing:
        raise ValueError(f"Missing customer fields: {', '.join(missing)}")

    return {
        "customer": clean_customer,
        "items": [
            {
                "product_id": item["product_id"],
                "name": item["name"],
                "price": item["price"],
                "quantity": item["quantity"],
                "selected_variants": dict(item["selected_variants"]),
            }
            for item in cart.items
        ],
        "total": cart.total,
        "status": "Pending",
        "date": datetime.now(timezone.utc).isoformat(),
    }
