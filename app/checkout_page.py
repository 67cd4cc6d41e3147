"""Cart review and checkout form."""

from __future__ import annotations

import logging

import streamlit as st

from app.cart import CUSTOMER_FIELDS, build_order
from app.state import get_cart, get_settings, get_store, persist_store, save_cart
from app.ui.nav import go

logger = logging.getLogger(__name__)

_FIELD_LABELS = {
    "name": "Full name",
    "email": "Email",
    "phone": "Phone",
    "address": "Address",
    "city": "City",
    "postal_code": "Postal code",
}
_CONFIRM_KEY = "checkout__confirmed_order"


def _render_items(currency: str) -> None:
    cart = get_cart()
    for item in cart.items:
        cid = item["cart_id"]
        with st.container(border=True):
            info, qty, remove = st.columns([4, 2, 1])
            variants = ", ".join(f"{k}: {v}" for k, v in item.get("selected_variants", {}).items())
            info.markdown(f"**{item['name']}**")
            if variants:
                info.caption(variants)
            info.caption(f"{item['price']} {currency} each")
            new_qty = qty.number_input(
                "Qty", min_value=0, value=int(item["quantity"]), step=1, key=f"cart__qty_{cid}"
            )
            if new_qty != item["quantity"]:
                cart.update_quantity(cid, int(new_qty))
                save_cart(cart)
                st.rerun()
            if remove.button("✕", key=f"cart__rm_{cid}"):
                cart.remove(cid)
                save_cart(cart)
                st.rerun()
    st.markdown(f"### Total: {cart.total} {currency}")


def _checkout_form() -> None:
    with st.form("checkout_form"):
        st.subheader("Shipping details")
        values = {field: st.text_input(_FIELD_LABELS[field], key=f"checkout__{field}") for field in CUSTOMER_FIELDS}
        submitted = st.form_submit_button("Place order", type="primary")

    if not submitted:
        return
    cart = get_cart()
    try:
        order = build_order(cart, values)
    except ValueError as exc:
        st.error(str(exc))
        return

    store = get_store()
    order_id = store.add_order(order)
    persist_store(store)
    cart.clear()
    save_cart(cart)
    logger.info("Order #%s placed (%s items)", order_id, len(order["items"]))
    st.session_state[_CONFIRM_KEY] = order_id
    st.rerun()


def show_cart_page() -> None:
    st.markdown("## 🛒 Cart")
    confirmed = st.session_state.pop(_CONFIRM_KEY, None)
    if confirmed is not None:
        st.success(f"Thank you! Your order #{confirmed} has been placed.")
        st.balloons()

    currency = get_settings().currency
    if not get_cart():
        st.caption("Your cart is empty.")
        if st.button("Continue shopping", key="cart__shop"):
            go("Store")
        return

    _render_items(currency)
    _checkout_form()


__all__ = ["show_cart_page"]
