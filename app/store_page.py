"""Club shop: product grid with variant pickers."""

from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from app.state import get_cart, get_settings, get_store, save_cart
from app.ui.nav import go


def _pick_variants(product: Dict[str, Any]) -> Dict[str, str]:
    chosen: Dict[str, str] = {}
    for variant in product.get("variants") or []:
        options = variant.get("options") or []
        if not options:
            continue
        values = [o["value"] for o in options]
        labels = {o["value"]: o.get("label", o["value"]) for o in options}
        key = f"store__{product['id']}__{variant['name']}"
        if variant.get("type") == "dropdown":
            chosen[variant["name"]] = st.selectbox(variant["name"], values, format_func=labels.get, key=key)
        else:
            chosen[variant["name"]] = st.radio(
                variant["name"], values, format_func=labels.get, horizontal=True, key=key
            )
    return chosen


def _product_card(product: Dict[str, Any], currency: str) -> None:
    with st.container(border=True):
        images = product.get("images") or []
        if images:
            st.image(images[0], use_container_width=True)
        st.markdown(f"**{product.get('name', '')}**")
        st.caption(product.get("description", ""))
        st.markdown(f"{product.get('price', 0)} {currency}")
        if int(product.get("stock") or 0) <= 0:
            st.button("Out of stock", disabled=True, key=f"store__oos_{product['id']}")
            return
        variants = _pick_variants(product)
        if st.button("Add to cart", key=f"store__add_{product['id']}", type="primary"):
            cart = get_cart()
            cart.add(product, variants)
            save_cart(cart)
            st.toast(f"{product.get('name', 'Item')} added to cart")


def show_store_page() -> None:
    st.markdown("## 🛍️ Club store")
    store = get_store()
    currency = get_settings().currency
    cart = get_cart()
    if cart:
        if st.button(f"🛒 View cart ({cart.item_count})", key="store__view_cart"):
            go("Cart")

    categories = sorted({p.get("category", "") for p in store.products if p.get("category")})
    picked = st.selectbox("Category", ["All", *categories], key="store__category")
    products = [p for p in store.products if picked == "All" or p.get("category") == picked]
    if not products:
        st.caption("No products available.")
        return

    cols = st.columns(3)
    for idx, product in enumerate(products):
        with cols[idx % 3]:
            _product_card(product, currency)


__all__ = ["show_store_page"]
