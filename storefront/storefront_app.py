"""Main Textual app class."""

from __future__ import annotations

import logging

from textual.app import App

from storefront.cart import Cart
from storefront.cart_screen import CartScreen
from storefront.ordering import OrderSubmitter
from storefront.shop_list_screen import ShopListScreen
from storefront.store import RemoteStore

logger = logging.getLogger(__name__)


class StorefrontApp(App):
    """A Textual app for browsing shops, filling a cart and placing orders."""

    TITLE = "Mobile Order"
    SUB_TITLE = "Shops / Menu / Cart"

    BINDINGS = [
        ("c", "open_cart", "Cart"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: RemoteStore, cart: Cart | None = None) -> None:
        super().__init__()
        self.store = store
        self.cart = cart if cart is not None else Cart()
        self.submitter = OrderSubmitter(store)
        logger.info("app_init store=%s", type(store).__name__)

    def on_mount(self) -> None:
        self.push_screen(ShopListScreen(self.store, self.cart))

    def action_open_cart(self) -> None:
        if isinstance(self.screen, CartScreen):
            return
        logger.debug("open_cart rows=%d", len(self.cart))
        self.push_screen(CartScreen(self.cart, self.submitter))
