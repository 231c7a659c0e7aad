"""Shop detail screen: one shop's menu."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import work

from storefront.cart import Cart
from storefront.catalog import list_menu_items
from storefront.errors import ReadError
from storefront.list_screen import ListScreen
from storefront.models import MenuItem, Shop
from storefront.rendering import format_menu_row
from storefront.store import RemoteStore

logger = logging.getLogger(__name__)


class ShopDetailScreen(ListScreen):
    """Shows a shop's menu. Enter or A adds the selected item to the cart."""

    HELP = "J/K/↑/↓ move, Enter/A add to cart, C cart, Esc back"

    BINDINGS = [
        ("enter", "add_selected", "Add to cart"),
        ("a", "add_selected", "Add to cart"),
        ("escape", "back", "Back"),
    ]

    def __init__(self, store: RemoteStore, cart: Cart, shop: Shop) -> None:
        super().__init__(cart, heading=shop.name)
        self.store = store
        self.shop = shop
        self.menu_items: list[MenuItem] = []
        self.loading = False
        self.error = ""

    def start(self) -> None:
        self.load_menu()

    @work(exclusive=True)
    async def load_menu(self) -> None:
        self.loading = True
        self.error = ""
        self._refresh_body()
        try:
            self.menu_items = await list_menu_items(self.store, self.shop.shop_id)
        except ReadError as exc:
            self.menu_items = []
            self.error = str(exc)
        finally:
            self.loading = False
        self.selected_index = 0
        logger.debug("menu_loaded shop_id=%r count=%d error=%r", self.shop.shop_id, len(self.menu_items), self.error)
        self._refresh_body()

    def placeholder(self) -> str | None:
        if self.loading:
            return "Loading..."
        if self.error:
            return self.error
        if not self.menu_items:
            return "No menu items for this shop."
        return None

    def rows(self) -> list[Text]:
        if self.placeholder() is not None:
            return []
        return [format_menu_row(item) for item in self.menu_items]

    def action_add_selected(self) -> None:
        if self.placeholder() is not None:
            return
        item = self.menu_items[self.selected_index]
        self.cart.add(item, self.shop.shop_id, self.shop.name)
        self.app.notify(f"{item.name} added to cart", timeout=2)

    def action_back(self) -> None:
        self.app.pop_screen()
