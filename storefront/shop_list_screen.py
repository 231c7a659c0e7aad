"""Home screen: the list of shops."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import work

from storefront.cart import Cart
from storefront.catalog import list_shops
from storefront.errors import ReadError
from storefront.list_screen import ListScreen
from storefront.models import Shop
from storefront.rendering import format_shop_row
from storefront.shop_detail_screen import ShopDetailScreen
from storefront.store import RemoteStore

logger = logging.getLogger(__name__)


class ShopListScreen(ListScreen):
    """Lists every shop; Enter opens the selected shop's menu."""

    HELP = "J/K/↑/↓ move, Enter open shop, R reload, C cart, Ctrl+Q quit"

    BINDINGS = [
        ("enter", "open_selected", "Open shop"),
        ("r", "reload", "Reload"),
    ]

    def __init__(self, store: RemoteStore, cart: Cart) -> None:
        super().__init__(cart, heading="Find a Shop")
        self.store = store
        self.shops: list[Shop] = []
        self.loading = False
        self.error = ""

    def start(self) -> None:
        self.load_shops()

    @work(exclusive=True)
    async def load_shops(self) -> None:
        self.loading = True
        self.error = ""
        self._refresh_body()
        try:
            self.shops = await list_shops(self.store)
        except ReadError as exc:
            self.shops = []
            self.error = str(exc)
        finally:
            self.loading = False
        self.selected_index = 0
        logger.debug("shops_loaded count=%d error=%r", len(self.shops), self.error)
        self._refresh_body()

    def placeholder(self) -> str | None:
        if self.loading:
            return "Loading..."
        if self.error:
            return self.error
        if not self.shops:
            return "No shops available."
        return None

    def rows(self) -> list[Text]:
        if self.placeholder() is not None:
            return []
        return [format_shop_row(shop) for shop in self.shops]

    def action_reload(self) -> None:
        self.load_shops()

    def action_open_selected(self) -> None:
        if self.placeholder() is not None:
            return
        shop = self.shops[self.selected_index]
        logger.info("open_shop shop_id=%r", shop.shop_id)
        self.app.push_screen(ShopDetailScreen(self.store, self.cart, shop))
