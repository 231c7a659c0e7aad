"""Single-shop cart state."""

from __future__ import annotations

import logging

from storefront.models import MenuItem
from storefront.observers import Subject

logger = logging.getLogger(__name__)


class Cart(Subject["Cart"]):
    """
    The items selected for one pending order.

    All items belong to `shop_id`. Adding an item from another shop empties
    the cart first. Every mutation notifies subscribers with the cart itself.
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: list[MenuItem] = []
        self._shop_id = ""
        self._shop_name = ""

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    @property
    def shop_id(self) -> str:
        return self._shop_id

    @property
    def shop_name(self) -> str:
        return self._shop_name

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def total_price(self) -> int:
        return sum(item.price for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: MenuItem, shop_id: str, shop_name: str) -> None:
        """Append `item`, switching the cart to `shop_id` if needed."""
        if self._shop_id and self._shop_id != shop_id:
            logger.info("cart_shop_switch from=%r to=%r dropped=%d", self._shop_id, shop_id, len(self._items))
            self._reset()
        self._shop_id = shop_id
        self._shop_name = shop_name
        self._items.append(item)
        logger.debug("cart_add item_id=%r rows=%d total=%d", item.item_id, len(self._items), self.total_price)
        self._notify(self)

    def clear(self) -> None:
        self._reset()
        logger.debug("cart_clear")
        self._notify(self)

    def _reset(self) -> None:
        self._items.clear()
        self._shop_id = ""
        self._shop_name = ""
