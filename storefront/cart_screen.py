"""Cart screen: review the cart and place the order."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import work
from textual.binding import Binding
from textual.widgets import Static

from storefront.cart import Cart
from storefront.errors import SubmissionError, ValidationError
from storefront.list_screen import ListScreen
from storefront.ordering import OrderSubmitter
from storefront.rendering import format_cart_row, format_total_line

logger = logging.getLogger(__name__)


class CartScreen(ListScreen):
    """Lists cart items with the total; O or Ctrl+S places the order."""

    HELP = "J/K/↑/↓ move, O/Ctrl+S place order, X clear cart, Esc back"

    BINDINGS = [
        ("o", "place_order", "Place order"),
        Binding("ctrl+s", "place_order", "Place order", priority=True),
        ("x", "clear_cart", "Clear cart"),
        ("escape", "back", "Back"),
    ]

    def __init__(self, cart: Cart, submitter: OrderSubmitter) -> None:
        super().__init__(cart, heading="Cart")
        self.submitter = submitter

    def start(self) -> None:
        self._subscriptions.append(self.submitter.subscribe(self._on_submitting_changed))

    def placeholder(self) -> str | None:
        if self.cart.is_empty:
            return "Cart is empty"
        return None

    def rows(self) -> list[Text]:
        return [format_cart_row(item) for item in self.cart.items]

    def _render_body(self, body: Static) -> Text:
        content = super()._render_body(body)
        if self.cart.is_empty:
            return content
        content.append("\n\n")
        content.append_text(format_total_line(self.cart))
        content.append("\n")
        if self.submitter.submitting:
            content.append("Placing order...", style="bold yellow")
        else:
            content.append("Press O to place the order", style="dim")
        return content

    def action_place_order(self) -> None:
        if self.submitter.submitting:
            return
        self.submit_order()

    @work
    async def submit_order(self) -> None:
        try:
            order_id = await self.submitter.place_order(self.cart)
        except ValidationError as exc:
            self.app.notify(str(exc), severity="warning")
            return
        except SubmissionError as exc:
            self.app.notify(str(exc), severity="error")
            return

        logger.info("order_confirmed order_id=%s", order_id)
        self.app.notify("Order placed!")
        if self.is_current:
            self.app.pop_screen()

    def action_clear_cart(self) -> None:
        if self.submitter.submitting:
            return
        self.cart.clear()

    def action_back(self) -> None:
        # Leaving would cancel the in-flight write along with this screen's workers.
        if self.submitter.submitting:
            return
        self.app.pop_screen()

    def _on_submitting_changed(self, submitting: bool) -> None:
        self._refresh_all()
