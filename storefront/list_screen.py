"""Base screen: a cursor-driven list with a live cart status line."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from storefront.cart import Cart
from storefront.rendering import format_cart_summary, render_pointer_list


class ListScreen(Screen[None]):
    """Shared layout and list navigation for the storefront screens."""

    HELP = ""

    BINDINGS = [
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("up", "move_cursor(-1)", "Previous"),
    ]

    CSS = """
    #list-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #list-body {
        height: 1fr;
        padding: 0 1;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
    }

    #help-bar {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    selected_index = reactive(0)

    def __init__(self, cart: Cart, heading: str) -> None:
        super().__init__()
        self.cart = cart
        self.heading = heading
        self._subscriptions: list[Callable[[], None]] = []

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="list-pane"):
            yield Static(Text(self.heading), classes="pane-title")
            yield Static(id="list-body")
        yield Static(id="status-bar")
        yield Static(self.HELP, id="help-bar")

    def on_mount(self) -> None:
        self._subscriptions.append(self.cart.subscribe(self._on_cart_changed))
        self._refresh_all()
        self.start()

    def on_unmount(self) -> None:
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()

    def start(self) -> None:
        """Hook run once the screen is mounted."""

    def placeholder(self) -> str | None:
        """Message shown instead of the list (loading, error, empty), if any."""
        return None

    def rows(self) -> list[Text]:
        return []

    def action_move_cursor(self, delta: int) -> None:
        total = len(self.rows())
        if total == 0:
            return
        self.selected_index = (self.selected_index + delta) % total
        self._refresh_body()

    def _on_cart_changed(self, cart: Cart) -> None:
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_body()
        self._refresh_status()

    def _refresh_body(self) -> None:
        try:
            body = self.query_one("#list-body", Static)
        except NoMatches:
            return
        body.update(self._render_body(body))

    def _render_body(self, body: Static) -> Text:
        message = self.placeholder()
        if message is not None:
            return Text(message)

        rows = self.rows()
        if self.selected_index >= len(rows):
            self.selected_index = max(0, len(rows) - 1)
        return render_pointer_list(rows, self.selected_index, body.size.height or 8)

    def _refresh_status(self) -> None:
        try:
            status = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status.update(format_cart_summary(self.cart))
