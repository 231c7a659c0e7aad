"""Rendering helpers shared by the storefront screens."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from storefront.cart import Cart
from storefront.config import CURRENCY_SYMBOL
from storefront.models import MenuItem, Shop


def format_price(price: int) -> str:
    """Render an amount in the smallest currency unit, e.g. `¥1,200`."""
    return f"{CURRENCY_SYMBOL}{price:,}"


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Return the [start, end) slice of a list that keeps `selected` visible."""
    rows = max(1, rows)
    if selected is None or total <= rows:
        return (0, max(0, min(total, rows)))
    start = min(max(0, selected - rows // 2), total - rows)
    return (start, start + rows)


def render_pointer_list(rows: Sequence[Text], selected: int | None, visible_rows: int) -> Text:
    """Render rows with a pointer on the selected one, windowed to `visible_rows`."""
    start, end = window_bounds(len(rows), visible_rows, selected)

    lines = Text()
    if start > 0:
        lines.append("⋮\n", style="dim")

    for idx in range(start, end):
        if idx > start:
            lines.append("\n")
        pointer = "➤ " if idx == selected else "  "
        lines.append(pointer)
        lines.append_text(rows[idx])

    if end < len(rows):
        lines.append("\n⋮", style="dim")

    return lines


def format_shop_row(shop: Shop) -> Text:
    text = Text()
    text.append(shop.name or "(unnamed shop)", style="bold")
    if shop.description:
        text.append(f"  {shop.description}", style="dim")
    return text


def format_menu_row(item: MenuItem) -> Text:
    text = Text()
    text.append(item.name, style="bold")
    text.append(f"  {format_price(item.price)}")
    return text


def format_cart_row(item: MenuItem) -> Text:
    text = Text()
    text.append("✓ ", style="green")
    text.append(item.name)
    text.append(f"  {format_price(item.price)}", style="bold")
    return text


def format_cart_summary(cart: Cart) -> Text:
    """One-line cart badge shown on every screen."""
    text = Text()
    text.append(" CART ", style="bold #ffffff on #c75b12")
    if cart.is_empty:
        text.append(" empty")
        return text
    count = len(cart)
    noun = "item" if count == 1 else "items"
    text.append(f" {count} {noun} from {cart.shop_name}  ")
    text.append(format_price(cart.total_price), style="bold")
    return text


def format_total_line(cart: Cart) -> Text:
    text = Text()
    text.append("Total  ", style="bold")
    text.append(format_price(cart.total_price), style="bold red")
    return text
