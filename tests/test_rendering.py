"""Tests for rendering helpers."""

from rich.text import Text

from storefront.rendering import format_cart_summary, format_price, render_pointer_list, window_bounds


def test_format_price():
    assert format_price(0) == "¥0"
    assert format_price(1200) == "¥1,200"


class TestWindowBounds:
    def test_empty(self):
        assert window_bounds(0, 5, None) == (0, 0)

    def test_fits(self):
        assert window_bounds(3, 5, 2) == (0, 3)

    def test_centers_selection(self):
        assert window_bounds(20, 5, 10) == (8, 13)

    def test_clamps_to_end(self):
        assert window_bounds(20, 5, 19) == (15, 20)


def test_pointer_marks_selected_row():
    rendered = render_pointer_list([Text("Burger"), Text("Fries")], 1, 8)
    assert rendered.plain == "  Burger\n➤ Fries"


def test_cart_summary(cart, burger, fries):
    assert format_cart_summary(cart).plain == " CART  empty"
    cart.add(burger, "s1", "Shop One")
    cart.add(fries, "s1", "Shop One")
    assert format_cart_summary(cart).plain == " CART  2 items from Shop One  ¥800"


def test_window_bounds_without_selection():
    assert window_bounds(20, 5, None) == (0, 5)
    assert window_bounds(3, 0, 1) == (1, 2)
