"""Tests for the single-shop cart."""

from storefront.cart import Cart
from storefront.models import MenuItem


class TestAdd:
    def test_same_shop_items_accumulate(self, cart, burger, fries):
        cart.add(burger, "s1", "Shop One")
        cart.add(fries, "s1", "Shop One")
        cart.add(burger, "s1", "Shop One")
        assert len(cart) == 3
        assert cart.total_price == 1300

    def test_duplicates_are_kept_in_insertion_order(self, cart, burger, fries):
        cart.add(burger, "s1", "Shop One")
        cart.add(fries, "s1", "Shop One")
        cart.add(burger, "s1", "Shop One")
        assert [item.item_id for item in cart.items] == ["a1", "a2", "a1"]

    def test_first_add_adopts_shop(self, cart, burger):
        cart.add(burger, "s1", "Shop One")
        assert cart.shop_id == "s1"
        assert cart.shop_name == "Shop One"

    def test_other_shop_replaces_cart(self, cart, burger, fries, sushi):
        cart.add(burger, "s1", "Shop One")
        cart.add(fries, "s1", "Shop One")
        cart.add(sushi, "s2", "Shop Two")
        assert cart.items == (sushi,)
        assert cart.shop_id == "s2"
        assert cart.shop_name == "Shop Two"
        assert cart.total_price == 1200

    def test_switching_back_does_not_restore_items(self, cart, burger, sushi):
        cart.add(burger, "s1", "Shop One")
        cart.add(sushi, "s2", "Shop Two")
        cart.add(burger, "s1", "Shop One")
        assert cart.items == (burger,)
        assert cart.shop_id == "s1"

    def test_items_view_is_immutable_snapshot(self, cart, burger):
        cart.add(burger, "s1", "Shop One")
        items = cart.items
        cart.clear()
        assert items == (burger,)


class TestClear:
    def test_clear_resets_everything(self, cart, burger):
        cart.add(burger, "s1", "Shop One")
        cart.clear()
        assert cart.is_empty
        assert cart.items == ()
        assert cart.shop_id == ""
        assert cart.shop_name == ""
        assert cart.total_price == 0

    def test_clear_is_idempotent(self, cart):
        cart.clear()
        cart.clear()
        assert cart.is_empty
        assert cart.shop_id == ""

    def test_empty_cart_total_is_zero(self):
        assert Cart().total_price == 0


class TestNotifications:
    def test_every_mutation_notifies_once(self, cart, burger, sushi):
        seen = []
        cart.subscribe(lambda c: seen.append(len(c)))
        cart.add(burger, "s1", "Shop One")
        cart.add(sushi, "s2", "Shop Two")
        cart.clear()
        cart.clear()
        assert seen == [1, 1, 0, 0]

    def test_listener_receives_cart(self, cart, burger):
        received = []
        cart.subscribe(received.append)
        cart.add(burger, "s1", "Shop One")
        assert received == [cart]

    def test_unsubscribe_stops_notifications(self, cart, burger):
        seen = []
        unsubscribe = cart.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        cart.add(burger, "s1", "Shop One")
        assert seen == []

    def test_listener_may_unsubscribe_while_notified(self, cart, burger):
        calls = []

        def once(c):
            calls.append(c)
            unsubscribe()

        unsubscribe = cart.subscribe(once)
        cart.add(burger, "s1", "Shop One")
        cart.add(burger, "s1", "Shop One")
        assert len(calls) == 1


def test_scenario_burger_fries_then_sushi():
    cart = Cart()

    cart.add(MenuItem(item_id="a1", name="Burger", price=500), "s1", "Shop One")
    assert len(cart) == 1
    assert cart.total_price == 500

    cart.add(MenuItem(item_id="a2", name="Fries", price=300), "s1", "Shop One")
    assert len(cart) == 2
    assert cart.total_price == 800

    cart.add(MenuItem(item_id="b1", name="Sushi", price=1200), "s2", "Shop Two")
    assert len(cart) == 1
    assert [item.name for item in cart.items] == ["Sushi"]
    assert cart.total_price == 1200
    assert cart.shop_name == "Shop Two"


def test_failing_listener_does_not_block_others(cart, burger):
    seen = []

    def broken(c):
        raise RuntimeError("boom")

    cart.subscribe(broken)
    cart.subscribe(seen.append)
    cart.add(burger, "s1", "Shop One")
    assert seen == [cart]
    assert len(cart) == 1
