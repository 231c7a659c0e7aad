"""Tests for catalog and order models."""

import pytest

from storefront.models import MenuItem, OrderRecord, Shop


class TestMenuItem:
    def test_from_document(self):
        item = MenuItem.from_document("a1", {"name": "Burger", "price": 500, "imageUrl": "https://img/a1.png"})
        assert item == MenuItem(item_id="a1", name="Burger", price=500, image_url="https://img/a1.png")

    def test_missing_fields_default(self):
        item = MenuItem.from_document("a1", {})
        assert item.name == ""
        assert item.price == 0
        assert item.image_url == ""

    def test_none_data_defaults(self):
        assert MenuItem.from_document("a1", None).price == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            MenuItem(item_id="a1", name="Burger", price=-1)

    def test_order_line_projection(self):
        item = MenuItem(item_id="a1", name="Burger", price=500, image_url="https://img/a1.png")
        assert item.to_order_line() == {"id": "a1", "name": "Burger", "price": 500}


class TestShop:
    def test_from_document(self):
        shop = Shop.from_document("s1", {"name": "Shop One", "description": "Burgers", "imageUrl": "u"})
        assert shop == Shop(shop_id="s1", name="Shop One", description="Burgers", image_url="u")

    def test_missing_fields_default(self):
        shop = Shop.from_document("s1", {"name": "Shop One"})
        assert shop.description == ""
        assert shop.image_url == ""


class TestOrderRecord:
    def test_to_document_layout(self, burger, fries):
        record = OrderRecord(shop_id="s1", shop_name="Shop One", items=(burger, fries), total_price=800)
        stamp = object()
        assert record.to_document(created_at=stamp) == {
            "shopId": "s1",
            "shopName": "Shop One",
            "items": [
                {"id": "a1", "name": "Burger", "price": 500},
                {"id": "a2", "name": "Fries", "price": 300},
            ],
            "totalPrice": 800,
            "orderStatus": "new",
            "createdAt": stamp,
        }
