import pytest

from storefront.cart import Cart
from storefront.models import MenuItem
from storefront.store import InMemoryStore

SHOPS = {
    "s1": {"name": "Shop One", "description": "Burgers and fries", "imageUrl": "https://img/s1.png"},
    "s2": {"name": "Shop Two", "description": "Sushi", "imageUrl": ""},
}

MENU_ITEMS = {
    "s1": {
        "a1": {"name": "Burger", "price": 500, "imageUrl": ""},
        "a2": {"name": "Fries", "price": 300, "imageUrl": ""},
    },
    "s2": {
        "b1": {"name": "Sushi", "price": 1200, "imageUrl": ""},
    },
}


@pytest.fixture
def burger():
    return MenuItem(item_id="a1", name="Burger", price=500)


@pytest.fixture
def fries():
    return MenuItem(item_id="a2", name="Fries", price=300)


@pytest.fixture
def sushi():
    return MenuItem(item_id="b1", name="Sushi", price=1200)


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def store():
    return InMemoryStore.from_catalog(SHOPS, MENU_ITEMS)
