"""Static demo catalog used to seed the in-memory backend."""

from __future__ import annotations

from typing import Any

DEMO_SHOPS: dict[str, dict[str, Any]] = {
    "gimbap-house": {
        "name": "Gimbap House",
        "description": "Rolled to order. Pork, tuna mayo, cheese and bulgogi.",
        "imageUrl": "",
    },
    "ramyun-bar": {
        "name": "Ramyun Bar",
        "description": "Spicy noodle soups and toppings.",
        "imageUrl": "",
    },
    "burger-stand": {
        "name": "Burger Stand",
        "description": "Burgers, fries and shakes.",
        "imageUrl": "",
    },
    "sushi-counter": {
        "name": "Sushi Counter",
        "description": "Nigiri sets and rolls.",
        "imageUrl": "",
    },
}

DEMO_MENU_ITEMS: dict[str, dict[str, dict[str, Any]]] = {
    "gimbap-house": {
        "pork-gimbap": {"name": "Pork Gimbap", "price": 650, "imageUrl": ""},
        "tuna-mayo-gimbap": {"name": "Tuna Mayo Gimbap", "price": 600, "imageUrl": ""},
        "cheese-gimbap": {"name": "Cheese Gimbap", "price": 550, "imageUrl": ""},
        "bulgogi-gimbap": {"name": "Bulgogi Gimbap", "price": 700, "imageUrl": ""},
        "kimchi-gimbap": {"name": "Kimchi Gimbap", "price": 550, "imageUrl": ""},
    },
    "ramyun-bar": {
        "classic-ramyun": {"name": "Classic Ramyun", "price": 800, "imageUrl": ""},
        "shin-ramyun": {"name": "Shin Ramyun", "price": 850, "imageUrl": ""},
        "cheese-ramyun": {"name": "Cheese Ramyun", "price": 900, "imageUrl": ""},
        "seafood-ramyun": {"name": "Seafood Ramyun", "price": 1100, "imageUrl": ""},
    },
    "burger-stand": {
        "burger": {"name": "Burger", "price": 500, "imageUrl": ""},
        "cheeseburger": {"name": "Cheeseburger", "price": 550, "imageUrl": ""},
        "fries": {"name": "Fries", "price": 300, "imageUrl": ""},
        "milkshake": {"name": "Milkshake", "price": 400, "imageUrl": ""},
    },
    # Sushi Counter has no menu yet.
}
