"""Domain models for the mobile order storefront."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from storefront.config import ORDER_STATUS_NEW


@dataclass(frozen=True)
class StoredDocument:
    """A raw document as returned by the remote store."""

    doc_id: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MenuItem:
    """A menu item offered by one shop."""

    item_id: str
    name: str
    price: int
    image_url: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any] | None) -> MenuItem:
        """Build a menu item from a stored record, defaulting missing fields."""
        data = data or {}
        return cls(
            item_id=doc_id,
            name=str(data.get("name") or ""),
            price=_price_from_document(data.get("price")),
            image_url=str(data.get("imageUrl") or ""),
        )

    def to_order_line(self) -> dict[str, Any]:
        return {"id": self.item_id, "name": self.name, "price": self.price}


@dataclass(frozen=True)
class Shop:
    """A shop listed in the catalog."""

    shop_id: str
    name: str
    description: str = ""
    image_url: str = ""

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any] | None) -> Shop:
        data = data or {}
        return cls(
            shop_id=doc_id,
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            image_url=str(data.get("imageUrl") or ""),
        )


@dataclass(frozen=True)
class OrderRecord:
    """A finalized cart, ready to be written once to the orders collection."""

    shop_id: str
    shop_name: str
    items: tuple[MenuItem, ...]
    total_price: int
    order_status: str = ORDER_STATUS_NEW

    def to_document(self, created_at: object) -> dict[str, Any]:
        """
        Return the stored field layout of the order.

        `created_at` is whatever the backend uses to stamp the write time,
        e.g. Firestore's server timestamp sentinel.
        """
        return {
            "shopId": self.shop_id,
            "shopName": self.shop_name,
            "items": [item.to_order_line() for item in self.items],
            "totalPrice": self.total_price,
            "orderStatus": self.order_status,
            "createdAt": created_at,
        }


def _price_from_document(value: Any) -> int:
    """Missing prices default to 0; anything but a plain integer is rejected."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"price must be an integer, got {value!r}")
    return value
