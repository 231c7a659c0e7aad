"""Read-only catalog queries: shops and their menu items."""

from __future__ import annotations

import logging

from storefront.errors import ReadError
from storefront.models import MenuItem, Shop
from storefront.store import RemoteStore

logger = logging.getLogger(__name__)


async def list_shops(store: RemoteStore) -> list[Shop]:
    """Return every shop in the catalog. An empty catalog is not an error."""
    try:
        documents = await store.list_shops()
    except Exception as exc:
        logger.warning("list_shops_failed error=%r", exc)
        raise ReadError(f"Failed to load shops: {exc}") from exc

    try:
        shops = [Shop.from_document(doc.doc_id, doc.data) for doc in documents]
    except (TypeError, ValueError) as exc:
        logger.warning("list_shops_malformed error=%r", exc)
        raise ReadError(f"Failed to load shops: {exc}") from exc

    logger.debug("list_shops count=%d", len(shops))
    return shops


async def list_menu_items(store: RemoteStore, shop_id: str) -> list[MenuItem]:
    """Return the menu of one shop. A shop without items yields an empty list."""
    if not shop_id:
        raise ReadError("Failed to load menu: no shop selected")

    try:
        documents = await store.list_menu_items(shop_id)
    except Exception as exc:
        logger.warning("list_menu_items_failed shop_id=%r error=%r", shop_id, exc)
        raise ReadError(f"Failed to load menu: {exc}") from exc

    try:
        items = [MenuItem.from_document(doc.doc_id, doc.data) for doc in documents]
    except (TypeError, ValueError) as exc:
        logger.warning("list_menu_items_malformed shop_id=%r error=%r", shop_id, exc)
        raise ReadError(f"Failed to load menu: {exc}") from exc

    logger.debug("list_menu_items shop_id=%r count=%d", shop_id, len(items))
    return items
