"""Remote document store access: the backend seam for catalog reads and order writes."""

from __future__ import annotations

import copy
import logging
import os
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Protocol
from uuid import uuid4

from storefront.config import (
    BACKEND_ENV,
    BACKEND_FIRESTORE,
    BACKEND_MEMORY,
    DEFAULT_BACKEND,
    FIRESTORE_PROJECT_ENV,
    MENU_ITEMS_COLLECTION,
    ORDERS_COLLECTION,
    SHOPS_COLLECTION,
)
from storefront.models import OrderRecord, StoredDocument

logger = logging.getLogger(__name__)


class RemoteStore(Protocol):
    """The three calls the storefront makes against its backend."""

    async def list_shops(self) -> list[StoredDocument]: ...

    async def list_menu_items(self, shop_id: str) -> list[StoredDocument]: ...

    async def add_order(self, record: OrderRecord) -> str: ...


class FirestoreStore:
    """Cloud Firestore backend using the async client."""

    def __init__(self, client: Any = None, project: str | None = None) -> None:
        if client is None:
            from google.cloud import firestore

            client = firestore.AsyncClient(project=project)
        self._client = client

    async def list_shops(self) -> list[StoredDocument]:
        snapshots = await self._client.collection(SHOPS_COLLECTION).get()
        return [_to_stored(snapshot) for snapshot in snapshots]

    async def list_menu_items(self, shop_id: str) -> list[StoredDocument]:
        menu = self._client.collection(SHOPS_COLLECTION).document(shop_id).collection(MENU_ITEMS_COLLECTION)
        snapshots = await menu.get()
        return [_to_stored(snapshot) for snapshot in snapshots]

    async def add_order(self, record: OrderRecord) -> str:
        from google.cloud import firestore

        _, doc_ref = await self._client.collection(ORDERS_COLLECTION).add(
            record.to_document(created_at=firestore.SERVER_TIMESTAMP)
        )
        logger.info("firestore_order_added order_id=%s", doc_ref.id)
        return doc_ref.id


def _to_stored(snapshot: Any) -> StoredDocument:
    return StoredDocument(doc_id=snapshot.id, data=snapshot.to_dict() or {})


class InMemoryStore:
    """Dict-backed store for demos and tests. Orders are kept in `orders`."""

    def __init__(self) -> None:
        self.shops: dict[str, dict[str, Any]] = {}
        self.menu_items: dict[str, dict[str, dict[str, Any]]] = {}
        self.orders: dict[str, dict[str, Any]] = {}

    @classmethod
    def from_catalog(
        cls,
        shops: Mapping[str, Mapping[str, Any]],
        menu_items: Mapping[str, Mapping[str, Mapping[str, Any]]] | None = None,
    ) -> InMemoryStore:
        """Seed a store from `{shop_id: fields}` and `{shop_id: {item_id: fields}}`."""
        store = cls()
        for shop_id, fields in shops.items():
            store.shops[shop_id] = dict(fields)
        for shop_id, items in (menu_items or {}).items():
            store.menu_items[shop_id] = {item_id: dict(fields) for item_id, fields in items.items()}
        return store

    async def list_shops(self) -> list[StoredDocument]:
        return _copy_documents(self.shops.items())

    async def list_menu_items(self, shop_id: str) -> list[StoredDocument]:
        return _copy_documents(self.menu_items.get(shop_id, {}).items())

    async def add_order(self, record: OrderRecord) -> str:
        order_id = uuid4().hex
        self.orders[order_id] = record.to_document(created_at=datetime.now(timezone.utc))
        logger.info("memory_order_added order_id=%s", order_id)
        return order_id


def _copy_documents(entries: Iterable[tuple[str, Mapping[str, Any]]]) -> list[StoredDocument]:
    return [StoredDocument(doc_id=doc_id, data=copy.deepcopy(dict(fields))) for doc_id, fields in entries]


class UnavailableStore:
    """Stands in for a backend whose client could not be created; every call fails."""

    def __init__(self, reason: Exception) -> None:
        self.reason = reason

    async def list_shops(self) -> list[StoredDocument]:
        raise self._error() from self.reason

    async def list_menu_items(self, shop_id: str) -> list[StoredDocument]:
        raise self._error() from self.reason

    async def add_order(self, record: OrderRecord) -> str:
        raise self._error() from self.reason

    def _error(self) -> RuntimeError:
        return RuntimeError(f"Backend unavailable: {self.reason}")


def resolve_backend(backend: str | None = None) -> str:
    """Resolve the backend name from the argument, then the environment."""
    name = (backend or os.environ.get(BACKEND_ENV, "")).strip().lower()
    return name or DEFAULT_BACKEND


def create_store(backend: str | None = None) -> RemoteStore:
    """Build the configured store. The memory backend is seeded with the demo catalog."""
    name = resolve_backend(backend)
    if name == BACKEND_MEMORY:
        from storefront.data import DEMO_MENU_ITEMS, DEMO_SHOPS

        return InMemoryStore.from_catalog(DEMO_SHOPS, DEMO_MENU_ITEMS)
    if name == BACKEND_FIRESTORE:
        project = os.environ.get(FIRESTORE_PROJECT_ENV, "").strip() or None
        return FirestoreStore(project=project)
    raise ValueError(f"Unknown backend {name!r}. Expected {BACKEND_MEMORY!r} or {BACKEND_FIRESTORE!r}.")
