"""Runtime configuration defaults for the backend, ordering and logging."""

from __future__ import annotations

SHOPS_COLLECTION = "shops"
MENU_ITEMS_COLLECTION = "menu_items"
ORDERS_COLLECTION = "orders"

ORDER_STATUS_NEW = "new"
CURRENCY_SYMBOL = "¥"

BACKEND_MEMORY = "memory"
BACKEND_FIRESTORE = "firestore"
DEFAULT_BACKEND = BACKEND_MEMORY

DEBUG_LOG_PATH = "/tmp/storefront-debug.log"

# Environment overrides.
BACKEND_ENV = "STOREFRONT_BACKEND"
FIRESTORE_PROJECT_ENV = "STOREFRONT_FIRESTORE_PROJECT"
DEBUG_LOG_ENV = "STOREFRONT_DEBUG_LOG"
